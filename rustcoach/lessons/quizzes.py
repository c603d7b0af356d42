"""Quiz lessons: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

_BULK_THRESHOLD = 40
_REGULAR_PRICE = 2
_BULK_PRICE = 1


def calculate_price_of_apples(apples: int) -> int:
    """Price an order: 2 per apple, or 1 per apple above 40 apples."""
    if apples > _BULK_THRESHOLD:
        return apples * _BULK_PRICE
    return apples * _REGULAR_PRICE


class CommandKind(Enum):
    """What a transformer command does to its string."""

    UPPERCASE = auto()
    TRIM = auto()
    APPEND = auto()


@dataclass(frozen=True)
class Command:
    """A transformer command; ``times`` counts the appends of "bar"."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.times
    raise ValueError(f"unknown command kind: {command.kind!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in items]


def _display(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetical."""

    grade: Any
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )