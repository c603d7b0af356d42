"""Error-handling lessons: nametags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed integer strictly, raising ValueError like a typed parse."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    low, high = bounds
    if number > high:
        raise ValueError("number too large to fit in target type")
    if number < low:
        raise ValueError("number too small to fit in target type")
    return number


def generate_nametag_text(name: str) -> str:
    """Return nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of buying the typed-in quantity of items."""
    qty = _parse_int(item_quantity, _I32)
    product = qty * _COST_PER_ITEM
    if not _I32[0] <= product <= _I32[1]:
        raise OverflowError("attempt to multiply with overflow")
    cost = product + _PROCESSING_FEE
    if not _I32[0] <= cost <= _I32[1]:
        raise OverflowError("attempt to add with overflow")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable, report the outcome and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    remaining = tokens - cost
    print(f"You now have {remaining} tokens.")
    return remaining


class CreationErrorKind(Enum):
    """Why a PositiveNonzeroInteger could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive, nonzero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not become a PositiveNonzeroInteger.

    ``error`` holds the cause: a CreationError, or the ValueError of a
    failed integer parse.
    """

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        number = _parse_int(text, _I64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err