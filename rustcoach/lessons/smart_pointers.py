"""Smart pointer lessons: a cons list and clone-on-write data."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Nil())


@dataclass
class Cow:
    """Borrowed or owned data that is copied only when first mutated."""

    data: Sequence[int]
    owned: bool = False

    def __post_init__(self) -> None:
        if self.owned and not isinstance(self.data, list):
            self.data = list(self.data)

    def to_mut(self) -> list[int]:
        """Return mutable data, copying borrowed data into owned data first."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying only if something changes."""
    if any(value < 0 for value in cow.data):
        values = cow.to_mut()
        values[:] = [-value if value < 0 else value for value in values]
    return cow