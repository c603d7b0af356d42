"""Trait lessons: appending "Bar", shared licence info and combined traits."""

from __future__ import annotations

from dataclasses import dataclass

_BAR = "Bar"


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar" to a string, or add a "Bar" element to a list of strings."""
    if isinstance(value, str):
        return value + _BAR
    if isinstance(value, list):
        return [*value, _BAR]
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides some_function."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Provides other_function."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both traits."""


class OtherStruct(SomeTrait, OtherTrait):
    """Has both traits as well."""


def some_func(item: SomeTrait) -> bool:
    """True when both trait functions of the item agree to it."""
    if not isinstance(item, SomeTrait) or not isinstance(item, OtherTrait):
        raise TypeError("item must provide both SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()