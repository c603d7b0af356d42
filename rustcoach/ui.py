"""Coloured one-line status messages for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_console = Console(highlight=False, soft_wrap=True, emoji=False, markup=False)


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def format_warning(message: str) -> str:
    """Prefix a warning message with its marker."""
    mark = "!" if no_emoji() else "⚠️ "
    return f"{mark} {message}"


def format_success(message: str) -> str:
    """Prefix a success message with its marker."""
    mark = "✓" if no_emoji() else "✅"
    return f"{mark} {message}"


def warn(message: str) -> None:
    """Print a warning in red."""
    _console.print(Text(format_warning(message), style="red"))


def success(message: str) -> None:
    """Print a success message in green."""
    _console.print(Text(format_success(message), style="green"))