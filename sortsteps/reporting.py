"""Formatting of integer sequences as comma-separated lines."""

from __future__ import annotations

from typing import Iterable, TextIO


def format_values(values: Iterable[int]) -> str:
    """Return the values joined by ", "."""
    return ", ".join(str(value) for value in values)


def print_values(values: Iterable[int], file: TextIO | None = None) -> None:
    """Write the values as one comma-separated line."""
    print(format_values(values), file=file)