"""Adding behaviour to existing types."""

from __future__ import annotations

from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]