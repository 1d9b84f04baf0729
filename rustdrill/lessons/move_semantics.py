"""Passing, copying and returning vectors."""

from collections.abc import Sequence


def fill_vec(vec: Sequence[int]) -> list[int]:
    """Return a copy of ``vec`` with 22, 44 and 66 appended; the input is untouched."""
    filled = list(vec)
    filled.extend((22, 44, 66))
    return filled


def fill_new_vec() -> list[int]:
    """Return a freshly created, filled vector."""
    return fill_vec([])


def describe_vec(name: str, vec: Sequence[int]) -> str:
    return f"{name} has length {len(vec)} content `{list(vec)!r}`"


def reborrow_total(start: int) -> int:
    """Add 100 and then 1000 to ``start`` through successive updates."""
    x = start
    x += 100
    x += 1000
    return x