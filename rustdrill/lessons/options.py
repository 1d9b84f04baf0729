"""Optional values: unwrapping, conditional binding and matching."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def print_number(maybe_number: int | None) -> str:
    """Print and return the number; a missing number is an error."""
    if maybe_number is None:
        raise ValueError("called print_number without a number")
    text = f"printing: {maybe_number}"
    print(text)
    return text


def number_table() -> list[int]:
    """Return the five numbers computed from a fixed formula."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def describe_word(optional_word: str | None) -> str:
    """Print and return a line describing the optional word."""
    if optional_word is not None:
        text = f"The word is: {optional_word}"
    else:
        text = "The optional word doesn't contain anything"
    print(text)
    return text


def drain_values(values: MutableSequence[int | None]) -> list[int]:
    """Pop values from the end while they are present, printing each one.

    Stops once the sequence is empty or a missing value has been popped.
    """
    drained = []
    while values:
        value = values.pop()
        if value is None:
            break
        print(f"current value: {value}")
        drained.append(value)
    return drained


def describe_point(point: Point | None) -> str:
    """Print and return the co-ordinates of an optional point."""
    match point:
        case Point(x=x, y=y):
            text = f"Co-ordinates are {x},{y} "
        case _:
            text = "no match"
    print(text)
    return text