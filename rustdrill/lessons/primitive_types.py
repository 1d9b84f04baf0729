"""Booleans, characters, arrays, slices and tuples."""

from collections.abc import Sequence


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that apply."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_character(ch: str) -> str:
    """Describe a single character as alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence) -> str:
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence) -> list:
    """Return elements 1 to 3; the sequence must hold at least four."""
    if len(values) < 4:
        raise IndexError(f"slice end 4 is out of range for length {len(values)}")
    return list(values[1:4])


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def second(numbers: tuple) -> object:
    return numbers[1]