"""Iterating over collections: stepping, mapping, collecting and counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum, auto

_U64_MAX = (1 << 64) - 1
_DIVIDENDS = (27, 297, 38502, 81)
_DIVISOR = 27


def favorite_fruits() -> Iterator[str]:
    """Return an iterator over a fixed list of favourite fruits."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character if it is ASCII; "hello" becomes "Hello"."""
    if not text:
        return ""
    first, rest = text[0], text[1:]
    if first.isascii():
        first = first.upper()
    return first + rest


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word, returning a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


class NotDivisibleError(ArithmeticError):
    """Raised when the dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(dividend, divisor)
        self.dividend = dividend
        self.divisor = divisor

    def __str__(self) -> str:
        return f"{self.dividend} is not divisible by {self.divisor}"


class DivideByZeroError(ZeroDivisionError):
    """Raised when dividing by zero."""

    def __str__(self) -> str:
        return "division by zero"


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when ``a`` is evenly divisible by ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def result_with_list() -> list[int]:
    """Divide each fixed number by 27, raising at the first failure."""
    return [divide(n, _DIVISOR) for n in _DIVIDENDS]


def _attempt(n: int) -> int | ArithmeticError:
    try:
        return divide(n, _DIVISOR)
    except ArithmeticError as exc:
        return exc


def list_of_results() -> list[int | ArithmeticError]:
    """Divide each fixed number by 27, keeping each failure as a value."""
    return [_attempt(n) for n in _DIVIDENDS]


def factorial(num: int) -> int:
    """Product of 1..=num; the result must fit in an unsigned 64-bit integer."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result


class Progress(Enum):
    """How far along an exercise is."""

    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a plain loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a generator."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using plain loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using generators."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)