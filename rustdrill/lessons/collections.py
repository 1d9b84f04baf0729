"""Hash maps and vectors."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from enum import Enum, auto


class Fruit(Enum):
    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five fruits."""
    return {"banana": 2, "peach": 2, "Apple": 2}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add five of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 5)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a vector holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return every value multiplied by two."""
    return [value * 2 for value in values]