"""Dictionaries and lists."""

from __future__ import annotations

import enum
from typing import Iterable


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and five fruits."""
    return {"banana": 2, "apple": 2, "mango": 2}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add three of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 3)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same elements as a fixed tuple and as a list."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every element."""
    return [value * 2 for value in values]