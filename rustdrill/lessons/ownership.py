"""Ownership of lists, references and optional values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list: the given values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]


def new_filled_vec() -> list[int]:
    """Create the filled list from scratch."""
    return fill_vec([])


def add_through_references() -> int:
    """Apply two successive updates to one value and return it."""
    x = 100
    x += 100
    x += 1000
    return x


def format_number(maybe_number: int | None) -> str:
    """Format a present number; a missing one is an error."""
    if maybe_number is None:
        raise ValueError("called format_number on a missing value")
    return f"printing: {maybe_number}"


def optional_numbers() -> list[int]:
    """The five values computed in the option lesson."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def describe_word(optional_word: str | None) -> str:
    if optional_word is not None:
        return f"The word is: {optional_word}"
    return "The optional word doesn't contain anything"


def pop_all(values: list[int]) -> list[int]:
    """Pop every element off the list, returning them in popped order."""
    popped = []
    while values:
        popped.append(values.pop())
    return popped


def describe_point(point: Point | None) -> str:
    if point is None:
        return "no match"
    return f"Co-ordinates are {point.x},{point.y} "