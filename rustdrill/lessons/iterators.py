"""Iterating, mapping, collecting results and counting with iterators."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Iterator, Mapping, Sequence

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1
_U64_MAX = (1 << 64) - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def favourite_fruits() -> Iterator[str]:
    """An iterator over the favourite fruits, in order."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(Exception):
    """A division could not produce a whole result."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(dividend, divisor)
        self.dividend = dividend
        self.divisor = divisor

    def __str__(self) -> str:
        return f"{self.dividend} is not divisible by {self.divisor}"


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __str__(self) -> str:
        return "divide by zero"


def divide(a: int, b: int) -> int:
    """Divide a by b when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    quotient = a // b
    if not _I32_MIN <= quotient <= _I32_MAX:
        raise OverflowError("attempt to divide with overflow")
    return quotient


def result_with_list() -> list[int]:
    """All quotients, or the first DivisionError raised."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as error:
        return error


def list_of_results() -> list[int | DivisionError]:
    """One entry per number: its quotient, or the DivisionError it produced."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """num! for a non-negative num whose factorial fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError(f"factorial is undefined for {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an iterator."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(collection: Sequence[Mapping[str, Progress]], value: Progress) -> int:
    """Count matching entries across several maps using explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several maps using iterators."""
    return sum(count_iterator(mapping, value) for mapping in collection)