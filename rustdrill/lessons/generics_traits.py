"""Generic containers and a behaviour shared by several types."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A list of strings, started empty and then filled."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[T]):
    """A report card whose grade may be numeric or alphabetic."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]