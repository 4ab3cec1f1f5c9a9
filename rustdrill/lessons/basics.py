"""Variables, functions, conditionals and primitive types."""

from __future__ import annotations

from typing import Sequence

_DIGIT_WORDS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def describe_number(x: int) -> str:
    """Say whether x is ten."""
    return "Ten!" if x == 10 else "Not ten!"


def spell_then_add(number: str) -> int:
    """Read a number spelled letter by letter ("T-H-R-E-E") and add two."""
    word = number.replace("-", "").strip().lower()
    if word not in _DIGIT_WORDS:
        raise ValueError(f"not a spelled number: {number!r}")
    value = _DIGIT_WORDS[word]
    return value + 2


def call_me(num: int) -> list[str]:
    """Return one ring line per call."""
    return [f"Ring! Call number {i + 1}" for i in range(num)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that fit the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(ch: str) -> str:
    """Describe a single character as alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence[object]) -> str:
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[int]) -> list[int]:
    """Return the elements at positions 1 to 3."""
    if len(values) < 4:
        raise IndexError(f"slice 1..4 out of range for length {len(values)}")
    return list(values[1:4])


def second_of(numbers: Sequence[int]) -> int:
    return numbers[1]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def calculate_apple_price(quantity: int) -> int:
    """Two per apple, or one per apple for orders of more than 40."""
    return quantity if quantity > 40 else quantity * 2


def times_two(num: int) -> int:
    return num * 2