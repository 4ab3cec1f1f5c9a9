"""Reporting errors: messages, parse failures and custom error types."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: optional sign, then ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a one-token processing fee."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


def purchase(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying the given quantity with the given tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(Exception):
    """A value could not be made into a positive non-zero integer."""

    class Reason(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    NEGATIVE = Reason.NEGATIVE
    ZERO = Reason.ZERO

    def __init__(self, reason: CreationError.Reason) -> None:
        super().__init__(reason.value)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(Exception):
    """Parsing failed, either as an integer or as a positive non-zero one."""

    class Kind(enum.Enum):
        CREATION = "creation"
        PARSE_INT = "parse_int"

    CREATION = Kind.CREATION
    PARSE_INT = Kind.PARSE_INT

    def __init__(self, kind: ParsePosNonzeroError.Kind, source: Exception) -> None:
        super().__init__(str(source))
        self.kind = kind
        self.source = source

    @classmethod
    def from_creation(cls, error: CreationError) -> ParsePosNonzeroError:
        return cls(cls.CREATION, error)

    @classmethod
    def from_parse_int(cls, error: ValueError) -> ParsePosNonzeroError:
        return cls(cls.PARSE_INT, error)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(s, 64)
    except ValueError as error:
        raise ParsePosNonzeroError.from_parse_int(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError.from_creation(error) from error