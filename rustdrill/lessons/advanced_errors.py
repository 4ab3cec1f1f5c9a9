"""Error types that convert into each other, and a parser with a custom error."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from rustdrill.lessons.errors import PositiveNonzeroInteger, parse_pos_nonzero

_DIGITS = frozenset("0123456789")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE | re.ASCII,
)
_U32_MAX = (1 << 32) - 1


def parse_positive(s: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer.

    Raises ParsePosNonzeroError whose kind tells a bad integer apart from a
    negative or zero one.
    """
    return parse_pos_nonzero(s)


def _parse_u32(text: str) -> int:
    """Parse an unsigned 32-bit integer strictly: optional '+', then ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _parse_float(text: str) -> float:
    """Parse a float literal strictly: no surrounding spaces or underscores."""
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT_LITERAL.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


class ParseClimateError(Exception):
    """A Climate could not be parsed from text."""

    class Kind(enum.Enum):
        EMPTY = "empty"
        BAD_LEN = "bad_len"
        NO_CITY = "no_city"
        PARSE_INT = "parse_int"
        PARSE_FLOAT = "parse_float"

    EMPTY = Kind.EMPTY
    BAD_LEN = Kind.BAD_LEN
    NO_CITY = Kind.NO_CITY
    PARSE_INT = Kind.PARSE_INT
    PARSE_FLOAT = Kind.PARSE_FLOAT

    def __init__(self, kind: ParseClimateError.Kind, source: Exception | None = None) -> None:
        self.kind = kind
        self.source = source
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind is ParseClimateError.EMPTY:
            return "empty input"
        if self.kind is ParseClimateError.BAD_LEN:
            return "incorrect number of fields"
        if self.kind is ParseClimateError.NO_CITY:
            return "no city name"
        if self.kind is ParseClimateError.PARSE_INT:
            return f"error parsing year: {self.source}"
        return f"error parsing temperature: {self.source}"

    @classmethod
    def from_parse_int(cls, error: ValueError) -> ParseClimateError:
        return cls(cls.PARSE_INT, error)

    @classmethod
    def from_parse_float(cls, error: ValueError) -> ParseClimateError:
        return cls(cls.PARSE_FLOAT, error)


@dataclass(frozen=True)
class Climate:
    city: str
    year: int
    temp: float

    @classmethod
    def from_str(cls, s: str) -> Climate:
        """Parse "city,year,temp"; raise ParseClimateError on bad input."""
        if not s:
            raise ParseClimateError(ParseClimateError.EMPTY)
        fields = s.split(",")
        if len(fields) != 3:
            raise ParseClimateError(ParseClimateError.BAD_LEN)
        city, year_text, temp_text = fields
        if not city:
            raise ParseClimateError(ParseClimateError.NO_CITY)
        try:
            year = _parse_u32(year_text)
        except ValueError as error:
            raise ParseClimateError.from_parse_int(error) from error
        try:
            temp = _parse_float(temp_text)
        except ValueError as error:
            raise ParseClimateError.from_parse_float(error) from error
        return cls(city=city, year=year, temp=temp)