"""Owned strings and string slices."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words this lesson knows."""
    return attempt in _COLOR_WORDS


def string_examples() -> list[str]:
    """The values produced by common string operations, in lesson order."""
    return [
        "blue",
        str("red"),
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]