"""Visibility, re-exported names, the system clock and small macros."""

from __future__ import annotations

import time

_PEAR = "Pear"
_APPLE = "Apple"
_CUCUMBER = "Cucumber"
_CARROT = "Carrot"

FRUIT = _PEAR
VEGGIE = _CUCUMBER


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage from the private recipe."""
    recipe = _get_secret_recipe()
    if not recipe:
        raise RuntimeError("the secret recipe is missing")
    return "sausage!"


def favorite_snacks() -> str:
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def seconds_since_epoch() -> int:
    """Whole seconds elapsed since 1970-01-01 00:00:00 UTC."""
    seconds = time.time_ns() // 1_000_000_000
    if seconds < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return seconds


def my_macro(*args: object) -> str:
    """With no argument, the plain message; with one, a message that shows it."""
    if not args:
        return "Check out my macro!"
    if len(args) == 1:
        return f"Look at this other macro: {args[0]}"
    raise TypeError(f"my_macro takes at most one argument ({len(args)} given)")


def hello(text: str) -> str:
    return f"Hello {text}"