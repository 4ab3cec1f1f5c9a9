"""Terminal styling and the warning/success message helpers."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_RED = "\x1b[31m"
_GREEN = "\x1b[32m"
_BLUE = "\x1b[34m"
_BOLD = "\x1b[1m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def emoji(fancy: str, plain: str) -> str:
    """Pick the fancy symbol unless emoji output has been switched off."""
    return plain if no_emoji() else fancy


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _paint(code: str, text: object) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"{code}{text}{_RESET}"


def red(text: object) -> str:
    """Style text in red when the terminal supports colour."""
    return _paint(_RED, text)


def green(text: object) -> str:
    """Style text in green when the terminal supports colour."""
    return _paint(_GREEN, text)


def blue(text: object) -> str:
    """Style text in blue when the terminal supports colour."""
    return _paint(_BLUE, text)


def bold(text: object) -> str:
    """Style text in bold when the terminal supports it."""
    return _paint(_BOLD, text)


def warn(message: str) -> None:
    """Print a red warning line."""
    marker = "!" if no_emoji() else emoji("⚠️ ", "!")
    print(f"{red(marker)} {red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    marker = "✓" if no_emoji() else emoji("✅", "✓")
    print(f"{green(marker)} {green(message)}")