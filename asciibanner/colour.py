"""Conversion of colour specifications into 24-bit ANSI escape sequences."""

from __future__ import annotations

import re

_RGB_PATTERN = re.compile(r"rgb(\d+),\s*(\d+),\s*(\d+)", re.ASCII)
_HEX_PAIR = re.compile(r"[+-]?[0-9a-fA-F]+", re.ASCII)

_NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "black": (0, 0, 0),
    "white": (255, 255, 255),
}


class ColorError(ValueError):
    """Raised when a colour specification cannot be understood."""


def rgb_to_ansi(r: int, g: int, b: int) -> str:
    """Return the foreground escape sequence for an RGB triple."""
    return f"\033[38;2;{r};{g};{b}m"


def rgb_string_to_ansi(value: str) -> str:
    """Convert a string such as ``rgb255,0,0`` into an escape sequence."""
    match = _RGB_PATTERN.search(value)
    if match is None:
        raise ColorError("invalid RGB format")
    r, g, b = (int(part) for part in match.groups())
    return rgb_to_ansi(r, g, b)


def _parse_hex_pair(pair: str) -> int:
    if not _HEX_PAIR.fullmatch(pair):
        raise ColorError(f"invalid hex component: {pair!r}")
    return int(pair, 16)


def hex_to_ansi(value: str) -> str:
    """Convert a ``#rrggbb`` string into an escape sequence."""
    if len(value) != 7 or not value.startswith("#"):
        raise ColorError("invalid hex format")
    r, g, b = (_parse_hex_pair(value[start:start + 2]) for start in (1, 3, 5))
    return rgb_to_ansi(r, g, b)


def named_color_to_ansi(name: str) -> str:
    """Convert one of the known colour names into an escape sequence."""
    try:
        rgb = _NAMED_COLORS[name]
    except KeyError:
        raise ColorError(f"unknown color name: {name}") from None
    return rgb_to_ansi(*rgb)


def color_to_ansi(value: str) -> str:
    """Recognise the format of a colour specification and convert it."""
    value = value.strip().lower()
    if value.startswith("#"):
        return hex_to_ansi(value)
    if value.startswith("rgb"):
        return rgb_string_to_ansi(value)
    return named_color_to_ansi(value)