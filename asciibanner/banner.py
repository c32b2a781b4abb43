"""Loading of banner fonts: glyphs for printable ASCII, blank-line separated."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

ASCII_OFFSET = 32


class BannerError(Exception):
    """Raised when a banner font cannot be loaded."""


@dataclass(frozen=True)
class Banner:
    """A font mapping characters to the lines of their glyphs."""

    glyphs: dict[str, tuple[str, ...]] = field(default_factory=dict)
    height: int = 0

    def glyph(self, char: str) -> tuple[str, ...] | None:
        """Return the lines of the glyph for ``char``, or None if absent."""
        return self.glyphs.get(char)

    def __contains__(self, char: object) -> bool:
        return char in self.glyphs


def parse_banner(text: str) -> Banner:
    """Build a banner from font text; glyphs start at the space character."""
    text = text.replace("\r\n", "\n")
    if text.startswith("\n"):
        text = text[1:]
    glyphs = {
        chr(ASCII_OFFSET + index): tuple(art.split("\n"))
        for index, art in enumerate(text.split("\n\n"))
    }
    height = len(next(iter(glyphs.values()))) if glyphs else 0
    return Banner(glyphs=glyphs, height=height)


def load_banner(path: str | Path) -> Banner:
    """Read and parse a banner font file."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise BannerError(f"Failed to load font: {exc}") from exc
    return parse_banner(text)