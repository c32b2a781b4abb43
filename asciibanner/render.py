"""Rendering of text lines as banner art, with optional highlighting and file output."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from asciibanner.banner import Banner

ANSI_COLORS: dict[str, str] = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "reset": "\033[0m",
}

Glyph = Sequence[str]


def build_ascii_art(
    line: str,
    banner: Banner,
    warn: Callable[[str], None] | None = None,
) -> list[Glyph]:
    """Return the glyph of each character of ``line``.

    Characters missing from the font become blank glyphs of the banner's
    height, and ``warn`` is called with a message for each of them.
    """
    glyphs: list[Glyph] = []
    for char in line:
        art = banner.glyph(char)
        if art is None:
            if warn is not None:
                warn(f"Warning: Character '{char}' not found in font data.")
            art = ("",) * banner.height
        glyphs.append(art)
    return glyphs


def build_highlight_mask(line: str, substring: str) -> list[bool]:
    """Mark every character of ``line`` that lies in a non-overlapping match of ``substring``."""
    mask = [False] * len(line)
    if not substring:
        return mask
    idx = 0
    while idx < len(line):
        if line.startswith(substring, idx):
            end = min(idx + len(substring), len(mask))
            mask[idx:end] = [True] * (end - idx)
            idx += len(substring)
        else:
            idx += 1
    return mask


def render_art(
    glyphs: Sequence[Glyph],
    mask: Sequence[bool],
    height: int,
    color: str,
) -> str:
    """Join glyphs row by row, wrapping highlighted ones in the named colour."""
    start = ANSI_COLORS.get(color, "")
    reset = ANSI_COLORS["reset"]
    rows = []
    for row in range(height):
        parts = []
        for glyph, highlighted in zip(glyphs, mask):
            if highlighted:
                parts.append(f"{start}{glyph[row]}{reset}")
            else:
                parts.append(glyph[row])
        rows.append("".join(parts) + "\n")
    return "".join(rows)


def format_plain(glyphs: Sequence[Glyph], height: int) -> str:
    """Join glyphs row by row with a single space between characters."""
    return "".join(
        " ".join(glyph[row] for glyph in glyphs) + "\n" for row in range(height)
    )


class OutputFile:
    """A text file that is truncated on the first write and appended to afterwards."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        self._written = False

    def write_art(self, glyphs: Sequence[Glyph], height: int) -> None:
        """Write the plain rendering of ``glyphs`` to the file."""
        if not str(self.path).endswith(".txt"):
            raise ValueError("Output file must have a .txt extension.")
        if self._written:
            try:
                handle = os.fdopen(
                    os.open(self.path, os.O_APPEND | os.O_WRONLY), "a", encoding="utf-8"
                )
            except OSError as exc:
                raise OSError(f"Could not open the file for appending: {exc}") from exc
        else:
            try:
                handle = open(self.path, "w", encoding="utf-8")
            except OSError as exc:
                raise OSError(f"Could not create or open the file: {exc}") from exc
            self._written = True
        with handle:
            try:
                handle.write(format_plain(glyphs, height))
            except OSError as exc:
                raise OSError(f"Failed to write to the file: {exc}") from exc


def process_string(
    text: str,
    banner: Banner,
    highlight: str = "",
    color: str = "",
    output: str | Path | None = None,
    out: TextIO | None = None,
) -> None:
    """Render ``text`` line by line to ``out``; a literal ``\\n`` also breaks lines."""
    stream = sys.stdout if out is None else out
    writer = OutputFile(output) if output else None

    def warn(message: str) -> None:
        stream.write(message + "\n")

    for line in text.replace("\\n", "\n").split("\n"):
        if not line:
            stream.write("\n")
            continue
        glyphs = build_ascii_art(line, banner, warn)
        if writer is not None:
            try:
                writer.write_art(glyphs, banner.height)
            except (ValueError, OSError) as exc:
                stream.write(f"Error: {exc}\n")
        mask = build_highlight_mask(line, highlight)
        stream.write(render_art(glyphs, mask, banner.height, color))