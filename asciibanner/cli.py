"""Command-line interface: argument checking and the program entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from asciibanner.banner import BannerError, load_banner
from asciibanner.colour import ColorError, color_to_ansi
from asciibanner.render import process_string

DEFAULT_BANNER = "standard.txt"
BANNER_NAMES = ("standard", "shadow", "thinkertoy")

_FLAG_DEFAULTS = {
    "color": "",
    "output": "",
    "align": "left",
    "reverse": "",
}


class UsageError(Exception):
    """Raised when the command line cannot be accepted."""


class _FlagError(UsageError):
    """Raised when flag syntax itself is wrong."""


@dataclass(frozen=True)
class Options:
    """The outcome of parsing the command line."""

    args: tuple[str, ...]
    input_index: int = 0
    highlight: str = ""
    banner: str = DEFAULT_BANNER
    color: str = ""
    output: str = ""
    align: str = "left"
    reverse: str = ""

    @property
    def text(self) -> str:
        """The text to render."""
        return _arg(self.args, self.input_index)


def _arg(args: Sequence[str], index: int) -> str:
    return args[index] if 0 <= index < len(args) else ""


def validate_args_order(args: Sequence[str]) -> None:
    """Reject any flag that follows a positional argument."""
    has_positional = False
    for position, arg in enumerate(args, start=1):
        if arg.startswith("-"):
            if has_positional:
                raise UsageError(
                    f"Error: Flag '{arg}' found after positional arguments "
                    f"at position {position}."
                )
        else:
            has_positional = True


def check_equals_form(args: Sequence[str]) -> None:
    """Require value-taking flags to be written as ``--flag=value``."""
    for arg in args:
        if arg.startswith("--color") and not arg.startswith("--color="):
            raise UsageError(
                "Usage: go run . [OPTION] [STRING]\n"
                "\n"
                'EX: go run . --color=<color> <substring to be colored> "something"'
            )
        if arg.startswith("--output") and not arg.startswith("--output="):
            raise UsageError("Error: --output flag must be in the form --output=value")
        if arg.startswith("--justify") and not arg.startswith("--justify="):
            raise UsageError("Error: --justify flag must be in the form --justify=value")


def is_banner(name: str) -> str | None:
    """Return the font file of a known banner name, or None."""
    lowered = name.lower()
    return f"{lowered}.txt" if lowered in BANNER_NAMES else None


def is_ascii(text: str) -> bool:
    """Tell whether every character of ``text`` is ASCII."""
    return text.isascii()


def _parse_flags(args: Sequence[str]) -> tuple[dict[str, str], tuple[str, ...]]:
    values = dict(_FLAG_DEFAULTS)
    remaining = list(args)
    while remaining:
        arg = remaining[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        remaining.pop(0)
        if arg == "--":
            break
        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name[0] in "-=":
            raise _FlagError(f"bad flag syntax: {arg}")
        name, has_value, value = name.partition("=")
        if name in ("h", "help"):
            raise _FlagError("flag: help requested")
        if name not in values:
            raise _FlagError(f"flag provided but not defined: -{name}")
        if not has_value:
            if not remaining:
                raise _FlagError(f"flag needs an argument: -{name}")
            value = remaining.pop(0)
        values[name] = value
    return values, tuple(remaining)


def parse_options(args: Sequence[str]) -> Options:
    """Parse flags and work out which positional argument plays which role."""
    flags, positional = _parse_flags(args)
    color = flags["color"]
    common = {
        "args": positional,
        "color": color,
        "output": flags["output"],
        "align": flags["align"],
        "reverse": flags["reverse"],
    }
    count = len(positional)
    second = _arg(positional, 1)

    if count == 1:
        return Options(highlight=positional[0] if color else "", **common)
    if count == 2:
        font = is_banner(second)
        if font is not None:
            return Options(
                highlight=positional[0] if color else "", banner=font, **common
            )
        if color:
            return Options(input_index=1, highlight=positional[0], **common)
    if count == 3:
        return Options(
            input_index=1,
            highlight=positional[0],
            banner=positional[2] + ".txt",
            **common,
        )
    raise UsageError(
        f'" {second} " is not a valid banner, please use '
        '"standard", "shadow" or "thinkertoy".'
    )


def check_validity(options: Options) -> None:
    """Check the argument after the input, the banner file and the colour."""
    if not is_ascii(_arg(options.args, options.input_index + 1)):
        raise UsageError(
            "Error: Only ASCII characters or newline symbols (\\n) are allowed."
        )
    try:
        os.stat(options.banner)
    except OSError:
        raise UsageError("File does not exist!") from None
    if options.color:
        try:
            color_to_ansi(options.color)
        except ColorError:
            raise UsageError(
                f"Error: Invalid color format '{options.color}'."
            ) from None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        validate_args_order(args)
    except UsageError as exc:
        print(exc)
        print("Invalid argument order: Flags must precede positional arguments.")
        return 1
    try:
        options = parse_options(args)
        check_equals_form(args)
        check_validity(options)
    except _FlagError as exc:
        print(exc, file=sys.stderr)
        return 2
    except UsageError as exc:
        print(exc)
        return 1
    try:
        banner = load_banner(options.banner)
    except BannerError as exc:
        print(exc, file=sys.stderr)
        return 1
    process_string(
        options.text,
        banner,
        options.highlight,
        options.color,
        options.output or None,
        sys.stdout,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())