# asciibanner

Turn text into a large ASCII-art banner, drawn with a font file, and
optionally colour parts of it in the terminal.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Font files

A font file holds one glyph per character, starting at the space character
(code 32) and going up in order. Glyphs are separated by a blank line. The
height of the banner is the number of rows in the first glyph. Windows line
endings are accepted, and one leading newline is skipped.

No font files come with the package. The banner names `standard`, `shadow`
and `thinkertoy` are looked up as `standard.txt`, `shadow.txt` and
`thinkertoy.txt` in the current directory; `standard.txt` is the default.

## Command line

```
asciibanner [OPTION] [STRING]
asciibanner [OPTION] [STRING] [BANNER]
asciibanner --color=<colour> [SUBSTRING] [STRING] [BANNER]
```

Options must come before all positional arguments.

```
asciibanner "Hello"
asciibanner "Hello" shadow
asciibanner --color=red "Hello"
asciibanner --color=red ell "Hello"
asciibanner --color=red ell "Hello" thinkertoy
asciibanner --output=banner.txt "Hello\nWorld"
```

How the positional arguments are read:

- One argument: the text. With `--color`, the whole text is coloured.
- Two arguments where the second is `standard`, `shadow` or `thinkertoy`
  (in any case): the text and the banner.
- Two arguments otherwise, with `--color`: the substring to colour, then the
  text. Without `--color` this is an error.
- Three arguments: the substring, the text and a banner name; the banner is
  read from `<name>.txt`, whatever the name.

Options:

- `--color=<colour>` colours matching parts of the text. The colour is
  checked: it may be a name (`red`, `green`, `blue`, `yellow`, `cyan`,
  `magenta`, `black`, `white`), a hex value such as `#ff8800`, or an RGB value
  such as `rgb255,128,0`. Only the eight names written in lower case produce
  coloured output; other accepted values emit no colour code.
  Occurrences of the substring are matched left to right without overlapping.
- `--output=<file>.txt` also writes each rendered line, in plain form with a
  space between glyphs, to the file. The file is replaced on the first line
  and appended to afterwards. A name not ending in `.txt` prints an error and
  rendering carries on without a file.
- `--align=<value>` and `--reverse=<value>` are accepted but have no effect.
- `--color` and `--output` must be written with `=`.

A literal `\n` in the text, like a real newline, starts a new banner line; an
empty line prints a blank line. Characters not in the font print a warning
and are drawn as blank space.

The command exits with 0 on success, 1 for a rejected command line, a missing
banner file or an invalid colour, and 2 for malformed or unknown flags (the
message then goes to standard error).

## Library use

```python
from asciibanner.banner import load_banner, parse_banner
from asciibanner.render import process_string, build_ascii_art, format_plain
from asciibanner.colour import color_to_ansi

banner = load_banner("standard.txt")
process_string("Hi there", banner, highlight="there", color="cyan")

print(repr(color_to_ansi("#ff0000")))  # '\x1b[38;2;255;0;0m'
```

- `asciibanner.banner`: `Banner` (with `glyphs`, `height` and `glyph(char)`),
  `parse_banner(text)`, `load_banner(path)`; loading failures raise
  `BannerError`.
- `asciibanner.colour`: `color_to_ansi`, `hex_to_ansi`, `rgb_string_to_ansi`,
  `named_color_to_ansi` and `rgb_to_ansi` return 24-bit ANSI foreground
  sequences; unreadable colours raise `ColorError`.
- `asciibanner.render`: `build_ascii_art`, `build_highlight_mask`,
  `render_art`, `format_plain`, `process_string` and `OutputFile`.
- `asciibanner.cli`: `main(argv=None)`, the command above, with
  `parse_options`, `check_validity` and the other checks it uses.

## What it does not do

The `--align` and `--reverse` options are parsed only: the package does not
justify banners or turn a banner back into text.