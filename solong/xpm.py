"""Loading XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from solong.text import atoi

TRANSPARENT = -1
"""Colour value stored for pixels whose colour is ``None``."""

_WORD_SEPARATOR = re.compile(r"[ \t]+")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: one row of 0xRRGGBB colours per line."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int | None:
        """Return the colour at ``(x, y)``, or None where the pixel is transparent."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside a {self.width}x{self.height} image")
        value = self.rows[y][x]
        return None if value == TRANSPARENT else value


def split_words(line: str) -> list[str]:
    """Split a line on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATOR.split(line) if word]


def _find_outside_quotes(text: str, token: str) -> int:
    in_quote = False
    for index, ch in enumerate(text):
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(token, index):
            return index
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double quotes.

    Each comment is replaced by spaces of the same length, so positions in
    the text do not move. A ``//`` comment is blanked together with the
    newline that ends it.
    """
    while (begin := _find_outside_quotes(text, "/*")) >= 0:
        end = text.find("*/", begin + 2)
        stop = len(text) if end < 0 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := _find_outside_quotes(text, "//")) >= 0:
        end = text.find("\n", begin + 2)
        stop = len(text) if end < 0 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (opening := text.find('"', pos)) >= 0:
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def _text_color(name: str, end: str | None) -> int:
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name[1:])
        if match is None:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    full_name = f"{name} {end}" if end is not None else name
    if full_name.lower() == "none":
        return TRANSPARENT
    # Symbolic colour names other than None are not known here and map to black.
    return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"XPM data ends before the {what}")
    return line


def parse_xpm(text: str | Iterable[str]) -> XpmImage:
    """Decode XPM data.

    ``text`` is either the contents of an XPM file, whose comments are
    ignored and whose quoted strings are the image lines, or the image
    lines themselves as a sequence of strings.
    """
    if isinstance(text, str):
        lines: Iterator[str] = _quoted_strings(strip_comments(text))
    else:
        lines = iter(text)

    header = split_words(_next_line(lines, "header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(header[:4])}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour table ends")
        key = line[:cpp]
        words = split_words(line[cpp:])
        if "c" not in words:
            raise XpmError(f"colour line {line!r} has no 'c' entry")
        index = words.index("c") + 1
        if index >= len(words):
            raise XpmError(f"colour line {line!r} has no colour after 'c'")
        end = words[index + 1] if index + 1 < len(words) else None
        color = _text_color(words[index], end)
        # Short keys keep the last definition, long keys the first.
        if cpp <= 2 or key not in palette:
            palette[key] = color

    rows = []
    for _ in range(height):
        line = _next_line(lines, "last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} is shorter than {width} pixels")
        keys = (line[start : start + cpp] for start in range(0, width * cpp, cpp))
        rows.append(tuple(palette.get(key, 0) for key in keys))
    return XpmImage(width, height, tuple(rows))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)