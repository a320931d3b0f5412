"""Reader for XPM images used as wall textures."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colornames import lookup_color
from .image import Image
from .textutil import atoi

TRANSPARENT = 0xFF000000

_HEX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_WORD_SEP = re.compile(r"[ \t]+")


class XpmError(Exception):
    """Raised when XPM data cannot be turned into an image."""


def _blank_comments(text: str, opener: str, closer: str, include_closer: bool) -> str:
    chars = list(text)
    quoted = False
    i = 0
    while i < len(chars):
        if chars[i] == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            if end == -1:
                stop = len(chars)
            else:
                stop = end + (len(closer) if include_closer else 0)
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1
    return "".join(chars)


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside double quotes, keeping the length."""
    text = _blank_comments(text, "/*", "*/", include_closer=True)
    return _blank_comments(text, "//", "\n", include_closer=True)


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def split_words(line: str) -> list[str]:
    """Split ``line`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEP.split(line) if word]


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _text_rgb(name: str, extra: str | None) -> int:
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        if match and match.group(1) == "-":
            value = -value
        return _signed32(value)
    if extra is not None:
        name = f"{name} {extra}"
    return lookup_color(name)


def _color_of(words: list[str]) -> int:
    try:
        at = words.index("c") + 1
    except ValueError:
        raise XpmError("colour definition has no 'c' key") from None
    if at >= len(words):
        raise XpmError("colour definition has no colour after 'c'")
    extra = words[at + 1] if at + 1 < len(words) else None
    return _text_rgb(words[at], extra)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM document, header first."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before {what}") from None

    header = split_words(next_line("the header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError("XPM header values must be positive")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("the colour table is complete")
        key = line[:cpp]
        color = _color_of(split_words(line[cpp:]))
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = next_line("every pixel row is read")
        row = [palette.get(line[cpp * x:cpp * x + cpp], 0) for x in range(width)]
        start = y * width
        image.pixels[start:start + width] = [
            TRANSPARENT if color == -1 else color & 0xFFFFFFFF for color in row
        ]
    return image


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read an XPM file from ``path`` and return its image."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise XpmError(f'"{path}" does not exist.') from exc
    return parse_xpm(quoted_strings(strip_comments(text)))