"""Small string helpers used when reading scene description files."""

from __future__ import annotations

from itertools import takewhile

_DIGITS = frozenset("0123456789")
_SPACE = " \t\n\v\f\r"


def trim(text: str, chars: str | None) -> str:
    """Strip every character of ``chars`` from both ends of ``text``.

    With ``chars`` of ``None`` the text comes back unchanged.
    """
    if chars is None:
        return text
    return text.strip(chars)


def create_line(text: str, needle: str) -> str | None:
    """Return the rest of the line that follows the first ``needle`` in ``text``.

    Leading and trailing spaces of that rest are removed. ``None`` is
    returned when ``needle`` does not occur at all.
    """
    start = text.find(needle)
    if start == -1:
        return None
    rest = text[start + len(needle):].lstrip(" ")
    end = rest.find("\n")
    if end != -1:
        rest = rest[:end]
    return trim(rest, " ")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Read a leading decimal integer the way the C library does.

    Whitespace and one sign are skipped, digits are read until the first
    non-digit, and the result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda c: c in _DIGITS, rest))
    magnitude = int(digits) % (1 << 64) if digits else 0
    value = (magnitude * sign) % (1 << 32)
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def has_digit(text: str | None) -> bool:
    """Tell whether ``text`` holds at least one ASCII digit."""
    return bool(text) and any(c in _DIGITS for c in text)


def only_digits(text: str | None) -> bool:
    """Tell whether ``text`` holds nothing but ASCII digits and spaces."""
    return not text or all(c in _DIGITS or c == " " for c in text)


def find_first_of(text: str, chars: str) -> int:
    """Return the index of the first character of ``text`` found in ``chars``.

    Returns -1 when no character of ``text`` is in ``chars``.
    """
    return next((i for i, c in enumerate(text) if c in chars), -1)