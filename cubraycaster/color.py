"""Packing and darkening of 0xRRGGBB colours."""

from __future__ import annotations


def create_rgb(r: int, g: int, b: int) -> int:
    """Pack three channels into a 24-bit 0xRRGGBB value."""
    return 0xFFFFFF & (r << 16 | g << 8 | b)


def get_r(rgb: int) -> int:
    """Return the red channel of a packed colour."""
    return (rgb & (0xFF << 16)) >> 16


def get_g(rgb: int) -> int:
    """Return the green channel of a packed colour."""
    return (rgb & (0xFF << 8)) >> 8


def get_b(rgb: int) -> int:
    """Return the blue channel of a packed colour."""
    return rgb & 0xFF


def gen_darker_color(color: int, factor: int) -> int:
    """Lower every channel by ``factor``, stopping at zero."""
    r = max(get_r(color) - factor, 0)
    g = max(get_g(color) - factor, 0)
    b = max(get_b(color) - factor, 0)
    return create_rgb(r, g, b)