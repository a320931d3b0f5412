"""In-memory 32-bit pixel buffer that frames and textures are drawn into."""

from __future__ import annotations

from dataclasses import dataclass, field

_MASK32 = 0xFFFFFFFF


@dataclass
class Image:
    """A ``width`` x ``height`` grid of packed 0xAARRGGBB pixels, row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image size must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError(
                f"expected {size} pixels for a {self.width}x{self.height} image, "
                f"got {len(self.pixels)}"
            )

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x`` of row ``y``."""
        self.pixels[self._index(x, y)] = color & _MASK32

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at column ``x`` of row ``y``."""
        return self.pixels[self._index(x, y)]

    def fill_row(self, y: int, color: int) -> None:
        """Paint the whole row ``y`` with ``color``."""
        start = self._index(0, y) if self.width else 0
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        self.pixels[start:start + self.width] = [color & _MASK32] * self.width

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed 8-bit R, G, B triples, row by row."""
        return bytes(
            channel
            for color in self.pixels
            for channel in ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        )