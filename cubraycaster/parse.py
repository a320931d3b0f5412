"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from .color import create_rgb
from .errors import CubError
from .textutil import atoi, create_line, find_first_of, has_digit, only_digits, split

_MAP_CHARS = frozenset("102NEWS \n")
_OPEN_CELLS = frozenset("02NESW")
_SPAWN_CHARS = "NESW"
_RGB_COUNT_MSG = "Please enter one r, g, and b value"


@dataclass
class CubConfig:
    """Everything a scene file describes, with the spawn cell turned into floor."""

    width: int
    height: int
    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    rows: list[str]
    spawn_x: int
    spawn_y: int
    spawn_dir: str

    @property
    def map_height(self) -> int:
        """Number of map rows."""
        return len(self.rows)

    @property
    def map_width(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.rows), default=0)


def parse_resolution(text: str, axis: int) -> int:
    """Return the render width (``axis`` 0) or height (``axis`` 1) of the ``R`` line."""
    line = create_line(text, "R ")
    if line is None:
        raise CubError("No resolution found")
    words = split(line, " ")
    if len(words) < 2:
        raise CubError("Please provide both x and y render size")
    size = atoi(words[axis])
    if size < 1:
        raise CubError("Invalid resolution")
    return size


def check_rgb(parts: list[str] | None) -> tuple[int, int, int]:
    """Validate comma-separated colour parts and return the red, green and blue values."""
    if not parts or len(parts) < 3:
        raise CubError(_RGB_COUNT_MSG)
    for part in parts:
        if not has_digit(part):
            raise CubError(_RGB_COUNT_MSG)
        if not only_digits(part):
            raise CubError("Please enter rgb value with digits only")
    r, g, b = (atoi(part) for part in parts[:3])
    if not all(0 <= channel <= 255 for channel in (r, g, b)):
        raise CubError("RGB values must be within 0 and 255")
    return r, g, b


def parse_color(text: str, ident: str) -> int:
    """Return the packed colour given on the line introduced by ``ident``."""
    line = create_line(text, ident)
    if line is None:
        raise CubError("No rgb value found")
    r, g, b = check_rgb(split(line, ","))
    return create_rgb(r, g, b)


def find_map(text: str) -> int:
    """Return the index of the blank line that opens the map, or -1.

    The map is the tail of the text after the last pair of consecutive
    newlines such that the tail holds only map characters.
    """
    i = len(text) - 1
    while i > 0:
        if text[i] not in _MAP_CHARS:
            return -1
        i -= 1
        if i >= 1 and text[i] == "\n" and text[i - 1] == "\n":
            return i - 1
    return -1


def check_spawn(start: str) -> bool:
    """Tell whether ``start`` holds exactly one spawn letter."""
    first = find_first_of(start, _SPAWN_CHARS)
    if first == -1:
        return False
    return find_first_of(start[first + 1:], _SPAWN_CHARS) == -1


def _is_not_map(rows: list[str], y: int, x: int) -> bool:
    row = rows[y]
    cell = row[x] if x < len(row) else ""
    return cell in ("", " ", "\n")


def _cell_leaks(rows: list[str], x: int, y: int) -> bool:
    if rows[y][x] not in _OPEN_CELLS:
        return False
    neighbours = (
        (y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1),
        (y - 1, x - 1), (y + 1, x + 1), (y - 1, x + 1), (y + 1, x - 1),
    )
    return any(_is_not_map(rows, ny, nx) for ny, nx in neighbours)


def check_map(rows: list[str]) -> bool:
    """Tell whether every open cell of the map is enclosed by walls."""
    if not rows:
        return False
    if any(c in _OPEN_CELLS for c in rows[0]) or any(c in _OPEN_CELLS for c in rows[-1]):
        return False
    for row in rows:
        if row and (row[0] in _OPEN_CELLS or row[-1] in _OPEN_CELLS):
            return False
    for y in range(1, len(rows) - 1):
        for x in range(1, len(rows[y]) - 1):
            if _cell_leaks(rows, x, y):
                return False
    return True


def spawn_position(rows: list[str]) -> tuple[int, int, str]:
    """Return the column, row and letter of the first spawn cell in the map."""
    for y, row in enumerate(rows):
        x = find_first_of(row, _SPAWN_CHARS)
        if x >= 0:
            return x, y, row[x]
    raise CubError("Error saving spawn position in map")


def parse_textures(text: str) -> tuple[str, str, str, str]:
    """Return the north, south, west and east texture paths."""
    paths = tuple(create_line(text, ident) for ident in ("NO ", "SO ", "WE ", "EA "))
    if any(path is None for path in paths):
        raise CubError("Enter path for every texture")
    north, south, west, east = paths
    return north, south, west, east


def _parse_map(text: str) -> list[str]:
    start_index = find_map(text)
    if start_index == -1:
        raise CubError("Invalid map area")
    start = text[start_index:]
    rows = split(start, "\n")
    if not check_spawn(start):
        raise CubError("Make sure there is one spawn position in map!")
    if not check_map(rows):
        raise CubError("Map must be closed/surrounded by walls!")
    return rows


def parse_cub(text: str) -> CubConfig:
    """Parse and validate the whole contents of a scene file."""
    width = parse_resolution(text, 0)
    height = parse_resolution(text, 1)
    floor = parse_color(text, "F ")
    ceiling = parse_color(text, "C ")
    rows = _parse_map(text)
    spawn_x, spawn_y, spawn_dir = spawn_position(rows)
    row = rows[spawn_y]
    rows[spawn_y] = row[:spawn_x] + "0" + row[spawn_x + 1:]
    north, south, west, east = parse_textures(text)
    return CubConfig(
        width=width,
        height=height,
        north=north,
        south=south,
        west=west,
        east=east,
        floor=floor,
        ceiling=ceiling,
        rows=rows,
        spawn_x=spawn_x,
        spawn_y=spawn_y,
        spawn_dir=spawn_dir,
    )


def load_cub(path: str | PathLike[str]) -> CubConfig:
    """Read the scene file at ``path`` and parse it."""
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise CubError("Make sure cub file exists and path is correct") from exc
    with handle:
        try:
            text = handle.read()
        except OSError as exc:
            raise CubError("Error encountered while reading cub file") from exc
    return parse_cub(text)