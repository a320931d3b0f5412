"""Drawing the background and textured walls of a frame."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from .color import gen_darker_color
from .errors import CubError
from .image import Image
from .raycast import Player, RayHit, cast_ray
from .xpm import XpmError, load_xpm


@dataclass
class Textures:
    """The four wall textures, one per face direction."""

    north: Image
    south: Image
    west: Image
    east: Image


def draw_background(image: Image, ceiling: int, floor: int) -> None:
    """Paint a slowly darkening ceiling over the top half and plain floor below."""
    height = image.height
    band = height // 200
    color = ceiling
    half = height // 2
    for y in range(half):
        if band == 0 or y % band == 0:
            color = gen_darker_color(color, 1)
        image.fill_row(y, color)
    for y in range(half, height):
        image.fill_row(y, floor)


def draw_column(image: Image, hit: RayHit, texture: Image, column: int) -> None:
    """Draw the wall slice of ``hit`` into ``column``, sampling ``texture``."""
    if hit.line_height <= 0:
        return
    x_tex = int(hit.wall_x * texture.width)
    if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
        x_tex = texture.width - x_tex
    x_tex %= texture.width
    step = texture.height / float(hit.line_height)
    y_tex = 0.0
    if hit.line_height > image.height:
        y_tex = (hit.line_height - image.height) * step / 2
    for y in range(hit.draw_start, hit.draw_end + 1):
        image.put_pixel(column, y, texture.get_pixel(x_tex, int(y_tex) % texture.height))
        y_tex += step


def _face_texture(textures: Textures, hit: RayHit) -> Image:
    if hit.side == 0:
        return textures.north if hit.step_x == -1 else textures.south
    return textures.east if hit.step_y == -1 else textures.west


def draw_frame(
    image: Image,
    player: Player,
    grid: Sequence[str],
    textures: Textures,
    ceiling: int,
    floor: int,
) -> Image:
    """Render the whole view of ``player`` into ``image`` and return it."""
    draw_background(image, ceiling, floor)
    for column in range(image.width):
        hit = cast_ray(player, grid, column, image.width, image.height)
        draw_column(image, hit, _face_texture(textures, hit), column)
    return image


def _load_png(name: str) -> Image:
    import pygame

    try:
        surface = pygame.image.load(name)
    except (pygame.error, OSError) as exc:
        raise CubError(f'"{name}" does not exist.') from exc
    width, height = surface.get_size()
    pixels = []
    for y in range(height):
        for x in range(width):
            c = surface.get_at((x, y))
            pixels.append((c.r << 16) | (c.g << 8) | c.b)
    return Image(width, height, pixels)


def load_texture(path: str | PathLike[str]) -> Image:
    """Load an ``.xpm`` or ``.png`` texture from ``path``."""
    name = os.fspath(path)
    if ".xpm" in name:
        try:
            return load_xpm(name)
        except XpmError as exc:
            raise CubError(f'"{name}" does not exist.') from exc
    if ".png" in name:
        return _load_png(name)
    raise CubError(f'"{name}" does not exist.')