import pytest

from cubraycaster.color import gen_darker_color
from cubraycaster.errors import CubError
from cubraycaster.image import Image
from cubraycaster.raycast import Player, RayHit
from cubraycaster.render import (
    Textures,
    draw_background,
    draw_column,
    draw_frame,
    load_texture,
)

ROOM = ["11111", "10001", "10001", "10001", "11111"]
NORTH, SOUTH, WEST, EAST = 0x0000AA, 0x00AA00, 0xAA0000, 0xAAAA00


def _uniform(color, width=4, height=4):
    return Image(width, height, [color] * (width * height))


def _textures():
    return Textures(
        north=_uniform(NORTH), south=_uniform(SOUTH), west=_uniform(WEST), east=_uniform(EAST)
    )


def _hit(**overrides):
    values = dict(
        ray_dir_x=-1.0, ray_dir_y=0.0, map_x=0, map_y=0, step_x=-1, step_y=1,
        side=0, perp_wall_dist=1.0, line_height=8, draw_start=0, draw_end=7, wall_x=0.5,
    )
    values.update(overrides)
    return RayHit(**values)


def test_background_darkens_ceiling_and_fills_floor():
    image = Image(3, 4)
    ceiling, floor = 0x405060, 0x102030
    draw_background(image, ceiling, floor)
    first = gen_darker_color(ceiling, 1)
    assert image.get_pixel(0, 0) == first
    assert image.get_pixel(2, 1) == gen_darker_color(first, 1)
    assert all(image.get_pixel(x, y) == floor for x in range(3) for y in (2, 3))


def test_column_painted_only_between_start_and_end():
    image = Image(1, 10)
    hit = _hit(line_height=6, draw_start=2, draw_end=7)
    draw_column(image, hit, _uniform(0x123456), 0)
    column = [image.get_pixel(0, y) for y in range(10)]
    assert column[2:8] == [0x123456] * 6
    assert column[:2] == [0, 0]
    assert column[8:] == [0, 0]


def test_column_samples_whole_texture_top_to_bottom():
    texture = Image(1, 4, [10, 20, 30, 40])
    image = Image(1, 8)
    draw_column(image, _hit(), texture, 0)
    column = [image.get_pixel(0, y) for y in range(8)]
    assert column == sorted(column)
    assert column[0] == 10
    assert column[-1] == 40
    assert set(column) == {10, 20, 30, 40}


def test_tall_column_starts_inside_texture():
    texture = Image(1, 4, [10, 20, 30, 40])
    image = Image(1, 8)
    draw_column(image, _hit(line_height=16), texture, 0)
    column = [image.get_pixel(0, y) for y in range(8)]
    assert column == sorted(column)
    assert 10 not in column
    assert 40 not in column


def test_texture_mirrored_for_positive_ray():
    texture = Image(4, 1, [1, 2, 3, 4])
    mirrored = Image(1, 1)
    plain = Image(1, 1)
    draw_column(mirrored, _hit(ray_dir_x=1.0, wall_x=0.25, line_height=1, draw_end=0), texture, 0)
    draw_column(plain, _hit(ray_dir_x=-1.0, wall_x=0.75, line_height=1, draw_end=0), texture, 0)
    assert mirrored.get_pixel(0, 0) == plain.get_pixel(0, 0)


@pytest.mark.parametrize("direction, expected", [("N", NORTH), ("S", SOUTH)])
def test_frame_shows_facing_wall_in_centre(direction, expected):
    image = Image(20, 30)
    player = Player.from_spawn(2, 2, direction)
    result = draw_frame(image, player, ROOM, _textures(), 0x808080, 0x202020)
    assert result is image
    assert image.get_pixel(10, 15) == expected
    assert image.get_pixel(10, 0) == gen_darker_color(0x808080, 1)
    assert image.get_pixel(10, 29) == 0x202020


def test_load_xpm_texture(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(
        '/* XPM */\nstatic char *t[] = {\n"2 1 2 1",\n"a c #FF0000",\n"b c #00FF00",\n"ab"\n};\n'
    )
    image = load_texture(path)
    assert (image.width, image.height) == (2, 1)
    assert image.pixels == [0xFF0000, 0x00FF00]


def test_load_png_texture(tmp_path):
    import pygame

    surface = pygame.Surface((2, 1))
    surface.fill((255, 0, 0))
    surface.set_at((1, 0), (0, 0, 255))
    path = tmp_path / "wall.png"
    pygame.image.save(surface, str(path))
    image = load_texture(path)
    assert image.pixels == [0xFF0000, 0x0000FF]


def test_missing_texture_raises(tmp_path):
    with pytest.raises(CubError, match="does not exist"):
        load_texture(tmp_path / "missing.xpm")


def test_unknown_texture_format_raises(tmp_path):
    path = tmp_path / "wall.bmp"
    path.write_bytes(b"BM")
    with pytest.raises(CubError, match="does not exist"):
        load_texture(path)