import math

import pytest

from cubraycaster.app import Game, Key, fit_resolution, main
from cubraycaster.image import Image
from cubraycaster.parse import parse_cub
from cubraycaster.raycast import Player
from cubraycaster.render import Textures

SCENE = (
    "R 8 6\n"
    "NO ./missing_north.xpm\n"
    "SO ./missing_south.xpm\n"
    "WE ./missing_west.xpm\n"
    "EA ./missing_east.xpm\n"
    "F 10,20,30\n"
    "C 40,50,60\n"
    "\n"
    "111111\n"
    "100001\n"
    "10N001\n"
    "100001\n"
    "111111\n"
)

NORTH = 0x112233
SOUTH = 0x445566
WEST = 0x778899
EAST = 0xAABBCC


def _solid(color):
    return Image(2, 2, [color] * 4)


@pytest.fixture
def game():
    config = parse_cub(SCENE)
    textures = Textures(
        north=_solid(NORTH), south=_solid(SOUTH), west=_solid(WEST), east=_solid(EAST)
    )
    return Game(config, textures)


def test_fit_resolution_keeps_size_that_fits():
    assert fit_resolution(800, 600, 1920, 1080) == (800, 600)


def test_fit_resolution_shrinks_to_screen():
    assert fit_resolution(3000, 600, 1920, 1080) == (1728, 972)


def test_fit_resolution_result_fits_when_height_too_big():
    width, height = fit_resolution(100, 5000, 1920, 1080)
    assert width < 1920 and height < 1080


def test_game_uses_config_resolution(game):
    assert (game.image.width, game.image.height) == (8, 6)


def test_spawn_position_from_config(game):
    assert (game.player.pos_x, game.player.pos_y) == (2.5, 2.5)


def test_center_column_shows_north_wall(game):
    assert game.image.get_pixel(4, 3) == NORTH


def test_key_press_and_release_toggle_forward(game):
    game.key_pressed(Key.FORWARD)
    assert game.player.forward is True
    game.key_released(Key.FORWARD)
    assert game.player.forward is False


def test_rotate_keys_set_flags(game):
    game.key_pressed(Key.ROTATE_LEFT)
    game.key_pressed(Key.ROTATE_RIGHT)
    assert (game.player.rot_left, game.player.rot_right) == (True, True)


def test_escape_stops_game(game):
    game.key_pressed(Key.ESC)
    assert game.running is False


def test_unknown_key_changes_nothing(game):
    before = (game.player.dir_x, game.player.dir_y, game.player.forward)
    game.key_pressed(99)
    game.key_released(99)
    assert (game.player.dir_x, game.player.dir_y, game.player.forward) == before
    assert game.running is True


def test_quarter_turn_rotates_view(game):
    expected = Player.from_spawn(2, 2, "N")
    expected.rotate(-math.pi / 2)
    game.key_pressed(Key.QUARTER_TURN)
    assert math.isclose(game.player.dir_x, expected.dir_x, abs_tol=1e-12)
    assert math.isclose(game.player.dir_y, expected.dir_y, abs_tol=1e-12)


def test_tick_without_keys_does_nothing(game):
    assert game.tick() is False
    assert game.player.pos_x == 2.5


def test_tick_moves_forward(game):
    game.key_pressed(Key.FORWARD)
    assert game.tick() is True
    assert game.player.pos_x < 2.5
    assert game.player.pos_y == 2.5


def test_tick_rotation_redraws(game):
    game.key_pressed(Key.ROTATE_LEFT)
    before = game.player.dir_x
    assert game.tick() is True
    assert game.player.dir_x != before


def test_main_rejects_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Invalid argument" in capsys.readouterr().out


def test_main_reports_missing_scene(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert "Make sure cub file exists" in capsys.readouterr().out


def test_main_reports_missing_texture(tmp_path, capsys):
    scene = tmp_path / "scene.cub"
    scene.write_text(SCENE)
    assert main([str(scene)]) == 1
    out = capsys.readouterr().out
    assert "Parsing successful!" in out
    assert "does not exist." in out


def test_main_reports_invalid_scene(tmp_path, capsys):
    scene = tmp_path / "scene.cub"
    scene.write_text(SCENE.replace("R 8 6\n", ""))
    assert main([str(scene)]) == 1
    assert "No resolution found" in capsys.readouterr().out