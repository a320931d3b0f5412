"""The interactive game: key handling, the frame loop and the command entry point."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .errors import RESET, RED, CubError, error_msg, success_msg
from .image import Image
from .parse import CubConfig, load_cub
from .raycast import Player
from .render import Textures, draw_frame, load_texture

_SCREEN_FILL = 0.9
_FRAMES_PER_SECOND = 60


class Key(IntEnum):
    """Key codes the game reacts to."""

    LEFT = 0
    BACKWARDS = 1
    RIGHT = 2
    FORWARD = 13
    QUARTER_TURN = 25
    ESC = 53
    ROTATE_LEFT = 123
    ROTATE_RIGHT = 124


_HOLD_FLAGS = {
    Key.FORWARD: "forward",
    Key.BACKWARDS: "backwards",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.ROTATE_RIGHT: "rot_right",
    Key.ROTATE_LEFT: "rot_left",
}


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def fit_resolution(
    width: int, height: int, screen_width: int, screen_height: int
) -> tuple[int, int]:
    """Return the render size, shrunk to 90% of the screen when it does not fit."""
    if screen_width < width or screen_height < height:
        return int(screen_width * _SCREEN_FILL), int(screen_height * _SCREEN_FILL)
    return width, height


@dataclass
class Game:
    """A running scene: the player, the frame buffer and the held keys."""

    config: CubConfig
    textures: Textures
    width: int | None = None
    height: int | None = None
    running: bool = True
    image: Image = field(init=False)
    player: Player = field(init=False)

    def __post_init__(self) -> None:
        if self.width is None:
            self.width = self.config.width
        if self.height is None:
            self.height = self.config.height
        self.image = Image(self.width, self.height)
        self.player = Player.from_spawn(
            self.config.spawn_x, self.config.spawn_y, self.config.spawn_dir
        )
        self.render()

    def render(self) -> Image:
        """Draw the current view into the frame buffer and return it."""
        return draw_frame(
            self.image,
            self.player,
            self.config.rows,
            self.textures,
            self.config.ceiling,
            self.config.floor,
        )

    def key_pressed(self, key: int) -> None:
        """React to a key going down."""
        code = _as_key(key)
        if code is None:
            return
        if code is Key.ESC:
            self.running = False
        elif code is Key.QUARTER_TURN:
            self.player.rotate(-math.pi / 2)
            self.render()
        else:
            setattr(self.player, _HOLD_FLAGS[code], True)

    def key_released(self, key: int) -> None:
        """React to a key coming up."""
        code = _as_key(key)
        if code in _HOLD_FLAGS:
            setattr(self.player, _HOLD_FLAGS[code], False)

    def tick(self) -> bool:
        """Apply held keys once and redraw if the view changed. Returns whether it did."""
        changed = self.player.update(self.config.rows)
        if changed:
            self.render()
        return changed


def _load_textures(config: CubConfig) -> Textures:
    return Textures(
        north=load_texture(config.north),
        south=load_texture(config.south),
        west=load_texture(config.west),
        east=load_texture(config.east),
    )


def _run(config: CubConfig, textures: Textures) -> None:
    import pygame

    pygame.init()
    try:
        info = pygame.display.Info()
        width, height = fit_resolution(
            config.width, config.height, info.current_w, info.current_h
        )
        if (width, height) != (config.width, config.height):
            error_msg("Given resolution too big for screen . . .")
            success_msg("Resolution has been altered to screen size")
        game = Game(config, textures, width, height)
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("cub3D")
        keymap = {
            pygame.K_w: Key.FORWARD,
            pygame.K_s: Key.BACKWARDS,
            pygame.K_a: Key.LEFT,
            pygame.K_d: Key.RIGHT,
            pygame.K_LEFT: Key.ROTATE_LEFT,
            pygame.K_RIGHT: Key.ROTATE_RIGHT,
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_9: Key.QUARTER_TURN,
        }
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key in keymap:
                    game.key_pressed(keymap[event.key])
                elif event.type == pygame.KEYUP and event.key in keymap:
                    game.key_released(keymap[event.key])
            if not game.running:
                break
            game.tick()
            frame = pygame.image.frombuffer(
                game.image.to_rgb_bytes(), (width, height), "RGB"
            )
            screen.blit(frame, (0, 0))
            pygame.display.flip()
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    success_msg("Thanks for playing! :)")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        error_msg("Invalid argument\n")
        return 1
    try:
        config = load_cub(args[0])
    except CubError as exc:
        error_msg(str(exc))
        return 1
    success_msg("Parsing successful!")
    try:
        textures = _load_textures(config)
    except CubError as exc:
        sys.stdout.write(f"{RED}\n{exc}\n\n{RESET}")
        return 1
    _run(config, textures)
    return 0