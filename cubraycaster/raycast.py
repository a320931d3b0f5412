"""Player movement and DDA ray casting over a grid map."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

_SPAWN_ANGLES = {
    "N": 0.0,
    "E": math.pi / 2,
    "S": math.pi,
    "W": 1.5 * math.pi,
}
_MIN_DISTANCE = 1e-6


def _cell(grid: Sequence[str], row: int, col: int) -> str:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return ""
    return grid[row][col]


def _is_wall(grid: Sequence[str], row: int, col: int) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] == "1"


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


@dataclass
class Player:
    """Camera state: position, view direction, camera plane and held movement keys.

    ``pos_x`` runs along the map rows and ``pos_y`` along the columns.
    """

    pos_x: float
    pos_y: float
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66
    step_size: float = 0.1
    turn_speed: float = math.pi / 48
    forward: bool = False
    backwards: bool = False
    left: bool = False
    right: bool = False
    rot_left: bool = False
    rot_right: bool = False

    @classmethod
    def from_spawn(cls, x: int, y: int, direction: str) -> Player:
        """Place a player in the middle of map cell (``x``, ``y``) facing ``direction``."""
        player = cls(pos_x=y + 0.5, pos_y=x + 0.5)
        player.rotate(_SPAWN_ANGLES.get(direction, 0.0))
        return player

    def rotate(self, radians: float) -> None:
        """Turn the view direction and camera plane by ``radians``."""
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_r - self.dir_y * sin_r,
            self.dir_x * sin_r + self.dir_y * cos_r,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_r - self.plane_y * sin_r,
            self.plane_x * sin_r + self.plane_y * cos_r,
        )

    def move(self, grid: Sequence[str], dx: float, dy: float) -> bool:
        """Step along (``dx``, ``dy``), axis by axis, where the target cell is floor.

        Returns whether the position changed.
        """
        before = (self.pos_x, self.pos_y)
        if _cell(grid, int(self.pos_x + dx * self.step_size), int(self.pos_y)) == "0":
            self.pos_x += dx * (self.step_size - 0.01)
        if _cell(grid, int(self.pos_x), int(self.pos_y + dy * self.step_size)) == "0":
            self.pos_y += dy * (self.step_size - 0.01)
        return (self.pos_x, self.pos_y) != before

    def update(self, grid: Sequence[str]) -> bool:
        """Apply every held movement key once. Returns whether anything changed."""
        changed = False
        if self.forward:
            changed |= self.move(grid, self.dir_x, self.dir_y)
        if self.backwards:
            changed |= self.move(grid, -self.dir_x, -self.dir_y)
        if self.left:
            changed |= self.move(grid, -self.plane_x, -self.plane_y)
        if self.right:
            changed |= self.move(grid, self.plane_x, self.plane_y)
        if self.rot_right:
            self.rotate(-self.turn_speed)
            changed = True
        if self.rot_left:
            self.rotate(self.turn_speed)
            changed = True
        return changed


@dataclass(frozen=True)
class RayHit:
    """Where the ray of one screen column met a wall and how tall it is drawn."""

    ray_dir_x: float
    ray_dir_y: float
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side: int
    perp_wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    wall_x: float


def cast_ray(
    player: Player, grid: Sequence[str], column: int, width: int, height: int
) -> RayHit:
    """Cast the ray for screen ``column`` of a ``width`` x ``height`` view."""
    camera_x = 2 * column / float(width) - 1
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)

    delta_x = _inverse_abs(ray_dir_x)
    delta_y = _inverse_abs(ray_dir_y)
    if ray_dir_x < 0:
        step_x = -1
        side_dist_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_dist_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        side_dist_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_dist_y = (map_y + 1.0 - player.pos_y) * delta_y

    side = 0
    while True:
        if side_dist_x < side_dist_y:
            side_dist_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_dist_y += delta_y
            map_y += step_y
            side = 1
        if _is_wall(grid, map_x, map_y):
            break

    if side == 0:
        perp = (map_x - player.pos_x + (1 - step_x) // 2) / ray_dir_x
    else:
        perp = (map_y - player.pos_y + (1 - step_y) // 2) / ray_dir_y
    perp = max(perp, _MIN_DISTANCE)

    line_height = int(height / perp)
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)

    if side == 0:
        wall_x = player.pos_y + perp * ray_dir_y
    else:
        wall_x = player.pos_x + perp * ray_dir_x
    wall_x -= math.floor(wall_x)

    return RayHit(
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
        side=side,
        perp_wall_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        wall_x=wall_x,
    )