"""Player state, movement with wall collision, and view rotation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

WALL = "1"


@dataclass
class Player:
    """Position, view direction, camera plane and movement intent of the player."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66
    move_speed: float = 0.05
    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False


class Move(NamedTuple):
    """Position the player would reach after one step."""

    new_x: float
    new_y: float


def _direction(player: Player) -> tuple[float, float]:
    mvx = mvy = 0.0
    if player.move_forward:
        mvx += player.dir_x
        mvy += player.dir_y
    if player.move_backward:
        mvx -= player.dir_x
        mvy -= player.dir_y
    if player.move_right:
        mvx += player.plane_x
        mvy += player.plane_y
    if player.move_left:
        mvx -= player.plane_x
        mvy -= player.plane_y
    return mvx, mvy


def compute_move(player: Player) -> Move:
    """Return where one step of the active movement keys would take the player.

    The combined direction is normalised, so diagonal steps are no longer
    than straight ones. With no movement, the current position is returned.
    """
    mvx, mvy = _direction(player)
    length = math.hypot(mvx, mvy)
    if length > 0.0:
        return Move(
            player.pos_x + mvx / length * player.move_speed,
            player.pos_y + mvy / length * player.move_speed,
        )
    return Move(player.pos_x, player.pos_y)


def _cell(grid: Sequence[str], row: int, col: int) -> str:
    line = grid[row]
    return line[col] if col < len(line) else " "


def _open(grid: Sequence[str], row: int, col: int) -> bool:
    height = len(grid)
    width = max((len(line) for line in grid), default=0)
    return 0 <= row < height and 0 <= col < width and _cell(grid, row, col) != WALL


def move_player(player: Player, grid: Sequence[str]) -> bool:
    """Step the player through the map, refusing to enter walls.

    Both the horizontal and the vertical component of the step must lead
    into open cells for the move to happen. Returns whether it moved.
    """
    move = compute_move(player)
    can_move_x = _open(grid, int(player.pos_y), int(move.new_x))
    can_move_y = _open(grid, int(move.new_y), int(player.pos_x))
    if can_move_x and can_move_y:
        player.pos_x, player.pos_y = move.new_x, move.new_y
        return True
    return False


def rotate_player(player: Player, angle: float) -> None:
    """Rotate the view direction and camera plane by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    player.dir_x, player.dir_y = (
        player.dir_x * cos_a - player.dir_y * sin_a,
        player.dir_x * sin_a + player.dir_y * cos_a,
    )
    player.plane_x, player.plane_y = (
        player.plane_x * cos_a - player.plane_y * sin_a,
        player.plane_x * sin_a + player.plane_y * cos_a,
    )