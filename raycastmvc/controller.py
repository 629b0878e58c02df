"""Player movement in response to the current input state."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Sequence

from .model import Player


class Movement(Enum):
    """What the player is currently doing."""

    NONE = auto()
    FORWARD = auto()
    BACKWARD = auto()
    TURNING_LEFT = auto()
    TURNING_RIGHT = auto()


def _walk(player: Player, level: Sequence[Sequence[int]], step: float) -> None:
    probe = step * 4
    if level[int(player.pos_x + player.dir_x * probe)][int(player.pos_y)] == 0:
        player.pos_x += player.dir_x * step
    if level[int(player.pos_x)][int(player.pos_y + player.dir_y * probe)] == 0:
        player.pos_y += player.dir_y * step


def _rotate(player: Player, angle: float) -> None:
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


def control(
    player: Player,
    level: Sequence[Sequence[int]],
    movement: Movement,
    delta_time: float,
) -> Player:
    """Advance the player by ``delta_time`` according to ``movement``.

    Walking is blocked per axis when a wall lies four steps ahead.
    The player is updated in place and returned.
    """
    if movement is Movement.FORWARD:
        _walk(player, level, player.move_speed * delta_time)
    elif movement is Movement.BACKWARD:
        _walk(player, level, -player.move_speed * delta_time)
    elif movement is Movement.TURNING_LEFT:
        _rotate(player, player.rot_speed * delta_time)
    elif movement is Movement.TURNING_RIGHT:
        _rotate(player, -player.rot_speed * delta_time)
    return player