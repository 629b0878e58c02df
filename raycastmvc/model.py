"""Game state: the player and the level grid."""

from __future__ import annotations

from dataclasses import dataclass

MAP_WIDTH = 25
MAP_HEIGHT = 25

_LEVEL_ROWS = (
    "111111111111111111111111",
    "100000000000000000000001",
    "100000000000000000000001",
    "100000000000000000000001",
    "100000100010000101010001",
    "100000100010000000000001",
    "100000100010000100010001",
    "100000100010000000000001",
    "100000100010000101010001",
    "100000000000000000000001",
    "100000000000000000000001",
    "100000000000000000001001",
    "111110000000000000001001",
    "100000000000010000001001",
    "100000000000111000011001",
    "100000000000010000000001",
    "100000000000000000000001",
    "100000000000000000000001",
    "100000100000000000000001",
    "100000000000000000000001",
    "100000000000000011111001",
    "100000000000000000000001",
    "100000000000000000000001",
    "111111111111111111111111",
)


@dataclass
class Player:
    """Position, facing direction, camera plane and speeds of the player."""

    pos_x: float = 5.0
    pos_y: float = 5.0
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66
    move_speed: float = 1.8
    rot_speed: float = 0.8


def default_player() -> Player:
    """Return the player in its starting state."""
    return Player()


def default_level() -> list[list[int]]:
    """Return a fresh copy of the level, indexed as ``level[x][y]``.

    The grid is MAP_WIDTH by MAP_HEIGHT; cells beyond the drawn map are empty.
    """
    level = [[0] * MAP_HEIGHT for _ in range(MAP_WIDTH)]
    for x, row in enumerate(_LEVEL_ROWS):
        for y, cell in enumerate(row):
            level[x][y] = int(cell)
    return level