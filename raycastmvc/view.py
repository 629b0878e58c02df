"""Raycast rendering and the interactive window."""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass
from typing import Sequence

import pygame

from .controller import Movement, control
from .model import Player, default_level, default_player

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
FADE_VALUE = 12
_FAR = 1e30


@dataclass(frozen=True)
class RayHit:
    """Where a ray cast through one screen column met a wall."""

    map_x: int
    map_y: int
    side: int
    wall: int
    perp_wall_dist: float
    wall_x: float


@dataclass(frozen=True)
class WallSlice:
    """Vertical span of a screen column covered by a wall, end exclusive."""

    draw_start: int
    draw_end: int
    color: tuple[int, int, int]


def cast_ray(
    player: Player, level: Sequence[Sequence[int]], x: int, screen_width: int
) -> RayHit:
    """Cast the ray for screen column ``x`` with digital differential analysis.

    Raises IndexError if the ray leaves the map without meeting a wall.
    """
    camera_x = 2 * x / screen_width - 1
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x

    map_x = int(player.pos_x)
    map_y = int(player.pos_y)

    delta_x = _FAR if ray_dir_x == 0 else abs(1 / ray_dir_x)
    delta_y = _FAR if ray_dir_y == 0 else abs(1 / ray_dir_y)

    if ray_dir_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_x < len(level) and 0 <= map_y < len(level[map_x])):
            raise IndexError(f"ray for column {x} left the map")
        wall = level[map_x][map_y]
        if wall > 0:
            break

    if side == 0:
        perp = side_x - delta_x
        wall_x = player.pos_y + perp * ray_dir_y
    else:
        perp = side_y - delta_y
        wall_x = player.pos_x + perp * ray_dir_x
    wall_x -= math.floor(wall_x)

    return RayHit(map_x, map_y, side, wall, perp, wall_x)


def wall_color(hit: RayHit) -> tuple[int, int, int]:
    """Grey shade of a wall: fades with distance, halved on y-facing sides."""
    base = (hit.wall * 255) & 0xFF
    fade = min(255, int(hit.perp_wall_dist * FADE_VALUE))
    shade = max(0, base - fade)
    if hit.side == 1:
        shade >>= 1
    return (shade, shade, shade)


def wall_slice(hit: RayHit, screen_height: int) -> WallSlice:
    """Compute the drawn span and color for a ray hit."""
    if hit.perp_wall_dist > 0:
        line_height = int(screen_height / hit.perp_wall_dist)
    else:
        line_height = screen_height * 2
    draw_start = max(0, -(line_height // 2) + screen_height // 2)
    draw_end = min(screen_height - 1, line_height // 2 + screen_height // 2)
    return WallSlice(draw_start, draw_end, wall_color(hit))


def render_frame(
    player: Player, level: Sequence[Sequence[int]], width: int, height: int
) -> bytearray:
    """Render one frame as packed RGB bytes, row by row."""
    frame = bytearray(width * height * 3)
    stride = width * 3
    for x in range(width):
        span = wall_slice(cast_ray(player, level, x, width), height)
        count = span.draw_end - span.draw_start
        if count <= 0:
            continue
        first = (span.draw_start * width + x) * 3
        for channel, value in enumerate(span.color):
            start = first + channel
            frame[start : start + count * stride : stride] = bytes((value,)) * count
    return frame


_KEY_MOVEMENTS = {
    pygame.K_LEFT: Movement.TURNING_LEFT,
    pygame.K_RIGHT: Movement.TURNING_RIGHT,
    pygame.K_UP: Movement.FORWARD,
    pygame.K_DOWN: Movement.BACKWARD,
}


def movement_for_key(key: int, pressed: bool, current: Movement) -> Movement:
    """Return the movement after an arrow key is pressed or released."""
    if key not in _KEY_MOVEMENTS:
        return current
    return _KEY_MOVEMENTS[key] if pressed else Movement.NONE


class View:
    """A window that shows the raycast scene."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Game")

    def draw(self, player: Player, level: Sequence[Sequence[int]]) -> None:
        """Render the scene and present it."""
        frame = render_frame(player, level, self.width, self.height)
        surface = pygame.image.frombuffer(bytes(frame), (self.width, self.height), "RGB")
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        """Shut the window down."""
        pygame.quit()

    def __enter__(self) -> View:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="raycastmvc", description="Raycasting maze walker.")
    parser.parse_args(argv)

    player = default_player()
    level = default_level()
    movement = Movement.NONE

    with View() as view:
        done = False
        now = time.perf_counter()
        while not done:
            last, now = now, time.perf_counter()
            delta_time = (now - last) * 3

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    done = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        done = True
                    movement = movement_for_key(event.key, True, movement)
                elif event.type == pygame.KEYUP:
                    movement = movement_for_key(event.key, False, movement)

            control(player, level, movement, delta_time)
            view.draw(player, level)
    return 0