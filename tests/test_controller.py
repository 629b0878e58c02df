import math

import pytest

from raycastmvc.controller import Movement, control
from raycastmvc.model import Player, default_level, default_player


def _boxed_level():
    return [
        [1, 1, 1],
        [1, 0, 1],
        [1, 1, 1],
    ]


def test_none_leaves_player_unchanged():
    player = default_player()
    result = control(player, default_level(), Movement.NONE, 0.5)
    assert result == default_player()


def test_forward_moves_along_direction():
    player = default_player()
    control(player, default_level(), Movement.FORWARD, 0.1)
    assert player.pos_x < 5
    assert player.pos_y == pytest.approx(5)


def test_forward_then_backward_returns():
    player = default_player()
    level = default_level()
    control(player, level, Movement.FORWARD, 0.1)
    control(player, level, Movement.BACKWARD, 0.1)
    assert player.pos_x == pytest.approx(5)
    assert player.pos_y == pytest.approx(5)


def test_forward_distance_scales_with_speed():
    slow = default_player()
    fast = default_player()
    fast.move_speed = slow.move_speed * 2
    level = default_level()
    control(slow, level, Movement.FORWARD, 0.05)
    control(fast, level, Movement.FORWARD, 0.05)
    assert 5 - fast.pos_x == pytest.approx(2 * (5 - slow.pos_x))


def test_wall_blocks_forward():
    player = Player(pos_x=1.5, pos_y=1.5)
    control(player, _boxed_level(), Movement.FORWARD, 0.1)
    assert player.pos_x == 1.5
    assert player.pos_y == 1.5


def test_wall_blocks_backward():
    player = Player(pos_x=1.5, pos_y=1.5)
    control(player, _boxed_level(), Movement.BACKWARD, 0.1)
    assert player.pos_x == 1.5


@pytest.mark.parametrize("movement", [Movement.TURNING_LEFT, Movement.TURNING_RIGHT])
def test_rotation_preserves_lengths(movement):
    player = default_player()
    control(player, default_level(), movement, 0.3)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)
    assert player.dir_x * player.plane_x + player.dir_y * player.plane_y == pytest.approx(0)


def test_rotation_does_not_move():
    player = default_player()
    control(player, default_level(), Movement.TURNING_LEFT, 0.3)
    assert (player.pos_x, player.pos_y) == (5, 5)


def test_left_then_right_restores_direction():
    player = default_player()
    level = default_level()
    control(player, level, Movement.TURNING_LEFT, 0.4)
    control(player, level, Movement.TURNING_RIGHT, 0.4)
    start = default_player()
    assert player.dir_x == pytest.approx(start.dir_x)
    assert player.dir_y == pytest.approx(start.dir_y)
    assert player.plane_x == pytest.approx(start.plane_x)
    assert player.plane_y == pytest.approx(start.plane_y)


def test_turn_directions_are_opposite():
    left = default_player()
    right = default_player()
    level = default_level()
    control(left, level, Movement.TURNING_LEFT, 0.2)
    control(right, level, Movement.TURNING_RIGHT, 0.2)
    assert left.dir_y == pytest.approx(-right.dir_y)
    assert left.dir_y != pytest.approx(0)