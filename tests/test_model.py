from raycastmvc.model import MAP_HEIGHT, MAP_WIDTH, Player, default_level, default_player


def test_default_player_values():
    player = default_player()
    assert (player.pos_x, player.pos_y) == (5, 5)
    assert (player.dir_x, player.dir_y) == (-1, 0)
    assert (player.plane_x, player.plane_y) == (0, 0.66)
    assert player.move_speed == 1.8
    assert player.rot_speed == 0.8


def test_default_player_is_fresh():
    first = default_player()
    first.pos_x = 10.0
    assert default_player().pos_x == 5


def test_player_is_mutable_dataclass():
    player = Player(pos_x=2.5)
    player.pos_y = 3.5
    assert player == Player(pos_x=2.5, pos_y=3.5)


def test_level_dimensions():
    level = default_level()
    assert len(level) == MAP_WIDTH
    assert all(len(column) == MAP_HEIGHT for column in level)


def test_level_border_is_walled():
    level = default_level()
    last = 23
    for i in range(last + 1):
        assert level[0][i] == 1
        assert level[last][i] == 1
        assert level[i][0] == 1
        assert level[i][last] == 1


def test_level_padding_is_empty():
    level = default_level()
    assert all(level[MAP_WIDTH - 1][y] == 0 for y in range(MAP_HEIGHT))
    assert all(level[x][MAP_HEIGHT - 1] == 0 for x in range(MAP_WIDTH))


def test_start_cell_is_free():
    player = default_player()
    level = default_level()
    assert level[int(player.pos_x)][int(player.pos_y)] == 0


def test_level_copies_are_independent():
    level = default_level()
    level[5][5] = 1
    assert default_level()[5][5] == 0


def test_level_known_walls():
    level = default_level()
    assert level[4][6] == 1
    assert level[14][13] == 1
    assert level[4][5] == 0