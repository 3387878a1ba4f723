import pytest

from tablecat.sprites import (
    DUCK_FRAMES,
    RUN_FRAMES,
    Box,
    Coin,
    Key,
    Obstacle,
    Player,
    PlayerState,
)


def grounded_player():
    player = Player()
    player.y = player.ground_level
    player.ground_y = player.y
    return player


def test_box_overlap_is_symmetric():
    a = Box(0, 0, 10, 10)
    b = Box(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_box_touching_edges_do_not_intersect():
    assert not Box(0, 0, 10, 10).intersects(Box(10, 0, 10, 10))
    assert not Box(0, 0, 10, 10).intersects(Box(0, 20, 10, 10))


def test_coin_bounds_are_fifty_square():
    coin = Coin(x=800, y=250)
    assert coin.bounds() == Box(800, 250, 50, 50)


def test_obstacle_moves_left_by_five():
    obstacle = Obstacle(x=800, y=-10)
    assert obstacle.move() is True
    assert obstacle.x == 795
    assert obstacle.bounds().y == -10


def test_obstacle_dies_off_screen():
    obstacle = Obstacle(x=-356, y=-10)
    assert obstacle.move() is False
    assert obstacle.alive is False


def test_player_starts_on_first_run_frame():
    player = Player()
    assert player.image == "fly(1)"
    assert player.state is PlayerState.RUNNING
    assert player.animation_interval == 150


def test_run_animation_cycles():
    player = Player()
    seen = [player.image]
    for _ in RUN_FRAMES:
        player.animate()
        seen.append(player.image)
    assert tuple(seen[: len(RUN_FRAMES)]) == RUN_FRAMES
    assert seen[-1] == seen[0]


def test_jump_and_land():
    player = grounded_player()
    player.key_press(Key.W)
    assert player.is_jumping
    assert player.velocity_y == -15
    assert player.state is PlayerState.JUMPING
    assert player.animation_interval == 100
    player.move()
    assert player.y < player.ground_level
    for _ in range(200):
        if not player.is_jumping:
            break
        player.move()
    assert not player.is_jumping
    assert player.y == player.ground_level
    assert player.velocity_y == 0
    assert player.state is PlayerState.RUNNING
    assert player.image == "fly(1)"


def test_second_jump_press_ignored_while_airborne():
    player = grounded_player()
    player.key_press(Key.W)
    player.move()
    velocity = player.velocity_y
    player.key_press(Key.W)
    assert player.velocity_y == velocity


def test_duck_lowers_player_and_release_restores_state():
    player = grounded_player()
    player.key_press(Key.S)
    assert player.state is PlayerState.DUCKING
    assert player.y == player.ground_y + 55
    assert player.image in DUCK_FRAMES
    assert player.animation_interval == 200
    player.key_release(Key.S)
    assert player.state is PlayerState.RUNNING


def test_duck_ignored_while_jumping():
    player = grounded_player()
    player.key_press(Key.W)
    player.key_press(Key.S)
    assert player.state is PlayerState.JUMPING


def test_bounds_are_scaled():
    player = Player(width=100, height=100, x=10, y=20)
    box = player.bounds()
    assert box.width == pytest.approx(100 * player.scale)
    assert (box.x, box.y) == (10, 20)


def test_take_damage_reports_lives_and_game_over():
    player = Player()
    reported = []
    over = []
    player.on_lives_changed = reported.append
    player.on_game_over = lambda: over.append(True)
    for _ in range(5):
        player.take_damage()
    assert reported == [4, 3, 2, 1, 0]
    assert over == [True]