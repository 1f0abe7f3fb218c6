import random

import pytest

from snakegame import constants
from snakegame.entities import Direction
from snakegame.game import Game, Mode

INTERVAL = constants.GRID_SIZE / constants.S_SPEED


@pytest.fixture
def game():
    return Game(random.Random(7))


def test_initial_state(game):
    assert game.score == 0
    assert game.started is False
    assert game.game_over is False
    assert game.mode is Mode.USER
    assert game.score_text() == "Score : 0"
    assert game.position_text() == "Snake Position : "


@pytest.mark.parametrize("seed", range(20))
def test_food_placed_on_grid_within_range_and_off_snake(seed):
    game = Game(random.Random(seed))
    grid = constants.GRID_SIZE
    radius = int(constants.F_RADIUS)
    for _ in range(5):
        game.generate_food_position()
        x, y = game.food.position
        gx = (x - grid // 2) / grid
        gy = (y - grid // 2) / grid
        assert gx == int(gx) and gy == int(gy)
        assert radius <= gx <= game.max_grid_x - radius
        assert radius <= gy <= game.max_grid_y - radius
        assert not game.food.collides_with(game.snake.head_bounds())


def test_update_below_interval_does_not_move(game):
    start = game.snake.position
    game.update(INTERVAL / 2)
    assert game.snake.position == start
    assert game.accumulated_time == pytest.approx(INTERVAL / 2)


def test_update_after_interval_moves_one_cell(game):
    x, y = game.snake.position
    game.update(INTERVAL)
    assert game.snake.position == (x, y - constants.GRID_SIZE)
    assert game.accumulated_time == 0.0


def test_accumulated_time_adds_up(game):
    x, y = game.snake.position
    game.update(INTERVAL * 0.6)
    game.update(INTERVAL * 0.6)
    assert game.snake.position == (x, y - constants.GRID_SIZE)


def test_eating_food_grows_and_scores(game):
    x, y = game.snake.position
    half = constants.GRID_SIZE / 2
    game.food.set_position(x + half, y + half)
    game.update(0.0)
    assert game.score == 1
    assert len(game.snake.body) == 1
    assert game.score_text() == constants.SCORE_TEXT + "1"
    assert not game.food.collides_with(game.snake.head_bounds())


def test_position_text_after_update(game):
    game.update(INTERVAL)
    x, y = game.snake.position
    assert game.position_text() == f"{constants.SNAKE_POS_INFO}{int(x)} | {int(y)}"


def test_steer_turns_snake(game):
    game.steer(Direction.LEFT)
    assert game.snake.direction is Direction.LEFT


def test_mode_switching(game):
    game.use_brute_force()
    assert game.mode is Mode.BRUTE_FORCE
    game.use_user_mode()
    assert game.mode is Mode.USER


def test_start(game):
    game.start()
    assert game.started is True


def test_brute_force_heads_towards_food(game):
    x, y = game.snake.position
    game.food.set_position(x - 10 * constants.GRID_SIZE, y + constants.GRID_SIZE / 2)
    game.use_brute_force()
    game.update(INTERVAL)
    assert game.snake.direction is Direction.LEFT
    assert game.snake.position[0] < x


def test_run_brute_force_sets_direction(game):
    x, y = game.snake.position
    game.food.set_position(x + 10 * constants.GRID_SIZE, y)
    game.run_brute_force()
    assert game.snake.direction is Direction.RIGHT


def test_refresh_game_over_after_wall_hit(game):
    assert game.refresh_game_over() is False
    while not game.snake.collided:
        game.snake.move()
    assert game.refresh_game_over() is True
    assert game.game_over is True


def test_reset_restores_fresh_state(game):
    game.start()
    game.use_brute_force()
    game.score = 5
    game.accumulated_time = 0.05
    game.snake.grow()
    old_snake = game.snake
    game.reset()
    assert game.score == 0
    assert game.started is False
    assert game.mode is Mode.USER
    assert game.accumulated_time == 0.0
    assert game.snake is not old_snake
    assert game.snake.body == []
    assert game.ai.snake is game.snake
    assert game.ai.food is game.food
    assert game.position_text() == constants.SNAKE_POS_INFO