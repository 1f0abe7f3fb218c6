import math

from snakegame import constants
from snakegame.bruteforce import BruteForce
from snakegame.entities import Direction, Food, Snake


def _food_at(x, y):
    food = Food()
    food.set_position(x, y)
    return food


def test_default_depth_and_directions():
    ai = BruteForce(Snake(), Food())
    assert ai.search_depth == 3
    assert ai.directions == [Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT]


def test_chooses_right_when_food_is_right():
    snake = Snake()
    x, y = snake.position
    ai = BruteForce(snake, _food_at(x + 200, y + 10), 1)
    assert ai.find_best_move() is Direction.RIGHT


def test_chooses_up_when_food_is_above():
    snake = Snake()
    x, y = snake.position
    ai = BruteForce(snake, _food_at(x + 10, y - 200), 2)
    assert ai.find_best_move() is Direction.UP


def test_avoids_wall():
    snake = Snake()
    while snake.position[1] > 0:
        snake.move()
    assert not snake.collided
    x, _ = snake.position
    ai = BruteForce(snake, _food_at(x, 0), 2)
    assert ai.find_best_move() in (Direction.RIGHT, Direction.LEFT)


def test_evaluate_collided_is_negative_infinity():
    snake = Snake()
    while not snake.collided:
        snake.move()
    ai = BruteForce(snake, Food(), 3)
    assert ai.evaluate_state(snake, 2) == -math.inf


def test_evaluate_depth_zero_is_negative_distance():
    snake = Snake()
    x, y = snake.position
    ai = BruteForce(snake, _food_at(x, y), 3)
    assert ai.evaluate_state(snake, 0) == 0.0
    ai.food.set_position(x + 3 * constants.GRID_SIZE, y + 4 * constants.GRID_SIZE)
    assert ai.evaluate_state(snake, 0) == -5 * constants.GRID_SIZE


def test_deeper_search_never_worse_than_shallow():
    snake = Snake()
    x, y = snake.position
    ai = BruteForce(snake, _food_at(x + 100, y - 100), 3)
    assert ai.evaluate_state(snake, 2) >= ai.evaluate_state(snake, 0)


def test_simulate_move_leaves_snake_untouched():
    snake = Snake()
    x, y = snake.position
    ai = BruteForce(snake, Food(), 3)
    assert ai.simulate_move(Direction.RIGHT) == (x + constants.GRID_SIZE, y)
    assert snake.position == (x, y)
    assert snake.direction is Direction.UP