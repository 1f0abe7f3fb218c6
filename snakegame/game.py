"""Game state: scoring, food placement, timing and control modes."""

from __future__ import annotations

import logging
import random
from enum import Enum

from snakegame import constants
from snakegame.bruteforce import BruteForce
from snakegame.entities import Direction, Food, Snake

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Who steers the snake."""

    USER = "user"
    BRUTE_FORCE = "brute_force"


class Game:
    """The state of one snake game, independent of any window."""

    def __init__(self, rng: random.Random | None = None, search_depth: int = 4) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.search_depth = search_depth
        self.score = 0
        self.accumulated_time = 0.0
        self.started = False
        self.game_over = False
        self.mode = Mode.USER
        self.snake = Snake()
        self.food = Food()
        self.ai = BruteForce(self.snake, self.food, search_depth)
        self._position_info = ""

        grid = constants.GRID_SIZE
        self.max_grid_x = int(constants.WIDTH / grid - 1)
        self.max_grid_y = int(constants.HEIGHT / grid - 1)
        radius = int(constants.F_RADIUS)
        self._range_x = (radius, self.max_grid_x - radius)
        self._range_y = (radius, self.max_grid_y - radius)

        self.generate_food_position()

    def start(self) -> None:
        self.started = True

    def use_user_mode(self) -> None:
        logger.info("Mode Utilisateur")
        self.mode = Mode.USER

    def use_brute_force(self) -> None:
        logger.info("BruteForce Algorithme")
        self.mode = Mode.BRUTE_FORCE

    def steer(self, direction: Direction) -> None:
        self.snake.set_direction(direction)

    def generate_food_position(self) -> None:
        """Place the food on a random grid cell not covered by the snake."""
        grid = constants.GRID_SIZE
        while True:
            grid_x = self.rng.randint(*self._range_x)
            grid_y = self.rng.randint(*self._range_y)
            self.food.set_position(grid_x * grid + grid // 2, grid_y * grid + grid // 2)
            if self.food.collides_with(self.snake.head_bounds()):
                continue
            if not any(self.food.collides_with(b) for b in self.snake.body_bounds()):
                return

    def run_brute_force(self) -> None:
        self.snake.set_direction(self.ai.find_best_move())

    def refresh_game_over(self) -> bool:
        """Mark the game over once the snake has collided; return the flag."""
        if self.snake.collided:
            self.game_over = True
        return self.game_over

    def update(self, delta: float) -> None:
        """Advance the clock by ``delta`` seconds, moving and feeding the snake."""
        self.accumulated_time += delta
        move_interval = 1.0 / (constants.S_SPEED / constants.GRID_SIZE)
        if self.accumulated_time >= move_interval:
            if self.mode is Mode.BRUTE_FORCE:
                self.ai = BruteForce(self.snake, self.food, self.search_depth)
                self.run_brute_force()
            self.snake.move()
            self.accumulated_time = 0.0

        if self.food.collides_with(self.snake.head_bounds()):
            self.snake.grow()
            self.score += 1
            self.generate_food_position()

        x, y = self.snake.position
        self._position_info = f"{int(x)} | {int(y)}"

    def reset(self) -> None:
        """Start over with a fresh snake and food, back in user mode and paused."""
        self.score = 0
        self.game_over = False
        self.snake = Snake()
        self.food = Food()
        self.generate_food_position()
        self.ai = BruteForce(self.snake, self.food, self.search_depth)
        self._position_info = ""
        self.accumulated_time = 0.0
        self.mode = Mode.USER
        self.started = False

    def score_text(self) -> str:
        return constants.SCORE_TEXT + str(self.score)

    def position_text(self) -> str:
        return constants.SNAKE_POS_INFO + self._position_info