"""Exhaustive look-ahead search for the snake's next move."""

from __future__ import annotations

import logging
import math

from snakegame.entities import Direction, Food, Snake

logger = logging.getLogger(__name__)


class BruteForce:
    """Pick the move that brings the head closest to the food within a search depth."""

    def __init__(self, snake: Snake, food: Food, search_depth: int = 3) -> None:
        self.snake = snake
        self.food = food
        self.search_depth = search_depth
        self.directions: list[Direction] = list(Direction)

    def simulate_move(self, direction: Direction) -> tuple[float, float]:
        """Return where the head would be after turning and moving once."""
        trial = self.snake.copy()
        trial.set_direction(direction)
        trial.move()
        return trial.position

    def evaluate_state(self, snake: Snake, depth: int) -> float:
        """Score a simulated snake: minus the food distance, or -inf if dead."""
        if snake.collided:
            return -math.inf

        if depth <= 0:
            hx, hy = snake.position
            fx, fy = self.food.position
            return -math.hypot(hx - fx, hy - fy)

        best = -math.inf
        logger.debug("[Depth %d] Evaluating positions...", depth)
        for direction in self.directions:
            nxt = snake.copy()
            nxt.set_direction(direction)
            nxt.move()
            if nxt.collided:
                continue
            score = self.evaluate_state(nxt, depth - 1)
            best = max(score, best)
            logger.debug(
                "Testing dir: %d at depth: %d | Score: %s", direction.value, depth, score
            )
        return best

    def find_best_move(self) -> Direction:
        """Return the direction with the highest look-ahead score."""
        best_score = -math.inf
        best_direction = self.snake.direction
        for direction in self.directions:
            trial = self.snake.copy()
            trial.set_direction(direction)
            trial.move()
            score = self.evaluate_state(trial, self.search_depth - 1)
            if score > best_score:
                best_score = score
                best_direction = direction
        return best_direction