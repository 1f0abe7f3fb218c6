"""The pygame window that shows a game and feeds it input."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable

import pygame

from snakegame import constants
from snakegame.entities import Direction
from snakegame.game import Game
from snakegame.text import TextLabel

_ARROWS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
}


class App:
    """Owns the window, translates events and draws the game."""

    def __init__(self, game: Game | None = None) -> None:
        self.game = game if game is not None else Game()
        self.window = pygame.display.set_mode((int(constants.WIDTH), int(constants.HEIGHT)))
        pygame.display.set_caption(constants.TITLE)
        self.running = True

        self.game_over_label = TextLabel(constants.GAME_OVER_SIZE, constants.GAME_OVER_COLOR)
        self.game_over_label.set_text(constants.GAME_OVER_TEXT)
        self.game_over_label.set_position(constants.WIDTH / 2, constants.HEIGHT / 2)

        self.score_label = TextLabel(constants.SCORE_SIZE, constants.SCORE_COLOR)
        self.score_label.set_text(self.game.score_text())
        self.score_label.set_position(constants.WIDTH / 2, 10)

        self.position_label = TextLabel(constants.SNAKE_POS_INFO_SIZE, constants.SNAKE_POS_INFO_COLOR)
        self.position_label.set_text(self.game.position_text())
        self.position_label.set_position(constants.WIDTH / 2, constants.HEIGHT - 10)

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Apply window and keyboard events to the game."""
        game = self.game
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_RETURN:
                    game.start()
                elif event.key == pygame.K_u:
                    game.use_user_mode()
                elif event.key == pygame.K_b:
                    game.use_brute_force()
                elif event.key in _ARROWS:
                    game.steer(_ARROWS[event.key])
                elif event.key == pygame.K_SPACE:
                    game.reset()
        game.refresh_game_over()

    def _sync_labels(self) -> None:
        score = self.game.score_text()
        if score != self.score_label.text:
            self.score_label.set_text(score)
        position = self.game.position_text()
        if position != self.position_label.text:
            self.position_label.set_text(position)

    def draw(self) -> None:
        """Render one frame."""
        self.window.fill(constants.BACKGROUND)
        self._sync_labels()
        self.game.food.draw(self.window)
        self.game.snake.draw(self.window)
        self.position_label.draw(self.window)
        self.score_label.draw(self.window)
        if self.game.game_over:
            self.game_over_label.draw(self.window)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        clock = pygame.time.Clock()
        last_update = time.monotonic()
        while self.running:
            self.handle_events(pygame.event.get())
            if not self.game.game_over and self.game.started:
                now = time.monotonic()
                self.game.update(now - last_update)
                last_update = now
            self.draw()
            clock.tick(constants.FPS)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="snakegame", description="Play snake.")
    parser.parse_args(argv)
    print("Snake Game!")
    pygame.init()
    try:
        App().run()
    except Exception as exc:  # noqa: BLE001 - report and exit cleanly
        print(f"Error: {exc}", file=sys.stderr)
    finally:
        pygame.quit()
    return 0