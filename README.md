# snakegame

A classic Snake game on a 20-pixel grid inside a 1280×720 window, drawn with
pygame. You can steer the snake yourself, or hand control to a brute-force AI
that looks a few moves ahead and heads for the food.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Playing

Start the game with:

```
snakegame
```

The command prints `Snake Game!`, opens the window and waits. The snake does
not move until you press Enter.

| Key          | Action                                          |
|--------------|-------------------------------------------------|
| Enter        | Start the game                                  |
| Arrow keys   | Change the snake's direction                    |
| U            | User mode: you steer the snake                  |
| B            | Brute-force AI mode: the AI steers the snake    |
| Space        | Reset: new snake and food, score 0, user mode, paused |

The snake moves one grid cell every 1/15 of a second. It can only turn
90 degrees at a time, so it cannot reverse onto itself. Eating the food makes
it one segment longer and adds a point to the score, and new food appears on
a random free cell. The game is over when the head leaves the window or runs
into the body; "Game Over" is shown and the snake stops. Press Space to start
again.

The score is shown at the top of the window and the head's pixel position at
the bottom.

### Fonts

Text is drawn with the font file `snakegame/font/JetBrainsMono.ttf` if it is
there. The package does not ship that file; when it is missing, an error is
logged and pygame's default font is used instead.

## Using the pieces in code

The game logic in `snakegame.game.Game` runs without a window, so you can
drive it from your own code or from tests:

```python
import random

from snakegame.entities import Direction
from snakegame.game import Game

game = Game(random.Random(1), 4)
game.start()
game.steer(Direction.LEFT)
game.update(0.1)
print(game.score_text(), game.position_text())
```

- `Game(rng, search_depth)` takes a `random.Random` for food placement and
  the AI's search depth (default 4). `update(delta)` advances the clock by
  `delta` seconds; `use_brute_force()` and `use_user_mode()` switch `mode`
  between `Mode.BRUTE_FORCE` and `Mode.USER`; `refresh_game_over()` sets
  `game_over` once the snake has collided; `reset()` starts over.
- `snakegame.entities` holds `Snake`, `Food`, `Direction` and `Rect`, the
  axis-aligned rectangle used for collision tests.
- `snakegame.bruteforce.BruteForce(snake, food, search_depth)` does the AI
  search on its own: `find_best_move()` returns the `Direction` whose
  look-ahead ends closest to the food while avoiding collisions.
- `snakegame.app.App` owns the pygame window, turns pygame events into game
  calls and draws each frame; `snakegame.app.main()` is what the `snakegame`
  command runs.

Mode changes are logged at INFO level and the AI's search at DEBUG level,
through the standard `logging` module.

## Running the tests

```
pytest
```