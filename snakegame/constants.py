"""Window, colour and gameplay settings shared across the game."""

from pathlib import Path

WIDTH: float = 1280.0
HEIGHT: float = 720.0
FPS: int = 120
TITLE: str = "Snake Game"
BACKGROUND: tuple[int, int, int] = (30, 30, 40)

# Text display
FONT_PATH: Path = Path(__file__).resolve().parent / "font" / "JetBrainsMono.ttf"
GAME_OVER_TEXT: str = "Game Over"
GAME_OVER_SIZE: float = 100.0
GAME_OVER_COLOR: tuple[int, int, int] = (255, 20, 20)

SNAKE_POS_INFO: str = "Snake Position : "
SNAKE_POS_INFO_SIZE: float = 10.0
SNAKE_POS_INFO_COLOR: tuple[int, int, int] = (255, 255, 255)

SCORE_TEXT: str = "Score : "
SCORE_SIZE: float = 20.0
SCORE_COLOR: tuple[int, int, int] = (125, 100, 125)

# Food
F_RADIUS: float = 10.0
F_COLOR: tuple[int, int, int] = (225, 85, 85)

# Snake
S_HEAD_COLOR: tuple[int, int, int] = (100, 255, 100)
S_BODY_COLOR: tuple[int, int, int] = (50, 180, 50)
S_EDGE: float = F_RADIUS
S_SPEED: float = 300.0

# Grid
GRID_SIZE: int = int(S_EDGE * 2)