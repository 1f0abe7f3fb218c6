"""The snake, the food and the rectangles used for collision tests."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from enum import Enum

from snakegame import constants


class Direction(Enum):
    """A heading the snake can take."""

    UP = 0
    DOWN = 1
    RIGHT = 2
    LEFT = 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap with a non-zero area."""
        inter_left = max(self.left, other.left)
        inter_top = max(self.top, other.top)
        inter_right = min(self.left + self.width, other.left + other.width)
        inter_bottom = min(self.top + self.height, other.top + other.height)
        return inter_left < inter_right and inter_top < inter_bottom


def _start_position() -> tuple[float, float]:
    grid = constants.GRID_SIZE
    cols = int(constants.WIDTH / grid)
    rows = int(constants.HEIGHT / grid)
    return float(grid * (cols // 2)), float(grid * (rows // 2))


class Snake:
    """A grid snake that moves one segment per step."""

    def __init__(self) -> None:
        self.segment_size: float = float(constants.GRID_SIZE)
        self.speed: float = float(constants.GRID_SIZE)
        self.collided: bool = False
        self.direction: Direction = Direction.UP
        self._vertical: bool = True
        self._horizontal: bool = False
        self.velocity: tuple[float, float] = (0.0, 0.0)
        self.position: tuple[float, float] = _start_position()
        self.body: list[tuple[float, float]] = []

    def copy(self) -> Snake:
        """Return an independent copy of this snake."""
        return _copy.deepcopy(self)

    def update_velocity(self) -> None:
        """Derive the velocity and axis flags from the current direction."""
        speed = self.speed
        if self.direction is Direction.UP:
            self.velocity = (0.0, -speed)
        elif self.direction is Direction.DOWN:
            self.velocity = (0.0, speed)
        elif self.direction is Direction.RIGHT:
            self.velocity = (speed, 0.0)
        else:
            self.velocity = (-speed, 0.0)
        self._vertical = self.direction in (Direction.UP, Direction.DOWN)
        self._horizontal = not self._vertical

    def move(self) -> None:
        """Advance one step; a collided snake no longer moves."""
        self.update_velocity()
        if self.collided:
            return
        if self.body:
            self.body = [self.position, *self.body[:-1]]
        dx, dy = self.velocity
        x, y = self.position
        self.position = (x + dx, y + dy)
        self.check_collision()

    def set_direction(self, direction: Direction) -> None:
        """Turn, unless the new direction lies on the axis already travelled."""
        if direction in (Direction.UP, Direction.DOWN):
            if not self._vertical:
                self.direction = direction
        elif not self._horizontal:
            self.direction = direction

    def check_collision(self) -> None:
        """Mark the snake collided if it left the window or hit its body."""
        x, y = self.position
        size = self.segment_size
        if x < 0 or x + size > constants.WIDTH or y < 0 or y + size > constants.HEIGHT:
            self.collided = True
        head = self.head_bounds()
        if any(segment.intersects(head) for segment in self.body_bounds()):
            self.collided = True

    def grow(self) -> None:
        """Add a segment at the tail (or at the head when there is no body)."""
        self.body.append(self.body[-1] if self.body else self.position)

    def reset(self) -> None:
        """Return to the starting square with no body; the heading is kept."""
        self.collided = False
        self.velocity = (0.0, -self.speed)
        self._vertical = True
        self._horizontal = False
        self.body.clear()
        self.position = _start_position()

    def head_bounds(self) -> Rect:
        x, y = self.position
        return Rect(x, y, self.segment_size, self.segment_size)

    def body_bounds(self) -> list[Rect]:
        size = self.segment_size
        return [Rect(x, y, size, size) for x, y in self.body]

    def draw(self, surface) -> None:
        """Draw the body segments, then the head, onto a pygame surface."""
        import pygame

        size = self.segment_size
        for x, y in self.body:
            pygame.draw.rect(surface, constants.S_BODY_COLOR, pygame.Rect(x, y, size, size))
        x, y = self.position
        pygame.draw.rect(surface, constants.S_HEAD_COLOR, pygame.Rect(x, y, size, size))


@dataclass
class Food:
    """A round piece of food positioned by its centre."""

    radius: float = constants.F_RADIUS
    position: tuple[float, float] = field(default=(0.0, 0.0))

    def copy(self) -> Food:
        """Return an independent copy of this food."""
        return Food(self.radius, self.position)

    def set_position(self, x: float, y: float) -> None:
        self.position = (float(x), float(y))

    def bounds(self) -> Rect:
        x, y = self.position
        r = self.radius
        return Rect(x - r, y - r, 2 * r, 2 * r)

    def collides_with(self, rect: Rect) -> bool:
        return self.bounds().intersects(rect)

    def draw(self, surface) -> None:
        """Draw the food onto a pygame surface."""
        import pygame

        pygame.draw.circle(surface, constants.F_COLOR, self.position, self.radius)