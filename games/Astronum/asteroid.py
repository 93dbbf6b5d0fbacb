"""
Asteroid - a drifting numeric token.

Asteroids spawn on the arena perimeter, stay hidden until the round starts,
then drift in a straight line. When the next step would leave the arena
they turn by a random angle instead of moving.
"""
import math
import random
from typing import Optional

from models import Point2D, Rectangle
from games.Astronum import config


class Asteroid:
    """A token carrying one candidate value of the equation."""

    def __init__(
        self,
        arena_width: float,
        arena_height: float,
        origin: Point2D,
        value: int,
        rng: Optional[random.Random] = None,
        speed: float = config.ASTEROID_SPEED,
    ):
        """
        Args:
            arena_width: Arena width in pixels
            arena_height: Arena height in pixels
            origin: Spawn point (top-left of the token) on the arena perimeter
            value: Number shown on the token
            rng: Random source for headings and deflections
            speed: Pixels travelled per tick
        """
        self._arena_width = arena_width
        self._arena_height = arena_height
        self._rng = rng or random.Random()
        self._speed = speed
        self._value = value
        self._size = min(arena_width, arena_height) * config.ASTEROID_SIZE_RATIO

        self._origin = self._pull_inside(origin)
        self._position = self._origin
        self._angle = 0.0
        self._visible = False
        self._removed = False

        self.reset()

    def _pull_inside(self, origin: Point2D) -> Point2D:
        """Shift a perimeter spawn point so the whole token starts inside."""
        offset = config.ASTEROID_BOUND_OFFSET
        x, y = origin.x, origin.y
        if x <= 0:
            x = offset
        if x + self._size >= self._arena_width:
            x = self._arena_width - self._size - offset
        if y <= 0:
            y = offset
        if y + self._size >= self._arena_height:
            y = self._arena_height - self._size - offset
        return Point2D(x=x, y=y)

    @property
    def value(self) -> int:
        return self._value

    @property
    def position(self) -> Point2D:
        return self._position

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def size(self) -> float:
        return self._size

    @property
    def visible(self) -> bool:
        return self._visible and not self._removed

    @property
    def removed(self) -> bool:
        return self._removed

    def get_bounds(self) -> Rectangle:
        return Rectangle(x=self._position.x, y=self._position.y,
                         width=self._size, height=self._size)

    def show(self) -> None:
        if not self._removed:
            self._visible = True

    def hide(self) -> None:
        self._visible = False

    def remove(self) -> None:
        """Take the token out of play for the rest of the round."""
        self._visible = False
        self._removed = True

    def reset(self) -> None:
        """Go back to the spawn point with a fresh random heading."""
        self._position = self._origin
        self._angle = self._rng.random() * 360

    def _leaves_arena(self, position: Point2D) -> bool:
        return (position.x <= 0 or
                position.x + self._size >= self._arena_width or
                position.y <= 0 or
                position.y + self._size >= self._arena_height)

    def move(self) -> bool:
        """Drift one step, or deflect at a wall.

        Returns:
            True if the token moved, False if it deflected or is hidden.
        """
        if not self.visible:
            return False

        rad = math.radians(self._angle)
        step = self._position.offset(math.cos(rad) * self._speed, math.sin(rad) * self._speed)
        if self._leaves_arena(step):
            self._angle = (self._angle + self._rng.random() * 90) % 360
            return False

        self._position = step
        return True
