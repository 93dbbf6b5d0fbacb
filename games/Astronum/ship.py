"""
Ship - the player's craft.

The ship lives in arena-local coordinates (origin at the arena's top-left
corner). Its pose is a footprint square of side `length` plus a heading.
At heading 0 the tip faces -x; the initial heading of 90 points it up.

Every pose change is validated against the arena before anything is
mutated, so a rejected move also discards the rotation that came with it.
"""
import math
from dataclasses import dataclass, replace
from typing import List, Optional

from models import Point2D, Rectangle
from games.Astronum import config


@dataclass(frozen=True)
class ActorPose:
    """Position (footprint top-left), heading in degrees and render scale."""
    position: Point2D
    heading: float
    scale: float = 1.0


def normalize_heading(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = degrees % 360.0
    # -1e-18 % 360 rounds to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


class Ship:
    """Kinematic ship with atomic, boundary-checked updates."""

    def __init__(
        self,
        arena_width: float,
        arena_height: float,
        start: Optional[Point2D] = None,
        turn_angle: float = config.TURN_ANGLE,
        thrust_distance: float = config.THRUST_DISTANCE,
        initial_heading: float = config.INITIAL_HEADING,
    ):
        """Create a ship centered on `start` (arena center by default).

        Args:
            arena_width: Arena width in pixels
            arena_height: Arena height in pixels
            start: Center of the ship after reset()
            turn_angle: Degrees turned per rotate_left/rotate_right
            thrust_distance: Pixels moved per forward()
            initial_heading: Heading after reset()
        """
        self._arena_width = arena_width
        self._arena_height = arena_height
        self._start = start or Point2D(x=arena_width / 2, y=arena_height / 2)
        self._turn_angle = turn_angle
        self._thrust_distance = thrust_distance
        self._initial_heading = initial_heading

        short_side = min(arena_width, arena_height)
        self._length = short_side * config.SHIP_LENGTH_RATIO
        self._breadth = short_side * config.SHIP_BREADTH_RATIO

        self._pose = self._initial_pose()

    def _initial_pose(self) -> ActorPose:
        half = self._length / 2
        return ActorPose(
            position=self._start.offset(-half, -half),
            heading=normalize_heading(self._initial_heading),
            scale=1.0,
        )

    # --- Pose changes ---

    def reset(self) -> None:
        """Return to the centered starting pose."""
        self._pose = self._initial_pose()

    def collides(self, position: Point2D) -> bool:
        """Check whether a footprint at `position` touches the arena edge."""
        return (position.x <= 0 or
                position.x + self._length >= self._arena_width or
                position.y <= 0 or
                position.y + self._length >= self._arena_height)

    def update(self, dx: float, dy: float, degrees: float) -> bool:
        """Translate and rotate in one step, or not at all.

        The footprint is tested at the tentative position; a rotation with a
        zero translation is therefore only refused if the ship already
        touches an edge, which reset() and accepted moves never produce.

        Returns:
            True if the pose was changed.
        """
        position = self._pose.position.offset(dx, dy)
        if self.collides(position):
            return False

        self._pose = replace(
            self._pose,
            position=position,
            heading=normalize_heading(self._pose.heading + degrees),
        )
        return True

    def rotate(self, degrees: float) -> bool:
        """Turn by `degrees` (positive turns clockwise on screen)."""
        return self.update(0.0, 0.0, degrees)

    def move(self, distance: float) -> bool:
        """Translate by distance * (cos(heading), sin(heading))."""
        rad = math.radians(self._pose.heading)
        return self.update(math.cos(rad) * distance, math.sin(rad) * distance, 0.0)

    def move_forward(self, distance: float) -> bool:
        """Translate `distance` pixels towards the tip."""
        return self.move(-distance)

    def forward(self) -> bool:
        return self.move_forward(self._thrust_distance)

    def backward(self) -> bool:
        """Reverse thrust is disabled; the ship only flies forwards."""
        return False

    def rotate_left(self) -> bool:
        return self.rotate(-self._turn_angle)

    def rotate_right(self) -> bool:
        return self.rotate(self._turn_angle)

    # --- Accessors ---

    @property
    def pose(self) -> ActorPose:
        return self._pose

    @property
    def length(self) -> float:
        return self._length

    @property
    def breadth(self) -> float:
        return self._breadth

    def get_orientation(self) -> float:
        """Heading in degrees, in [0, 360)."""
        return self._pose.heading

    def get_center(self) -> Point2D:
        half = self._length / 2
        return self._pose.position.offset(half, half)

    def get_min_turn_step(self) -> float:
        """Degrees turned on a single tick."""
        return self._turn_angle

    def get_min_thrust_distance(self) -> float:
        """Pixels moved on a single tick."""
        return self._thrust_distance

    def _rotate_about_center(self, dx: float, dy: float) -> Point2D:
        """Rotate an offset from the center by the heading; return the point."""
        center = self.get_center()
        rad = math.radians(self._pose.heading)
        cos = math.cos(rad)
        sin = math.sin(rad)
        return Point2D(
            x=dx * cos - dy * sin + center.x,
            y=dx * sin + dy * cos + center.y,
        )

    def get_front_point(self) -> Point2D:
        """Tip of the ship, accounting for the heading."""
        # Un-rotated tip sits on the left edge, level with the center
        return self._rotate_about_center(-self._length / 2, 0.0)

    def get_outline(self) -> List[Point2D]:
        """Triangle (tip, rear corners) of the ship body, rotated and scaled."""
        half_length = self._length / 2 * self._pose.scale
        half_breadth = self._breadth / 2 * self._pose.scale
        return [
            self._rotate_about_center(-half_length, 0.0),
            self._rotate_about_center(half_length, -half_breadth),
            self._rotate_about_center(half_length, half_breadth),
        ]

    def get_bounds(self) -> Rectangle:
        """Axis-aligned box around the rotated, scaled ship body."""
        half_length = self._length / 2 * self._pose.scale
        half_breadth = self._breadth / 2 * self._pose.scale
        corners = [
            self._rotate_about_center(sx * half_length, sy * half_breadth)
            for sx in (-1, 1) for sy in (-1, 1)
        ]
        xs = [p.x for p in corners]
        ys = [p.y for p in corners]
        return Rectangle(
            x=min(xs),
            y=min(ys),
            width=max(max(xs) - min(xs), 1e-6),
            height=max(max(ys) - min(ys), 1e-6),
        )
