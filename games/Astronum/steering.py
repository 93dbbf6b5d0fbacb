"""
Pointer-seeking steering.

On every tick of a drag the ship either turns one step towards the pointer
or, once its tip faces it, thrusts one step. Heading always converges over
several ticks; the ship never snaps to the target direction.
"""
import math
from enum import Enum

from models import Point2D
from games.Astronum.ship import Ship, normalize_heading


class SteeringOutcome(Enum):
    """What a steering step did."""
    ROTATED_LEFT = "rotated_left"
    ROTATED_RIGHT = "rotated_right"
    THRUST = "thrust"
    ARRIVED = "arrived"    # Facing the target and within one thrust of it
    BLOCKED = "blocked"    # The turn or thrust was refused at the arena edge


def heading_delta(target_heading: float, heading: float) -> float:
    """Signed difference target - heading folded into (-180, 180]."""
    delta = target_heading - heading
    if delta > 180:
        delta -= 360
    if delta <= -180:
        delta += 360
    return delta


def legacy_distance(dx: float, dy: float) -> float:
    """Legacy steering distance sqrt(dx + dy).

    Negative sums give NaN, which never compares below the thrust threshold.
    """
    total = dx + dy
    return math.sqrt(total) if total >= 0 else math.nan


def steer_toward(ship: Ship, target: Point2D, legacy: bool = False) -> SteeringOutcome:
    """Turn or thrust the ship one step towards `target`.

    Args:
        ship: The ship to steer
        target: Target point in arena-local coordinates
        legacy: Use legacy_distance() instead of the Euclidean distance

    Returns:
        The action taken this tick.
    """
    front = ship.get_front_point()
    dx = target.x - front.x
    dy = target.y - front.y
    if dx == 0 and dy == 0:
        return SteeringOutcome.ARRIVED

    target_heading = normalize_heading(math.degrees(math.atan2(dy, dx)))

    # The heading points from the tip to the tail, so a target straight
    # ahead shows up as a delta of +-180
    delta = heading_delta(target_heading, ship.get_orientation())
    if abs(delta) < 180 - ship.get_min_turn_step():
        if delta < 0:
            applied = ship.rotate_right()
            outcome = SteeringOutcome.ROTATED_RIGHT
        else:
            applied = ship.rotate_left()
            outcome = SteeringOutcome.ROTATED_LEFT
        return outcome if applied else SteeringOutcome.BLOCKED

    distance = legacy_distance(dx, dy) if legacy else math.hypot(dx, dy)
    if distance < ship.get_min_thrust_distance():
        return SteeringOutcome.ARRIVED

    if ship.move_forward(ship.get_min_thrust_distance()):
        return SteeringOutcome.THRUST
    return SteeringOutcome.BLOCKED
