"""
Tests for pointer-seeking steering.

The test ship sits in the middle of a 400x400 arena with its tip at
(200, 172), pointing up.
"""

import math

import pytest

from models import Point2D
from games.Astronum.ship import Ship
from games.Astronum.steering import (
    SteeringOutcome,
    heading_delta,
    legacy_distance,
    steer_toward,
)


@pytest.fixture
def ship():
    return Ship(400, 400)


class TestHeadingDelta:
    """Test heading_delta()."""

    @pytest.mark.parametrize("target, heading, expected", [
        (270, 90, 180),
        (90, 270, 180),
        (0, 90, -90),
        (180, 90, 90),
        (350, 10, -20),
        (10, 350, 20),
        (90, 90, 0),
    ])
    def test_folds_into_half_open_range(self, target, heading, expected):
        """Test deltas fall in (-180, 180]."""
        assert heading_delta(target, heading) == pytest.approx(expected)


class TestLegacyDistance:
    """Test legacy_distance()."""

    def test_sqrt_of_sum(self):
        """Test the result is sqrt(dx + dy), not the Euclidean distance."""
        assert legacy_distance(3.0, 1.0) == pytest.approx(2.0)
        assert legacy_distance(3.0, 4.0) != pytest.approx(5.0)

    def test_negative_sum_is_nan(self):
        """Test negative sums produce NaN."""
        assert math.isnan(legacy_distance(-5.0, 1.0))


class TestSteerToward:
    """Test steer_toward()."""

    def test_target_on_right_turns_right(self, ship):
        """Test a target to the right increases the heading."""
        outcome = steer_toward(ship, Point2D(x=300.0, y=172.0))

        assert outcome == SteeringOutcome.ROTATED_RIGHT
        assert ship.get_orientation() == pytest.approx(92.0)

    def test_target_on_left_turns_left(self, ship):
        """Test a target to the left decreases the heading."""
        outcome = steer_toward(ship, Point2D(x=100.0, y=172.0))

        assert outcome == SteeringOutcome.ROTATED_LEFT
        assert ship.get_orientation() == pytest.approx(88.0)

    def test_target_behind_turns(self, ship):
        """Test a target behind the ship is reached by turning first."""
        outcome = steer_toward(ship, Point2D(x=210.0, y=350.0))

        assert outcome in (SteeringOutcome.ROTATED_LEFT, SteeringOutcome.ROTATED_RIGHT)
        assert ship.pose.position.y == pytest.approx(172.0)

    def test_target_ahead_thrusts(self, ship):
        """Test a target straight ahead moves the ship forward."""
        outcome = steer_toward(ship, Point2D(x=200.0, y=100.0))

        assert outcome == SteeringOutcome.THRUST
        assert ship.get_orientation() == 90.0
        assert ship.pose.position.y == pytest.approx(171.0)

    def test_target_within_thrust_arrives(self, ship):
        """Test a target closer than one thrust leaves the ship alone."""
        front = ship.get_front_point()
        before = ship.pose

        outcome = steer_toward(ship, Point2D(x=front.x, y=front.y - 0.5))

        assert outcome == SteeringOutcome.ARRIVED
        assert ship.pose == before

    def test_target_on_tip_arrives(self, ship):
        """Test a target exactly on the tip needs no action."""
        before = ship.pose

        outcome = steer_toward(ship, ship.get_front_point())

        assert outcome == SteeringOutcome.ARRIVED
        assert ship.pose == before

    def test_never_snaps_to_target_heading(self, ship):
        """Test one step turns by exactly one turn step."""
        steer_toward(ship, Point2D(x=399.0, y=399.0))

        assert abs(heading_delta(ship.get_orientation(), 90.0)) == pytest.approx(2.0)

    def test_blocked_at_edge(self):
        """Test a thrust into the arena edge is reported as blocked."""
        ship = Ship(400, 400, start=Point2D(x=200.0, y=29.0))

        outcome = steer_toward(ship, Point2D(x=200.0, y=-5.0))

        assert outcome == SteeringOutcome.BLOCKED
        assert ship.pose.position.y == pytest.approx(1.0)

    def test_legacy_distance_keeps_thrusting(self, ship):
        """Test the legacy distance never arrives at targets above the tip."""
        front = ship.get_front_point()
        target = Point2D(x=front.x, y=front.y - 0.5)

        outcome = steer_toward(ship, target, legacy=True)

        assert outcome == SteeringOutcome.THRUST

    def test_repeated_steps_approach_target(self, ship):
        """Test that steering over many ticks closes in on the target."""
        target = Point2D(x=230.0, y=60.0)
        start = ship.get_front_point()
        start_distance = math.hypot(target.x - start.x, target.y - start.y)

        outcomes = [steer_toward(ship, target) for _ in range(300)]

        front = ship.get_front_point()
        assert math.hypot(target.x - front.x, target.y - front.y) < start_distance / 10
        assert SteeringOutcome.THRUST in outcomes
        assert SteeringOutcome.ROTATED_RIGHT in outcomes
        assert SteeringOutcome.BLOCKED not in outcomes
