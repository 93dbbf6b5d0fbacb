"""
Spawn layout for asteroids.

Spawn points are spread evenly along the arena perimeter, walking
clockwise from a random offset on the top edge.
"""
import random
from typing import List, Optional

from models import Point2D


def perimeter_point(distance: float, width: float, height: float) -> Point2D:
    """Point reached after walking `distance` clockwise from (0, 0)."""
    perimeter = 2 * (width + height)
    d = distance % perimeter
    if d < width:
        return Point2D(x=d, y=0.0)
    if d < width + height:
        return Point2D(x=width, y=d - width)
    if d < 2 * width + height:
        return Point2D(x=2 * width + height - d, y=height)
    return Point2D(x=0.0, y=perimeter - d)


def perimeter_positions(
    count: int,
    width: float,
    height: float,
    rng: Optional[random.Random] = None,
) -> List[Point2D]:
    """Return `count` points equally spaced along the arena perimeter.

    Args:
        count: Number of points
        width: Arena width
        height: Arena height
        rng: Random source for the starting offset

    Returns:
        Points on the perimeter, in clockwise order
    """
    rng = rng or random
    perimeter = 2 * (width + height)
    step_size = perimeter / count
    start = rng.random() * width
    return [perimeter_point(start + i * step_size, width, height) for i in range(count)]
