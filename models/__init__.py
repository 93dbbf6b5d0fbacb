"""
Pydantic models and enums shared by the minigame runtime and the games.

    >>> from models import Point2D, Rectangle, InputKind
"""

from .primitives import Point2D, Rectangle
from .enums import InputKind, EventClass, SchedulerPhase

__all__ = [
    "Point2D",
    "Rectangle",
    "InputKind",
    "EventClass",
    "SchedulerPhase",
]
