"""
Input and scheduling enumerations.

These enums are the contract between host input sources and the
event scheduler.
"""

from enum import Enum


class InputKind(str, Enum):
    """Raw host input kinds an input source can deliver.

    Pointer (mouse) and touch kinds are kept apart here; the scheduler
    unifies them into a single drag gesture.
    """
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    POINTER_DOWN = "pointer_down"
    POINTER_MOVE = "pointer_move"
    POINTER_UP = "pointer_up"
    TOUCH_START = "touch_start"
    TOUCH_MOVE = "touch_move"
    TOUCH_END = "touch_end"

    @property
    def is_press(self) -> bool:
        """True for pointer presses and touch starts."""
        return self in (InputKind.POINTER_DOWN, InputKind.TOUCH_START)

    @property
    def is_move(self) -> bool:
        """True for pointer and touch moves."""
        return self in (InputKind.POINTER_MOVE, InputKind.TOUCH_MOVE)

    @property
    def is_release(self) -> bool:
        """True for pointer releases and touch ends."""
        return self in (InputKind.POINTER_UP, InputKind.TOUCH_END)

    @property
    def is_touch(self) -> bool:
        """True for any touch kind."""
        return self in (InputKind.TOUCH_START, InputKind.TOUCH_MOVE, InputKind.TOUCH_END)


class EventClass(str, Enum):
    """Classes of scheduler registrations.

    Attributes:
        KEY: Fires while a matching key is held
        POINTER: Fires while a mouse drag is in progress
        TOUCH: Fires while a single-finger drag is in progress
        TICK: Fires on every scheduler tick
    """
    KEY = "key"
    POINTER = "pointer"
    TOUCH = "touch"
    TICK = "tick"

    @property
    def is_drag(self) -> bool:
        """True for the classes armed by presses and disarmed by releases."""
        return self in (EventClass.POINTER, EventClass.TOUCH)


class SchedulerPhase(str, Enum):
    """Derived state of the scheduler's pause machine.

    RUNNING -> (pause) -> PAUSED -> (resume) -> RESUMING -> RUNNING
    """
    RUNNING = "running"
    PAUSED = "paused"
    RESUMING = "resuming"
