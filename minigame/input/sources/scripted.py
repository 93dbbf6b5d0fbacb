"""Scripted Input Source for headless runs and automated tests.

Events are either published immediately (press/move/release/key helpers)
or queued and published on the next update(), which mirrors how a real
host source delivers input between frames.

Usage:
    source = ScriptedInputSource()
    scheduler = EventScheduler(source, arena)
    source.press(120, 80)
    scheduler.tick()
    source.release()
"""
from typing import List, Optional

from models import Point2D, InputKind
from minigame.input.input_event import InputEvent
from minigame.input.sources.base import InputSource


class ScriptedInputSource(InputSource):
    """Input source driven by explicit calls instead of a host queue."""

    def __init__(self):
        super().__init__()
        self._pending: List[InputEvent] = []
        self._clock = 0.0

    def update(self, dt: float) -> None:
        """Advance the scripted clock and publish queued events."""
        self._clock += dt
        pending, self._pending = self._pending, []
        for event in pending:
            self._publish(event)

    def queue(self, event: InputEvent) -> None:
        """Queue an event for the next update()."""
        self._pending.append(event)

    def emit(
        self,
        kind: InputKind,
        x: Optional[float] = None,
        y: Optional[float] = None,
        key: Optional[int] = None,
        contacts: int = 1,
    ) -> InputEvent:
        """Build an event and publish it right away."""
        position = Point2D(x=x, y=y) if x is not None and y is not None else None
        event = InputEvent(
            kind=kind,
            timestamp=self._clock,
            position=position,
            key=key,
            contacts=contacts,
        )
        self._publish(event)
        return event

    def key_down(self, key: int) -> InputEvent:
        return self.emit(InputKind.KEY_DOWN, key=key)

    def key_up(self, key: int) -> InputEvent:
        return self.emit(InputKind.KEY_UP, key=key)

    def press(self, x: float, y: float) -> InputEvent:
        return self.emit(InputKind.POINTER_DOWN, x, y)

    def move(self, x: float, y: float) -> InputEvent:
        return self.emit(InputKind.POINTER_MOVE, x, y)

    def release(self, x: float = 0.0, y: float = 0.0) -> InputEvent:
        return self.emit(InputKind.POINTER_UP, x, y)

    def touch_start(self, x: float, y: float, contacts: int = 1) -> InputEvent:
        return self.emit(InputKind.TOUCH_START, x, y, contacts=contacts)

    def touch_move(self, x: float, y: float, contacts: int = 1) -> InputEvent:
        return self.emit(InputKind.TOUCH_MOVE, x, y, contacts=contacts)

    def touch_end(self, x: float = 0.0, y: float = 0.0) -> InputEvent:
        return self.emit(InputKind.TOUCH_END, x, y)
