"""
Base Input Source - Abstract interface for host input backends.
"""
from abc import ABC, abstractmethod
from typing import Callable, List

from minigame.input.input_event import InputEvent

InputHandler = Callable[[InputEvent], None]


class InputSource(ABC):
    """Abstract base class for input sources.

    Sources push events to subscribers instead of being polled, so the
    scheduler observes host input even while its callbacks are paused.
    Subclasses only have to implement update(); subscription bookkeeping
    lives here.
    """

    def __init__(self):
        self._subscribers: List[InputHandler] = []

    def subscribe(self, handler: InputHandler) -> None:
        """Register a handler for every event this source produces.

        Subscribing the same handler twice has no effect.
        """
        if handler not in self._subscribers:
            self._subscribers.append(handler)

    def unsubscribe(self, handler: InputHandler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        if handler in self._subscribers:
            self._subscribers.remove(handler)

    @property
    def subscriber_count(self) -> int:
        """Number of currently subscribed handlers."""
        return len(self._subscribers)

    def _publish(self, event: InputEvent) -> None:
        """Deliver an event to every subscriber, in subscription order."""
        for handler in list(self._subscribers):
            handler(event)

    @abstractmethod
    def update(self, dt: float) -> None:
        """Collect host input and publish it to subscribers.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass
