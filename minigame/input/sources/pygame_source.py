"""
Pygame Input Source - Keyboard, mouse and touch input from the pygame queue.
"""
import time
from typing import Set, Tuple

import pygame

from models import Point2D, InputKind
from minigame.input.input_event import InputEvent
from minigame.input.sources.base import InputSource


class PygameInputSource(InputSource):
    """Converts pygame events into InputEvent models.

    Handles:
    - Key presses and releases (KEYDOWN / KEYUP)
    - Left mouse button drags (MOUSEBUTTONDOWN / MOUSEMOTION / MOUSEBUTTONUP)
    - Finger touches (FINGERDOWN / FINGERMOTION / FINGERUP), converted from
      normalized coordinates to screen pixels

    Mouse events that SDL synthesizes from touches are dropped so a single
    finger is not reported twice. Everything else is re-posted to the pygame
    event queue for the main loop.
    """

    def __init__(self, screen_size: Tuple[int, int]):
        """Initialize the source.

        Args:
            screen_size: (width, height) of the window, used to scale touches
        """
        super().__init__()
        self._screen_width, self._screen_height = screen_size
        self._fingers: Set[int] = set()

    def resize(self, width: int, height: int) -> None:
        """Update screen dimensions used for touch scaling."""
        self._screen_width = width
        self._screen_height = height

    def update(self, dt: float) -> None:
        """Drain the pygame queue and publish input events."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                # Re-post non-input events for the main loop to handle
                pygame.event.post(event)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Convert and publish a single pygame event.

        Returns:
            True if the event was an input event consumed by this source.
        """
        converted = self._convert(event)
        if converted is None:
            return False
        if converted is not _IGNORED:
            self._publish(converted)
        return True

    def _convert(self, event: pygame.event.Event):
        now = time.monotonic()

        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            kind = InputKind.KEY_DOWN if event.type == pygame.KEYDOWN else InputKind.KEY_UP
            return InputEvent(kind=kind, timestamp=now, key=event.key)

        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            if getattr(event, 'touch', False):
                return _IGNORED
            if event.type == pygame.MOUSEMOTION:
                kind = InputKind.POINTER_MOVE
            elif event.button != 1:  # Left mouse button only
                return _IGNORED
            elif event.type == pygame.MOUSEBUTTONDOWN:
                kind = InputKind.POINTER_DOWN
            else:
                kind = InputKind.POINTER_UP
            return InputEvent(kind=kind, timestamp=now, position=self._pixel(event.pos))

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            if event.type == pygame.FINGERDOWN:
                self._fingers.add(event.finger_id)
                kind = InputKind.TOUCH_START
            elif event.type == pygame.FINGERMOTION:
                kind = InputKind.TOUCH_MOVE
            else:
                self._fingers.discard(event.finger_id)
                kind = InputKind.TOUCH_END
            position = Point2D(
                x=event.x * self._screen_width,
                y=event.y * self._screen_height,
            )
            # Lifting the last finger still reports the contact that ended
            contacts = max(1, len(self._fingers))
            return InputEvent(kind=kind, timestamp=now, position=position, contacts=contacts)

        return None

    @staticmethod
    def _pixel(pos: Tuple[int, int]) -> Point2D:
        return Point2D(x=float(pos[0]), y=float(pos[1]))


# Marker for input events that are consumed but not published
_IGNORED = object()
