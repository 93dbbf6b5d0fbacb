"""
Event Scheduler - Decouples raw host input from gameplay ticks.

Host input never runs game code directly. Key presses and drags only arm
listener registrations; the registrations are serviced on the scheduler's
own fixed-interval tick, which can be paused and resumed with a debounce
window.

Usage:
    scheduler = EventScheduler(source, arena_bounds)
    scheduler.add_tick_listener(on_tick)
    scheduler.add_key_listener(pygame.K_LEFT, on_key)
    scheduler.add_pointer_listener(on_drag)

    # From the main loop
    scheduler.advance(dt)
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

from models import Point2D, Rectangle, EventClass, InputKind, SchedulerPhase
from minigame.input.input_event import InputEvent
from minigame.input.sources.base import InputSource
from minigame.logging import get_logger

log = get_logger('scheduler')

# Milliseconds between two ticks
TICK_INTERVAL_MS = 5.0

# Milliseconds of ticks to skip after resume()
RESUME_INTERVAL_MS = 100.0

# Upper bound of ticks run by one advance() call
MAX_CATCH_UP_TICKS = 20

Callback = Callable[..., None]


@dataclass
class ListenerRegistration:
    """A callback bound to an event class.

    Active registrations carry an id. Key and drag templates keep id=None
    until matching input arms them, and get it cleared again on disarm.
    """
    id: Optional[int]
    event_class: EventClass
    match_code: Optional[int]
    callback: Callback
    repeating: bool = True


class EventScheduler:
    """Services input-armed and tick callbacks on a fixed tick.

    Per tick, while running:
    1. every tick-class registration is invoked (no arguments);
    2. the active key/drag/direct registrations are snapshotted;
    3. each snapshotted callback gets (match_code, tracked_position);
    4. non-repeating registrations are removed right after they fire.

    Callbacks may register and unregister freely; the pass in progress
    works on its snapshot.
    """

    def __init__(
        self,
        source: InputSource,
        bounds: Rectangle,
        tick_interval_ms: float = TICK_INTERVAL_MS,
        resume_interval_ms: float = RESUME_INTERVAL_MS,
        max_catch_up_ticks: int = MAX_CATCH_UP_TICKS,
    ):
        """Create a scheduler and subscribe it to an input source.

        Args:
            source: Host input source to observe
            bounds: Arena rectangle in host coordinates; drags start only inside it
            tick_interval_ms: Length of one tick
            resume_interval_ms: Debounce window after resume(), in ms of ticks
            max_catch_up_ticks: Most ticks a single advance() may run
        """
        self._source = source
        self._bounds = bounds
        self._tick_interval_ms = tick_interval_ms
        self._resume_interval_ms = resume_interval_ms
        self._max_catch_up_ticks = max_catch_up_ticks

        self._registrations: List[ListenerRegistration] = []
        self._key_templates: List[ListenerRegistration] = []
        self._drag_templates: List[ListenerRegistration] = []
        self._next_id = 0

        # Tracked drag position; None while no drag is in progress
        self._tracked: Optional[Point2D] = None

        self._paused = False
        self._resume_remaining_ms = 0.0
        self._accumulated_ms = 0.0
        self._tick_count = 0

        source.subscribe(self.on_input)

    # --- Registration ---

    def register(
        self,
        event_class: EventClass,
        match_code: Optional[int],
        callback: Callback,
        repeating: bool = True,
    ) -> int:
        """Add an active registration and return its fresh id."""
        self._next_id += 1
        self._registrations.append(
            ListenerRegistration(self._next_id, event_class, match_code, callback, repeating)
        )
        return self._next_id

    def unregister(self, registration_id: Optional[int]) -> None:
        """Remove an active registration. Unknown ids are ignored.

        A registration armed from a template also clears the template's
        marker, so the template can be armed again by the next input.
        """
        if registration_id is None:
            return
        for idx, registration in enumerate(self._registrations):
            if registration.id == registration_id:
                del self._registrations[idx]
                break
        for template in self._key_templates + self._drag_templates:
            if template.id == registration_id:
                template.id = None
                break

    def add_key_listener(self, code: int, callback: Callback, repeating: bool = True) -> None:
        """Fire callback(code, position) every tick while key `code` is held."""
        self._key_templates.append(ListenerRegistration(None, EventClass.KEY, code, callback, repeating))

    def add_pointer_listener(self, callback: Callback, repeating: bool = True) -> None:
        """Fire callback(None, position) every tick while a mouse drag is held."""
        self._drag_templates.append(ListenerRegistration(None, EventClass.POINTER, None, callback, repeating))

    def add_touch_listener(self, callback: Callback, repeating: bool = True) -> None:
        """Fire callback(None, position) every tick while a finger drag is held."""
        self._drag_templates.append(ListenerRegistration(None, EventClass.TOUCH, None, callback, repeating))

    def add_tick_listener(self, callback: Callable[[], None], repeating: bool = True) -> int:
        """Fire callback() on every running tick."""
        return self.register(EventClass.TICK, None, callback, repeating)

    def is_registered(self, registration_id: int) -> bool:
        """Check whether an id belongs to an active registration."""
        return any(r.id == registration_id for r in self._registrations)

    @property
    def registrations(self) -> List[ListenerRegistration]:
        """Copy of the active registrations, in registration order."""
        return list(self._registrations)

    # --- Pause machine ---

    def pause(self) -> None:
        """Stop servicing callbacks. Input is still observed."""
        self._paused = True
        self._resume_remaining_ms = 0.0
        log.debug("Paused")

    def resume(self) -> None:
        """Service callbacks again once the debounce window has elapsed.

        Calling resume() while already resuming restarts the window.
        """
        self._paused = False
        self._resume_remaining_ms = self._resume_interval_ms
        log.debug("Resuming in %.0fms", self._resume_interval_ms)

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def resume_remaining_ms(self) -> float:
        return self._resume_remaining_ms

    @property
    def phase(self) -> SchedulerPhase:
        """Current state of the pause machine."""
        if self._paused:
            return SchedulerPhase.PAUSED
        if self._resume_remaining_ms > 0:
            return SchedulerPhase.RESUMING
        return SchedulerPhase.RUNNING

    # --- Arena / drag state ---

    @property
    def bounds(self) -> Rectangle:
        return self._bounds

    def set_bounds(self, bounds: Rectangle) -> None:
        """Move or resize the arena used for press and move hit-tests."""
        self._bounds = bounds

    @property
    def tracked_position(self) -> Optional[Point2D]:
        """Position of the drag in progress, in host coordinates."""
        return self._tracked

    @property
    def tick_count(self) -> int:
        """Number of ticks processed so far, suppressed ones included."""
        return self._tick_count

    # --- Host input ---

    def on_input(self, event: InputEvent) -> None:
        """Handle one raw host event from the input source."""
        kind = event.kind
        if kind == InputKind.KEY_DOWN:
            self._on_key_down(event.key)
        elif kind == InputKind.KEY_UP:
            self._on_key_up(event.key)
        elif kind.is_press:
            self._on_press(event)
        elif kind.is_move:
            self._on_move(event)
        elif kind.is_release:
            self._on_release()

    def _on_key_down(self, key: Optional[int]) -> None:
        for template in self._key_templates:
            # Host key-repeat must not arm a template twice
            if template.match_code == key and template.id is None:
                template.id = self.register(template.event_class, template.match_code,
                                            template.callback, template.repeating)

    def _on_key_up(self, key: Optional[int]) -> None:
        for registration in list(self._registrations):
            if registration.event_class == EventClass.KEY and registration.match_code == key:
                self.unregister(registration.id)

    def _on_press(self, event: InputEvent) -> None:
        position = event.coordinates()
        if position is None or not self._bounds.contains_point(position):
            return

        self._tracked = position
        for template in self._drag_templates:
            if template.id is None:
                template.id = self.register(template.event_class, None,
                                            template.callback, template.repeating)
        log.trace("Drag started at %s", position)

    def _on_move(self, event: InputEvent) -> None:
        if self._tracked is None:
            return
        position = event.coordinates()
        if position is not None and self._bounds.contains_point(position):
            self._tracked = position

    def _on_release(self) -> None:
        self._tracked = None
        for registration in list(self._registrations):
            if registration.event_class.is_drag:
                self.unregister(registration.id)

    # --- Ticking ---

    def tick(self) -> bool:
        """Run one tick.

        Returns:
            True if callbacks were serviced, False if the tick was suppressed
            by a pause or the resume debounce window.
        """
        self._tick_count += 1
        if self._paused or self._resume_remaining_ms > 0:
            if self._resume_remaining_ms > 0:
                self._resume_remaining_ms -= self._tick_interval_ms
                if self._resume_remaining_ms <= 0:
                    self._resume_remaining_ms = 0.0
                    log.debug("Resumed")
            return False

        tick_pass = [r for r in self._registrations if r.event_class == EventClass.TICK]
        for registration in tick_pass:
            registration.callback()
            if not registration.repeating:
                self.unregister(registration.id)

        dispatch_pass = [r for r in self._registrations if r.event_class != EventClass.TICK]
        for registration in dispatch_pass:
            registration.callback(registration.match_code, self._tracked)
            if not registration.repeating:
                self.unregister(registration.id)
        return True

    def advance(self, dt: float) -> int:
        """Feed elapsed host time and run every whole tick it covers.

        Args:
            dt: Elapsed time in seconds

        Returns:
            Number of ticks run
        """
        self._accumulated_ms += dt * 1000.0
        ticks = int(self._accumulated_ms // self._tick_interval_ms)
        if ticks > self._max_catch_up_ticks:
            log.debug("Dropping %d ticks of backlog", ticks - self._max_catch_up_ticks)
            ticks = self._max_catch_up_ticks
            self._accumulated_ms = 0.0
        else:
            self._accumulated_ms -= ticks * self._tick_interval_ms

        for _ in range(ticks):
            self.tick()
        return ticks

    def close(self) -> None:
        """Stop observing the input source."""
        self._source.unsubscribe(self.on_input)
