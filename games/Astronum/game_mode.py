"""
Astronum Game Mode

Fly the ship into the asteroids whose numbers solve the equation
left + right = sum. Exactly one choice of three asteroids solves it.

Game flow:
1. Asteroids are generated hidden on the arena perimeter (READY, paused)
2. A press inside the arena shows them and resumes the scheduler (PLAYING)
3. A press outside the arena pauses (PAUSED); a press inside resumes
4. Each collected asteroid fills the next equation slot
5. A wrong equation resets the ship and deals a new set (FAILED)
6. A correct one pauses for good and notifies the host once (WON)
"""
import random
from typing import List, Optional, Tuple

import pygame

from models import Point2D, Rectangle
from minigame.game_state import GameState
from minigame.input.input_event import InputEvent
from minigame.input.sources.base import InputSource
from minigame.logging import get_logger
from minigame.notify import CompletionNotifier, Sender
from minigame.scheduler import EventScheduler
from games.Astronum import config
from games.Astronum.asteroid import Asteroid
from games.Astronum.equation import Equation
from games.Astronum.generator import generate
from games.Astronum.layout import perimeter_positions
from games.Astronum.renderer import render_round
from games.Astronum.ship import Ship
from games.Astronum.steering import steer_toward

log = get_logger('astronum')


class AstronumMode:
    """Astronum captcha round orchestration.

    Input reaches the game only through the scheduler, except for focus
    handling: presses are observed directly to pause and resume it.
    """

    NAME = "Astronum"
    DESCRIPTION = "Steer into the asteroids that solve the equation."
    VERSION = "1.0.0"

    def __init__(
        self,
        source: InputSource,
        count: Optional[int] = None,
        max_sum: Optional[int] = None,
        screen_width: Optional[int] = None,
        screen_height: Optional[int] = None,
        sender: Optional[Sender] = None,
        seed: Optional[int] = None,
        legacy_steering: Optional[bool] = None,
    ):
        """Initialize the Astronum game.

        Args:
            source: Host input source, shared with the scheduler
            count: Number of asteroids (at least 3)
            max_sum: Exclusive bound on values and triple sums
            screen_width: Window width in pixels
            screen_height: Window height in pixels; the arena sits below the title strip
            sender: Completion sender for native builds (stdout by default)
            seed: Seed for asteroid values, spawn offsets and drift
            legacy_steering: Use the legacy sqrt(dx + dy) steering distance
        """
        self._count = max(config.MIN_ASTEROID_COUNT, count or config.DEFAULT_ASTEROID_COUNT)
        self._max_sum = max_sum or config.MAX_SUM
        self._legacy_steering = (config.LEGACY_STEERING_DISTANCE
                                 if legacy_steering is None else legacy_steering)
        screen_width = screen_width or config.SCREEN_WIDTH
        screen_height = screen_height or config.SCREEN_HEIGHT

        self._source = source
        self._rng = random.Random(seed)
        self._arena = Rectangle(
            x=0.0,
            y=float(config.TITLE_HEIGHT),
            width=float(screen_width),
            height=float(screen_height - config.TITLE_HEIGHT),
        )

        self._scheduler = EventScheduler(
            source,
            self._arena,
            tick_interval_ms=config.TICK_INTERVAL_MS,
            resume_interval_ms=config.RESUME_INTERVAL_MS,
        )
        self._ship = Ship(self._arena.width, self._arena.height)
        self._equation = Equation()
        self._notifier = CompletionNotifier(sender)
        self._asteroids: List[Asteroid] = []

        self._state = GameState.READY
        self._overlay: Optional[Tuple[str, str]] = config.TEXT_INTRO

        self._bind()
        self._refresh_asteroids()
        # Nothing is serviced until the first press inside the arena
        self._scheduler.pause()
        log.info("Round ready: %d asteroids, max sum %d", self._count, self._max_sum)

    def _bind(self) -> None:
        self._source.subscribe(self._on_focus)
        self._scheduler.add_tick_listener(self._on_tick)

        key_codes = (config.KEYS_FORWARD + config.KEYS_BACKWARD +
                     config.KEYS_LEFT + config.KEYS_RIGHT)
        for code in key_codes:
            self._scheduler.add_key_listener(code, self._on_key, repeating=True)
        # Touches arm pointer listeners too
        self._scheduler.add_pointer_listener(self._on_drag, repeating=True)

    # --- Properties ---

    @property
    def state(self) -> GameState:
        """Current round state."""
        return self._state

    @property
    def overlay(self) -> Optional[Tuple[str, str]]:
        """(title, subtitle) shown over the arena, or None."""
        return self._overlay

    @property
    def arena(self) -> Rectangle:
        return self._arena

    @property
    def scheduler(self) -> EventScheduler:
        return self._scheduler

    @property
    def ship(self) -> Ship:
        return self._ship

    @property
    def equation(self) -> Equation:
        return self._equation

    @property
    def asteroids(self) -> List[Asteroid]:
        return list(self._asteroids)

    @property
    def notifier(self) -> CompletionNotifier:
        return self._notifier

    # --- Round lifecycle ---

    def _refresh_asteroids(self) -> None:
        """Deal a fresh set of hidden asteroids."""
        values = generate(self._count, self._max_sum, rng=self._rng)
        for asteroid in self._asteroids:
            asteroid.remove()

        origins = perimeter_positions(len(values), self._arena.width, self._arena.height, rng=self._rng)
        self._asteroids = [
            Asteroid(self._arena.width, self._arena.height, origin, value, rng=self._rng)
            for origin, value in zip(origins, values)
        ]
        log.debug("Dealt asteroids %s", values)

    def _on_success(self) -> None:
        self._state = GameState.WON
        self._overlay = config.TEXT_SUCCESS
        self._scheduler.pause()
        self._notifier.notify()
        log.info("Solved: %s", self._equation)

    def _on_failed(self) -> None:
        self._state = GameState.FAILED
        self._scheduler.pause()
        self._ship.reset()
        self._refresh_asteroids()
        self._overlay = config.TEXT_RETRY
        log.info("Wrong equation: %s", self._equation)

    def _on_collision(self, asteroid: Asteroid) -> None:
        was_visible = asteroid.visible
        asteroid.remove()
        if was_visible:
            self._equation.add_input(asteroid.value)

        # An incomplete equation is neither solved nor failed
        if self._equation.solved():
            self._on_success()
        elif self._equation.failed():
            self._on_failed()

    # --- Host input ---

    def _on_focus(self, event: InputEvent) -> None:
        """Pause on presses outside the arena, resume on presses inside."""
        if not event.kind.is_press or self._state.is_terminal:
            return
        position = event.coordinates()
        if position is None:
            return

        if not self._arena.contains_point(position):
            if self._state == GameState.PLAYING:
                self._scheduler.pause()
                self._state = GameState.PAUSED
                self._overlay = config.TEXT_PAUSED
                log.info("Paused")
            return

        if self._equation.failed():
            self._equation.reset()
        for asteroid in self._asteroids:
            asteroid.show()
        self._overlay = None
        self._scheduler.resume()
        if self._state != GameState.PLAYING:
            log.info("Playing")
        self._state = GameState.PLAYING

    # --- Scheduler callbacks ---

    def _on_tick(self) -> None:
        """Drift the asteroids and collect the ones the ship touches."""
        ship_bounds = self._ship.get_bounds()
        for asteroid in list(self._asteroids):
            if self._state != GameState.PLAYING:
                break
            if not asteroid.visible:
                continue
            asteroid.move()
            if ship_bounds.intersects(asteroid.get_bounds()):
                self._on_collision(asteroid)

    def _on_key(self, code: Optional[int], _position: Optional[Point2D]) -> None:
        if code in config.KEYS_FORWARD:
            self._ship.forward()
        elif code in config.KEYS_BACKWARD:
            self._ship.backward()
        elif code in config.KEYS_LEFT:
            self._ship.rotate_left()
        elif code in config.KEYS_RIGHT:
            self._ship.rotate_right()

    def _on_drag(self, _code: Optional[int], position: Optional[Point2D]) -> None:
        if position is None:
            return
        steer_toward(self._ship, self._arena.to_local(position), legacy=self._legacy_steering)

    # --- Frame hooks ---

    def update(self, dt: float) -> None:
        """Run the scheduler ticks covered by dt seconds."""
        self._scheduler.advance(dt)

    def render(self, screen: pygame.Surface) -> None:
        """Draw the round."""
        render_round(screen, self)

    def close(self) -> None:
        """Detach from the input source."""
        self._scheduler.close()
        self._source.unsubscribe(self._on_focus)
