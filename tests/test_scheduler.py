"""
Tests for the EventScheduler.

Tests cover:
- Registration ids and tick listeners
- Pause / resume debounce
- Key arming, key-repeat and release
- Drag gestures for mouse and touch
- Snapshot dispatch while callbacks change registrations
- Time accumulation in advance()
- Several schedulers sharing one input source
"""

import pytest

from models import Point2D, Rectangle, EventClass, SchedulerPhase
from minigame.scheduler import (
    EventScheduler,
    MAX_CATCH_UP_TICKS,
    RESUME_INTERVAL_MS,
    TICK_INTERVAL_MS,
)

KEY_A = 97
KEY_D = 100

# Ticks swallowed by the debounce window with the default intervals
DEBOUNCE_TICKS = int(RESUME_INTERVAL_MS / TICK_INTERVAL_MS)


def run_ticks(scheduler: EventScheduler, count: int) -> None:
    for _ in range(count):
        scheduler.tick()


class TestRegistration:
    """Test registration bookkeeping."""

    def test_ids_start_at_one_and_increase(self, scheduler, recorder):
        """Test that fresh ids are handed out monotonically from 1."""
        first = scheduler.add_tick_listener(recorder)
        second = scheduler.register(EventClass.KEY, 42, recorder)
        third = scheduler.add_tick_listener(recorder)

        assert (first, second, third) == (1, 2, 3)

    def test_ids_are_not_reused(self, scheduler, recorder):
        """Test that an unregistered id is never handed out again."""
        first = scheduler.add_tick_listener(recorder)
        scheduler.unregister(first)
        second = scheduler.add_tick_listener(recorder)

        assert second == 2

    def test_repeating_tick_listener_fires_every_tick(self, scheduler, recorder):
        """Test a repeating tick listener over three ticks."""
        reg_id = scheduler.add_tick_listener(recorder)

        run_ticks(scheduler, 3)

        assert recorder.calls == [(), (), ()]
        assert scheduler.is_registered(reg_id)

    def test_one_shot_tick_listener_is_removed(self, scheduler, recorder):
        """Test that a non-repeating listener fires once and disappears."""
        reg_id = scheduler.add_tick_listener(recorder, repeating=False)

        run_ticks(scheduler, 3)

        assert recorder.count == 1
        assert not scheduler.is_registered(reg_id)
        assert scheduler.registrations == []

    def test_direct_registration_gets_code_and_position(self, scheduler, recorder):
        """Test that direct registrations are dispatched with their match code."""
        scheduler.register(EventClass.KEY, 42, recorder)

        scheduler.tick()

        assert recorder.calls == [(42, None)]

    def test_unregister_unknown_id_is_ignored(self, scheduler, recorder):
        """Test that unknown and None ids are silently ignored."""
        scheduler.add_tick_listener(recorder)

        scheduler.unregister(999)
        scheduler.unregister(None)

        assert len(scheduler.registrations) == 1

    def test_registrations_returns_copy(self, scheduler, recorder):
        """Test that mutating the returned list does not affect the scheduler."""
        scheduler.add_tick_listener(recorder)

        scheduler.registrations.clear()

        assert len(scheduler.registrations) == 1

    def test_tick_listeners_run_before_dispatch(self, scheduler, source):
        """Test that the tick pass runs before key and drag callbacks."""
        order = []
        scheduler.add_key_listener(KEY_A, lambda code, pos: order.append('key'))
        scheduler.add_tick_listener(lambda: order.append('tick'))
        source.key_down(KEY_A)

        scheduler.tick()

        assert order == ['tick', 'key']


class TestPauseResume:
    """Test the pause machine and its debounce window."""

    def test_starts_running(self, scheduler):
        """Test initial phase."""
        assert scheduler.phase == SchedulerPhase.RUNNING
        assert not scheduler.paused

    def test_paused_ticks_are_suppressed(self, scheduler, recorder):
        """Test that no callbacks run while paused."""
        scheduler.add_tick_listener(recorder)
        scheduler.pause()

        results = [scheduler.tick() for _ in range(5)]

        assert results == [False] * 5
        assert recorder.count == 0
        assert scheduler.tick_count == 5

    def test_resume_skips_debounce_window(self, scheduler, recorder):
        """Test that 100ms of 5ms ticks are swallowed after resume."""
        scheduler.add_tick_listener(recorder)
        scheduler.pause()
        scheduler.resume()
        assert scheduler.phase == SchedulerPhase.RESUMING

        run_ticks(scheduler, DEBOUNCE_TICKS)
        assert recorder.count == 0
        assert scheduler.phase == SchedulerPhase.RUNNING

        scheduler.tick()
        assert recorder.count == 1

    def test_resume_while_resuming_restarts_window(self, scheduler, recorder):
        """Test that a second resume() starts the window again."""
        scheduler.add_tick_listener(recorder)
        scheduler.pause()
        scheduler.resume()
        run_ticks(scheduler, 10)

        scheduler.resume()
        assert scheduler.resume_remaining_ms == RESUME_INTERVAL_MS

        run_ticks(scheduler, DEBOUNCE_TICKS)
        assert recorder.count == 0
        scheduler.tick()
        assert recorder.count == 1

    def test_pause_discards_resume_countdown(self, scheduler, recorder):
        """Test that pausing mid-window drops the remaining countdown."""
        scheduler.add_tick_listener(recorder)
        scheduler.resume()
        run_ticks(scheduler, 5)

        scheduler.pause()

        assert scheduler.resume_remaining_ms == 0
        assert scheduler.phase == SchedulerPhase.PAUSED
        run_ticks(scheduler, 50)
        assert recorder.count == 0

    def test_custom_intervals(self, source, arena, recorder):
        """Test the debounce length follows the configured intervals."""
        scheduler = EventScheduler(source, arena, tick_interval_ms=10.0, resume_interval_ms=30.0)
        scheduler.add_tick_listener(recorder)
        scheduler.resume()

        run_ticks(scheduler, 3)
        assert recorder.count == 0
        scheduler.tick()
        assert recorder.count == 1

    def test_input_observed_while_paused(self, scheduler, source, recorder):
        """Test that keys arm registrations even while paused."""
        scheduler.add_key_listener(KEY_A, recorder)
        scheduler.pause()

        source.key_down(KEY_A)
        scheduler.tick()

        assert len(scheduler.registrations) == 1
        assert recorder.count == 0


class TestKeyListeners:
    """Test key templates."""

    def test_key_down_arms_template(self, scheduler, source, recorder):
        """Test that a key press arms the template with a fresh id."""
        scheduler.add_key_listener(KEY_A, recorder)

        source.key_down(KEY_A)

        registrations = scheduler.registrations
        assert len(registrations) == 1
        assert registrations[0].id == 1
        assert registrations[0].event_class == EventClass.KEY

    def test_held_key_fires_every_tick(self, scheduler, source, recorder):
        """Test callback receives the key code on every tick while held."""
        scheduler.add_key_listener(KEY_A, recorder)
        source.key_down(KEY_A)

        run_ticks(scheduler, 3)

        assert recorder.calls == [(KEY_A, None)] * 3

    def test_key_repeat_does_not_arm_twice(self, scheduler, source, recorder):
        """Test that host key-repeat keeps a single registration."""
        scheduler.add_key_listener(KEY_A, recorder)

        source.key_down(KEY_A)
        source.key_down(KEY_A)
        source.key_down(KEY_A)
        scheduler.tick()

        assert len(scheduler.registrations) == 1
        assert recorder.count == 1

    def test_key_up_disarms(self, scheduler, source, recorder):
        """Test that releasing the key stops the callback and frees the template."""
        scheduler.add_key_listener(KEY_A, recorder)
        source.key_down(KEY_A)
        scheduler.tick()

        source.key_up(KEY_A)
        run_ticks(scheduler, 3)

        assert recorder.count == 1
        assert scheduler.registrations == []

        source.key_down(KEY_A)
        assert scheduler.registrations[0].id == 2

    def test_other_keys_ignored(self, scheduler, source, recorder):
        """Test that unrelated key codes do not arm the template."""
        scheduler.add_key_listener(KEY_A, recorder)

        source.key_down(KEY_D)

        assert scheduler.registrations == []

    def test_key_up_removes_every_matching_registration(self, scheduler, source, make_recorder):
        """Test that all registrations with the released code are removed."""
        first = make_recorder()
        second = make_recorder()
        scheduler.add_key_listener(KEY_A, first)
        scheduler.add_key_listener(KEY_A, second)
        scheduler.add_key_listener(KEY_D, second)
        source.key_down(KEY_A)
        source.key_down(KEY_D)
        assert len(scheduler.registrations) == 3

        source.key_up(KEY_A)

        remaining = scheduler.registrations
        assert len(remaining) == 1
        assert remaining[0].match_code == KEY_D

    def test_one_shot_key_listener_rearms_on_next_press(self, scheduler, source, recorder):
        """Test a non-repeating key listener fires once per arming."""
        scheduler.add_key_listener(KEY_A, recorder, repeating=False)
        source.key_down(KEY_A)

        run_ticks(scheduler, 3)
        assert recorder.count == 1

        source.key_down(KEY_A)
        scheduler.tick()
        assert recorder.count == 2

    def test_unregister_armed_key_frees_template(self, scheduler, source, recorder):
        """Test that unregistering an armed key lets the template arm again."""
        scheduler.add_key_listener(KEY_A, recorder)
        source.key_down(KEY_A)
        reg_id = scheduler.registrations[0].id

        scheduler.unregister(reg_id)
        source.key_down(KEY_A)

        assert [r.id for r in scheduler.registrations] == [reg_id + 1]


class TestDragListeners:
    """Test mouse and touch drags."""

    def test_press_inside_arms_and_tracks(self, scheduler, source, recorder):
        """Test a press inside the arena starts a drag."""
        scheduler.add_pointer_listener(recorder)

        source.press(150, 100)
        scheduler.tick()

        assert scheduler.tracked_position == Point2D(x=150.0, y=100.0)
        assert recorder.calls == [(None, Point2D(x=150.0, y=100.0))]

    def test_press_on_arena_edge_counts_as_inside(self, scheduler, source, recorder):
        """Test that arena bounds are inclusive."""
        scheduler.add_pointer_listener(recorder)

        source.press(100, 50)

        assert len(scheduler.registrations) == 1

    def test_press_outside_is_ignored(self, scheduler, source, recorder):
        """Test a press outside the arena does nothing."""
        scheduler.add_pointer_listener(recorder)

        source.press(10, 10)
        scheduler.tick()

        assert scheduler.registrations == []
        assert scheduler.tracked_position is None
        assert recorder.count == 0

    def test_move_updates_tracked_position(self, scheduler, source, recorder):
        """Test that moves inside the arena update the tracked position."""
        scheduler.add_pointer_listener(recorder)
        source.press(150, 100)

        source.move(200, 120)
        scheduler.tick()

        assert recorder.calls == [(None, Point2D(x=200.0, y=120.0))]

    def test_move_outside_keeps_last_position(self, scheduler, source):
        """Test that moves leaving the arena are ignored."""
        scheduler.add_pointer_listener(lambda code, pos: None)
        source.press(150, 100)

        source.move(500, 500)

        assert scheduler.tracked_position == Point2D(x=150.0, y=100.0)

    def test_move_without_press_is_ignored(self, scheduler, source):
        """Test that hovering does not start a drag."""
        scheduler.add_pointer_listener(lambda code, pos: None)

        source.move(150, 100)

        assert scheduler.tracked_position is None
        assert scheduler.registrations == []

    def test_release_ends_drag(self, scheduler, source, recorder):
        """Test that releasing clears tracking and removes drag registrations."""
        scheduler.add_pointer_listener(recorder)
        source.press(150, 100)
        scheduler.tick()

        source.release()
        run_ticks(scheduler, 3)

        assert scheduler.tracked_position is None
        assert scheduler.registrations == []
        assert recorder.count == 1

    def test_release_keeps_key_registrations(self, scheduler, source):
        """Test that a release only removes drag registrations."""
        scheduler.add_key_listener(KEY_A, lambda code, pos: None)
        scheduler.add_pointer_listener(lambda code, pos: None)
        source.key_down(KEY_A)
        source.press(150, 100)

        source.release()

        remaining = scheduler.registrations
        assert len(remaining) == 1
        assert remaining[0].event_class == EventClass.KEY

    def test_second_press_does_not_arm_twice(self, scheduler, source):
        """Test an armed drag template is not armed again."""
        scheduler.add_pointer_listener(lambda code, pos: None)

        source.press(150, 100)
        source.press(160, 110)

        assert len(scheduler.registrations) == 1
        assert scheduler.tracked_position == Point2D(x=160.0, y=110.0)

    def test_single_touch_arms_every_drag_template(self, scheduler, source, make_recorder):
        """Test a one-finger touch arms pointer and touch templates alike."""
        pointer = make_recorder()
        touch = make_recorder()
        scheduler.add_pointer_listener(pointer)
        scheduler.add_touch_listener(touch)

        source.touch_start(150, 100)
        scheduler.tick()

        assert pointer.calls == [(None, Point2D(x=150.0, y=100.0))]
        assert touch.calls == [(None, Point2D(x=150.0, y=100.0))]

    def test_multi_touch_is_ignored(self, scheduler, source, recorder):
        """Test that touches with more than one contact produce nothing."""
        scheduler.add_touch_listener(recorder)

        source.touch_start(150, 100, contacts=2)

        assert scheduler.registrations == []
        assert scheduler.tracked_position is None

    def test_multi_touch_move_keeps_position(self, scheduler, source):
        """Test that a second finger does not move the tracked point."""
        scheduler.add_touch_listener(lambda code, pos: None)
        source.touch_start(150, 100)

        source.touch_move(200, 200, contacts=2)

        assert scheduler.tracked_position == Point2D(x=150.0, y=100.0)

    def test_touch_end_ends_drag(self, scheduler, source):
        """Test that lifting the finger ends the drag."""
        scheduler.add_touch_listener(lambda code, pos: None)
        source.touch_start(150, 100)

        source.touch_end()

        assert scheduler.registrations == []
        assert scheduler.tracked_position is None

    def test_set_bounds_moves_hit_area(self, scheduler, source):
        """Test presses are tested against updated bounds."""
        scheduler.add_pointer_listener(lambda code, pos: None)
        scheduler.set_bounds(Rectangle(x=0.0, y=0.0, width=50.0, height=50.0))

        source.press(150, 100)
        assert scheduler.registrations == []

        source.press(20, 20)
        assert len(scheduler.registrations) == 1


class TestSnapshotDispatch:
    """Test callbacks that change registrations mid-pass."""

    def test_registration_during_pass_waits_for_next_tick(self, scheduler, recorder):
        """Test a listener added by a callback is first called on the next tick."""
        def spawn():
            scheduler.add_tick_listener(recorder)

        scheduler.add_tick_listener(spawn, repeating=False)

        scheduler.tick()
        assert recorder.count == 0

        scheduler.tick()
        assert recorder.count == 1

    def test_self_unregister_does_not_skip_next(self, scheduler, make_recorder):
        """Test that removing the current entry does not skip the following one."""
        following = make_recorder()
        ids = {}

        def once():
            scheduler.unregister(ids['self'])

        ids['self'] = scheduler.add_tick_listener(once)
        scheduler.add_tick_listener(following)

        scheduler.tick()

        assert following.count == 1
        assert not scheduler.is_registered(ids['self'])

    def test_unregistered_entry_still_runs_in_current_pass(self, scheduler, make_recorder):
        """Test the pass in progress runs on its snapshot."""
        victim = make_recorder()
        ids = {}

        def remover():
            scheduler.unregister(ids['victim'])

        scheduler.add_tick_listener(remover)
        ids['victim'] = scheduler.add_tick_listener(victim)

        scheduler.tick()
        scheduler.tick()

        assert victim.count == 1

    def test_callback_can_pause(self, scheduler, source, recorder):
        """Test pausing from a tick callback stops later ticks."""
        scheduler.add_tick_listener(scheduler.pause)
        scheduler.add_key_listener(KEY_A, recorder)
        source.key_down(KEY_A)

        run_ticks(scheduler, 3)

        # The first pass finishes on its snapshot
        assert recorder.count == 1
        assert scheduler.paused


class TestAdvance:
    """Test advance() time accumulation."""

    def test_whole_ticks_only(self, scheduler):
        """Test that partial ticks carry over to the next call."""
        assert scheduler.advance(0.012) == 2
        assert scheduler.advance(0.004) == 1
        assert scheduler.tick_count == 3

    def test_zero_dt(self, scheduler):
        """Test that no time means no ticks."""
        assert scheduler.advance(0.0) == 0

    def test_catch_up_is_capped(self, scheduler):
        """Test a long stall runs at most MAX_CATCH_UP_TICKS and drops the rest."""
        assert scheduler.advance(1.0) == MAX_CATCH_UP_TICKS
        assert scheduler.advance(0.004) == 0

    def test_advance_drives_callbacks(self, scheduler, recorder):
        """Test that advance() services listeners."""
        scheduler.add_tick_listener(recorder)

        scheduler.advance(0.05)

        assert recorder.count == 10


class TestIndependentInstances:
    """Test schedulers sharing one input source stay independent."""

    def test_ids_are_per_scheduler(self, source, arena, recorder):
        """Test each scheduler hands out its own ids from 1."""
        first = EventScheduler(source, arena)
        second = EventScheduler(source, arena)

        assert first.add_tick_listener(recorder) == 1
        assert second.add_tick_listener(recorder) == 1
        assert first.add_tick_listener(recorder) == 2

        first.close()
        second.close()

    def test_pause_affects_one_scheduler(self, source, arena, make_recorder):
        """Test pausing one scheduler leaves the other running."""
        first = EventScheduler(source, arena)
        second = EventScheduler(source, arena)
        first_calls = make_recorder()
        second_calls = make_recorder()
        first.add_tick_listener(first_calls)
        second.add_tick_listener(second_calls)

        first.pause()
        first.tick()
        second.tick()

        assert first_calls.count == 0
        assert second_calls.count == 1
        assert second.phase == SchedulerPhase.RUNNING

        first.close()
        second.close()

    def test_shared_input_arms_each_scheduler(self, source, arena, make_recorder):
        """Test one key press arms both schedulers' templates separately."""
        first = EventScheduler(source, arena)
        second = EventScheduler(source, Rectangle(x=0.0, y=0.0, width=50.0, height=50.0))
        first.add_key_listener(KEY_A, make_recorder())
        second.add_key_listener(KEY_A, make_recorder())
        first.add_pointer_listener(make_recorder())
        second.add_pointer_listener(make_recorder())

        source.key_down(KEY_A)
        source.press(150, 100)

        assert [r.event_class for r in first.registrations] == [EventClass.KEY, EventClass.POINTER]
        assert [r.event_class for r in second.registrations] == [EventClass.KEY]
        assert second.tracked_position is None

        first.close()
        second.close()

    def test_close_detaches_only_one(self, source, arena):
        """Test closing one scheduler keeps the other subscribed."""
        first = EventScheduler(source, arena)
        second = EventScheduler(source, arena)
        second.add_key_listener(KEY_A, lambda code, pos: None)

        first.close()
        source.key_down(KEY_A)

        assert source.subscriber_count == 1
        assert len(second.registrations) == 1

        second.close()


class TestClose:
    """Test detaching from the source."""

    def test_close_unsubscribes(self, source, arena):
        """Test that a closed scheduler no longer observes input."""
        scheduler = EventScheduler(source, arena)
        scheduler.add_key_listener(KEY_A, lambda code, pos: None)
        assert source.subscriber_count == 1

        scheduler.close()
        source.key_down(KEY_A)

        assert source.subscriber_count == 0
        assert scheduler.registrations == []

    def test_close_twice(self, source, arena):
        """Test that closing twice is harmless."""
        scheduler = EventScheduler(source, arena)
        scheduler.close()
        scheduler.close()
        assert source.subscriber_count == 0


@pytest.mark.parametrize("dt, expected", [(0.005, 1), (0.0049, 0), (0.0101, 2)])
def test_advance_tick_boundaries(scheduler, dt, expected):
    """Test tick counts around the tick interval."""
    assert scheduler.advance(dt) == expected
