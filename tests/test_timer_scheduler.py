from __future__ import annotations

from padelmemory.engine.scheduler import DeferredActions
from padelmemory.engine.timer import SessionTimer


class FakeClock:
    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


def test_timer_tracks_clock_not_frames() -> None:
    clock = FakeClock(500)
    timer = SessionTimer(clock)
    timer.start()
    assert timer.elapsed_ms == 0
    # one long stall counts the same as many small frames
    clock.now = 4500
    assert timer.elapsed_ms == 4000


def test_timer_stop_pins_to_given_instant() -> None:
    clock = FakeClock(0)
    timer = SessionTimer(clock)
    timer.start()
    clock.now = 3000
    assert timer.stop(at_ms=2400) == 2400
    assert not timer.running
    clock.now = 9000
    assert timer.elapsed_ms == 2400
    assert timer.stop() == 2400


def test_timer_restart_and_cancel() -> None:
    clock = FakeClock(0)
    timer = SessionTimer(clock)
    timer.start()
    clock.now = 700
    timer.stop()
    clock.now = 1000
    timer.start()
    assert timer.elapsed_ms == 0
    timer.cancel()
    assert not timer.running
    assert timer.elapsed_ms == 0


def test_deferred_actions_run_in_due_order() -> None:
    ran: list[tuple[str, int]] = []
    actions = DeferredActions()
    actions.schedule("late", 300, 1, lambda due: ran.append(("late", due)))
    actions.schedule("early", 100, 1, lambda due: ran.append(("early", due)))

    assert actions.run_due(50, generation=1) == 0
    assert actions.run_due(1000, generation=1) == 2
    assert ran == [("early", 100), ("late", 300)]
    assert actions.pending() == []


def test_stale_generation_is_discarded() -> None:
    ran: list[str] = []
    actions = DeferredActions()
    actions.schedule("old", 100, 1, lambda due: ran.append("old"))
    actions.schedule("new", 100, 2, lambda due: ran.append("new"))
    assert len(actions.pending(generation=2)) == 1

    assert actions.run_due(100, generation=2) == 1
    assert ran == ["new"]
    assert actions.pending() == []


def test_callback_may_schedule_follow_up() -> None:
    ran: list[int] = []
    actions = DeferredActions()

    def first(due: int) -> None:
        ran.append(due)
        actions.schedule("second", due + 50, 1, ran.append)

    actions.schedule("first", 10, 1, first)
    actions.run_due(100, generation=1)
    assert ran == [10, 60]
