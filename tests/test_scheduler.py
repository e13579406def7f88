"""Tests for the fixed-cadence tick driver."""
import pytest

from laser_strike.clock import ManualClock
from laser_strike.scheduler import FrameScheduler


class FakeEngine:
    def __init__(self, destroy_after=None):
        self.ticks = 0
        self.destroy_after = destroy_after

    def tick(self):
        if self.destroy_after is not None and self.ticks >= self.destroy_after:
            return False
        self.ticks += 1
        return True


@pytest.fixture
def clock():
    return ManualClock()


def test_runs_requested_ticks_at_frame_cadence(clock):
    sleeps = []

    def sleep(s):
        sleeps.append(s)
        clock.advance(s)

    engine = FakeEngine()
    sched = FrameScheduler(engine, fps=50, clock=clock, sleep=sleep)
    assert sched.run(max_ticks=5) == 5
    assert engine.ticks == 5
    assert sleeps == pytest.approx([0.02] * 5)
    assert clock.now() == pytest.approx(0.1)


def test_stops_when_engine_is_destroyed(clock):
    engine = FakeEngine(destroy_after=3)
    sched = FrameScheduler(engine, fps=60, clock=clock, sleep=clock.advance)
    assert sched.run() == 3


def test_stop_from_inside_a_tick(clock):
    class StoppingEngine(FakeEngine):
        def tick(self):
            super().tick()
            if self.ticks == 2:
                sched.stop()
            return True

    sched = FrameScheduler(StoppingEngine(), fps=60, clock=clock, sleep=clock.advance)
    assert sched.run() == 2
    assert sched.stopped


def test_late_frames_do_not_sleep(clock):
    sleeps = []

    class SlowEngine(FakeEngine):
        def tick(self):
            clock.advance(0.5)
            return super().tick()

    sched = FrameScheduler(SlowEngine(), fps=60, clock=clock, sleep=sleeps.append)
    sched.run(max_ticks=3)
    assert sleeps == []


def test_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        FrameScheduler(FakeEngine(), fps=0)


def test_drives_a_real_engine(engine, clock):
    engine.start()
    sched = FrameScheduler(engine, fps=60, clock=clock, sleep=clock.advance)
    sched.run(max_ticks=10)
    assert len(engine.enemies) == 1
    engine.destroy()
    assert sched.run() == 0
