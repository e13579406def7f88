"""Shared fixtures for engine tests."""
import random

import pytest

from laser_strike.clock import ManualClock
from laser_strike.engine import Engine, GameCallbacks


class RecordingSurface:
    """Surface that records every draw call as (method, args)."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def fill_rect(self, *args, **kwargs):
        self._record("fill_rect", *args, **kwargs)

    def fill_circle(self, *args, **kwargs):
        self._record("fill_circle", *args, **kwargs)

    def stroke_circle(self, *args, **kwargs):
        self._record("stroke_circle", *args, **kwargs)

    def fill_polygon(self, *args, **kwargs):
        self._record("fill_polygon", *args, **kwargs)

    def stroke_polygon(self, *args, **kwargs):
        self._record("stroke_polygon", *args, **kwargs)

    def names(self):
        return [c[0] for c in self.calls]


class CallbackRecorder:
    """Collects every callback invocation in order."""

    def __init__(self):
        self.events = []

    def callbacks(self):
        return GameCallbacks(
            on_score_change=lambda s: self.events.append(("score", s)),
            on_level_change=lambda l: self.events.append(("level", l)),
            on_lives_change=lambda l: self.events.append(("lives", l)),
            on_game_over=lambda: self.events.append(("game_over",)),
            on_game_start=lambda: self.events.append(("game_start",)),
        )

    def of(self, kind):
        return [e for e in self.events if e[0] == kind]


class Keys:
    """Minimal directional input for Player.update."""

    def __init__(self, up=False, down=False, left=False, right=False):
        self.up = up
        self.down = down
        self.left = left
        self.right = right


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def recorder():
    return CallbackRecorder()


@pytest.fixture
def engine(surface, clock, rng, recorder):
    return Engine(surface, recorder.callbacks(), clock=clock, rng=rng)


@pytest.fixture
def running_engine(engine):
    """Started engine with no enemies and the spawn timer just reset."""
    engine.start()
    engine._last_spawn = engine.clock.now()
    return engine
