"""Tests for the surface contract."""
from laser_strike.engine import Engine
from laser_strike.surface import NullSurface, Surface
from tests.conftest import RecordingSurface


def test_null_and_recording_surfaces_satisfy_contract():
    assert isinstance(NullSurface(), Surface)
    assert isinstance(RecordingSurface(), Surface)


def test_engine_runs_headless_on_null_surface(clock):
    engine = Engine(NullSurface(640, 480), clock=clock)
    engine.start()
    for _ in range(5):
        assert engine.tick()
    assert (engine.player.x, engine.player.y) == (320, 400)
