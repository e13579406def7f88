"""Tests for geometry helpers."""
import math

import pytest

from laser_strike.utils import (
    clamp, distance, angle_to, from_angle, rotate_points,
)


class TestScalars:

    def test_clamp_inside_and_outside(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10


class TestAngles:

    def test_distance_is_symmetric(self):
        assert distance(1, 2, 4, 6) == distance(4, 6, 1, 2) == 5

    def test_angle_to_points_along_axes(self):
        assert angle_to(0, 0, 10, 0) == 0
        assert angle_to(0, 0, 0, 10) == pytest.approx(math.pi / 2)
        assert angle_to(0, 0, -10, 0) == pytest.approx(math.pi)

    def test_from_angle_decomposes_magnitude(self):
        vx, vy = from_angle(math.pi / 2, 8)
        assert vx == pytest.approx(0, abs=1e-9)
        assert vy == pytest.approx(8)

    def test_rotate_points_quarter_turn(self):
        (x, y), = rotate_points([(10, 0)], math.pi / 2, 100, 50)
        assert x == pytest.approx(100)
        assert y == pytest.approx(60)
