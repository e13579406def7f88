"""
Utility functions for game geometry
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x1 - x2, y1 - y2)


def angle_to(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle (radians) of the offset from (x1, y1) towards (x2, y2)"""
    return math.atan2(y2 - y1, x2 - x1)


def from_angle(angle: float, magnitude: float = 1.0) -> Tuple[float, float]:
    """Decompose a magnitude along an angle into x/y components"""
    return math.cos(angle) * magnitude, math.sin(angle) * magnitude


def rotate_points(points, angle: float, ox: float, oy: float):
    """Rotate local-space points by angle and translate them to (ox, oy)"""
    c, s = math.cos(angle), math.sin(angle)
    return [(ox + px * c - py * s, oy + px * s + py * c) for px, py in points]


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
