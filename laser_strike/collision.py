"""
Circle overlap tests
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

T = TypeVar("T")


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching edges do not count)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)


def collides(a, b) -> bool:
    """Overlap test for any two objects with x, y and radius"""
    return circle_collide(a.x, a.y, a.radius, b.x, b.y, b.radius)


def first_hit(obj, candidates: Iterable[T]) -> Optional[T]:
    """First candidate (in iteration order) overlapping `obj`, or None"""
    for c in candidates:
        if collides(obj, c):
            return c
    return None
