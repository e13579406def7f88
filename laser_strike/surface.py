"""
Drawable surface contract

The engine and entities draw in screen space: origin at the top-left corner,
y grows downwards. Colors are RGB tuples, alpha is a float in [0, 1].
Backends (see window.ArcadeSurface) translate to their own coordinates.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple, runtime_checkable

Color = Tuple[int, int, int]
Point = Tuple[float, float]


@runtime_checkable
class Surface(Protocol):
    """Anything the engine can draw a frame onto"""

    width: int
    height: int

    def fill_rect(self, x: float, y: float, w: float, h: float,
                  color: Color, alpha: float = 1.0) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float,
                    color: Color, alpha: float = 1.0) -> None: ...

    def stroke_circle(self, x: float, y: float, radius: float, color: Color,
                      line_width: float = 1.0, alpha: float = 1.0) -> None: ...

    def fill_polygon(self, points: Sequence[Point], color: Color,
                     alpha: float = 1.0) -> None: ...

    def stroke_polygon(self, points: Sequence[Point], color: Color,
                       line_width: float = 1.0, alpha: float = 1.0) -> None: ...


class NullSurface:
    """Surface that discards every draw call (headless runs)"""

    def __init__(self, width: int = 800, height: int = 600):
        self.width = width
        self.height = height

    def fill_rect(self, x, y, w, h, color, alpha=1.0):
        pass

    def fill_circle(self, x, y, radius, color, alpha=1.0):
        pass

    def stroke_circle(self, x, y, radius, color, line_width=1.0, alpha=1.0):
        pass

    def fill_polygon(self, points, color, alpha=1.0):
        pass

    def stroke_polygon(self, points, color, line_width=1.0, alpha=1.0):
        pass
