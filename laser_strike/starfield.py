"""
Decorative star background, generated once per engine
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

STAR_C = (255, 255, 255)
OVERLAY_C = (10, 14, 39)
OVERLAY_ALPHA = 0.1


@dataclass
class Star:
    x: float
    y: float
    radius: float
    opacity: float


class Starfield:
    def __init__(self, width: float, height: float, count: int = 100,
                 rng: Optional[random.Random] = None):
        rng = rng or random.Random()
        self.stars: List[Star] = [
            Star(
                x=rng.random() * width,
                y=rng.random() * height,
                radius=rng.random() * 1.5,
                opacity=rng.random() * 0.5 + 0.5,
            )
            for _ in range(count)
        ]

    def __len__(self):
        return len(self.stars)

    def draw(self, surface, width: float, height: float):
        # translucent overlay instead of a hard clear leaves motion trails
        surface.fill_rect(0, 0, width, height, OVERLAY_C, alpha=OVERLAY_ALPHA)
        for s in self.stars:
            surface.fill_circle(s.x, s.y, s.radius, STAR_C, alpha=s.opacity)
