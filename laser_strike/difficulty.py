"""
Score-driven difficulty progression
"""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)

POINTS_PER_LEVEL = 500
BASE_CADENCE = 2.0      # seconds between spawns at level 1
CADENCE_STEP = 0.2      # seconds shaved off per level
MIN_CADENCE = 0.5


def level_for_score(score: int) -> int:
    return score // POINTS_PER_LEVEL + 1


def spawn_cadence_for_level(level: int) -> float:
    return max(MIN_CADENCE, BASE_CADENCE - (level - 1) * CADENCE_STEP)


class DifficultyController:
    """Tracks the current level and spawn cadence.

    `update(score)` is meant to be called every frame; the level and cadence
    are only touched when the level derived from the score actually changes.
    """

    def __init__(self):
        self.level = 1
        self.spawn_cadence = spawn_cadence_for_level(1)

    def reset(self):
        self.level = 1
        self.spawn_cadence = spawn_cadence_for_level(1)

    def update(self, score: int) -> bool:
        """Recompute from `score`; returns True when the level changed"""
        new_level = level_for_score(score)
        if new_level == self.level:
            return False
        self.level = new_level
        self.spawn_cadence = spawn_cadence_for_level(new_level)
        log.info("Level %d reached, spawn cadence now %.2fs", self.level, self.spawn_cadence)
        return True
