"""
Input state shared between the host's event handlers and the engine

The host writes key, pointer and drag state between ticks; the engine takes
one consistent snapshot at the start of each tick. A lock keeps the snapshot
from tearing when the host feeds input from another thread.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .config import KEY_BINDINGS


@dataclass(frozen=True)
class InputSnapshot:
    keys: FrozenSet[str] = frozenset()
    pointer: Tuple[float, float] = (0.0, 0.0)
    dragging: bool = False

    def _held(self, direction: str) -> bool:
        return any(k in self.keys for k in KEY_BINDINGS[direction])

    @property
    def up(self) -> bool:
        return self._held("up")

    @property
    def down(self) -> bool:
        return self._held("down")

    @property
    def left(self) -> bool:
        return self._held("left")

    @property
    def right(self) -> bool:
        return self._held("right")


class InputState:
    def __init__(self):
        self._lock = threading.Lock()
        self._keys = set()
        self._pointer = (0.0, 0.0)
        self._dragging = False

    def press(self, key: str):
        with self._lock:
            self._keys.add(key.lower())

    def release(self, key: str):
        with self._lock:
            self._keys.discard(key.lower())

    def set_pointer(self, x: float, y: float):
        with self._lock:
            self._pointer = (float(x), float(y))

    @property
    def pointer(self) -> Tuple[float, float]:
        with self._lock:
            return self._pointer

    @property
    def dragging(self) -> bool:
        with self._lock:
            return self._dragging

    @dragging.setter
    def dragging(self, value: bool):
        with self._lock:
            self._dragging = bool(value)

    def clear(self):
        with self._lock:
            self._keys.clear()
            self._dragging = False

    def snapshot(self) -> InputSnapshot:
        with self._lock:
            return InputSnapshot(frozenset(self._keys), self._pointer, self._dragging)
