"""Thread-safe queues passing chunk work between the game and worker threads."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Optional


def _as_position(item) -> tuple[int, int, int]:
    x, y, z = (int(v) for v in item)
    return (x, y, z)


class ChunkQueue:
    """Chunk positions waiting to be loaded; the newest request is served first."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ready = threading.Condition(self._lock)
        self._items: deque[tuple[int, int, int]] = deque()

    def push(self, item) -> None:
        """Add a chunk position to the front of the queue."""
        with self._ready:
            self._items.appendleft(_as_position(item))
            self._ready.notify()

    def pop(self) -> Optional[tuple[int, int, int]]:
        """Take the front position, or None when the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def has(self, item) -> bool:
        """True if the position is waiting in the queue."""
        with self._lock:
            return _as_position(item) in self._items


@dataclass
class CompletedData:
    """A finished chunk mesh ready for upload."""

    position: tuple
    vertices: list = field(default_factory=list)
    indices: list = field(default_factory=list)


class CompletedQueue:
    """First-in first-out queue of finished chunk meshes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ready = threading.Condition(self._lock)
        self._items: deque[CompletedData] = deque()

    def push(self, item: CompletedData) -> None:
        with self._ready:
            self._items.append(item)
            self._ready.notify()

    def pop(self) -> Optional[CompletedData]:
        """Take the oldest mesh, or None when the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items