from __future__ import annotations

import random
import threading
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def next_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        ...

    def choice(self, options: Sequence[T]) -> T:
        ...


class SharedRandomSource:
    """
    Process-wide random source shared by concurrent requests.

    random.Random is not documented as thread-safe, so every draw
    goes through one lock.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def next_int(self, low: int, high: int) -> int:
        with self._lock:
            return self._rng.randint(low, high)

    def choice(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("choice() needs at least one option")
        with self._lock:
            return self._rng.choice(options)
