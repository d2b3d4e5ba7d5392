import random
import threading
from typing import Optional, Protocol


class RandomSource(Protocol):
    def next_double(self) -> float:
        """Return a uniformly distributed float in [0, 1)."""
        ...


class SharedRandomSource:
    """A random.Random guarded by a lock so request threads can share one stream."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def next_double(self) -> float:
        with self._lock:
            return self._random.random()


_shared_source = SharedRandomSource()


def get_shared_random_source() -> SharedRandomSource:
    return _shared_source
