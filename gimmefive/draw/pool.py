import logging
import random
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

def fisher_yates(items: Sequence[int], rng: random.Random) -> list[int]:
    """
    Returns a uniformly shuffled copy of items.
    """
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out

class IndexPool:
    """
    Shuffled permutation of catalog indices consumed front to back.

    Every index is handed out exactly once per generation. When fewer than the
    requested number remain, the whole permutation is replaced by a fresh one.
    """

    def __init__(
        self,
        size: int,
        rng: Optional[random.Random] = None,
        shuffle: Callable[[Sequence[int], random.Random], list[int]] = fisher_yates,
    ):
        if size < 1:
            raise ValueError(f"Pool size must be positive, got {size}")
        self.size = size
        self.rng = rng or random.Random()
        self._shuffle = shuffle
        self.generation = 0
        self._indices: list[int] = []
        self._cursor = 0
        self._reshuffle()

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return self.size - self._cursor

    def _reshuffle(self):
        self._indices = self._shuffle(range(self.size), self.rng)
        self._cursor = 0
        self.generation += 1
        logger.debug(f"Pool reshuffled (generation {self.generation}, {self.size} indices)")

    def ensure_capacity(self, need: int):
        if self.remaining < need:
            self._reshuffle()

    def take(self, count: int) -> list[int]:
        if count < 1 or count > self.size:
            raise ValueError(f"Cannot take {count} indices from a pool of {self.size}")
        self.ensure_capacity(count)
        out = self._indices[self._cursor:self._cursor + count]
        self._cursor += count
        return out
