"""
Seedable randomness for team generation.

Every random decision in one generation round goes through a single
Randomizer so a fixed seed reproduces the whole round.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class Randomizer:
    """Thin wrapper over ``random.Random`` exposing only what allocation needs."""

    def __init__(self, seed: int | None = None):
        """
        Args:
            seed: Fixed seed for reproducible rounds; None draws from OS entropy
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def shuffled(self, items: Sequence[T]) -> list[T]:
        """Return a uniformly random permutation of ``items`` (input untouched)."""
        result = list(items)
        self._rng.shuffle(result)
        return result

    def choice(self, items: Sequence[T]) -> T:
        return self._rng.choice(items)

    def distinct_pair(self, n: int) -> tuple[int, int]:
        """Two different indices from range(n)."""
        if n < 2:
            raise ValueError(f"Need at least 2 items to pick a pair, got {n}")
        first, second = self._rng.sample(range(n), 2)
        return first, second

    def jitter(self, magnitude: float) -> float:
        """Uniform noise in [-magnitude, magnitude]; exactly 0.0 when disabled."""
        if magnitude <= 0:
            return 0.0
        return self._rng.uniform(-magnitude, magnitude)
