"""Mutable, cloneable random source."""

import random


class MutableRandom:
    """A seeded random source passed explicitly to every generation call.

    Each instance owns its own state; two runs never share one.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self, min_value: int, max_value: int) -> int:
        """Draw an integer in the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError(f"Empty range: [{min_value}, {max_value}]")
        return self._random.randint(min_value, max_value)

    def clone(self) -> "MutableRandom":
        """Return an independent copy positioned at the same state."""
        copy = MutableRandom.__new__(MutableRandom)
        copy.seed = self.seed
        copy._random = random.Random()
        copy._random.setstate(self._random.getstate())
        return copy

    def skip(self, num_draws: int) -> None:
        """Advance the state by num_draws draws."""
        for _ in range(num_draws):
            self._random.getrandbits(32)
