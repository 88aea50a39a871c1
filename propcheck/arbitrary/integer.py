"""Integer arbitrary."""

from typing import Iterator

from ..rng.generator import MutableRandom
from .definition import Arbitrary, Shrinkable

MIN_INT = -(2**31)
MAX_INT = 2**31 - 1


def _halve(gap: int) -> int:
    """Halve a gap, rounding toward zero."""
    return gap // 2 if gap >= 0 else -((-gap) // 2)


def shrink_integer(value: int, target: int) -> Iterator[Shrinkable[int]]:
    """Yield candidates from target back toward value.

    The first candidate is the target itself, then each following candidate
    halves the remaining distance.
    """
    gap = value - target
    while gap != 0:
        candidate = value - gap
        yield _shrinkable_integer(candidate, target)
        gap = _halve(gap)


def _shrinkable_integer(value: int, target: int) -> Shrinkable[int]:
    return Shrinkable(value, lambda: shrink_integer(value, target))


class IntegerArbitrary(Arbitrary[int]):
    """Integers in an inclusive range, shrinking toward zero (or the closest bound)."""

    def __init__(self, min_value: int = MIN_INT, max_value: int = MAX_INT):
        if min_value > max_value:
            raise ValueError(
                f"integer() requires min_value <= max_value, got {min_value} > {max_value}"
            )
        self.min_value = min_value
        self.max_value = max_value

    @property
    def target(self) -> int:
        if self.min_value > 0:
            return self.min_value
        if self.max_value < 0:
            return self.max_value
        return 0

    def generate(self, mrng: MutableRandom) -> Shrinkable[int]:
        value = mrng.next_int(self.min_value, self.max_value)
        return _shrinkable_integer(value, self.target)


def integer(min_value: int = MIN_INT, max_value: int = MAX_INT) -> IntegerArbitrary:
    return IntegerArbitrary(min_value, max_value)
