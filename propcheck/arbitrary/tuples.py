"""Tuple arbitrary combining independent arbitraries point-wise."""

from typing import Any, Iterator, Sequence

from ..rng.generator import MutableRandom
from .definition import Arbitrary, Shrinkable


def _shrink_tuple(items: tuple[Shrinkable[Any], ...]) -> Iterator[Shrinkable[tuple]]:
    """Shrink one position at a time, leftmost first, keeping the others fixed."""
    for index, item in enumerate(items):
        for shrunk in item.shrink():
            yield _shrinkable_tuple(items[:index] + (shrunk,) + items[index + 1 :])


def _shrinkable_tuple(items: tuple[Shrinkable[Any], ...]) -> Shrinkable[tuple]:
    return Shrinkable(
        tuple(item.value for item in items), lambda: _shrink_tuple(items)
    )


class TupleArbitrary(Arbitrary[tuple]):
    """Fixed-size tuples whose positions come from their own arbitraries."""

    def __init__(self, arbitraries: Sequence[Arbitrary[Any]]):
        self.arbitraries = tuple(arbitraries)

    def generate(self, mrng: MutableRandom) -> Shrinkable[tuple]:
        # Positions are drawn in declared order from the one shared source.
        items = tuple(arb.generate(mrng) for arb in self.arbitraries)
        return _shrinkable_tuple(items)


def tuple_of(*arbitraries: Arbitrary[Any]) -> TupleArbitrary:
    return TupleArbitrary(arbitraries)
