"""Generator and shrink contracts consumed by properties and the runner."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, TypeVar

from ..rng.generator import MutableRandom

T = TypeVar("T")
U = TypeVar("U")


def _no_shrinks() -> Iterator["Shrinkable[Any]"]:
    return iter(())


@dataclass(frozen=True)
class Shrinkable(Generic[T]):
    """A generated value together with its lazy shrink sequence.

    The sequence may be infinite; consumers always bound how far they walk it.
    """

    value: T
    shrinker: Callable[[], Iterator["Shrinkable[T]"]] = field(
        default=_no_shrinks, repr=False, compare=False
    )

    @classmethod
    def nil(cls, value: T) -> "Shrinkable[T]":
        """A value that cannot be shrunk any further."""
        return cls(value)

    def shrink(self) -> Iterator["Shrinkable[T]"]:
        """Return a fresh iterator over simpler candidates."""
        return self.shrinker()

    def map(self, fn: Callable[[T], U]) -> "Shrinkable[U]":
        return Shrinkable(
            fn(self.value), lambda: (s.map(fn) for s in self.shrink())
        )

    def filter(self, predicate: Callable[[T], bool]) -> "Shrinkable[T]":
        return Shrinkable(
            self.value,
            lambda: (s.filter(predicate) for s in self.shrink() if predicate(s.value)),
        )


class Arbitrary(ABC, Generic[T]):
    """A value-producing rule bound to a random source at generation time."""

    @abstractmethod
    def generate(self, mrng: MutableRandom) -> Shrinkable[T]:
        """Produce a value and its shrink sequence from mrng."""

    def map(self, fn: Callable[[T], U]) -> "Arbitrary[U]":
        return _MappedArbitrary(self, fn)

    def filter(self, predicate: Callable[[T], bool]) -> "Arbitrary[T]":
        return _FilteredArbitrary(self, predicate)


class _MappedArbitrary(Arbitrary[U]):
    def __init__(self, source: Arbitrary[T], fn: Callable[[T], U]):
        self.source = source
        self.fn = fn

    def generate(self, mrng: MutableRandom) -> Shrinkable[U]:
        return self.source.generate(mrng).map(self.fn)


class _FilteredArbitrary(Arbitrary[T]):
    def __init__(self, source: Arbitrary[T], predicate: Callable[[T], bool]):
        self.source = source
        self.predicate = predicate

    def generate(self, mrng: MutableRandom) -> Shrinkable[T]:
        # Retries draw from the same source so the sequence stays reproducible.
        while True:
            shrinkable = self.source.generate(mrng)
            if self.predicate(shrinkable.value):
                return shrinkable.filter(self.predicate)
