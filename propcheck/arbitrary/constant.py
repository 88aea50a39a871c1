"""Constant arbitrary."""

from typing import TypeVar

from ..rng.generator import MutableRandom
from .definition import Arbitrary, Shrinkable

T = TypeVar("T")


class ConstantArbitrary(Arbitrary[T]):
    """Always produces the same value and never shrinks."""

    def __init__(self, value: T):
        self.value = value

    def generate(self, mrng: MutableRandom) -> Shrinkable[T]:
        return Shrinkable.nil(self.value)


def constant(value: T) -> ConstantArbitrary[T]:
    return ConstantArbitrary(value)
