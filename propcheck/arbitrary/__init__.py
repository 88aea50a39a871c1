"""Generator and shrink contracts, plus the arbitraries used to drive properties."""

from .constant import ConstantArbitrary, constant
from .definition import Arbitrary, Shrinkable
from .integer import IntegerArbitrary, integer, shrink_integer
from .tuples import TupleArbitrary, tuple_of

__all__ = [
    "Arbitrary",
    "Shrinkable",
    "ConstantArbitrary",
    "IntegerArbitrary",
    "TupleArbitrary",
    "constant",
    "integer",
    "shrink_integer",
    "tuple_of",
]
