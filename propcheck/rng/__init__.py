"""Random source threaded through generation."""

from .generator import MutableRandom

__all__ = [
    "MutableRandom",
]
