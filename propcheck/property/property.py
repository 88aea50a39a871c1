"""Synchronous and asynchronous properties over composed arbitraries."""

import inspect
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from ..arbitrary.definition import Arbitrary, Shrinkable
from ..arbitrary.tuples import tuple_of
from ..rng.generator import MutableRandom
from .errors import PreconditionFailure
from .models import RETURNED_FALSE_DESCRIPTION, Verdict

T = TypeVar("T")

MAX_ARITY = 9

AWAITABLE_OUTPUT_DESCRIPTION = (
    "TypeError: predicate returned an awaitable; "
    "build the property with make_async_property"
)

Predicate = Callable[[T], Any]
AsyncPredicate = Callable[[T], Any]


def _verdict_from_output(output: Any) -> Verdict:
    """None and outputs equal to True pass; anything else fails."""
    if output is None or output == True:  # noqa: E712
        return Verdict.success()
    return Verdict.failure(RETURNED_FALSE_DESCRIPTION)


def _verdict_from_exception(err: Exception) -> Verdict:
    if isinstance(err, PreconditionFailure):
        return Verdict.skipped()
    error = "".join(traceback.format_exception_only(type(err), err)).strip()
    trace = "".join(traceback.format_tb(err.__traceback__)).rstrip() or None
    return Verdict.failure(error, trace)


@dataclass(frozen=True)
class Property(Generic[T]):
    """A predicate over values produced by an arbitrary, run synchronously."""

    arbitrary: Arbitrary[T]
    predicate: Predicate

    def is_async(self) -> bool:
        return False

    def generate(self, mrng: MutableRandom) -> Shrinkable[T]:
        return self.arbitrary.generate(mrng)

    def run(self, value: T) -> Verdict:
        """Run the predicate on value and turn its outcome into a Verdict."""
        try:
            output = self.predicate(value)
        except Exception as err:
            return _verdict_from_exception(err)
        if inspect.isawaitable(output):
            if inspect.iscoroutine(output):
                output.close()
            return Verdict.failure(AWAITABLE_OUTPUT_DESCRIPTION)
        return _verdict_from_output(output)


@dataclass(frozen=True)
class AsyncProperty(Generic[T]):
    """A predicate that may suspend; generation itself never does."""

    arbitrary: Arbitrary[T]
    predicate: AsyncPredicate

    def is_async(self) -> bool:
        return True

    def generate(self, mrng: MutableRandom) -> Shrinkable[T]:
        return self.arbitrary.generate(mrng)

    async def run(self, value: T) -> Verdict:
        """Await the predicate on value and turn its outcome into a Verdict."""
        try:
            output = self.predicate(value)
            if inspect.isawaitable(output):
                output = await output
        except Exception as err:
            return _verdict_from_exception(err)
        return _verdict_from_output(output)


def _check_arbitraries(arbitraries: Sequence[Arbitrary[Any]]) -> tuple[Arbitrary[Any], ...]:
    arbitraries = tuple(arbitraries)
    if not 1 <= len(arbitraries) <= MAX_ARITY:
        raise ValueError(
            f"A property takes between 1 and {MAX_ARITY} arbitraries, got {len(arbitraries)}; "
            "combine extra inputs with tuple_of() first"
        )
    for position, arb in enumerate(arbitraries):
        if not isinstance(arb, Arbitrary):
            raise TypeError(
                f"Expected an Arbitrary at position {position}, got {type(arb).__name__}"
            )
    return arbitraries


def _check_predicate(predicate: Any) -> None:
    if not callable(predicate):
        raise TypeError(f"Expected a callable predicate, got {type(predicate).__name__}")


def _check_sync_predicate(predicate: Any) -> None:
    _check_predicate(predicate)
    if inspect.iscoroutinefunction(predicate):
        raise TypeError("Predicate is a coroutine function; use make_async_property")


def make_property(
    arbitraries: Sequence[Arbitrary[Any]], predicate: Callable[..., Any]
) -> Property[tuple]:
    """Build a property over the tuple of values drawn from arbitraries.

    The predicate is called with the tuple unpacked positionally, in the
    order the arbitraries were given.

    Args:
        arbitraries: Between 1 and MAX_ARITY arbitraries.
        predicate: Callable taking one argument per arbitrary.

    Returns:
        A synchronous Property over tuples.

    Raises:
        ValueError: If the number of arbitraries is out of range.
        TypeError: If an argument has the wrong kind, or the predicate
            is a coroutine function.
    """
    arbitraries = _check_arbitraries(arbitraries)
    _check_sync_predicate(predicate)
    return Property(tuple_of(*arbitraries), lambda t: predicate(*t))


def make_async_property(
    arbitraries: Sequence[Arbitrary[Any]], predicate: Callable[..., Any]
) -> AsyncProperty[tuple]:
    """Asynchronous counterpart of make_property."""
    arbitraries = _check_arbitraries(arbitraries)
    _check_predicate(predicate)
    return AsyncProperty(tuple_of(*arbitraries), lambda t: predicate(*t))


def property_(*args: Any) -> Property[tuple]:
    """Variadic form: property_(arb1, ..., arbN, predicate).

    The last positional argument is always the predicate.
    """
    if not args:
        raise ValueError("property_() requires at least one arbitrary and a predicate")
    return make_property(args[:-1], args[-1])


def async_property_(*args: Any) -> AsyncProperty[tuple]:
    """Variadic form: async_property_(arb1, ..., arbN, predicate)."""
    if not args:
        raise ValueError(
            "async_property_() requires at least one arbitrary and a predicate"
        )
    return make_async_property(args[:-1], args[-1])
