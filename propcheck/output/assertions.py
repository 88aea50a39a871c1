"""Assertion helpers raising on failed runs.

The custom-assertion wrappers are experimental: they let a caller append
its own explanation of a counterexample to the generic report.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from ..property.property import AsyncProperty, Property
from ..runner.configuration import Parameters
from ..runner.models import RunDetails
from ..runner.runner import async_check, check
from .errors import PropertyFailedError
from .formatter import RunOutcome, assemble_report, classify_run, throw_if_failed

Explain = Callable[..., Awaitable[str] | str]


def assert_property(
    prop: Property, parameters: Parameters | None = None, **overrides: Any
) -> None:
    """Check a synchronous property and raise PropertyFailedError if it fails."""
    throw_if_failed(check(prop, parameters, **overrides))


async def async_assert_property(
    prop: Property | AsyncProperty,
    parameters: Parameters | None = None,
    **overrides: Any,
) -> None:
    """Check a property of either kind and raise PropertyFailedError if it fails."""
    throw_if_failed(await async_check(prop, parameters, **overrides))


async def _explain(explain: Explain, counterexample: Any) -> str:
    if isinstance(counterexample, tuple):
        text = explain(*counterexample)
    else:
        text = explain(counterexample)
    if inspect.isawaitable(text):
        text = await text
    return str(text)


async def _raise_with_explanation(out: RunDetails[Any], explain: Explain | None) -> None:
    if not out.failed:
        return
    report = classify_run(out)
    message = assemble_report(report)
    if explain is not None and out.found_counterexample:
        message += f"\n\n{await _explain(explain, out.counterexample)}"
    raise PropertyFailedError(message, report=report, run_details=out)


async def custom_assert(
    prop: Property | AsyncProperty,
    parameters: Parameters | None = None,
    explain: Explain | None = None,
) -> None:
    """Check prop and append explain(*counterexample) to the failure message."""
    out = await async_check(prop, parameters)
    await _raise_with_explanation(out, explain)


@dataclass(frozen=True)
class CustomAssert:
    """A prepared check whose explanation is supplied at run time."""

    prop: Property | AsyncProperty
    parameters: Parameters | None = None

    async def run(self, explain: Explain | None = None) -> None:
        await custom_assert(self.prop, self.parameters, explain)


def build_custom_assert(
    prop: Property | AsyncProperty, parameters: Parameters | None = None
) -> CustomAssert:
    return CustomAssert(prop, parameters)


async def with_custom_assert(
    pending_run: Awaitable[RunDetails[Any]], explain: Explain | None
) -> None:
    """Await a pending run, then surface it with the given explanation."""
    out = await pending_run
    await _raise_with_explanation(out, explain)


async def with_outcome_handlers(
    pending_run: Awaitable[RunDetails[Any]],
    on_failed: Explain | None = None,
    on_interrupted: Explain | None = None,
    on_too_many_skips: Explain | None = None,
) -> None:
    """Like with_custom_assert, choosing the explanation by outcome.

    on_failed receives the counterexample unpacked positionally. The
    interrupted and too-many-skips runs have no counterexample, so their
    handlers are called without arguments.
    """
    out = await pending_run
    if not out.failed:
        return
    report = classify_run(out)
    if report.outcome is RunOutcome.COUNTEREXAMPLE:
        await _raise_with_explanation(out, on_failed)
        return
    handler = (
        on_interrupted if report.outcome is RunOutcome.INTERRUPTED else on_too_many_skips
    )
    message = assemble_report(report)
    if handler is not None:
        text = handler()
        if inspect.isawaitable(text):
            text = await text
        message += f"\n\n{text}"
    raise PropertyFailedError(message, report=report, run_details=out)
