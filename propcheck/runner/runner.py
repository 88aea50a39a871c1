"""Sequential trial driver: generation, verdicts, shrinking and replay."""

import itertools
import time
from typing import Any, Generator, Iterator

import structlog

from ..arbitrary.definition import Shrinkable
from ..property.models import ExecutionStatus, Verdict
from ..property.property import AsyncProperty, Property
from ..rng.generator import MutableRandom
from .configuration import Parameters, VerbosityLevel
from .models import ExecutionTree, RunDetails

logger = structlog.get_logger(__name__)

# Draws skipped on the master random source between two trials.
RUN_SKIP_STEPS = 42

PATH_SEPARATOR = ":"


def parse_path(path: str) -> list[int]:
    """Parse a counterexample path such as "12:0:3".

    The first index is the trial, the following ones are positions in
    successive shrink sequences.

    Raises:
        ValueError: If the path is empty or holds anything but non-negative integers.
    """
    try:
        indexes = [int(part) for part in path.split(PATH_SEPARATOR)]
    except ValueError:
        raise ValueError(f"Malformed path: {path!r}") from None
    if any(index < 0 for index in indexes):
        raise ValueError(f"Malformed path: {path!r}")
    return indexes


def format_path(indexes: list[int]) -> str:
    return PATH_SEPARATOR.join(str(index) for index in indexes)


def _generate_trial(prop: Property | AsyncProperty, seed: int, run_index: int) -> Shrinkable[Any]:
    master = MutableRandom(seed)
    master.skip(RUN_SKIP_STEPS * run_index)
    return prop.generate(master.clone())


def _follow_path(
    prop: Property | AsyncProperty, seed: int, indexes: list[int]
) -> Shrinkable[Any]:
    shrinkable = _generate_trial(prop, seed, indexes[0])
    for depth, index in enumerate(indexes[1:], start=1):
        candidate = next(itertools.islice(shrinkable.shrink(), index, None), None)
        if candidate is None:
            raise ValueError(
                f"Path {format_path(indexes)!r} has no shrink at index {index} "
                f"(depth {depth})"
            )
        shrinkable = candidate
    return shrinkable


def replay_path(prop: Property | AsyncProperty, seed: int, path: str) -> Any:
    """Regenerate the value addressed by path without running the predicate.

    Args:
        prop: The property the path was reported for.
        seed: The seed of the reported run.
        path: The reported counterexample path.

    Returns:
        The value at the end of the path.

    Raises:
        ValueError: If the path is malformed or walks past a shrink sequence.
    """
    return _follow_path(prop, seed, parse_path(path)).value


def default_seed() -> int:
    return time.time_ns() // 1_000_000 & 0xFFFFFFFF


def resolve_parameters(parameters: Parameters | None = None, **overrides: Any) -> Parameters:
    """Merge keyword overrides into parameters and fix the seed."""
    base = parameters or Parameters()
    data = {**base.model_dump(), **overrides}
    if data.get("seed") is None:
        data["seed"] = default_seed()
    return Parameters.model_validate(data)


class _Execution:
    """Collects failures and the execution tree according to verbosity."""

    def __init__(self, verbose: VerbosityLevel):
        self.verbose = verbose
        self.roots: list[ExecutionTree[Any]] = []
        self.failures: list[Any] = []

    def record(
        self, value: Any, status: ExecutionStatus, parent: ExecutionTree[Any] | None
    ) -> ExecutionTree[Any] | None:
        if self.verbose < VerbosityLevel.VERY_VERBOSE:
            return None
        node = ExecutionTree(value, status)
        if parent is None:
            self.roots.append(node)
        else:
            parent.children.append(node)
        return node

    def add_failure(self, value: Any) -> None:
        if self.verbose >= VerbosityLevel.VERBOSE:
            self.failures.append(value)


def _trials(
    prop: Property | AsyncProperty, params: Parameters
) -> Iterator[tuple[list[int], Shrinkable[Any]]]:
    """Yield (path, shrinkable) lazily, one trial at a time."""
    if params.path is not None:
        indexes = parse_path(params.path)
        yield indexes, _follow_path(prop, params.seed, indexes)
        return
    master = MutableRandom(params.seed)
    for run_index in itertools.count():
        yield [run_index], prop.generate(master.clone())
        master.skip(RUN_SKIP_STEPS)


def _shrink(
    params: Parameters,
    execution: _Execution,
    shrinkable: Shrinkable[Any],
    node: ExecutionTree[Any] | None,
    verdict: Verdict,
    path: list[int],
) -> Generator[Any, Verdict, tuple[Any, Verdict, int]]:
    """Walk shrink sequences, keeping the first failing candidate each time."""
    num_shrinks = 0
    attempts = 0
    current, current_node = shrinkable, node
    searching = not params.end_on_failure
    while searching:
        searching = False
        for index, candidate in enumerate(current.shrink()):
            if attempts >= params.max_shrinks:
                break
            attempts += 1
            candidate_verdict = yield candidate.value
            candidate_node = execution.record(
                candidate.value, candidate_verdict.status, current_node
            )
            if candidate_verdict.is_failure:
                current, current_node, verdict = candidate, candidate_node, candidate_verdict
                path.append(index)
                num_shrinks += 1
                execution.add_failure(candidate.value)
                searching = True
                break
    return current.value, verdict, num_shrinks


def _execute(
    prop: Property | AsyncProperty, params: Parameters
) -> Generator[Any, Verdict, RunDetails[Any]]:
    """Drive a run; yields values to judge and receives their verdicts."""
    execution = _Execution(params.verbose)
    deadline = None
    if params.interrupt_after_time_limit is not None:
        deadline = time.monotonic() + params.interrupt_after_time_limit / 1000
    num_runs = 0
    num_skips = 0

    def details(**kwargs: Any) -> RunDetails[Any]:
        return RunDetails(
            num_runs=num_runs,
            num_skips=num_skips,
            seed=params.seed,
            verbose=params.verbose,
            failures=execution.failures,
            execution_summary=execution.roots,
            **kwargs,
        )

    logger.debug("Property run started", seed=params.seed, num_runs=params.num_runs)
    for path, shrinkable in _trials(prop, params):
        if num_runs - num_skips >= params.num_runs:
            break
        if deadline is not None and time.monotonic() >= deadline:
            logger.warning("Property run interrupted", seed=params.seed, num_runs=num_runs)
            return details(
                failed=params.mark_interrupt_as_failure,
                interrupted=True,
                num_shrinks=0,
            )

        num_runs += 1
        verdict = yield shrinkable.value
        node = execution.record(shrinkable.value, verdict.status, None)

        if verdict.is_skipped:
            num_skips += 1
            if num_skips > params.max_skips:
                logger.warning(
                    "Too many pre-condition failures",
                    seed=params.seed,
                    num_runs=num_runs,
                    num_skips=num_skips,
                )
                return details(failed=True, interrupted=False, num_shrinks=0)
            continue

        if verdict.is_failure:
            logger.debug("Property failed, shrinking", seed=params.seed, path=format_path(path))
            execution.add_failure(shrinkable.value)
            counterexample, verdict, num_shrinks = yield from _shrink(
                params, execution, shrinkable, node, verdict, path
            )
            logger.debug("Shrinking done", num_shrinks=num_shrinks, path=format_path(path))
            return details(
                failed=True,
                interrupted=False,
                num_shrinks=num_shrinks,
                counterexample=counterexample,
                counterexample_path=format_path(path),
                error=verdict.description,
            )

    logger.info("Property run passed", seed=params.seed, num_runs=num_runs, num_skips=num_skips)
    return details(failed=False, interrupted=False, num_shrinks=0)


def check(
    prop: Property, parameters: Parameters | None = None, **overrides: Any
) -> RunDetails[Any]:
    """Run a synchronous property and return its run details.

    Args:
        prop: The property to check.
        parameters: Base parameters; defaults are used when omitted.
        **overrides: Individual parameter overrides, e.g. ``seed=42``.

    Returns:
        RunDetails describing the run. Never raises on property failure.

    Raises:
        TypeError: If prop is asynchronous.
    """
    if prop.is_async():
        raise TypeError("check() cannot run an AsyncProperty, use async_check()")
    params = resolve_parameters(parameters, **overrides)
    run = _execute(prop, params)
    try:
        value = next(run)
        while True:
            value = run.send(prop.run(value))
    except StopIteration as stop:
        return stop.value


async def async_check(
    prop: Property | AsyncProperty,
    parameters: Parameters | None = None,
    **overrides: Any,
) -> RunDetails[Any]:
    """Run a property of either kind; each verdict is awaited before the next trial."""
    params = resolve_parameters(parameters, **overrides)
    run = _execute(prop, params)
    try:
        value = next(run)
        while True:
            if prop.is_async():
                verdict = await prop.run(value)
            else:
                verdict = prop.run(value)
            value = run.send(verdict)
    except StopIteration as stop:
        return stop.value
