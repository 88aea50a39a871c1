"""Shared fixtures for tests."""

import pytest

from propcheck.arbitrary import integer
from propcheck.property import ExecutionStatus, make_property, pre
from propcheck.runner.configuration import VerbosityLevel
from propcheck.runner.models import ExecutionTree, RunDetails


@pytest.fixture
def below_100_property():
    """Return a property failing for any integer >= 100."""
    return make_property([integer(0, 1000)], lambda x: x < 100)


@pytest.fixture
def always_passing_property():
    """Return a property that always holds."""
    return make_property([integer(0, 1000)], lambda x: True)


@pytest.fixture
def always_rejecting_property():
    """Return a property whose pre-condition never holds."""
    return make_property([integer(0, 1000)], lambda x: pre(False))


@pytest.fixture
def execution_forest() -> list[ExecutionTree]:
    """Return a forest of two trials, the second one shrunk twice."""
    return [
        ExecutionTree(1, ExecutionStatus.SUCCESS),
        ExecutionTree(
            120,
            ExecutionStatus.FAILURE,
            [
                ExecutionTree(0, ExecutionStatus.SUCCESS),
                ExecutionTree(
                    110,
                    ExecutionStatus.FAILURE,
                    [ExecutionTree(-1, ExecutionStatus.SKIPPED)],
                ),
            ],
        ),
    ]


@pytest.fixture
def make_run_details(execution_forest):
    """Return a factory for failed RunDetails of each outcome."""

    def factory(outcome: str, verbose=VerbosityLevel.QUIET, **kwargs) -> RunDetails:
        base = dict(
            failed=True,
            interrupted=False,
            num_runs=12,
            num_skips=0,
            num_shrinks=0,
            seed=42,
            verbose=verbose,
            execution_summary=execution_forest,
        )
        if outcome == "counterexample":
            base.update(
                num_shrinks=2,
                counterexample=(110,),
                counterexample_path="1:1",
                error="Property failed by returning false",
                failures=[(120,), (110,)],
            )
        elif outcome == "interrupted":
            base.update(interrupted=True)
        elif outcome == "too_many_skips":
            base.update(num_skips=12)
        base.update(kwargs)
        return RunDetails(**base)

    return factory
