"""Data models describing a completed run."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..property.models import ExecutionStatus
from .configuration import VerbosityLevel

T = TypeVar("T")


@dataclass
class ExecutionTree(Generic[T]):
    """A tried value and the shrink attempts explored from it, in order."""

    value: T
    status: ExecutionStatus
    children: list["ExecutionTree[T]"] = field(default_factory=list)


@dataclass
class RunDetails(Generic[T]):
    """Statistics and diagnostics of a property run.

    A failing run is exactly one of: too many skips, a counterexample, or an
    interruption. The driver guarantees this; reporting relies on it.
    """

    failed: bool
    interrupted: bool
    num_runs: int
    num_skips: int
    num_shrinks: int
    seed: int
    counterexample: T | None = None
    counterexample_path: str | None = None
    error: str | None = None
    failures: list[T] = field(default_factory=list)
    verbose: VerbosityLevel = VerbosityLevel.QUIET
    execution_summary: list[ExecutionTree[T]] = field(default_factory=list)

    @property
    def found_counterexample(self) -> bool:
        return self.counterexample_path is not None

    @property
    def too_many_skips(self) -> bool:
        return self.failed and not self.found_counterexample and not self.interrupted

    def summary(self) -> dict[str, Any]:
        """Scalar fields, for logging and JSON output."""
        return {
            "failed": self.failed,
            "interrupted": self.interrupted,
            "num_runs": self.num_runs,
            "num_skips": self.num_skips,
            "num_shrinks": self.num_shrinks,
            "seed": self.seed,
            "counterexample_path": self.counterexample_path,
        }
