"""Verdicts produced by running a property on one value."""

from dataclasses import dataclass
from enum import Enum

from .errors import PreconditionFailure

RETURNED_FALSE_DESCRIPTION = "Property failed by returning false"


class ExecutionStatus(Enum):
    """Outcome of a single trial or shrink attempt."""

    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class Verdict:
    """Result of running a predicate: success, failure with payload, or skip."""

    status: ExecutionStatus
    error: str | None = None
    trace: str | None = None

    @classmethod
    def success(cls) -> "Verdict":
        return cls(ExecutionStatus.SUCCESS)

    @classmethod
    def failure(cls, error: str, trace: str | None = None) -> "Verdict":
        return cls(ExecutionStatus.FAILURE, error=error, trace=trace)

    @classmethod
    def skipped(cls) -> "Verdict":
        return cls(ExecutionStatus.SKIPPED)

    @property
    def is_failure(self) -> bool:
        return self.status == ExecutionStatus.FAILURE

    @property
    def is_skipped(self) -> bool:
        return self.status == ExecutionStatus.SKIPPED

    @property
    def description(self) -> str | None:
        """Error text as reported to the user, with the trace when there is one."""
        if self.error is None:
            return None
        if self.trace:
            return f"{self.error}\n\nStack trace: {self.trace}"
        return self.error


def pre(condition: bool) -> None:
    """Discard the current trial unless condition holds."""
    if not condition:
        raise PreconditionFailure()
