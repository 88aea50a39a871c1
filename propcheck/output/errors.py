"""Exceptions raised when surfacing a failed run."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..runner.models import RunDetails
    from .formatter import Report


class PropertyFailedError(AssertionError):
    """Raised when a property run failed; the message is the full report."""

    def __init__(
        self,
        message: str,
        report: "Report | None" = None,
        run_details: "RunDetails[Any] | None" = None,
    ):
        self.report = report
        self.run_details = run_details
        super().__init__(message)
