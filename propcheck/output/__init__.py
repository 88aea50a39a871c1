"""Failure reports and the assertion boundary."""

from .assertions import (
    CustomAssert,
    assert_property,
    async_assert_property,
    build_custom_assert,
    custom_assert,
    with_custom_assert,
    with_outcome_handlers,
)
from .errors import PropertyFailedError
from .formatter import (
    Report,
    RunOutcome,
    assemble_report,
    classify_run,
    format_execution_summary,
    format_failures,
    format_hints,
    format_run_details,
    throw_if_failed,
)
from .stringify import stringify

__all__ = [
    "CustomAssert",
    "PropertyFailedError",
    "Report",
    "RunOutcome",
    "assemble_report",
    "assert_property",
    "async_assert_property",
    "build_custom_assert",
    "classify_run",
    "custom_assert",
    "format_execution_summary",
    "format_failures",
    "format_hints",
    "format_run_details",
    "stringify",
    "throw_if_failed",
    "with_custom_assert",
    "with_outcome_handlers",
]
