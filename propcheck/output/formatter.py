"""Classification and formatting of run details into failure reports."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Sequence

from ..property.models import ExecutionStatus
from ..runner.configuration import VerbosityLevel
from ..runner.models import ExecutionTree, RunDetails
from .errors import PropertyFailedError
from .stringify import stringify

STATUS_ICONS = {
    ExecutionStatus.SUCCESS: "\x1b[32m√\x1b[0m",
    ExecutionStatus.FAILURE: "\x1b[31m\xd7\x1b[0m",
    ExecutionStatus.SKIPPED: "\x1b[33m!\x1b[0m",
}

DEPTH_MARKER = ". "

VERY_VERBOSE_HINT = (
    "Enable verbose mode at level VERY_VERBOSE in order to check all generated values "
    "and their associated status"
)


class RunOutcome(str, Enum):
    """Terminal outcome of a failed run."""

    TOO_MANY_SKIPS = "too_many_skips"
    COUNTEREXAMPLE = "counterexample"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class Report:
    """A failure report: summary message, optional details, hints."""

    outcome: RunOutcome
    message: str
    details: str | None = None
    hints: tuple[str, ...] = ()


def format_hints(hints: Sequence[str]) -> str:
    """Format hints, numbering them when there are several."""
    if len(hints) == 1:
        return f"Hint: {hints[0]}"
    return "\n".join(f"Hint ({idx}): {hint}" for idx, hint in enumerate(hints, start=1))


def format_failures(failures: Sequence[Any]) -> str:
    """Format every failing value encountered as a bullet list."""
    lines = "\n- ".join(stringify(failure) for failure in failures)
    return f"Encountered failures were:\n- {lines}"


def format_execution_summary(execution_trees: Sequence[ExecutionTree[Any]]) -> str:
    """Render an execution forest, parent before children, siblings in order.

    Iterative, so arbitrarily deep shrink chains render without recursion.
    """
    summary_lines: list[str] = []
    remaining: list[tuple[int, ExecutionTree[Any]]] = [
        (1, tree) for tree in reversed(execution_trees)
    ]
    while remaining:
        depth, tree = remaining.pop()
        left_padding = DEPTH_MARKER * (depth - 1)
        summary_lines.append(
            f"{left_padding}{STATUS_ICONS[tree.status]} {stringify(tree.value)}"
        )
        # Reversed so that children pop in their original order
        for child in reversed(tree.children):
            remaining.append((depth + 1, child))
    return "Execution summary:\n" + "\n".join(summary_lines)


def _format_too_many_skips(out: RunDetails[Any]) -> Report:
    message = (
        "Failed to run property, too many pre-condition failures encountered\n"
        f"{{ seed: {out.seed} }}\n\n"
        f"Ran {out.num_runs} time(s)\n"
        f"Skipped {out.num_skips} time(s)"
    )
    details = None
    hints = [
        "Try to reduce the number of rejected values by combining map, filter and "
        "built-in arbitraries",
        "Increase failure tolerance by setting max_skips_per_run to a higher value",
    ]

    if out.verbose >= VerbosityLevel.VERY_VERBOSE:
        details = format_execution_summary(out.execution_summary)
    else:
        hints.append(VERY_VERBOSE_HINT)

    return Report(RunOutcome.TOO_MANY_SKIPS, message, details, tuple(hints))


def _format_counterexample(out: RunDetails[Any]) -> Report:
    message = (
        f"Property failed after {out.num_runs} tests\n"
        f'{{ seed: {out.seed}, path: "{out.counterexample_path}", end_on_failure: true }}\n'
        f"Counterexample: {stringify(out.counterexample)}\n"
        f"Shrunk {out.num_shrinks} time(s)\n"
        f"Got error: {out.error}"
    )
    details = None
    hints = []

    # Very verbose first: the tree shows everything the failure list would
    if out.verbose >= VerbosityLevel.VERY_VERBOSE:
        details = format_execution_summary(out.execution_summary)
    elif out.verbose >= VerbosityLevel.VERBOSE:
        details = format_failures(out.failures)
    else:
        hints.append(
            "Enable verbose mode in order to have the list of all failing values "
            "encountered during the run"
        )

    return Report(RunOutcome.COUNTEREXAMPLE, message, details, tuple(hints))


def _format_interrupted(out: RunDetails[Any]) -> Report:
    message = f"Property interrupted after {out.num_runs} tests\n{{ seed: {out.seed} }}"
    details = None
    hints = []

    if out.verbose >= VerbosityLevel.VERY_VERBOSE:
        details = format_execution_summary(out.execution_summary)
    else:
        hints.append(VERY_VERBOSE_HINT)

    return Report(RunOutcome.INTERRUPTED, message, details, tuple(hints))


def classify_run(out: RunDetails[Any]) -> Report:
    """Build the report of a failed run from its outcome.

    Dispatches on (counterexample found, interrupted) only.
    """
    if out.found_counterexample:
        return _format_counterexample(out)
    if out.interrupted:
        return _format_interrupted(out)
    return _format_too_many_skips(out)


def assemble_report(report: Report) -> str:
    """Join message, details and hints into the final error text."""
    text = report.message
    if report.details is not None:
        text += f"\n\n{report.details}"
    if report.hints:
        text += f"\n\n{format_hints(report.hints)}"
    return text


def format_run_details(
    out: RunDetails[Any],
    format: Literal["text", "json"] = "text",
) -> str | None:
    """Format the report of a run for output.

    Args:
        out: The run details to format.
        format: Output format ("text" or "json").

    Returns:
        The formatted report, or None when the run did not fail.
    """
    if not out.failed:
        return None
    report = classify_run(out)
    if format == "json":
        return _format_json(out, report)
    return assemble_report(report)


def _format_json(out: RunDetails[Any], report: Report) -> str:
    data = {
        **out.summary(),
        "outcome": report.outcome.value,
        "counterexample": (
            stringify(out.counterexample) if out.found_counterexample else None
        ),
        "message": report.message,
        "details": report.details,
        "hints": list(report.hints),
    }
    return json.dumps(data, indent=2)


def throw_if_failed(out: RunDetails[Any]) -> None:
    """Raise PropertyFailedError carrying the full report if the run failed."""
    if not out.failed:
        return
    report = classify_run(out)
    raise PropertyFailedError(assemble_report(report), report=report, run_details=out)
