"""Tests for failure reports and execution summaries."""

import json

import pytest

from propcheck.output.errors import PropertyFailedError
from propcheck.output.formatter import (
    STATUS_ICONS,
    RunOutcome,
    classify_run,
    format_execution_summary,
    format_failures,
    format_hints,
    format_run_details,
    throw_if_failed,
)
from propcheck.output.stringify import stringify
from propcheck.property import ExecutionStatus
from propcheck.runner.configuration import VerbosityLevel
from propcheck.runner.models import ExecutionTree, RunDetails

OK = STATUS_ICONS[ExecutionStatus.SUCCESS]
KO = STATUS_ICONS[ExecutionStatus.FAILURE]
SKIP = STATUS_ICONS[ExecutionStatus.SKIPPED]


class TestFormatHints:
    def test_single_hint(self):
        assert format_hints(["do this"]) == "Hint: do this"

    def test_several_hints_are_numbered(self):
        assert format_hints(["a", "b"]) == "Hint (1): a\nHint (2): b"


class TestFormatFailures:
    def test_bullet_list(self):
        assert format_failures([(120,), (110,)]) == (
            "Encountered failures were:\n- (120,)\n- (110,)"
        )


class TestFormatExecutionSummary:
    def test_renders_pre_order_with_depth(self, execution_forest):
        assert format_execution_summary(execution_forest) == "\n".join(
            [
                "Execution summary:",
                f"{OK} 1",
                f"{KO} 120",
                f". {OK} 0",
                f". {KO} 110",
                f". . {SKIP} -1",
            ]
        )

    def test_one_line_per_node_plus_header(self, execution_forest):
        lines = format_execution_summary(execution_forest).split("\n")

        assert len(lines) == 5 + 1

    def test_rendering_is_idempotent(self, execution_forest):
        first = format_execution_summary(execution_forest)
        second = format_execution_summary(execution_forest)

        assert first == second
        assert [tree.value for tree in execution_forest] == [1, 120]
        assert [child.value for child in execution_forest[1].children] == [0, 110]

    def test_empty_forest(self):
        assert format_execution_summary([]) == "Execution summary:\n"

    def test_deep_chain_does_not_recurse(self):
        root = ExecutionTree(0, ExecutionStatus.FAILURE)
        node = root
        for depth in range(1, 5000):
            child = ExecutionTree(depth, ExecutionStatus.FAILURE)
            node.children.append(child)
            node = child

        lines = format_execution_summary([root]).split("\n")

        assert len(lines) == 5001
        assert lines[-1] == ". " * 4999 + f"{KO} 4999"

    def test_distinct_glyphs(self):
        assert len(set(STATUS_ICONS.values())) == 3


class TestClassifyRun:
    @pytest.mark.parametrize(
        "outcome, expected",
        [
            ("counterexample", RunOutcome.COUNTEREXAMPLE),
            ("interrupted", RunOutcome.INTERRUPTED),
            ("too_many_skips", RunOutcome.TOO_MANY_SKIPS),
        ],
    )
    def test_dispatches_on_outcome(self, make_run_details, outcome, expected):
        assert classify_run(make_run_details(outcome)).outcome == expected

    def test_too_many_skips_message(self, make_run_details):
        report = classify_run(make_run_details("too_many_skips"))

        assert report.message == (
            "Failed to run property, too many pre-condition failures encountered\n"
            "{ seed: 42 }\n\n"
            "Ran 12 time(s)\n"
            "Skipped 12 time(s)"
        )
        assert report.details is None
        assert len(report.hints) == 3
        assert "max_skips_per_run" in report.hints[1]
        assert "VERY_VERBOSE" in report.hints[2]

    def test_too_many_skips_very_verbose(self, make_run_details, execution_forest):
        report = classify_run(
            make_run_details("too_many_skips", verbose=VerbosityLevel.VERY_VERBOSE)
        )

        assert report.details == format_execution_summary(execution_forest)
        assert len(report.hints) == 2

    def test_counterexample_message(self, make_run_details):
        report = classify_run(make_run_details("counterexample"))

        assert report.message == (
            "Property failed after 12 tests\n"
            '{ seed: 42, path: "1:1", end_on_failure: true }\n'
            "Counterexample: (110,)\n"
            "Shrunk 2 time(s)\n"
            "Got error: Property failed by returning false"
        )

    def test_counterexample_quiet(self, make_run_details):
        report = classify_run(make_run_details("counterexample"))

        assert report.details is None
        assert len(report.hints) == 1
        assert "list of all failing values" in report.hints[0]

    def test_counterexample_verbose_lists_failures(self, make_run_details):
        report = classify_run(
            make_run_details("counterexample", verbose=VerbosityLevel.VERBOSE)
        )

        assert report.details == format_failures([(120,), (110,)])
        assert report.hints == ()

    def test_counterexample_very_verbose_shows_tree(self, make_run_details):
        report = classify_run(
            make_run_details("counterexample", verbose=VerbosityLevel.VERY_VERBOSE)
        )

        assert report.details.startswith("Execution summary:")
        for failure in ("120", "110"):
            assert failure in report.details
        assert report.hints == ()

    def test_interrupted_message(self, make_run_details):
        report = classify_run(make_run_details("interrupted"))

        assert report.message == "Property interrupted after 12 tests\n{ seed: 42 }"
        assert report.details is None
        assert len(report.hints) == 1

    def test_interrupted_very_verbose(self, make_run_details):
        report = classify_run(
            make_run_details("interrupted", verbose=VerbosityLevel.VERY_VERBOSE)
        )

        assert report.details.startswith("Execution summary:")
        assert report.hints == ()

    def test_none_counterexample_value_still_counts(self, make_run_details):
        out = make_run_details(
            "counterexample", counterexample=None, counterexample_path="0"
        )

        assert classify_run(out).outcome == RunOutcome.COUNTEREXAMPLE


class TestThrowIfFailed:
    def test_passing_run_is_noop(self):
        out = RunDetails(
            failed=False, interrupted=False, num_runs=100, num_skips=0, num_shrinks=0, seed=1
        )

        assert throw_if_failed(out) is None

    def test_single_hint_message(self, make_run_details):
        with pytest.raises(PropertyFailedError) as exc_info:
            throw_if_failed(make_run_details("counterexample"))

        message = str(exc_info.value)
        assert message.startswith("Property failed after 12 tests")
        assert message.endswith(
            "\n\nHint: Enable verbose mode in order to have the list of all failing "
            "values encountered during the run"
        )
        assert exc_info.value.report.outcome == RunOutcome.COUNTEREXAMPLE

    def test_details_then_numbered_hints(self, make_run_details, execution_forest):
        out = make_run_details("too_many_skips", verbose=VerbosityLevel.VERY_VERBOSE)

        with pytest.raises(PropertyFailedError) as exc_info:
            throw_if_failed(out)

        message = str(exc_info.value)
        summary = format_execution_summary(execution_forest)
        assert f"Skipped 12 time(s)\n\n{summary}\n\nHint (1): " in message
        assert "\nHint (2): " in message
        assert exc_info.value.run_details is out

    def test_is_an_assertion_error(self, make_run_details):
        with pytest.raises(AssertionError):
            throw_if_failed(make_run_details("interrupted"))


class TestFormatRunDetails:
    def test_passing_run_returns_none(self):
        out = RunDetails(
            failed=False, interrupted=False, num_runs=1, num_skips=0, num_shrinks=0, seed=1
        )

        assert format_run_details(out) is None

    def test_text_matches_raised_message(self, make_run_details):
        out = make_run_details("counterexample", verbose=VerbosityLevel.VERBOSE)

        with pytest.raises(PropertyFailedError) as exc_info:
            throw_if_failed(out)

        assert format_run_details(out) == str(exc_info.value)

    def test_json_output(self, make_run_details):
        data = json.loads(format_run_details(make_run_details("counterexample"), "json"))

        assert data["outcome"] == "counterexample"
        assert data["counterexample"] == "(110,)"
        assert data["counterexample_path"] == "1:1"
        assert data["seed"] == 42
        assert len(data["hints"]) == 1


class TestStringify:
    def test_uses_repr(self):
        assert stringify("a") == "'a'"
        assert stringify((1, [2])) == "(1, [2])"

    def test_cyclic_value(self):
        value: list = []
        value.append(value)

        assert stringify(value) == "[[...]]"

    def test_broken_repr_does_not_raise(self):
        class Broken:
            def __repr__(self):
                raise RuntimeError("no repr")

        assert "Broken object" in stringify(Broken())
