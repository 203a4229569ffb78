"""Unit tests for StdoutReporter."""

from io import StringIO

import pytest

from cest.adapters.reporter.stdout import StdoutReporter
from cest.core.models import Outcome, RunSummary, TestRecord
from cest.core.registry import Registry
from cest.core.runner import Runner


@pytest.fixture
def record() -> TestRecord:
    """Create a sample record for testing."""
    return TestRecord.create("LL", "allocate", lambda: Outcome.SUCCESS)


def test_success_line(record, capsys):
    """Test a success line is green, with the parentheses inside the color."""
    StdoutReporter().report_test(record, Outcome.SUCCESS)
    assert capsys.readouterr().out == "LL->\033[32mallocate()\033[0m\n"


def test_failure_line(record, capsys):
    StdoutReporter().report_test(record, Outcome.FAILURE)
    assert capsys.readouterr().out == "LL->\033[31mallocate()\033[0m\n"


def test_pending_line(record, capsys):
    StdoutReporter().report_test(record, Outcome.PENDING)
    assert capsys.readouterr().out == "LL->\033[33mallocate()\033[0m\n"


def test_single_success_run_output(capsys):
    """Test one successful test prints a green line and a green 1-of-1 summary."""
    registry = Registry()
    registry.enroll(TestRecord.create("LL", "allocate", lambda: Outcome.SUCCESS))

    summary = Runner(registry=registry, reporter=StdoutReporter()).run_all()

    assert summary.exit_code == 0
    assert capsys.readouterr().out == (
        "LL->\033[32mallocate()\033[0m\n"
        "\033[32m1 successes\033[0m (of 1)\n"
    )


def test_summary_all_succeeded(capsys):
    summary = RunSummary(total=2, successes=2, failures=0, pending=0)
    StdoutReporter().report_summary(summary)
    assert capsys.readouterr().out == "\033[32m2 successes\033[0m (of 2)\n"


def test_summary_with_failures_is_red(capsys):
    summary = RunSummary(total=3, successes=1, failures=1, pending=1)
    StdoutReporter().report_summary(summary)
    assert capsys.readouterr().out == "\033[31m1 successes\033[0m (of 3)\n"


def test_summary_with_only_pending_is_red(capsys):
    """Pending tests are not successes, so the run is not clean."""
    summary = RunSummary(total=2, successes=1, failures=0, pending=1)
    StdoutReporter().report_summary(summary)
    assert capsys.readouterr().out.startswith("\033[31m1 successes")


def test_summary_empty_run_is_green(capsys):
    summary = RunSummary(total=0, successes=0, failures=0, pending=0)
    StdoutReporter().report_summary(summary)
    assert capsys.readouterr().out == "\033[32m0 successes\033[0m (of 0)\n"


def test_without_color(record):
    """Test the same lines are produced without escape codes."""
    stream = StringIO()
    reporter = StdoutReporter(color=False, stream=stream)

    reporter.report_test(record, Outcome.FAILURE)
    reporter.report_summary(RunSummary(total=1, successes=0, failures=1, pending=0))

    assert stream.getvalue() == "LL->allocate()\n0 successes (of 1)\n"
    assert "\033[" not in stream.getvalue()


def test_full_run_output(capsys):
    """Test a run of three tests prints three lines and a summary, in order."""
    registry = Registry()
    registry.enroll(TestRecord.create("LL", "one", lambda: Outcome.SUCCESS))
    registry.enroll(TestRecord.create("LL", "two", lambda: Outcome.FAILURE))
    registry.enroll(TestRecord.create("list", "three", lambda: Outcome.PENDING))

    summary = Runner(registry=registry, reporter=StdoutReporter()).run_all()

    assert summary.exit_code == 2
    assert capsys.readouterr().out.splitlines() == [
        "LL->\033[32mone()\033[0m",
        "LL->\033[31mtwo()\033[0m",
        "list->\033[33mthree()\033[0m",
        "\033[31m1 successes\033[0m (of 3)",
    ]
