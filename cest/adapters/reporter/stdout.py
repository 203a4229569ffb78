"""Stdout reporter adapter.

Implements ReporterPort by printing one colorized line per test and
a summary line to the terminal.
"""

import sys
from typing import TextIO

from cest.core.models import Outcome, RunSummary, TestRecord
from cest.core.ports import ReporterPort

CSI = "\033["
FAILURE_COLOR = CSI + "31m"
SUCCESS_COLOR = CSI + "32m"
PENDING_COLOR = CSI + "33m"
RESET = CSI + "0m"

OUTCOME_COLORS = {
    Outcome.FAILURE: FAILURE_COLOR,
    Outcome.SUCCESS: SUCCESS_COLOR,
    Outcome.PENDING: PENDING_COLOR,
}


class StdoutReporter(ReporterPort):
    """Prints test results to stdout with ANSI color codes."""

    def __init__(self, color: bool = True, stream: TextIO | None = None):
        """Initialize stdout reporter.

        Args:
            color: If False, print the same lines without escape codes.
            stream: Stream to write to. Defaults to sys.stdout at write time.
        """
        self.color = color
        self.stream = stream

    def report_test(self, record: TestRecord, outcome: Outcome) -> None:
        """Print `namespace->name()` in the outcome's color."""
        self._write(self.format_test(record, outcome))

    def report_summary(self, summary: RunSummary) -> None:
        """Print `N successes (of M)` in the run's color."""
        self._write(self.format_summary(summary))

    def format_test(self, record: TestRecord, outcome: Outcome) -> str:
        return (
            f"{record.namespace}->"
            f"{self._paint(OUTCOME_COLORS[outcome], f'{record.name}()')}"
        )

    def format_summary(self, summary: RunSummary) -> str:
        if summary.successes < summary.total:
            color = FAILURE_COLOR
        elif summary.pending:
            color = PENDING_COLOR
        else:
            color = SUCCESS_COLOR
        return (
            f"{self._paint(color, f'{summary.successes} successes')}"
            f" (of {summary.total})"
        )

    def _paint(self, color: str, text: str) -> str:
        if not self.color:
            return text
        return f"{color}{text}{RESET}"

    def _write(self, line: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        print(line, file=stream)
