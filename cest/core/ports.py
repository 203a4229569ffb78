"""Port interfaces for the cest test harness.

These abstract base classes define the boundaries between the core
registry/runner and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - ReporterPort: Report per-test status and the run summary

2. **Driving Ports** (adapters/external systems call into core)
   - RunPort: Entry point for executing every enrolled test
"""

from abc import ABC, abstractmethod

from .models import Outcome, RunSummary, TestRecord


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ReporterPort(ABC):
    """Port for reporting test results as the run progresses.

    The runner calls report_test once per record, in enrollment order,
    and report_summary exactly once after the last record.
    """

    @abstractmethod
    def report_test(self, record: TestRecord, outcome: Outcome) -> None:
        """Report the outcome of a single test.

        Args:
            record: The record that was executed.
            outcome: The tri-state result it produced.
        """

    @abstractmethod
    def report_summary(self, summary: RunSummary) -> None:
        """Report the aggregate result of the run.

        Args:
            summary: Tallies for the whole run.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class RunPort(ABC):
    """Port for running the enrolled tests."""

    @abstractmethod
    def run_all(self) -> RunSummary:
        """Execute every enrolled test once, in enrollment order.

        Returns:
            RunSummary whose exit_code is the number of tests that
            did not report SUCCESS.
        """
