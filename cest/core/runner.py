"""Run loop for the cest test harness.

This module implements the single pass over the registry that executes
every enrolled test, reports each result, and tallies the run.
"""

import logging

from .models import Outcome, RunSummary, TestRecord
from .ports import ReporterPort, RunPort
from .registry import Registry

logger = logging.getLogger(__name__)


class Runner(RunPort):
    """Executes every enrolled test once, in enrollment order.

    This service orchestrates:
    - Executing each record through the registry
    - Recording the outcome on the registry
    - Reporting each test and the final summary
    """

    def __init__(
        self,
        registry: Registry,
        reporter: ReporterPort,
        catch_exceptions: bool = True,
    ):
        self.registry = registry
        self.reporter = reporter
        self.catch_exceptions = catch_exceptions

    def run_all(self) -> RunSummary:
        """Run all tests and return the tallies.

        The summary's exit_code is total - successes.
        """
        total = 0
        successes = 0
        failures = 0
        pending = 0
        results: list[tuple[TestRecord, Outcome]] = []

        logger.info(f"Running {len(self.registry)} enrolled tests")

        for record in self.registry:
            outcome = self._run_one(record)
            self.registry.complete(record, outcome)
            results.append((record, outcome))

            total += 1
            if outcome is Outcome.SUCCESS:
                successes += 1
            elif outcome is Outcome.PENDING:
                pending += 1
            else:
                failures += 1

            self.reporter.report_test(record, outcome)

        summary = RunSummary(
            total=total,
            successes=successes,
            failures=failures,
            pending=pending,
            results=tuple(results),
        )
        self.reporter.report_summary(summary)

        logger.info(
            f"Run finished: {successes} succeeded, {failures} failed, "
            f"{pending} pending (of {total})"
        )
        return summary

    def _run_one(self, record: TestRecord) -> Outcome:
        """Execute a record, converting faults to FAILURE when configured."""
        if not self.catch_exceptions:
            return self._checked(record, self.registry.execute(record))

        try:
            return self._checked(record, self.registry.execute(record))
        except Exception as e:
            logger.error(
                f"Test {record.qualified_name} raised {type(e).__name__}: {e}",
                exc_info=True,
            )
            return Outcome.FAILURE

    @staticmethod
    def _checked(record: TestRecord, outcome: object) -> Outcome:
        if not isinstance(outcome, Outcome):
            raise TypeError(
                f"Test {record.qualified_name} returned {outcome!r}, "
                "expected an Outcome"
            )
        return outcome
