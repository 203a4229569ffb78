"""Fake implementations of core ports for testing.

These in-memory implementations allow the runner to be tested
without writing to the terminal:

- FakeReporter: Captured per-test and summary reports for assertion
"""

from .reporter import FakeReporter

__all__ = [
    "FakeReporter",
]
