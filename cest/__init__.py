"""cest: a small self-registering test harness.

Declare tests with the ``cest`` decorator, then call ``cest.main.main()``
to run everything that was imported and exit with the number of tests
that did not succeed.
"""

from cest.core.models import Outcome, RunSummary, TestRecord
from cest.declare import (
    Failed,
    Pended,
    assert_equal,
    assert_none,
    assert_not,
    assert_not_equal,
    assert_not_none,
    assert_not_zero,
    assert_str_equal,
    assert_that,
    assert_zero,
    cest,
    fail,
    get_registry,
    pend,
    this_test,
)

__all__ = [
    "Failed",
    "Outcome",
    "Pended",
    "RunSummary",
    "TestRecord",
    "assert_equal",
    "assert_none",
    "assert_not",
    "assert_not_equal",
    "assert_not_none",
    "assert_not_zero",
    "assert_str_equal",
    "assert_that",
    "assert_zero",
    "cest",
    "fail",
    "get_registry",
    "pend",
    "this_test",
]
