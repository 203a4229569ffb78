"""Core domain logic for the cest test harness.

This package contains zero external dependencies and represents
the registry and run loop. Console output and configuration are
handled outside the core.
"""

from .models import (
    NAME_CAPACITY,
    NAMESPACE_CAPACITY,
    Outcome,
    RunSummary,
    TestFunction,
    TestRecord,
    truncate_identifier,
)
from .registry import DuplicateRecordError, RecordNotFoundError, Registry
from .runner import Runner

__all__ = [
    "NAME_CAPACITY",
    "NAMESPACE_CAPACITY",
    "DuplicateRecordError",
    "Outcome",
    "RecordNotFoundError",
    "Registry",
    "RunSummary",
    "Runner",
    "TestFunction",
    "TestRecord",
    "truncate_identifier",
]
