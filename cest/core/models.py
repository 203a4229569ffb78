"""Domain models for the cest test harness.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

NAMESPACE_CAPACITY = 31
NAME_CAPACITY = 215


class Outcome(Enum):
    """Result of running a single test.

    There is no payload: a failing test carries no message or location.
    """

    FAILURE = "failure"
    SUCCESS = "success"
    PENDING = "pending"


TestFunction = Callable[[], Outcome]


def truncate_identifier(text: str, capacity: int) -> str:
    """Return the longest prefix of text that fits in capacity characters."""
    return text[:capacity]


@dataclass(frozen=True)
class TestRecord:
    """One declared test: its identity and a handle to its body.

    The record does not own the callable; it only keeps a reference
    to invoke it.
    """

    __test__ = False  # not a pytest test class

    namespace: str
    name: str
    function: TestFunction = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate record invariants on creation."""
        if not self.namespace or not self.namespace.strip():
            raise ValueError("namespace must be a non-empty string")
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        if len(self.namespace) > NAMESPACE_CAPACITY:
            raise ValueError(
                f"namespace exceeds {NAMESPACE_CAPACITY} characters; "
                "use TestRecord.create() to truncate"
            )
        if len(self.name) > NAME_CAPACITY:
            raise ValueError(
                f"name exceeds {NAME_CAPACITY} characters; "
                "use TestRecord.create() to truncate"
            )
        if not callable(self.function):
            raise TypeError("function must be callable")

    @classmethod
    def create(
        cls, namespace: str, name: str, function: TestFunction
    ) -> "TestRecord":
        """Build a record, silently truncating namespace and name to capacity."""
        return cls(
            namespace=truncate_identifier(namespace, NAMESPACE_CAPACITY),
            name=truncate_identifier(name, NAME_CAPACITY),
            function=function,
        )

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}->{self.name}"


@dataclass(frozen=True)
class RunSummary:
    """Aggregate result of one pass over the registry."""

    total: int
    successes: int
    failures: int
    pending: int
    results: tuple[tuple[TestRecord, Outcome], ...] = ()

    def __post_init__(self) -> None:
        """Validate that the tallies add up."""
        if min(self.total, self.successes, self.failures, self.pending) < 0:
            raise ValueError("counts must be non-negative")
        if self.successes + self.failures + self.pending != self.total:
            raise ValueError(
                f"outcome counts ({self.successes} + {self.failures} + "
                f"{self.pending}) do not add up to total {self.total}"
            )

    @property
    def exit_code(self) -> int:
        """Number of tests that did not succeed; pending counts against the run."""
        return self.total - self.successes

    @property
    def all_succeeded(self) -> bool:
        return self.exit_code == 0
