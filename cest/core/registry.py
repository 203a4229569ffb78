"""Ordered, append-only registry of enrolled tests."""

import logging
from collections.abc import Iterator

from .models import (
    NAME_CAPACITY,
    NAMESPACE_CAPACITY,
    Outcome,
    TestRecord,
    truncate_identifier,
)

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """No enrolled record matches the requested (namespace, name) pair."""

    def __init__(self, namespace: str, name: str):
        super().__init__(f"No test enrolled as {namespace}->{name}")
        self.namespace = namespace
        self.name = name


class DuplicateRecordError(ValueError):
    """A record with the same (namespace, name) pair is already enrolled."""

    def __init__(self, record: TestRecord):
        super().__init__(f"Test {record.qualified_name} is already enrolled")
        self.record = record


class Registry:
    """Holds every enrolled TestRecord in enrollment order.

    Records are never removed or reordered once enrolled. Enrollment
    happens while test modules are imported; execution happens later,
    so the two phases never overlap and no locking is needed.
    """

    def __init__(self) -> None:
        self._records: list[TestRecord] = []
        self._outcomes: dict[int, Outcome] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TestRecord]:
        return iter(tuple(self._records))

    def enroll(self, record: TestRecord) -> None:
        """Append a record to the end of the run order.

        Raises:
            DuplicateRecordError: If (namespace, name) is already enrolled.
        """
        for existing in self._records:
            if existing.namespace == record.namespace and existing.name == record.name:
                raise DuplicateRecordError(record)
        self._records.append(record)
        logger.debug(f"Enrolled {record.qualified_name} (#{len(self._records)})")

    def lookup(self, namespace: str, name: str) -> TestRecord:
        """Return the first record enrolled as (namespace, name).

        The query is truncated the same way TestRecord.create truncates,
        so a test can find itself by its declared identity.

        Raises:
            RecordNotFoundError: If no record matches.
        """
        namespace = truncate_identifier(namespace, NAMESPACE_CAPACITY)
        name = truncate_identifier(name, NAME_CAPACITY)
        for record in self._records:
            if record.namespace == namespace and record.name == name:
                return record
        raise RecordNotFoundError(namespace, name)

    def execute(self, record: TestRecord) -> Outcome:
        """Invoke the record's callable and return what it produced.

        Exceptions raised by the callable propagate to the caller.
        """
        return record.function()

    def complete(self, record: TestRecord, outcome: Outcome) -> None:
        """Store the final outcome of an executed record.

        Raises:
            RecordNotFoundError: If the record is not enrolled here.
        """
        if not self._is_enrolled(record):
            raise RecordNotFoundError(record.namespace, record.name)
        self._outcomes[id(record)] = outcome

    def outcome_of(self, record: TestRecord) -> Outcome | None:
        """Return the completed outcome of a record, or None if it has not run."""
        return self._outcomes.get(id(record))

    def clear(self) -> None:
        """Drop every record and stored outcome."""
        self._records.clear()
        self._outcomes.clear()

    def _is_enrolled(self, record: TestRecord) -> bool:
        return any(existing is record for existing in self._records)
