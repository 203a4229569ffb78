"""Declaration surface for writing cest tests.

Tests are plain functions registered with the ``cest`` decorator.
Decorating a function enrolls it in the process-wide registry as soon
as the defining module is imported, so every imported test is known
before the runner starts::

    from cest import assert_equal, cest, pend

    @cest("LL", "allocate")
    def _():
        assert_equal(len(make_list()), 0)

    @cest("LL", "free")
    def _():
        pend()

A body that returns normally without a value succeeds. A body may also
return an Outcome explicitly. Assertions stop the body at the first
fact that does not hold and the test reports FAILURE.
"""

import logging
from collections.abc import Callable
from contextvars import ContextVar
from typing import Any, NoReturn

from cest.core.models import Outcome, TestRecord
from cest.core.registry import Registry

logger = logging.getLogger(__name__)

_default_registry = Registry()
_this_test: ContextVar[TestRecord | None] = ContextVar("cest_this_test", default=None)


class Failed(BaseException):
    """Raised inside a test body to stop it and report FAILURE.

    Derives from BaseException so a body's own ``except Exception``
    cannot swallow it.
    """


class Pended(BaseException):
    """Raised inside a test body to stop it and report PENDING."""


def get_registry() -> Registry:
    """Return the process-wide registry that ``cest`` enrolls into."""
    return _default_registry


def this_test() -> TestRecord:
    """Return the record of the test body currently running.

    Raises:
        RuntimeError: If called outside a test body.
    """
    record = _this_test.get()
    if record is None:
        raise RuntimeError("this_test() called outside of a running test")
    return record


def cest(
    namespace: str, name: str, registry: Registry | None = None
) -> Callable[[Callable[[], Any]], Callable[[], Any]]:
    """Declare a test and enroll it at import time.

    Args:
        namespace: Group name, think module name. Truncated to 31 characters.
        name: Test description. Truncated to 215 characters.
        registry: Registry to enroll into. Defaults to get_registry().

    Returns:
        A decorator that enrolls the body and returns it unchanged.
    """
    target = registry if registry is not None else _default_registry

    def decorator(body: Callable[[], Any]) -> Callable[[], Any]:
        def run() -> Outcome:
            token = _this_test.set(target.lookup(namespace, name))
            try:
                result = body()
            except Failed:
                return Outcome.FAILURE
            except Pended:
                return Outcome.PENDING
            finally:
                _this_test.reset(token)

            if result is None:
                return Outcome.SUCCESS
            if isinstance(result, Outcome):
                return result
            raise TypeError(
                f"Test {namespace}->{name} returned {result!r}, expected an Outcome"
            )

        target.enroll(TestRecord.create(namespace, name, run))
        return body

    return decorator


# ============================================================================
# Assertions
# ============================================================================


def fail() -> NoReturn:
    """Stop the running test and report FAILURE."""
    raise Failed()


def pend() -> NoReturn:
    """Stop the running test and report PENDING."""
    raise Pended()


def assert_that(fact: Any) -> None:
    if not fact:
        raise Failed()


def assert_not(fact: Any) -> None:
    assert_that(not fact)


def assert_equal(thing1: Any, thing2: Any) -> None:
    assert_that(thing1 == thing2)


def assert_not_equal(thing1: Any, thing2: Any) -> None:
    assert_that(thing1 != thing2)


def assert_str_equal(thing1: str, thing2: str) -> None:
    """Compare two strings by ordinal equality."""
    if not isinstance(thing1, str) or not isinstance(thing2, str):
        raise Failed()
    assert_that(thing1 == thing2)


def assert_zero(thing: Any) -> None:
    assert_equal(thing, 0)


def assert_not_zero(thing: Any) -> None:
    assert_not_equal(thing, 0)


def assert_none(thing: Any) -> None:
    assert_that(thing is None)


def assert_not_none(thing: Any) -> None:
    assert_that(thing is not None)
