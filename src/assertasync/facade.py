"""Blocking entry points: group invocation and the direct-call helpers.

Use the module-level helpers for a single condition::

    will_be_equal(lambda: worker.processed, 5)

or an ``AssertAsync`` instance to evaluate several assertions together::

    assert_async = AssertAsync()
    assert_async(
        assert_async.expect.will_be_none(lambda: cache.get("key")),
        assert_async.expect.stays_false(lambda: worker.crashed),
    )
"""

from __future__ import annotations

import logging
from typing import Any

from assertasync.assertions import Assert
from assertasync.assertions.base import Assertion, Location, Message
from assertasync.config import DEFAULT_SETTINGS, Settings
from assertasync.reporting import CollectingReporter, Reporter
from assertasync.runner import Runner


class AssertAsync:
    """Binds a reporter and settings to the builders and the runner.

    Without an explicit reporter, failures are collected per invocation and
    raised as ``AsyncAssertionError`` once the whole group has resolved. With
    an explicit reporter, failures only go to that reporter.
    """

    def __init__(
        self,
        reporter: Reporter | None = None,
        settings: Settings | None = None,
        logger: logging.Logger | None = None,
    ):
        self._collector = CollectingReporter() if reporter is None else None
        self.reporter: Reporter = (
            reporter if reporter is not None else self._collector
        )
        self.settings = settings or DEFAULT_SETTINGS
        self.logger = logger
        self.expect = Assert(self.reporter, self.settings)

    def __call__(self, *assertions: Assertion | list[Assertion]) -> None:
        self.run(list(assertions))

    def run(self, assertions: Assertion | list[Any]) -> None:
        """Block until every assertion in the group is idle."""
        if self._collector is None:
            Runner(assertions, settings=self.settings, logger=self.logger).execute()
            return
        try:
            Runner(assertions, settings=self.settings, logger=self.logger).execute()
            self._collector.raise_for_failures()
        finally:
            self._collector.clear()

    def will_be_true(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(self.expect.will_be_true(expression, timeout, message, location))

    def will_be_false(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(self.expect.will_be_false(expression, timeout, message, location))

    def will_be_equal(
        self,
        expression1: Any,
        expression2: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(
            self.expect.will_be_equal(
                expression1, expression2, timeout, message, location
            )
        )

    def will_be_none(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(self.expect.will_be_none(expression, timeout, message, location))

    def will_not_be_none(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(self.expect.will_not_be_none(expression, timeout, message, location))

    def will_be_released(
        self,
        target: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        """Check that ``target`` is freed once this call drops its reference.

        The caller must not keep a reference of its own; pass the object out
        of its container (``holder.pop()``) or pass a ``weakref.ref``.
        """
        assertion = self.expect.will_be_released(target, timeout, message, location)
        del target
        self.run(assertion)

    def stays_true(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(self.expect.stays_true(expression, timeout, message, location))

    def stays_false(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(self.expect.stays_false(expression, timeout, message, location))

    def stays_equal(
        self,
        expression1: Any,
        expression2: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> None:
        self.run(
            self.expect.stays_equal(expression1, expression2, timeout, message, location)
        )


def will_be_true(
    expression: Any, settings: Settings | None = None, **kwargs: Any
) -> None:
    AssertAsync(settings=settings).will_be_true(expression, **kwargs)


def will_be_false(
    expression: Any, settings: Settings | None = None, **kwargs: Any
) -> None:
    AssertAsync(settings=settings).will_be_false(expression, **kwargs)


def will_be_equal(
    expression1: Any,
    expression2: Any,
    settings: Settings | None = None,
    **kwargs: Any,
) -> None:
    AssertAsync(settings=settings).will_be_equal(expression1, expression2, **kwargs)


def will_be_none(
    expression: Any, settings: Settings | None = None, **kwargs: Any
) -> None:
    AssertAsync(settings=settings).will_be_none(expression, **kwargs)


def will_not_be_none(
    expression: Any, settings: Settings | None = None, **kwargs: Any
) -> None:
    AssertAsync(settings=settings).will_not_be_none(expression, **kwargs)


def will_be_released(
    target: Any, settings: Settings | None = None, **kwargs: Any
) -> None:
    assert_async = AssertAsync(settings=settings)
    assertion = assert_async.expect.will_be_released(target, **kwargs)
    del target
    assert_async.run(assertion)


def stays_true(
    expression: Any, settings: Settings | None = None, **kwargs: Any
) -> None:
    AssertAsync(settings=settings).stays_true(expression, **kwargs)


def stays_false(
    expression: Any, settings: Settings | None = None, **kwargs: Any
) -> None:
    AssertAsync(settings=settings).stays_false(expression, **kwargs)


def stays_equal(
    expression1: Any,
    expression2: Any,
    settings: Settings | None = None,
    **kwargs: Any,
) -> None:
    AssertAsync(settings=settings).stays_equal(expression1, expression2, **kwargs)
