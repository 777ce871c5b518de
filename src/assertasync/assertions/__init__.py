"""Assertion combinators and the bound ``Assert`` builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from assertasync.assertions.base import (
    Assertion,
    Failure,
    FailureKind,
    Location,
    Message,
    State,
)
from assertasync.assertions.eventually import (
    will_be_equal,
    will_be_false,
    will_be_none,
    will_be_released,
    will_be_true,
    will_not_be_none,
)
from assertasync.assertions.stays import stays_equal, stays_false, stays_true
from assertasync.config import DEFAULT_SETTINGS, Settings

if TYPE_CHECKING:
    from assertasync.reporting import Reporter


class Assert:
    """Builds assertions bound to one reporter and one settings object.

    ``AssertAsync.expect`` is an instance of this class; use it to build the
    assertions handed to a group invocation::

        assert_async(
            assert_async.expect.will_be_none(lambda: session.token),
            assert_async.expect.stays_false(lambda: session.closed),
        )
    """

    def __init__(self, reporter: Reporter, settings: Settings = DEFAULT_SETTINGS):
        self.reporter = reporter
        self.settings = settings

    def _bind(self, location: Location | None) -> dict[str, Any]:
        return {
            "reporter": self.reporter,
            "settings": self.settings,
            "location": location or Location.capture(),
        }

    def will_be_true(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return will_be_true(
            expression, timeout=timeout, message=message, **self._bind(location)
        )

    def will_be_false(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return will_be_false(
            expression, timeout=timeout, message=message, **self._bind(location)
        )

    def will_be_equal(
        self,
        expression1: Any,
        expression2: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return will_be_equal(
            expression1,
            expression2,
            timeout=timeout,
            message=message,
            **self._bind(location),
        )

    def will_be_none(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return will_be_none(
            expression, timeout=timeout, message=message, **self._bind(location)
        )

    def will_not_be_none(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return will_not_be_none(
            expression, timeout=timeout, message=message, **self._bind(location)
        )

    def will_be_released(
        self,
        target: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        kwargs = self._bind(location)
        return will_be_released(target, timeout=timeout, message=message, **kwargs)

    def stays_true(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return stays_true(
            expression, timeout=timeout, message=message, **self._bind(location)
        )

    def stays_false(
        self,
        expression: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return stays_false(
            expression, timeout=timeout, message=message, **self._bind(location)
        )

    def stays_equal(
        self,
        expression1: Any,
        expression2: Any,
        timeout: float | None = None,
        message: Message | None = None,
        location: Location | None = None,
    ) -> Assertion:
        return stays_equal(
            expression1,
            expression2,
            timeout=timeout,
            message=message,
            **self._bind(location),
        )


__all__ = [
    "Assert",
    "Assertion",
    "Failure",
    "FailureKind",
    "Location",
    "State",
    "stays_equal",
    "stays_false",
    "stays_true",
    "will_be_equal",
    "will_be_false",
    "will_be_none",
    "will_be_released",
    "will_be_true",
    "will_not_be_none",
]
