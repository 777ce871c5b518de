"""Inverse assertions: the condition must hold for the whole timeout window."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from assertasync.assertions.base import (
    Assertion,
    Failure,
    FailureKind,
    Location,
    Message,
    State,
    as_expression,
    render_message,
)
from assertasync.assertions.eventually import check, describe, with_error
from assertasync.config import DEFAULT_SETTINGS, Settings

if TYPE_CHECKING:
    from assertasync.reporting import Reporter


def stays_true(
    expression: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    """Periodically check that the expression stays truthy for ``timeout`` seconds.

    Fails as soon as the expression turns falsy (or raises) before the timeout
    elapses, not at the end of the window.
    """
    expression = as_expression(expression)
    if timeout is None:
        timeout = settings.default_stays_timeout
    if message is None:
        message = "Failed to stay `TRUE`"
    location = location or Location.capture()

    def body(elapsed_time: float) -> State:
        if elapsed_time >= timeout:
            return State.IDLE

        passed, error = check(expression)
        if passed:
            return State.ACTIVE

        reporter.report(
            Failure(
                message=with_error(
                    render_message(message, "Failed to stay `TRUE`"), error
                ),
                location=location,
                kind=FailureKind.BROKE_EARLY,
                elapsed=elapsed_time,
            )
        )
        return State.IDLE

    return Assertion(body, description=f"stays_true at {location}")


def stays_false(
    expression: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    expression = as_expression(expression)
    return stays_true(
        lambda: not expression(),
        reporter=reporter,
        timeout=timeout,
        message="Failed to stay `FALSE`" if message is None else message,
        location=location or Location.capture(),
        settings=settings,
    )


def stays_equal(
    expression1: Any,
    expression2: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    expression1 = as_expression(expression1)
    expression2 = as_expression(expression2)
    if message is None:

        def message() -> str:
            return (
                f"{describe(expression1)} failed to stay equal to "
                f"{describe(expression2)}"
            )

    return stays_true(
        lambda: expression1() == expression2(),
        reporter=reporter,
        timeout=timeout,
        message=message,
        location=location or Location.capture(),
        settings=settings,
    )
