"""Assertions that wait for a condition to become true.

Every expression is re-evaluated on each tick until it succeeds or the
timeout elapses, so it must not have side effects that affect its own
result.
"""

from __future__ import annotations

import gc
import weakref
from typing import TYPE_CHECKING, Any

from assertasync.assertions.base import (
    Assertion,
    Expression,
    Failure,
    FailureKind,
    Location,
    Message,
    State,
    as_expression,
    render_message,
)
from assertasync.config import DEFAULT_SETTINGS, Settings

if TYPE_CHECKING:
    from assertasync.reporting import Reporter


def check(expression: Expression) -> tuple[bool, Exception | None]:
    """Evaluate an expression, turning an exception into a failed check."""
    try:
        return bool(expression()), None
    except Exception as exc:
        return False, exc


def describe(expression: Expression) -> str:
    try:
        return repr(expression())
    except Exception as exc:
        return f"<raised {type(exc).__name__}: {exc}>"


def with_error(message: str, error: Exception | None) -> str:
    if error is None:
        return message
    return f"{message} (last error: {type(error).__name__}: {error})"


def will_be_true(
    expression: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    """Periodically check that the expression becomes truthy.

    Fails if the expression is still falsy once ``timeout`` seconds have
    elapsed. An expression that raises counts as falsy; if the final
    evaluation raised, the exception is appended to the failure message.
    """
    expression = as_expression(expression)
    if timeout is None:
        timeout = settings.default_timeout
    if message is None:
        message = "Failed to become `TRUE`"
    location = location or Location.capture()

    def body(elapsed_time: float) -> State:
        passed, error = check(expression)
        if passed:
            return State.IDLE
        if elapsed_time < timeout:
            return State.ACTIVE

        reporter.report(
            Failure(
                message=with_error(
                    render_message(message, "Failed to become `TRUE`"), error
                ),
                location=location,
                kind=FailureKind.TIMED_OUT,
                elapsed=elapsed_time,
            )
        )
        return State.IDLE

    return Assertion(body, description=f"will_be_true at {location}")


def will_be_false(
    expression: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    expression = as_expression(expression)
    return will_be_true(
        lambda: not expression(),
        reporter=reporter,
        timeout=timeout,
        message="Failed to become `FALSE`" if message is None else message,
        location=location or Location.capture(),
        settings=settings,
    )


def will_be_equal(
    expression1: Any,
    expression2: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    """Periodically check that both expressions evaluate to equal values.

    The default message shows both values as they were when the timeout hit.
    """
    expression1 = as_expression(expression1)
    expression2 = as_expression(expression2)
    if message is None:

        def message() -> str:
            return f"{describe(expression1)} not equal to {describe(expression2)}"

    return will_be_true(
        lambda: expression1() == expression2(),
        reporter=reporter,
        timeout=timeout,
        message=message,
        location=location or Location.capture(),
        settings=settings,
    )


def will_be_none(
    expression: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    expression = as_expression(expression)
    return will_be_true(
        lambda: expression() is None,
        reporter=reporter,
        timeout=timeout,
        message="Failed to become `None`" if message is None else message,
        location=location or Location.capture(),
        settings=settings,
    )


def will_not_be_none(
    expression: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    expression = as_expression(expression)
    return will_be_true(
        lambda: expression() is not None,
        reporter=reporter,
        timeout=timeout,
        message="Failed to not be `None`" if message is None else message,
        location=location or Location.capture(),
        settings=settings,
    )


def will_be_released(
    target: Any,
    *,
    reporter: Reporter,
    timeout: float | None = None,
    message: Message | None = None,
    location: Location | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Assertion:
    """Check that nothing else keeps ``target`` alive.

    ``target`` is either the object itself or a ``weakref.ref`` to it. Only a
    weak reference is kept, so the caller must drop its own references (for
    example by passing ``holder.pop("obj")``) for the check to pass.
    """
    location = location or Location.capture()
    if message is None:
        message = "Failed to be released from memory"

    if isinstance(target, weakref.ref):
        ref = target
    else:
        try:
            ref = weakref.ref(target)
        except TypeError:
            return _unobservable(type(target).__name__, reporter, location)
    del target

    collect = settings.collect_garbage

    def released() -> bool:
        nonlocal collect
        if collect:
            # Builder frames are gone by the first tick, so cycles can go now.
            collect = False
            gc.collect()
        return ref() is None

    return will_be_true(
        released,
        reporter=reporter,
        timeout=timeout,
        message=message,
        location=location,
        settings=settings,
    )


def _unobservable(type_name: str, reporter: Reporter, location: Location) -> Assertion:
    def body(elapsed_time: float) -> State:
        reporter.report(
            Failure(
                message=f"Objects of type {type_name!r} cannot be weakly referenced",
                location=location,
                kind=FailureKind.TIMED_OUT,
                elapsed=elapsed_time,
            )
        )
        return State.IDLE

    return Assertion(body, description=f"will_be_released at {location}")
