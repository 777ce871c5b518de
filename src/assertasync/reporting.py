"""Failure sinks that receive reports from resolved assertions."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from assertasync.assertions.base import Failure


class AsyncAssertionError(AssertionError):
    """Raised on behalf of the host test framework when reports were collected."""

    def __init__(self, failures: list[Failure]):
        self.failures = list(failures)
        lines = [str(f) for f in self.failures]
        if len(lines) == 1:
            text = lines[0]
        else:
            text = f"{len(lines)} async assertions failed:\n" + "\n".join(
                f"  {line}" for line in lines
            )
        super().__init__(text)


class Reporter(Protocol):
    def report(self, failure: Failure) -> None: ...


class CollectingReporter:
    """Records failures in the order they were reported."""

    def __init__(self) -> None:
        self.failures: list[Failure] = []

    def report(self, failure: Failure) -> None:
        self.failures.append(failure)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def clear(self) -> None:
        self.failures.clear()

    def raise_for_failures(self) -> None:
        if self.failures:
            raise AsyncAssertionError(self.failures)


class LoggingReporter:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("assertasync.reporting")

    def report(self, failure: Failure) -> None:
        self.logger.error(
            f"{failure.location}: {failure.message} "
            f"({failure.kind.value} after {failure.elapsed:.3f}s)"
        )


class CallbackReporter:
    """Adapts a ``callback(message, file, line)`` function to a reporter."""

    def __init__(self, callback: Callable[[str, str, int], None]):
        self.callback = callback

    def report(self, failure: Failure) -> None:
        self.callback(failure.message, failure.location.file, failure.location.line)
