"""Base data structures for the assertion system."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable

_PACKAGE_DIR = Path(__file__).resolve().parent.parent

Expression = Callable[[], Any]
Message = str | Callable[[], str]


class State(str, Enum):
    ACTIVE = "active"
    IDLE = "idle"


class FailureKind(str, Enum):
    TIMED_OUT = "timed_out"
    BROKE_EARLY = "broke_early"


@dataclass(frozen=True)
class Location:
    """Source location an assertion is attributed to."""

    file: str
    line: int

    @classmethod
    def capture(cls) -> Location:
        """Return the location of the first caller outside this package."""
        frame = inspect.currentframe()
        try:
            while frame is not None:
                filename = frame.f_code.co_filename
                if not _inside_package(filename):
                    return cls(file=filename, line=frame.f_lineno)
                frame = frame.f_back
        finally:
            del frame
        return cls(file="<unknown>", line=0)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def _inside_package(filename: str) -> bool:
    try:
        Path(filename).resolve().relative_to(_PACKAGE_DIR)
    except (ValueError, OSError):
        return False
    return True


@dataclass
class Failure:
    """A single report delivered to a reporter.

    Attributes:
        message: Human-readable description of what went wrong.
        location: Where the failing assertion was created.
        kind: TIMED_OUT when the condition never held within the timeout,
            BROKE_EARLY when it stopped holding before the timeout elapsed.
        elapsed: Seconds since the group started when the failure was seen.
    """

    message: str
    location: Location
    kind: FailureKind
    elapsed: float = 0.0

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class Assertion:
    """A deferred, re-evaluatable check.

    Not meant to be created directly; use the combinators in
    ``assertasync.assertions``. ``body`` receives the elapsed time in seconds
    and returns the resulting state. Once the body has returned IDLE it is
    never called again.
    """

    def __init__(self, body: Callable[[float], State], description: str = ""):
        self._body = body
        self.description = description
        self.state = State.ACTIVE

    def evaluate(self, elapsed_time: float) -> State:
        if self.state is State.IDLE:
            return State.IDLE
        self.state = State(self._body(elapsed_time))
        return self.state

    def __repr__(self) -> str:
        return f"Assertion({self.description!r}, state={self.state.value})"


def as_expression(value: Any) -> Expression:
    """Wrap a non-callable value in a constant expression."""
    if callable(value):
        return value
    return lambda: value


def render_message(message: Message, fallback: str) -> str:
    """Render a lazy message, falling back to ``fallback`` if rendering raises."""
    if not callable(message):
        return message
    try:
        return str(message())
    except Exception as exc:
        return f"{fallback} (message raised {type(exc).__name__}: {exc})"
