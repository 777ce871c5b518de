"""Polling assertions for conditions that become true asynchronously."""

from assertasync.assertions import (
    Assert,
    Assertion,
    Failure,
    FailureKind,
    Location,
    State,
)
from assertasync.config import DEFAULT_SETTINGS, Settings, load_settings
from assertasync.facade import (
    AssertAsync,
    stays_equal,
    stays_false,
    stays_true,
    will_be_equal,
    will_be_false,
    will_be_none,
    will_be_released,
    will_be_true,
    will_not_be_none,
)
from assertasync.reporting import (
    AsyncAssertionError,
    CallbackReporter,
    CollectingReporter,
    LoggingReporter,
    Reporter,
)
from assertasync.runner import Runner, RunSummary, run_assertions

__all__ = [
    "Assert",
    "AssertAsync",
    "Assertion",
    "AsyncAssertionError",
    "CallbackReporter",
    "CollectingReporter",
    "DEFAULT_SETTINGS",
    "Failure",
    "FailureKind",
    "Location",
    "LoggingReporter",
    "Reporter",
    "RunSummary",
    "Runner",
    "Settings",
    "State",
    "load_settings",
    "run_assertions",
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
