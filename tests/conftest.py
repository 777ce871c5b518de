"""Pytest configuration and fixtures."""

import logging

import pytest

from assertasync.config import Settings

pytest_plugins = ["pytester", "assertasync.pytest_plugin"]


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up assertasync loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("assertasync")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fast_settings():
    """Coarse evaluation period so fake-clock loops stay short."""
    return Settings(evaluation_period=0.01)
