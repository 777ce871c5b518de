from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Iterable

from assertasync.assertions.base import Assertion, State
from assertasync.config import DEFAULT_SETTINGS, Settings


@dataclass
class RunSummary:
    total: int
    elapsed: float
    ticks: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _flatten(assertions: Assertion | Iterable[Any]) -> list[Assertion]:
    if isinstance(assertions, Assertion):
        return [assertions]
    flat: list[Assertion] = []
    for item in assertions:
        if isinstance(item, Assertion):
            flat.append(item)
        elif isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        else:
            raise TypeError(f"Expected Assertion, got {type(item).__name__}")
    return flat


class Runner:
    """Evaluates a group of assertions until every one of them is idle.

    Blocks the calling thread. Each tick evaluates every still-active
    assertion with the same elapsed time, then sleeps one evaluation period.
    Every assertion resolves within its own timeout, so the loop always ends.
    """

    def __init__(
        self,
        assertions: Assertion | Iterable[Any],
        settings: Settings = DEFAULT_SETTINGS,
        logger: logging.Logger | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.assertions = _flatten(assertions)
        self.settings = settings
        self.logger = logger or logging.getLogger("assertasync.runner")
        self.clock = clock
        self.sleep = sleep

    def execute(self) -> RunSummary:
        """Run the polling loop. Returns once all assertions have resolved."""
        active = list(self.assertions)
        total = len(active)
        period = self.settings.evaluation_period
        self.logger.debug(f"Evaluating {total} assertion(s), period={period}s")

        start = self.clock()
        elapsed = 0.0
        ticks = 0
        while active:
            elapsed = self.clock() - start
            ticks += 1
            active = [a for a in active if a.evaluate(elapsed) is State.ACTIVE]
            if active:
                self.sleep(period)

        self.logger.debug(
            f"Resolved {total} assertion(s) in {elapsed:.4f}s over {ticks} tick(s)"
        )
        return RunSummary(total=total, elapsed=elapsed, ticks=ticks)


def run_assertions(
    assertions: Assertion | Iterable[Any],
    settings: Settings = DEFAULT_SETTINGS,
    **kwargs: Any,
) -> RunSummary:
    return Runner(assertions, settings=settings, **kwargs).execute()
