from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field

SETTINGS_KEY = "assertasync"


class Settings(BaseModel):
    """Timing configuration read by the combinators and the runner.

    Attributes:
        default_timeout: Seconds the ``will_*`` assertions wait for success.
        default_stays_timeout: Seconds the ``stays_*`` assertions require the
            condition to hold. Longer values slow the whole suite down.
        evaluation_period: Seconds slept between two evaluation ticks.
        collect_garbage: Run one garbage collection when ``will_be_released``
            drops its reference, so cycles do not count as leaks.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_timeout: float = Field(default=1.0, ge=0)
    default_stays_timeout: float = Field(default=0.1, ge=0)
    evaluation_period: float = Field(default=1e-6, ge=0)
    collect_garbage: bool = True


DEFAULT_SETTINGS = Settings()


def _expand(raw: dict[str, Any]) -> dict[str, Any]:
    """Expand ${VAR} references in string values.

    Raises ValueError listing every missing variable so they can all be fixed
    at once.
    """
    expanded: dict[str, Any] = {}
    missing: list[str] = []
    for key, value in raw.items():
        if not isinstance(value, str):
            expanded[key] = value
            continue
        try:
            expanded[key] = expandvars(value, nounset=True)
        except Exception:
            # Variable is missing and has no default
            missing.append(f"  {key}={value}")

    if missing:
        details = "\n".join(missing)
        raise ValueError(f"Settings have missing environment variables:\n{details}")

    return expanded


def load_settings(path: Path) -> Settings:
    """Load and validate settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")
    if SETTINGS_KEY in raw:
        raw = raw[SETTINGS_KEY] or {}
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: '{SETTINGS_KEY}' must be a mapping")

    return Settings(**_expand(raw))
