"""Tests for settings loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from assertasync.config import DEFAULT_SETTINGS, Settings, load_settings


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "assertasync.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    assert DEFAULT_SETTINGS.default_timeout == 1.0
    assert DEFAULT_SETTINGS.default_stays_timeout == 0.1
    assert DEFAULT_SETTINGS.evaluation_period == 1e-6
    assert DEFAULT_SETTINGS.collect_garbage is True


def test_load_top_level_settings(tmp_yaml):
    path = tmp_yaml("""\
        default_timeout: 5
        evaluation_period: 0.01
    """)
    settings = load_settings(path)
    assert settings.default_timeout == 5.0
    assert settings.evaluation_period == 0.01
    assert settings.default_stays_timeout == 0.1


def test_load_nested_settings(tmp_yaml):
    path = tmp_yaml("""\
        assertasync:
          default_stays_timeout: 0.5
          collect_garbage: false
    """)
    settings = load_settings(path)
    assert settings.default_stays_timeout == 0.5
    assert settings.collect_garbage is False


def test_empty_file_yields_defaults(tmp_yaml):
    assert load_settings(tmp_yaml("")) == Settings()


def test_environment_variables_are_expanded(tmp_yaml, monkeypatch):
    monkeypatch.setenv("CI_TIMEOUT", "3.5")
    monkeypatch.delenv("CI_STAYS_TIMEOUT", raising=False)
    path = tmp_yaml("""\
        default_timeout: ${CI_TIMEOUT}
        default_stays_timeout: ${CI_STAYS_TIMEOUT:-0.2}
    """)
    settings = load_settings(path)
    assert settings.default_timeout == 3.5
    assert settings.default_stays_timeout == 0.2


def test_missing_variables_are_listed_together(tmp_yaml, monkeypatch):
    monkeypatch.delenv("NOPE_ONE", raising=False)
    monkeypatch.delenv("NOPE_TWO", raising=False)
    path = tmp_yaml("""\
        default_timeout: ${NOPE_ONE}
        evaluation_period: ${NOPE_TWO}
    """)
    with pytest.raises(ValueError) as exc_info:
        load_settings(path)
    message = str(exc_info.value)
    assert "missing environment variables" in message
    assert "NOPE_ONE" in message
    assert "NOPE_TWO" in message


def test_unknown_keys_are_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_settings(tmp_yaml("polling_interval: 0.1\n"))


def test_negative_timeouts_are_rejected():
    with pytest.raises(ValidationError):
        Settings(default_timeout=-1)


def test_non_mapping_is_rejected(tmp_yaml):
    with pytest.raises(ValueError, match="expected a mapping"):
        load_settings(tmp_yaml("- 1\n- 2\n"))


def test_settings_are_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.default_timeout = 10
