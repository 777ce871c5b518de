"""Tests for verbose logging."""

import logging

from assertasync.runner import Runner
from assertasync.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path):
    """Logger should create the debug file and log at DEBUG."""
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    handler_types = [type(h).__name__ for h in logger.handlers]
    assert sorted(handler_types) == ["FileHandler", "StreamHandler"]


def test_no_file_and_not_verbose_has_no_handlers():
    logger = setup_logger()
    assert logger.handlers == []


def test_logger_creates_parent_directories(tmp_path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file)

    assert debug_file.exists()


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logger(debug_file=tmp_path / "first.log")
    logger = setup_logger(debug_file=tmp_path / "second.log")

    assert len(logger.handlers) == 1
    logger.debug("only second")
    assert "only second" not in (tmp_path / "first.log").read_text()


def test_runner_output_reaches_debug_file(tmp_path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file)

    Runner([]).execute()

    assert "Evaluating 0 assertion(s)" in debug_file.read_text()
