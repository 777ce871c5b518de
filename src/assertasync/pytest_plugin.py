"""pytest integration.

Enable with ``pytest_plugins = ["assertasync.pytest_plugin"]`` in a
conftest. The ``assert_async`` fixture records failures without stopping the
test body; the test fails after its call phase if anything was recorded.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from assertasync.config import DEFAULT_SETTINGS, Settings, load_settings
from assertasync.facade import AssertAsync
from assertasync.reporting import AsyncAssertionError, CollectingReporter
from assertasync.verbose import setup_logger

reporter_key = pytest.StashKey[CollectingReporter]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("assertasync", "polling assertions")
    group.addoption(
        "--assertasync-config",
        default=None,
        help="YAML file with assertasync settings (timeouts, evaluation period)",
    )
    group.addoption(
        "--assertasync-debug-log",
        default=None,
        help="Write assertasync debug output to this file",
    )
    parser.addini("assertasync_config", "YAML file with assertasync settings")


def pytest_configure(config: pytest.Config) -> None:
    debug_log = config.getoption("assertasync_debug_log")
    if debug_log:
        setup_logger(Path(debug_log))


@pytest.fixture(scope="session")
def assertasync_settings(pytestconfig: pytest.Config) -> Settings:
    configured = pytestconfig.getoption("assertasync_config") or pytestconfig.getini(
        "assertasync_config"
    )
    if not configured:
        return DEFAULT_SETTINGS
    path = Path(configured)
    if not path.is_absolute():
        path = pytestconfig.rootpath / path
    return load_settings(path)


@pytest.fixture
def assert_async(
    request: pytest.FixtureRequest, assertasync_settings: Settings
) -> AssertAsync:
    reporter = CollectingReporter()
    request.node.stash[reporter_key] = reporter
    return AssertAsync(reporter=reporter, settings=assertasync_settings)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item):
    reporter = item.stash.get(reporter_key, None)
    try:
        result = yield
    except BaseException:
        # The body failed first; keep the recorded failures in the report.
        if reporter is not None and reporter.has_failures:
            item.add_report_section(
                "call", "assertasync", "\n".join(str(f) for f in reporter.failures)
            )
        raise
    if reporter is not None and reporter.has_failures:
        raise AsyncAssertionError(reporter.failures)
    return result
