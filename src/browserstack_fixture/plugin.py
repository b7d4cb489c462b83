"""
pytest plugin exposing BrowserStack as fixtures.

Fixtures:
    browserstack_tunnel: Shared tunnel manager; stops our tunnel after the session
    browserstack: Fresh BrowserStack facade per test
    browserstack_driver: Remote WebDriver session, quit after the test

The shared tunnel is also stopped when the test session finishes, so a
BrowserStack created directly in a test never outlives the run.
"""

import pytest

from .fixture import BrowserStack, stop_browserstack
from .tunnel.manager import get_tunnel_manager


def pytest_sessionfinish(session, exitstatus):
    stop_browserstack()


@pytest.fixture(scope="session")
def browserstack_tunnel():
    with get_tunnel_manager() as tunnel:
        yield tunnel


@pytest.fixture
def browserstack(browserstack_tunnel):
    return BrowserStack(tunnel=browserstack_tunnel)


@pytest.fixture
def browserstack_driver(browserstack):
    driver = browserstack.create_session()
    try:
        yield driver
    finally:
        driver.quit()
