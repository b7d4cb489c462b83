"""
Run BrowserStack from your tests.

A test run shares one BrowserStack Local tunnel. The first fixture that
needs it starts it, unless a tunnel is already listening on the local
port, in which case it belongs to someone else and is never stopped by us.
Each fixture instance keeps its own credentials and capabilities, loaded
once from the application config (services.browserstack) and overridable
per test.

With the pytest plugin installed, the tunnel is stopped when the session
ends:

    def test_homepage(browserstack_driver):
        browserstack_driver.get("http://localhost:8000")
"""

from .errors import BrowserStackConfigError, UnknownConfigKeyError, MissingCredentialError
from .fixture import BrowserStack, stop_browserstack
from .tunnel import TunnelManager, get_tunnel_manager, reset_tunnel_manager

__all__ = [
    "BrowserStack",
    "stop_browserstack",
    "TunnelManager",
    "get_tunnel_manager",
    "reset_tunnel_manager",
    "BrowserStackConfigError",
    "UnknownConfigKeyError",
    "MissingCredentialError",
]
