"""
Global constants and configuration defaults.
Only depends on errors - safe to import from anywhere.
"""

import os

from .errors import BrowserStackConfigError


def _env_number(name: str, default: str, cast):
    raw = (os.getenv(name) or "").strip() or default
    try:
        return cast(raw)
    except ValueError as e:
        raise BrowserStackConfigError(f"{name} must be a number, got {raw!r}") from e


# ============================================================================
# Remote Hub
# ============================================================================

HUB_HOST = "hub-cloud.browserstack.com"
"""Host of the BrowserStack Selenium hub."""

HUB_PATH = "/wd/hub"
"""Path of the WebDriver endpoint on the hub."""


# ============================================================================
# BrowserStack Local Tunnel
# ============================================================================

TUNNEL_HOST = "127.0.0.1"
"""Loopback address a running BrowserStack Local binary listens on."""

TUNNEL_PORT = _env_number("BROWSERSTACK_LOCAL_PORT", "45691", int)
"""Port BrowserStack Local binds while it is running."""

PROBE_TIMEOUT_SECS = _env_number("BROWSERSTACK_PROBE_TIMEOUT", "0.5", float)
"""Connect timeout for the tunnel port probe in seconds."""

DEFAULT_LOG_FILE = os.path.join("tests", "Browser", "console", "browserstack.log")
"""Tunnel log file, relative to the application base path."""


# ============================================================================
# Configuration Sources
# ============================================================================

ACCESS_KEY_ENV = "BROWSERSTACK_ACCESS_KEY"
"""Environment variable consulted when no access key is configured."""

CONFIG_SECTION = "services.browserstack"
"""Dotted path of the BrowserStack section in the application config."""

LOCAL_CAPABILITY = "browserstack.local"
"""Capability telling the hub to route traffic through the local tunnel."""


__all__ = [
    "HUB_HOST",
    "HUB_PATH",
    "TUNNEL_HOST",
    "TUNNEL_PORT",
    "PROBE_TIMEOUT_SECS",
    "DEFAULT_LOG_FILE",
    "ACCESS_KEY_ENV",
    "CONFIG_SECTION",
    "LOCAL_CAPABILITY",
]
