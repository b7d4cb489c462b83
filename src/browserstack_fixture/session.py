"""Remote WebDriver URL, capabilities and session creation."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from selenium import webdriver
from selenium.webdriver import DesiredCapabilities

from .config.environment import access_key_chain
from .config.paths import mask_url
from .constants import HUB_HOST, HUB_PATH, LOCAL_CAPABILITY
from .errors import MissingCredentialError

import logging
logger = logging.getLogger(__name__)


_OPTIONS_BY_BROWSER = {
    "chrome": webdriver.ChromeOptions,
    "firefox": webdriver.FirefoxOptions,
    "microsoftedge": webdriver.EdgeOptions,
    "edge": webdriver.EdgeOptions,
    "safari": webdriver.SafariOptions,
}


@dataclass
class SessionDescriptor:
    """Everything needed to open one remote session. Treat url as a secret."""

    url: str
    capabilities: dict = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"SessionDescriptor(url={mask_url(self.url)!r}, capabilities={self.capabilities!r})"


def build_session_url(
    username: Optional[str],
    access_key: Optional[str],
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Build the hub URL with the credentials embedded.

    The access key falls back to BROWSERSTACK_ACCESS_KEY.

    Raises:
        MissingCredentialError: If the username or access key is still empty
    """
    key = access_key_chain(access_key, environ).resolve()

    if not key or not username:
        raise MissingCredentialError("A BrowserStack API key & username must be configured.")

    return f"https://{username}:{key}@{HUB_HOST}{HUB_PATH}"


def default_capabilities() -> dict:
    """Default browser capabilities (Chrome)."""
    return dict(DesiredCapabilities.CHROME)


def build_capabilities(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    """Merge the tunnel flag, the default browser and the overrides; later sources win."""
    capabilities = {LOCAL_CAPABILITY: "true"}
    capabilities.update(default_capabilities())
    capabilities.update(overrides or {})
    return capabilities


def build_options(capabilities: Mapping[str, Any]):
    """Wrap capabilities in the Selenium options class matching browserName."""
    browser = str(capabilities.get("browserName") or "chrome").lower()
    options = _OPTIONS_BY_BROWSER.get(browser, webdriver.ChromeOptions)()
    for name, value in capabilities.items():
        options.set_capability(name, value)
    return options


def create_remote_session(descriptor: SessionDescriptor) -> webdriver.Remote:
    """Open a remote WebDriver session on the hub."""
    logger.info(
        f"Creating BrowserStack session at {mask_url(descriptor.url)} "
        f"(browserName={descriptor.capabilities.get('browserName')})"
    )
    return webdriver.Remote(
        command_executor=descriptor.url,
        options=build_options(descriptor.capabilities),
    )


__all__ = [
    "SessionDescriptor",
    "build_session_url",
    "default_capabilities",
    "build_capabilities",
    "build_options",
    "create_remote_session",
]
