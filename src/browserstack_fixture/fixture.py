"""
Run BrowserStack from your tests.

BrowserStack is the per-fixture facade: it owns the configuration of one
fixture instance and borrows the tunnel manager shared by the test run.

Usage:
    bs = BrowserStack()
    driver = bs.create_session({"capabilities": {"browserName": "firefox"}})
    ...
    driver.quit()
"""

from typing import Any, Callable, Mapping, Optional

from selenium import webdriver

from .config.application import ApplicationConfig
from .config.paths import tunnel_log_path
from .config.store import BrowserStackConfig
from .session import (
    SessionDescriptor,
    build_capabilities,
    build_session_url,
    create_remote_session,
)
from .tunnel.manager import TunnelManager, get_tunnel_manager

import logging
logger = logging.getLogger(__name__)


class BrowserStack:
    """
    Attributes:
        config: Credentials, Local options and capability overrides
        tunnel: Tunnel manager shared by the test run
        running_externally: Cached tunnel probe (None until probed)
    """

    def __init__(
        self,
        tunnel: Optional[TunnelManager] = None,
        app_config: Optional[ApplicationConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
        session_factory: Callable[[SessionDescriptor], Any] = create_remote_session,
    ):
        self.config = BrowserStackConfig()
        self.tunnel = tunnel if tunnel is not None else get_tunnel_manager()
        self._app_config = app_config
        self.environ = environ
        self.session_factory = session_factory
        self.running_externally: Optional[bool] = None

    @property
    def app_config(self) -> ApplicationConfig:
        if self._app_config is None:
            self._app_config = ApplicationConfig.from_env(self.environ)
        return self._app_config

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_config(self, config: Mapping[str, Any]) -> "BrowserStack":
        self.config.set_config(config)
        return self

    def set_username(self, username: str) -> "BrowserStack":
        self.config.set_username(username)
        return self

    def set_access_key(self, key: str) -> "BrowserStack":
        self.config.set_access_key(key)
        return self

    def set_local_options(self, options: Mapping[str, Any]) -> "BrowserStack":
        self.config.set_local_options(options)
        return self

    def set_capabilities(self, capabilities: Mapping[str, Any]) -> "BrowserStack":
        self.config.set_capabilities(capabilities)
        return self

    def load_application_config(self) -> "BrowserStack":
        if not self.config.config_loaded:
            self.config.load_application_config(self.app_config)
        return self

    # ------------------------------------------------------------------
    # Tunnel
    # ------------------------------------------------------------------

    def is_tunnel_running_externally(self) -> bool:
        """Probe the BrowserStack Local port once and remember the answer."""
        if self.running_externally is None:
            self.running_externally = self.tunnel.probe()
        return self.running_externally

    def ensure_tunnel(self) -> None:
        self.tunnel.ensure_running(
            self.config.access_key,
            self.config.local_options,
            tunnel_log_path(self.app_config.base_path),
            external=self.is_tunnel_running_externally(),
        )

    def stop_tunnel(self) -> None:
        self.tunnel.stop()

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def session_url(self) -> str:
        return build_session_url(self.config.username, self.config.access_key, self.environ)

    def capabilities(self) -> dict:
        return build_capabilities(self.config.capabilities)

    def session_descriptor(self) -> SessionDescriptor:
        return SessionDescriptor(url=self.session_url(), capabilities=self.capabilities())

    def create_session(self, config: Optional[Mapping[str, Any]] = None) -> webdriver.Remote:
        """
        Create the BrowserStack WebDriver session.

        Loads the application config on first use, applies config on top,
        makes sure BrowserStack Local is available and opens the session.
        """
        self.load_application_config()

        if config is not None:
            self.set_config(config)

        self.ensure_tunnel()

        return self.session_factory(self.session_descriptor())


def stop_browserstack() -> None:
    """Stop the shared BrowserStack Local process if this run started it."""
    get_tunnel_manager().stop()


__all__ = [
    "BrowserStack",
    "stop_browserstack",
]
