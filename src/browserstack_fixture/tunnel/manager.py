"""
Shared BrowserStack Local tunnel.

One TunnelManager is shared by every fixture of a test run. It starts the
BrowserStack Local binary at most once and only ever stops a process it
started itself: a tunnel found listening on the local port belongs to
someone else and is left alone.

Usage:
    with get_tunnel_manager() as tunnel:
        tunnel.ensure_running(key, {}, log_file)
        ...  # tunnel stopped on exit if we started it
"""

from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from ..config.environment import access_key_chain
from ..constants import TUNNEL_HOST, TUNNEL_PORT, PROBE_TIMEOUT_SECS
from ..errors import MissingCredentialError
from .process import TunnelProcess, _is_port_open, make_local_process

import logging
logger = logging.getLogger(__name__)


class TunnelManager:
    """
    Attributes:
        process: BrowserStack Local handle, created lazily on first start
        owned: Whether this manager started the process (and may stop it)
    """

    def __init__(
        self,
        process_factory: Callable[[], TunnelProcess] = make_local_process,
        host: str = TUNNEL_HOST,
        port: int = TUNNEL_PORT,
        timeout: float = PROBE_TIMEOUT_SECS,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.process_factory = process_factory
        self.host = host
        self.port = port
        self.timeout = timeout
        self.environ = environ
        self.process: Optional[TunnelProcess] = None
        self.owned = False

    def probe(self) -> bool:
        """Return True if a tunnel is already listening on the local port."""
        listening = _is_port_open(self.host, self.port, self.timeout)
        logger.debug(f"Tunnel probe {self.host}:{self.port} -> {'listening' if listening else 'closed'}")
        return listening

    def ensure_running(
        self,
        access_key: Optional[str],
        local_options: Optional[Mapping[str, Any]],
        log_file: str,
        *,
        external: Optional[bool] = None,
    ) -> None:
        """
        Start BrowserStack Local unless a tunnel is already available.

        Args:
            access_key: Configured access key (may be empty)
            local_options: Extra BrowserStack Local options; they win over the defaults
            log_file: Default BrowserStack Local log file
            external: Cached probe result; probed now when None
        """
        if external is None:
            external = self.probe()

        if external:
            logger.debug("BrowserStack Local is running externally; not starting it")
            return

        if self.process is None:
            self.process = self.process_factory()

        if not self.process.isRunning():
            self._start(access_key, local_options, log_file)

    def _start(self, access_key, local_options, log_file) -> None:
        options = {
            "key": access_key,
            "logfile": log_file,
        }
        options.update(local_options or {})

        key = access_key_chain(options.get("key"), self.environ).resolve()
        if not key:
            raise MissingCredentialError("A BrowserStack API key must be configured.")
        options["key"] = key

        logfile = options.get("logfile")
        if logfile:
            Path(logfile).parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"Starting BrowserStack Local (logfile={logfile})")
        self.process.start(**options)
        self.owned = True

    def is_running(self) -> bool:
        return self.process is not None and bool(self.process.isRunning())

    def stop(self) -> None:
        """Stop BrowserStack Local if this manager started it. Safe to call anytime."""
        if self.process is None or not self.owned:
            return
        if self.process.isRunning():
            logger.info("Stopping BrowserStack Local")
            self.process.stop()
        self.owned = False

    def __enter__(self) -> "TunnelManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


# ============================================================================
# Shared Manager
# ============================================================================

_shared_manager: Optional[TunnelManager] = None


def get_tunnel_manager() -> TunnelManager:
    """
    Get or create the tunnel manager shared by this test run.

    Use reset_tunnel_manager() to clear it (mainly for testing).
    """
    global _shared_manager

    if _shared_manager is None:
        _shared_manager = TunnelManager()

    return _shared_manager


def reset_tunnel_manager() -> None:
    """
    Forget the shared manager.

    Does not stop the process; call stop() first if it should go away.
    """
    global _shared_manager
    _shared_manager = None


__all__ = [
    "TunnelManager",
    "get_tunnel_manager",
    "reset_tunnel_manager",
]
