"""BrowserStack Local process and port probing."""

import socket
from typing import Protocol

from ..constants import PROBE_TIMEOUT_SECS


class TunnelProcess(Protocol):
    """The subset of browserstack.local.Local we rely on."""

    def start(self, **options) -> None: ...

    def stop(self) -> None: ...

    def isRunning(self) -> bool: ...


def _is_port_open(host: str, port: int, timeout: float = PROBE_TIMEOUT_SECS) -> bool:
    """Check if a port accepts TCP connections."""
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError:
        return False


def make_local_process() -> TunnelProcess:
    """Create a BrowserStack Local handle. The binary is downloaded on first start."""
    from browserstack.local import Local
    return Local()


__all__ = [
    "TunnelProcess",
    "_is_port_open",
    "make_local_process",
]
