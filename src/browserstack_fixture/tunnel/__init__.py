"""BrowserStack Local tunnel lifecycle."""

from .process import TunnelProcess, make_local_process
from .manager import TunnelManager, get_tunnel_manager, reset_tunnel_manager

__all__ = [
    "TunnelProcess",
    "make_local_process",
    "TunnelManager",
    "get_tunnel_manager",
    "reset_tunnel_manager",
]
