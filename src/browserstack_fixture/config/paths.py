"""Path utilities for BrowserStack files."""

import os

from ..constants import DEFAULT_LOG_FILE


def tunnel_log_path(base_path: str) -> str:
    """Get the path of the BrowserStack Local log file under the application base path."""
    return os.path.join(base_path, DEFAULT_LOG_FILE)


def mask_url(url: str) -> str:
    """Hide the credentials embedded in a hub URL before it reaches a log line."""
    scheme, sep, rest = url.partition("://")
    if not sep or "@" not in rest:
        return url
    userinfo, _, host = rest.rpartition("@")
    username = userinfo.split(":", 1)[0]
    return f"{scheme}://{username}:***@{host}"


__all__ = ["tunnel_log_path", "mask_url"]
