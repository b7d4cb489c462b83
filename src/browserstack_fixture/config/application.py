"""Application-level configuration provider."""

import os
import json
from pathlib import Path
from typing import Any, Mapping, Optional

from ..constants import CONFIG_SECTION
from ..errors import BrowserStackConfigError
from .environment import get_env_config, load_environment

import logging
logger = logging.getLogger(__name__)


class ApplicationConfig:
    """
    Nested key-value configuration addressed with dotted paths.

    Usage:
        config = ApplicationConfig({"services": {"browserstack": {"username": "u"}}})
        config.get("services.browserstack", {})  # -> {"username": "u"}
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None, base_path: Optional[str] = None):
        self.values = dict(values or {})
        self.base_path = str(Path(base_path or os.getcwd()).absolute())

    def get(self, path: str, default: Any = None) -> Any:
        node: Any = self.values
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return default
            node = node[part]
        return node

    @classmethod
    def from_file(cls, path: str, base_path: Optional[str] = None) -> "ApplicationConfig":
        """Read a JSON document shaped like {"services": {"browserstack": {...}}}."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                values = json.load(f)
        except json.JSONDecodeError as e:
            raise BrowserStackConfigError(f"Config file {path} is not valid JSON: {e}") from e
        if not isinstance(values, dict):
            raise BrowserStackConfigError(f"Config file {path} must contain a JSON object.")
        return cls(values, base_path=base_path)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApplicationConfig":
        """
        Build the application config from the process environment.

        BROWSERSTACK_CONFIG_FILE, when set, names a JSON config file and wins
        over the individual BROWSERSTACK_* variables.
        BROWSERSTACK_BASE_PATH sets the base path (default: cwd).
        """
        if environ is None:
            load_environment()
            environ = os.environ

        base_path = (environ.get("BROWSERSTACK_BASE_PATH") or "").strip() or None
        config_file = (environ.get("BROWSERSTACK_CONFIG_FILE") or "").strip()
        if config_file:
            logger.debug(f"Reading application config from {config_file}")
            return cls.from_file(config_file, base_path=base_path)

        section = get_env_config(environ)
        values: dict = {}
        node = values
        parts = CONFIG_SECTION.split(".")
        for part in parts[:-1]:
            node = node.setdefault(part, {})
        node[parts[-1]] = section
        return cls(values, base_path=base_path)


__all__ = ["ApplicationConfig"]
