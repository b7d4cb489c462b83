"""
BrowserStack configuration store.

Holds the credentials, BrowserStack Local options and capability overrides
of one fixture instance.

Usage:
    config = BrowserStackConfig()
    config.set_config({"username": "me", "api_key": "secret"})
    config.set_capabilities({"browserName": "firefox"})
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..constants import CONFIG_SECTION
from ..errors import BrowserStackConfigError, UnknownConfigKeyError

import logging
logger = logging.getLogger(__name__)


_FIELD_FOR_KEY = {
    "username": "username",
    "key": "key",
    "api_key": "key",
    "local_config": "local_config",
    "capabilities": "capabilities",
}

CONFIG_KEYS = tuple(_FIELD_FOR_KEY)
"""Keys accepted by set_config(). 'api_key' is an alias of 'key'."""

_STRING_FIELDS = ("username", "key")


@dataclass(frozen=True)
class ConfigUpdate:
    """
    A validated set_config() payload.

    A None value (e.g. a JSON null) means "not provided" and is not applied.
    """

    username: Optional[str] = None
    key: Optional[str] = None
    local_config: Optional[Mapping[str, Any]] = None
    capabilities: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "ConfigUpdate":
        """Validate every key and value before anything is applied."""
        fields = {}
        for key, value in config.items():
            if key not in _FIELD_FOR_KEY:
                raise UnknownConfigKeyError(key)
            if value is None:
                continue
            name = _FIELD_FOR_KEY[key]
            expected = str if name in _STRING_FIELDS else Mapping
            if not isinstance(value, expected):
                raise BrowserStackConfigError(
                    f"BrowserStack configuration '{key}' must be a "
                    f"{'string' if expected is str else 'mapping'}, got {type(value).__name__}"
                )
            fields[name] = value
        return cls(**fields)


@dataclass
class BrowserStackConfig:
    """
    Attributes:
        username: BrowserStack username
        access_key: BrowserStack access key (may stay empty, see BROWSERSTACK_ACCESS_KEY)
        local_options: Extra options for BrowserStack Local
        capabilities: Capability overrides requested for tests
        config_loaded: Whether services.browserstack was read from the application config
    """

    username: str = ""
    access_key: str = ""
    local_options: dict = field(default_factory=dict)
    capabilities: dict = field(default_factory=dict)
    config_loaded: bool = False

    def set_config(self, config: Mapping[str, Any]) -> "BrowserStackConfig":
        update = ConfigUpdate.from_mapping(config)
        if update.username is not None:
            self.set_username(update.username)
        if update.key is not None:
            self.set_access_key(update.key)
        if update.local_config is not None:
            self.set_local_options(update.local_config)
        if update.capabilities is not None:
            self.set_capabilities(update.capabilities)
        return self

    def set_username(self, username: str) -> "BrowserStackConfig":
        self.username = username
        return self

    def set_access_key(self, key: str) -> "BrowserStackConfig":
        self.access_key = key
        return self

    def set_local_options(self, options: Mapping[str, Any]) -> "BrowserStackConfig":
        self.local_options = dict(options)
        return self

    def set_capabilities(self, capabilities: Mapping[str, Any]) -> "BrowserStackConfig":
        self.capabilities = dict(capabilities)
        return self

    def load_application_config(self, app_config) -> "BrowserStackConfig":
        """Read services.browserstack from the application config, only the first time."""
        if self.config_loaded:
            return self

        self.config_loaded = True

        section = app_config.get(CONFIG_SECTION, {}) or {}
        logger.debug(f"Loaded {CONFIG_SECTION} keys: {sorted(section)}")
        return self.set_config(section)


__all__ = [
    "CONFIG_KEYS",
    "ConfigUpdate",
    "BrowserStackConfig",
]
