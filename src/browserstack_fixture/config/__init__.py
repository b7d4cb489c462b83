"""Configuration management for BrowserStack."""

from .environment import (
    load_environment,
    get_env_config,
    CredentialChain,
    explicit,
    from_environment,
    access_key_chain,
)

from .application import ApplicationConfig

from .paths import (
    tunnel_log_path,
    mask_url,
)

from .store import (
    CONFIG_KEYS,
    ConfigUpdate,
    BrowserStackConfig,
)

__all__ = [
    "load_environment",
    "get_env_config",
    "CredentialChain",
    "explicit",
    "from_environment",
    "access_key_chain",
    "ApplicationConfig",
    "tunnel_log_path",
    "mask_url",
    "CONFIG_KEYS",
    "ConfigUpdate",
    "BrowserStackConfig",
]
