"""Environment configuration and credential resolution."""

import os
import json
from typing import Callable, Iterable, Mapping, Optional

from dotenv import load_dotenv, find_dotenv

from ..constants import ACCESS_KEY_ENV
from ..errors import BrowserStackConfigError

import logging
logger = logging.getLogger(__name__)


_ENV_LOADED = False


def load_environment(override: bool = False) -> None:
    """Load the nearest .env file into os.environ, once per process."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True
    path = find_dotenv(filename=".env", usecwd=True)
    if path:
        load_dotenv(path, override=override)
        logger.debug(f"Loaded environment from {path}")


def _json_object_from_env(environ: Mapping[str, str], name: str) -> Optional[dict]:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BrowserStackConfigError(f"{name} is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise BrowserStackConfigError(f"{name} must be a JSON object.")
    return value


def get_env_config(environ: Optional[Mapping[str, str]] = None) -> dict:
    """
    Build the services.browserstack section from environment variables.

    Optional:   BROWSERSTACK_USERNAME
                BROWSERSTACK_ACCESS_KEY
                BROWSERSTACK_LOCAL_CONFIG  (JSON object of BrowserStack Local options)
                BROWSERSTACK_CAPABILITIES  (JSON object of WebDriver capabilities)

    Unset variables are left out so they never clobber values set elsewhere.
    """
    if environ is None:
        environ = os.environ

    config = {}

    username = (environ.get("BROWSERSTACK_USERNAME") or "").strip()
    if username:
        config["username"] = username

    key = (environ.get(ACCESS_KEY_ENV) or "").strip()
    if key:
        config["key"] = key

    local_config = _json_object_from_env(environ, "BROWSERSTACK_LOCAL_CONFIG")
    if local_config is not None:
        config["local_config"] = local_config

    capabilities = _json_object_from_env(environ, "BROWSERSTACK_CAPABILITIES")
    if capabilities is not None:
        config["capabilities"] = capabilities

    return config


Provider = Callable[[], Optional[str]]


class CredentialChain:
    """
    Ordered list of credential providers.

    Each provider is a zero-argument callable returning a value or None.
    The first non-empty value wins.
    """

    def __init__(self, providers: Iterable[Provider]):
        self.providers = list(providers)

    def resolve(self) -> Optional[str]:
        for provider in self.providers:
            value = provider()
            if value:
                return value
        return None


def explicit(value: Optional[str]) -> Provider:
    return lambda: value or None


def from_environment(name: str, environ: Optional[Mapping[str, str]] = None) -> Provider:
    def provider() -> Optional[str]:
        source = os.environ if environ is None else environ
        return (source.get(name) or "").strip() or None
    return provider


def access_key_chain(key: Optional[str], environ: Optional[Mapping[str, str]] = None) -> CredentialChain:
    """Explicit key first, then BROWSERSTACK_ACCESS_KEY."""
    return CredentialChain([explicit(key), from_environment(ACCESS_KEY_ENV, environ)])


__all__ = [
    "load_environment",
    "get_env_config",
    "CredentialChain",
    "explicit",
    "from_environment",
    "access_key_chain",
]
