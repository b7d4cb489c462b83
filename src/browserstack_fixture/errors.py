"""Error kinds raised while configuring BrowserStack."""


class BrowserStackConfigError(RuntimeError):
    """BrowserStack is not configured well enough to continue."""


class UnknownConfigKeyError(BrowserStackConfigError, ValueError):
    """A configuration mapping contained a key we do not recognize."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Unknown BrowserStack configuration: '{key}'")


class MissingCredentialError(BrowserStackConfigError):
    """The username or access key is missing after every fallback was tried."""


__all__ = [
    "BrowserStackConfigError",
    "UnknownConfigKeyError",
    "MissingCredentialError",
]
