"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""


class InvalidServerURLError(ConfigurationError):
    """Raised when an API server address is not an absolute http(s) URL."""

    def __init__(self, server: str) -> None:
        self.server = server
        super().__init__(f"API server must be an http(s) URL, got {server!r}")
