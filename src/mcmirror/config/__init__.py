"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, optional_env_var, require_env_vars
from .errors import ConfigurationError, InvalidServerURLError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .kube import KubeApiConfig, get_kube_api_config
from .logging import configure_logging

__all__ = [
    "ConfigurationError",
    "InvalidServerURLError",
    "KubeApiConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "env_flag",
    "get_kube_api_config",
    "optional_env_var",
    "require_env_vars",
]
