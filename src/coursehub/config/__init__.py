"""Application configuration helpers."""

from __future__ import annotations

from .content_api import (
    CONTENT_API_TIMEOUT_SECONDS,
    ContentApiConfig,
    build_http_config,
    get_content_api_config,
)
from .env import optional_env_var, optional_float_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_client import HttpClientConfig, RateLimit, ResponseHook
from .logging import configure_logging

__all__ = [
    "CONTENT_API_TIMEOUT_SECONDS",
    "ConfigurationError",
    "ContentApiConfig",
    "HttpClientConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResponseHook",
    "build_http_config",
    "configure_logging",
    "get_content_api_config",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_vars",
]
