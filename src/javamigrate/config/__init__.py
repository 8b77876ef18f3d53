"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .foojay import FoojayConfig, get_foojay_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig
from .logging import configure_logging
from .sdkman import SdkmanConfig, get_sdkman_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "FoojayConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "SdkmanConfig",
    "configure_logging",
    "get_foojay_config",
    "get_sdkman_config",
    "optional_env_var",
    "require_env_vars",
]
