"""Foojay Disco API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, ShouldCacheHook

DEFAULT_FOOJAY_URL = "https://api.foojay.io/disco/v3.0"
FOOJAY_TIMEOUT_SECONDS = 20.0
USER_AGENT = "javamigrate (+https://sdkman.io)"


@dataclass(frozen=True, slots=True)
class FoojayConfig:
    """Holds Foojay API configuration values."""

    url: str
    resilience: ResilienceConfig


def get_foojay_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> FoojayConfig:
    return FoojayConfig(
        url=optional_env_var("FOOJAY_URL", DEFAULT_FOOJAY_URL).rstrip("/"),
        resilience=resilience
        or ResilienceConfig(
            name="foojay",
            timeout_seconds=FOOJAY_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            cache=CacheConfig(should_cache=cache_predicate),
            default_headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        ),
    )
