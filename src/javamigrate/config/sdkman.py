"""SDKMAN broker and release API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .foojay import USER_AGENT
from .http_resilience import ResilienceConfig

DEFAULT_SDKMAN_BROKER_URL = "https://api.sdkman.io/2/broker"
DEFAULT_SDKMAN_RELEASE_URL = "https://vendors.sdkman.io"
SDKMAN_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class SdkmanConfig:
    """Holds SDKMAN endpoints and vendor credentials.

    The HTTP cache stays disabled: existence checks must always reflect the
    registry's current state.
    """

    broker_url: str
    release_url: str
    consumer_key: str
    consumer_token: str
    resilience: ResilienceConfig

    @property
    def credential_headers(self) -> dict[str, str]:
        return {"Consumer-Key": self.consumer_key, "Consumer-Token": self.consumer_token}


def get_sdkman_config(*, resilience: ResilienceConfig | None = None) -> SdkmanConfig:
    values = require_env_vars(("SDKMAN_CONSUMER_KEY", "SDKMAN_CONSUMER_TOKEN"))
    return SdkmanConfig(
        broker_url=optional_env_var("SDKMAN_BROKER_URL", DEFAULT_SDKMAN_BROKER_URL).rstrip("/"),
        release_url=optional_env_var("SDKMAN_RELEASE_URL", DEFAULT_SDKMAN_RELEASE_URL).rstrip("/"),
        consumer_key=values["SDKMAN_CONSUMER_KEY"],
        consumer_token=values["SDKMAN_CONSUMER_TOKEN"],
        resilience=resilience
        or ResilienceConfig(
            name="sdkman",
            timeout_seconds=SDKMAN_TIMEOUT_SECONDS,
            cache=None,
            default_headers={"User-Agent": USER_AGENT},
        ),
    )
