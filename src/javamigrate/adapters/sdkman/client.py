"""HTTP client for the SDKMAN broker and release APIs."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx

from javamigrate.adapters.http_resilience import (
    ClientFactory,
    ResilienceConfig,
    ResilientClient,
    SyncSession,
)
from javamigrate.config.sdkman import SdkmanConfig, get_sdkman_config
from javamigrate.domain.ports import ReleaseRegistry
from javamigrate.domain.types import JAVA_CANDIDATE

from .schema import to_release_payload

if TYPE_CHECKING:
    from types import TracebackType

    from javamigrate.domain.types import PublishRequest

log = getLogger(__name__)

RELEASE_PATH: Final = "release"


class SdkmanAPIError(RuntimeError):
    """Raised when an SDKMAN endpoint answers with a status we cannot interpret."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class SdkmanClient:
    config: SdkmanConfig = field(default_factory=get_sdkman_config)
    client_factory: ClientFactory = field(default=_default_client_factory)
    _session: SyncSession = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._session = SyncSession(self.config.resilience, self.client_factory)

    def __enter__(self) -> SdkmanClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def find_version(self, base_url: str, version_with_vendor: str, platform: str) -> bool:
        """Ask the broker for a download; any hit (redirect or body) means the version exists."""

        url = f"{base_url.rstrip('/')}/download/{JAVA_CANDIDATE}/{version_with_vendor}/{platform}"
        return self._session.run(partial(self._find_version_async, url=url))

    def new_version(self, base_url: str, request: PublishRequest) -> str | None:
        url = f"{base_url.rstrip('/')}/{RELEASE_PATH}"
        return self._session.run(partial(self._new_version_async, url=url, request=request))

    async def _find_version_async(self, client: ResilientClient, *, url: str) -> bool:
        response = await client.get(url, follow_redirects=False)
        log.debug("GET %s -> %s", url, response.status_code)

        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        if response.is_success or response.is_redirect:
            return True
        raise SdkmanAPIError(
            f"Unexpected broker status {response.status_code} for {url}",
            status_code=response.status_code,
        )

    async def _new_version_async(
        self,
        client: ResilientClient,
        *,
        url: str,
        request: PublishRequest,
    ) -> str | None:
        payload = to_release_payload(request)
        response = await client.post(
            url,
            json=payload.model_dump(mode="json"),
            headers=self.config.credential_headers,
        )
        log.debug("POST %s -> %s", url, response.status_code)
        response.raise_for_status()

        body = response.text.strip()
        return body or None


if TYPE_CHECKING:
    _registry_check: ReleaseRegistry = SdkmanClient()
