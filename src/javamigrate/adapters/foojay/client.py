"""HTTP client for the Foojay Disco API."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

import httpx

from javamigrate.adapters.http_resilience import (
    ClientFactory,
    ResilienceConfig,
    ResilientClient,
    SyncSession,
)
from javamigrate.config.foojay import FoojayConfig, get_foojay_config
from javamigrate.domain.ports import ReleaseCatalog

from .schema import IdsResponse, PackagesResponse
from .translator import to_detail_result_set, to_query_result_set

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from types import TracebackType

    from javamigrate.domain.types import DetailResultSet, QueryResultSet

log = getLogger(__name__)

PACKAGES_PATH: Final = "packages"

DEFAULT_QUERY_PARAMS: Final[Mapping[str, Sequence[str]]] = MappingProxyType(
    {
        "archive_type": ("tar.gz", "zip"),
        "package_type": ("jdk",),
        "release_status": ("ga",),
        "latest": ("available",),
        "directly_downloadable": ("true",),
        "lib_c_type": ("glibc", "libc", "c_std_lib"),
    }
)


class FoojayAPIError(RuntimeError):
    """Raised when the Foojay API returns an unexpected response."""


def should_cache_payload(payload: object) -> bool:
    """Only keep envelopes that actually list something."""

    return isinstance(payload, dict) and bool(payload.get("result"))


def default_foojay_config() -> FoojayConfig:
    """Foojay configuration from the environment, caching only non-empty results."""

    return get_foojay_config(cache_predicate=should_cache_payload)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _encode_query_params(query_params: Mapping[str, Sequence[str]]) -> httpx.QueryParams:
    return httpx.QueryParams(
        [(key, value) for key, values in query_params.items() for value in values]
    )


@dataclass(slots=True)
class FoojayClient:
    """Sync Foojay catalog backed by one long-lived :class:`ResilientClient`.

    Use it as a context manager, or call :meth:`close`, to release the client.
    """

    config: FoojayConfig = field(default_factory=default_foojay_config)
    client_factory: ClientFactory = field(default=_default_client_factory)
    default_query_params: Mapping[str, Sequence[str]] = field(
        default_factory=lambda: DEFAULT_QUERY_PARAMS
    )
    _session: SyncSession = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._session = SyncSession(self.config.resilience, self.client_factory)

    def __enter__(self) -> FoojayClient:
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

    def query_packages(
        self,
        base_url: str,
        query_params: Mapping[str, Sequence[str]],
    ) -> QueryResultSet | None:
        url = f"{base_url.rstrip('/')}/{PACKAGES_PATH}"
        params = _encode_query_params(query_params)
        response = self._session.run(partial(self._get_payload, url=url, params=params))
        if response is None:
            return None
        return to_query_result_set(PackagesResponse.model_validate(response))

    def query_url(self, uri: str) -> DetailResultSet | None:
        response = self._session.run(partial(self._get_payload, url=uri))
        if response is None:
            return None
        return to_detail_result_set(IdsResponse.model_validate(response))

    async def _get_payload(
        self,
        client: ResilientClient,
        *,
        url: str,
        params: httpx.QueryParams | None = None,
    ) -> dict[str, object] | None:
        response = await client.get(url, params=params)
        log.debug("GET %s -> %s", response.request.url, response.status_code)
        response.raise_for_status()

        if response.status_code == httpx.codes.NO_CONTENT or not response.content.strip():
            return None

        payload = response.json()
        if not isinstance(payload, dict):
            raise FoojayAPIError(f"Unexpected Foojay response payload from {url}")
        return payload


if TYPE_CHECKING:
    _catalog_check: ReleaseCatalog = FoojayClient()
