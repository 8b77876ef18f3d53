from __future__ import annotations

import asyncio
import time

import httpx
import pytest
from hishel.httpx import AsyncCacheClient

from javamigrate.adapters.http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    SyncSession,
)

from tests.support.http import make_client_factory


def _ok(request: httpx.Request) -> httpx.Response:
    del request
    return httpx.Response(200, json={"ok": True})


def test_client_without_cache_uses_plain_httpx_client() -> None:
    client = ResilientClient(ResilienceConfig(name="plain"))

    try:
        assert type(client._client) is httpx.AsyncClient  # noqa: SLF001  # type: ignore[reportPrivateUsage]
    finally:
        asyncio.run(client.aclose())


def test_client_with_cache_uses_hishel_client() -> None:
    client = ResilientClient(ResilienceConfig(name="cached", cache=CacheConfig()))

    try:
        assert isinstance(client._client, AsyncCacheClient)  # noqa: SLF001  # type: ignore[reportPrivateUsage]
    finally:
        asyncio.run(client.aclose())


def test_client_sends_default_headers_through_given_transport() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="limited",
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        default_headers={"User-Agent": "javamigrate-test"},
    )

    async def run() -> int:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            response = await client.get("https://example.test/ping")
            return response.status_code

    assert asyncio.run(run()) == 200
    assert seen[0].headers["User-Agent"] == "javamigrate-test"


def test_session_reuses_one_client_and_closes_it() -> None:
    created: list[ResilientClient] = []
    factory = make_client_factory(_ok, created=created)
    session = SyncSession(ResilienceConfig(name="session"), factory)

    async def ping(client: ResilientClient) -> int:
        response = await client.get("https://example.test/ping")
        return response.status_code

    with session:
        assert session.run(ping) == 200
        assert session.run(ping) == 200

    assert len(created) == 1
    assert created[0]._client.is_closed  # noqa: SLF001  # type: ignore[reportPrivateUsage]


def test_session_reopens_after_close() -> None:
    created: list[ResilientClient] = []
    factory = make_client_factory(_ok, created=created)
    session = SyncSession(ResilienceConfig(name="session"), factory)

    async def ping(client: ResilientClient) -> int:
        response = await client.get("https://example.test/ping")
        return response.status_code

    session.run(ping)
    session.close()
    session.run(ping)
    session.close()

    assert len(created) == 2


def test_session_propagates_errors_and_stays_usable() -> None:
    session = SyncSession(ResilienceConfig(name="session"), make_client_factory(_ok))

    async def boom(client: ResilientClient) -> None:
        del client
        raise RuntimeError("boom")

    async def ping(client: ResilientClient) -> int:
        response = await client.get("https://example.test/ping")
        return response.status_code

    with session:
        with pytest.raises(RuntimeError, match="boom"):
            session.run(boom)
        assert session.run(ping) == 200


def test_rate_limit_spans_calls_in_one_session() -> None:
    config = ResilienceConfig(name="limited", ratelimit=RateLimit(max_calls=1, per_seconds=0.2))
    session = SyncSession(config, make_client_factory(_ok))

    async def ping(client: ResilientClient) -> int:
        response = await client.get("https://example.test/ping")
        return response.status_code

    with session:
        started = time.monotonic()
        for _ in range(3):
            session.run(ping)
        elapsed = time.monotonic() - started

    assert elapsed >= 0.3
