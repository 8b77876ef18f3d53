"""Shared fixtures for Foojay adapter tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from javamigrate.config.foojay import FoojayConfig
from javamigrate.config.http_resilience import ResilienceConfig

FoojayPayload = dict[str, object]
FIXTURES = Path(__file__).resolve().parents[2] / "data" / "foojay"


def _load_fixture(name: str) -> FoojayPayload:
    return json.loads((FIXTURES / name).read_text())


@pytest.fixture
def packages_payload() -> FoojayPayload:
    return _load_fixture("packages.json")


@pytest.fixture
def ids_payload() -> FoojayPayload:
    return _load_fixture("ids.json")


@pytest.fixture
def foojay_config() -> FoojayConfig:
    return FoojayConfig(
        url="https://foojay.test/disco/v3.0",
        resilience=ResilienceConfig(name="foojay"),
    )
