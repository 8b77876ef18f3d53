"""Public interface for the Foojay adapter."""

from __future__ import annotations

from .client import (
    DEFAULT_QUERY_PARAMS,
    FoojayAPIError,
    FoojayClient,
    default_foojay_config,
    should_cache_payload,
)
from .schema import IdsPayload, IdsResponse, PackagePayload, PackagesResponse
from .translator import parse_detail, parse_release, to_detail_result_set, to_query_result_set

__all__ = [
    "DEFAULT_QUERY_PARAMS",
    "FoojayAPIError",
    "FoojayClient",
    "IdsPayload",
    "IdsResponse",
    "PackagePayload",
    "PackagesResponse",
    "default_foojay_config",
    "parse_detail",
    "parse_release",
    "should_cache_payload",
    "to_detail_result_set",
    "to_query_result_set",
]
