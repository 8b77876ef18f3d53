"""Public interface for the SDKMAN adapter."""

from __future__ import annotations

from .client import SdkmanAPIError, SdkmanClient
from .schema import CHECKSUM_ALGORITHMS, ReleasePayload, to_release_payload

__all__ = [
    "CHECKSUM_ALGORITHMS",
    "ReleasePayload",
    "SdkmanAPIError",
    "SdkmanClient",
    "to_release_payload",
]
