"""Pydantic models describing SDKMAN release API payloads."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Mapping

    from javamigrate.domain.types import PublishRequest

# Foojay checksum_type -> SDKMAN checksum algorithm
CHECKSUM_ALGORITHMS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "md5": "MD5",
        "sha1": "SHA-1",
        "sha256": "SHA-256",
        "sha512": "SHA-512",
    }
)


class SdkmanBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ReleasePayload(SdkmanBaseModel):
    candidate: str
    version: str
    vendor: str
    platform: str
    url: str
    checksums: dict[str, str] = Field(default_factory=dict)
    default: bool = False


def _checksums(request: PublishRequest) -> dict[str, str]:
    if not request.checksum or not request.checksum_type:
        return {}
    algorithm = CHECKSUM_ALGORITHMS.get(request.checksum_type.strip().lower())
    if algorithm is None:
        return {}
    return {algorithm: request.checksum}


def to_release_payload(request: PublishRequest) -> ReleasePayload:
    return ReleasePayload(
        candidate=request.candidate,
        version=request.version,
        vendor=request.vendor,
        platform=request.platform,
        url=request.url,
        checksums=_checksums(request),
        default=request.default,
    )
