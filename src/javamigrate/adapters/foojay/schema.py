"""Pydantic models describing the Foojay Disco API payloads."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class FoojayBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PackageLinks(FoojayBaseModel):
    pkg_info_uri: str
    pkg_download_redirect: str | None = None


class PackagePayload(FoojayBaseModel):
    id: str
    distribution: str
    java_version: str
    distribution_version: str = ""
    major_version: int | None = None
    operating_system: str
    architecture: str
    archive_type: str | None = None
    package_type: str | None = None
    lib_c_type: str | None = None
    release_status: str | None = None
    filename: str
    links: PackageLinks

    @field_validator("distribution_version", mode="before")
    @classmethod
    def _none_to_blank(cls, value: object) -> object:
        return "" if value is None else value


class PackagesResponse(FoojayBaseModel):
    result: list[PackagePayload] | None = None
    message: str = ""


class IdsPayload(FoojayBaseModel):
    filename: str
    direct_download_uri: str
    download_site_uri: str | None = None
    signature_uri: str | None = None
    checksum_uri: str | None = None
    checksum: str | None = None
    checksum_type: str | None = None

    _normalize_optional = field_validator(
        "download_site_uri",
        "signature_uri",
        "checksum_uri",
        "checksum",
        "checksum_type",
        mode="before",
    )(_blank_to_none)


class IdsResponse(FoojayBaseModel):
    result: list[IdsPayload] | None = None
    message: str = ""


PackagePayloadInput = PackagePayload | Mapping[str, object]
