"""Translate Foojay payloads into domain types."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from javamigrate.domain.types import (
    DetailRecord,
    DetailResultSet,
    JavaVersion,
    QueryResultSet,
    ReleaseDescriptor,
)

from .schema import IdsPayload, IdsResponse, PackagePayload, PackagePayloadInput, PackagesResponse

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)


def parse_release(payload: PackagePayloadInput) -> ReleaseDescriptor:
    package = (
        payload if isinstance(payload, PackagePayload) else PackagePayload.model_validate(payload)
    )
    return ReleaseDescriptor(
        id=package.id,
        distribution=package.distribution,
        java_version=JavaVersion.parse(package.java_version),
        distribution_version=package.distribution_version,
        operating_system=package.operating_system,
        architecture=package.architecture,
        filename=package.filename,
        pkg_info_uri=package.links.pkg_info_uri,
        archive_type=package.archive_type,
        package_type=package.package_type,
    )


def parse_detail(payload: IdsPayload) -> DetailRecord:
    return DetailRecord(
        filename=payload.filename,
        direct_download_uri=payload.direct_download_uri,
        download_site_uri=payload.download_site_uri,
        signature_uri=payload.signature_uri,
        checksum_uri=payload.checksum_uri,
        checksum=payload.checksum,
        checksum_type=payload.checksum_type,
    )


def _parse_releases(packages: Iterable[PackagePayload]) -> tuple[ReleaseDescriptor, ...]:
    releases: list[ReleaseDescriptor] = []
    for package in packages:
        try:
            releases.append(parse_release(package))
        except ValueError as exc:
            # unparseable java_version
            log.warning("Skipping Foojay package %s: %s", package.id, exc)
    return tuple(releases)


def to_query_result_set(response: PackagesResponse) -> QueryResultSet:
    if response.result is None:
        return QueryResultSet(result=None, message=response.message)
    return QueryResultSet(
        result=_parse_releases(response.result),
        message=response.message,
    )


def to_detail_result_set(response: IdsResponse) -> DetailResultSet:
    if response.result is None:
        return DetailResultSet(result=None, message=response.message)
    return DetailResultSet(
        result=tuple(parse_detail(ids) for ids in response.result),
        message=response.message,
    )
