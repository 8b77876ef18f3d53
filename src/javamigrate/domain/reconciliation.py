"""Reconcile the newest catalog release with the downstream registry.

One call to :meth:`Reconciler.execute` performs a single pass:

1) merge caller query parameters over the catalog defaults
2) search the catalog and pick the highest eligible release
3) derive the SDKMAN version and vendor, then both platform ids
4) ask the broker whether the version already exists
5) resolve the download details and publish the release

Every "nothing to do" condition ends the pass with a :class:`ReconcileOutcome`
instead of an exception. Transport errors raised by the ports propagate
unchanged; nothing here retries.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .platforms import broker_platform, release_platform
from .selection import select_candidate
from .types import JAVA_CANDIDATE, PublishRequest, ReconcileOutcome, ReconcileResult
from .vendors import vendor_for, version_with_vendor
from .versioning import format_version

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .ports import ReleaseCatalog, ReleaseRegistry
    from .types import DetailRecord, ReleaseDescriptor

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconcileSettings:
    catalog_url: str
    broker_url: str
    release_url: str


def merge_query_params(
    query_params: Mapping[str, Sequence[str]],
    defaults: Mapping[str, Sequence[str]],
) -> dict[str, list[str]]:
    """Overlay caller parameters on ``defaults``.

    A caller value replaces the default only when it is non-empty. Keys the
    defaults do not know are kept as given, even when empty.
    """

    merged = {key: list(values) for key, values in defaults.items()}
    for key, values in query_params.items():
        if values or key not in merged:
            merged[key] = list(values)
    return merged


def build_publish_request(
    *,
    vendor: str,
    version: str,
    platform: str,
    detail: DetailRecord,
    default_candidate: bool,
) -> PublishRequest:
    return PublishRequest(
        candidate=JAVA_CANDIDATE,
        vendor=vendor,
        version=version,
        platform=platform,
        url=detail.direct_download_uri,
        checksum=detail.checksum,
        checksum_type=detail.checksum_type,
        default=default_candidate,
    )


class Reconciler:
    """Publish the newest release matching a catalog query, unless already present."""

    def __init__(
        self,
        *,
        catalog: ReleaseCatalog,
        registry: ReleaseRegistry,
        settings: ReconcileSettings,
    ) -> None:
        self._catalog = catalog
        self._registry = registry
        self._settings = settings

    def execute(
        self,
        query_params: Mapping[str, Sequence[str]],
        default_candidate: bool = False,
    ) -> ReconcileResult:
        params = merge_query_params(query_params, self._catalog.default_query_params)
        result_set = self._catalog.query_packages(self._settings.catalog_url, params)
        if result_set is None or result_set.is_empty:
            log.info("Catalog returned no packages for %s", params)
            return ReconcileResult(ReconcileOutcome.NO_RESULTS)

        candidate = select_candidate(result_set)
        if candidate is None:
            log.info("No eligible package among %s results", len(result_set.result or ()))
            return ReconcileResult(ReconcileOutcome.NO_CANDIDATE)

        version = format_version(candidate)
        if version is None:
            log.info(
                "Version %s of %s has no SDKMAN form", candidate.java_version, candidate.distribution
            )
            return ReconcileResult(ReconcileOutcome.UNREPRESENTABLE_VERSION, candidate=candidate)

        vendor = vendor_for(candidate.distribution)
        return self._find_and_publish(
            candidate,
            vendor=vendor,
            version=version,
            default_candidate=default_candidate,
        )

    def _find_and_publish(
        self,
        candidate: ReleaseDescriptor,
        *,
        vendor: str,
        version: str,
        default_candidate: bool,
    ) -> ReconcileResult:
        identifier = version_with_vendor(version, vendor)
        log.info("Processing %s", identifier)
        broker_id = broker_platform(candidate.operating_system, candidate.architecture)
        release_id = release_platform(candidate.operating_system, candidate.architecture)

        if self._registry.find_version(self._settings.broker_url, identifier, broker_id):
            log.info("Version %s already exists for platform %s", identifier, broker_id)
            return ReconcileResult(
                ReconcileOutcome.ALREADY_EXISTS,
                candidate=candidate,
                version_with_vendor=identifier,
            )

        details = self._catalog.query_url(candidate.pkg_info_uri)
        detail = details.single() if details is not None else None
        if detail is None:
            log.info("Could not resolve a single download for %s", candidate.pkg_info_uri)
            return ReconcileResult(
                ReconcileOutcome.DETAIL_UNRESOLVED,
                candidate=candidate,
                version_with_vendor=identifier,
            )

        request = build_publish_request(
            vendor=vendor,
            version=version,
            platform=release_id,
            detail=detail,
            default_candidate=default_candidate,
        )
        log.info("Publishing %s", request)
        response = self._registry.new_version(self._settings.release_url, request)
        if response:
            log.info("Registry responded: %s", response)
        return ReconcileResult(
            ReconcileOutcome.PUBLISHED,
            candidate=candidate,
            version_with_vendor=identifier,
            request=request,
            response=response,
        )
