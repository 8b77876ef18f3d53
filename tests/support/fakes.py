"""Fake ports and release builders shared by domain and app tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from javamigrate.adapters.foojay import DEFAULT_QUERY_PARAMS
from javamigrate.domain.types import (
    DetailRecord,
    DetailResultSet,
    JavaVersion,
    QueryResultSet,
    ReleaseDescriptor,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from javamigrate.domain.types import PublishRequest

CATALOG_URL = "https://catalog.test/disco/v3.0"
BROKER_URL = "https://broker.test/2/broker"
RELEASE_URL = "https://release.test"


def make_release(
    java_version: str = "17.0.2+8",
    *,
    distribution: str = "temurin",
    distribution_version: str | None = None,
    operating_system: str = "linux",
    architecture: str = "x64",
    filename: str | None = None,
    package_id: str | None = None,
) -> ReleaseDescriptor:
    version = JavaVersion.parse(java_version)
    identifier = package_id or f"{distribution}-{java_version}-{operating_system}-{architecture}"
    return ReleaseDescriptor(
        id=identifier,
        distribution=distribution,
        java_version=version,
        distribution_version=distribution_version or java_version.split("+")[0],
        operating_system=operating_system,
        architecture=architecture,
        filename=filename or f"{distribution}-jdk-{java_version}-{architecture}.tar.gz",
        pkg_info_uri=f"{CATALOG_URL}/ids/{identifier}",
        archive_type="tar.gz",
        package_type="jdk",
    )


def make_detail(filename: str = "jdk.tar.gz", *, checksum: str | None = "abc123") -> DetailRecord:
    return DetailRecord(
        filename=filename,
        direct_download_uri=f"https://downloads.test/{filename}",
        checksum=checksum,
        checksum_type="sha256" if checksum else None,
    )


@dataclass
class FakeCatalog:
    packages: QueryResultSet | None = None
    details: DetailResultSet | None = None
    default_query_params: Mapping[str, Sequence[str]] = field(
        default_factory=lambda: DEFAULT_QUERY_PARAMS
    )
    package_queries: list[tuple[str, dict[str, list[str]]]] = field(default_factory=list)
    detail_queries: list[str] = field(default_factory=list)
    closed: bool = False

    @classmethod
    def with_releases(
        cls,
        *releases: ReleaseDescriptor,
        details: Sequence[DetailRecord] | None = None,
    ) -> FakeCatalog:
        detail_set = DetailResultSet(result=tuple(details)) if details is not None else None
        return cls(packages=QueryResultSet(result=releases), details=detail_set)

    def __enter__(self) -> FakeCatalog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    def query_packages(
        self,
        base_url: str,
        query_params: Mapping[str, Sequence[str]],
    ) -> QueryResultSet | None:
        self.package_queries.append(
            (base_url, {key: list(values) for key, values in query_params.items()})
        )
        return self.packages

    def query_url(self, uri: str) -> DetailResultSet | None:
        self.detail_queries.append(uri)
        return self.details


@dataclass
class FakeRegistry:
    """In-memory registry; ``new_version`` records the release so later checks see it."""

    published: set[tuple[str, str]] = field(default_factory=set)
    response: str | None = "Released"
    find_calls: list[tuple[str, str, str]] = field(default_factory=list)
    publish_calls: list[tuple[str, PublishRequest]] = field(default_factory=list)
    platform_aliases: dict[str, str] = field(default_factory=dict)
    closed: bool = False

    def __enter__(self) -> FakeRegistry:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    def find_version(self, base_url: str, version_with_vendor: str, platform: str) -> bool:
        self.find_calls.append((base_url, version_with_vendor, platform))
        return (version_with_vendor, platform) in self.published

    def new_version(self, base_url: str, request: PublishRequest) -> str | None:
        self.publish_calls.append((base_url, request))
        broker_id = self.platform_aliases.get(request.platform, request.platform)
        self.published.add((f"{request.version}-{request.vendor}", broker_id))
        return self.response
