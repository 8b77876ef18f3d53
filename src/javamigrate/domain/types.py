"""Domain types shared by the catalog, registry and reconciliation layers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from functools import total_ordering
from typing import Final

# SDKMAN candidate every release is published under
JAVA_CANDIDATE: Final = "java"

_JAVA_VERSION_PATTERN = re.compile(
    r"^(?P<components>\d+(?:\.\d+)*)"
    r"(?:-(?P<pre>(?i:ea|alpha|beta|rc|internal)[0-9A-Za-z.]*))?"
    r"(?:\+(?P<build>\d+))?"
    r"(?:-(?P<opt>[-0-9A-Za-z.]+))?$"
)


def _significant(components: tuple[int, ...]) -> tuple[int, ...]:
    end = len(components)
    while end > 1 and components[end - 1] == 0:
        end -= 1
    return components[:end]


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class JavaVersion:
    """Structured Java version as published by Foojay (``17.0.2+8``, ``22-ea+27``).

    Ordering is numeric per component; trailing zero components do not count,
    so ``17`` and ``17.0.0`` are equal. A GA release ranks above any
    pre-release with the same components, and higher build numbers rank last.
    """

    components: tuple[int, ...]
    pre: str | None = None
    build: int | None = None
    raw: str = ""

    @classmethod
    def parse(cls, value: str) -> JavaVersion:
        match = _JAVA_VERSION_PATTERN.match(value.strip())
        if match is None:
            raise ValueError(f"Invalid Java version: {value!r}")
        build = match.group("build")
        return cls(
            components=tuple(int(part) for part in match.group("components").split(".")),
            pre=match.group("pre"),
            build=int(build) if build is not None else None,
            raw=value.strip(),
        )

    def _component(self, index: int) -> int:
        return self.components[index] if len(self.components) > index else 0

    @property
    def feature(self) -> int:
        return self._component(0)

    @property
    def interim(self) -> int:
        return self._component(1)

    @property
    def update(self) -> int:
        return self._component(2)

    @property
    def patch(self) -> int:
        return self._component(3)

    @property
    def is_prerelease(self) -> bool:
        return self.pre is not None

    @property
    def sort_key(self) -> tuple[tuple[int, ...], bool, int]:
        return (_significant(self.components), self.pre is None, self.build or 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavaVersion):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: JavaVersion) -> bool:
        if not isinstance(other, JavaVersion):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __str__(self) -> str:
        if self.raw:
            return self.raw
        text = ".".join(str(part) for part in self.components)
        if self.pre:
            text += f"-{self.pre}"
        if self.build is not None:
            text += f"+{self.build}"
        return text


@dataclass(frozen=True, slots=True)
class ReleaseDescriptor:
    """One downloadable package listed by the upstream catalog."""

    id: str
    distribution: str
    java_version: JavaVersion
    distribution_version: str
    operating_system: str
    architecture: str
    filename: str
    pkg_info_uri: str
    archive_type: str | None = None
    package_type: str | None = None


@dataclass(frozen=True, slots=True)
class QueryResultSet:
    """Envelope of a catalog search; ``result`` is ``None`` when the catalog sent none."""

    result: tuple[ReleaseDescriptor, ...] | None
    message: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.result


@dataclass(frozen=True, slots=True)
class DetailRecord:
    """Download details ("ids" record) for a single package."""

    filename: str
    direct_download_uri: str
    download_site_uri: str | None = None
    signature_uri: str | None = None
    checksum_uri: str | None = None
    checksum: str | None = None
    checksum_type: str | None = None


@dataclass(frozen=True, slots=True)
class DetailResultSet:
    result: tuple[DetailRecord, ...] | None
    message: str = ""

    def single(self) -> DetailRecord | None:
        """Return the only record, or ``None`` when there are zero or several."""

        if self.result is None or len(self.result) != 1:
            return None
        return self.result[0]


@dataclass(frozen=True, slots=True)
class PublishRequest:
    """Payload registering one release with the downstream registry."""

    candidate: str
    vendor: str
    version: str
    platform: str
    url: str
    checksum: str | None = None
    checksum_type: str | None = None
    default: bool = False


class ReconcileOutcome(StrEnum):
    NO_RESULTS = "no_results"
    NO_CANDIDATE = "no_candidate"
    UNREPRESENTABLE_VERSION = "unrepresentable_version"
    ALREADY_EXISTS = "already_exists"
    DETAIL_UNRESOLVED = "detail_unresolved"
    PUBLISHED = "published"


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Outcome of one reconciliation pass, carrying whatever was derived before it stopped."""

    outcome: ReconcileOutcome
    candidate: ReleaseDescriptor | None = None
    version_with_vendor: str | None = None
    request: PublishRequest | None = None
    response: str | None = None

    @property
    def published(self) -> bool:
        return self.outcome is ReconcileOutcome.PUBLISHED
