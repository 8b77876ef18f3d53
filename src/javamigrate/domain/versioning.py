"""Derive SDKMAN version identifiers from catalog releases."""

from __future__ import annotations

import re
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .types import ReleaseDescriptor

    VersionRule = Callable[[ReleaseDescriptor], str | None]

log = getLogger(__name__)

MAX_VERSION_COMPONENTS: Final = 4
_DOTTED_NUMERIC = re.compile(r"\d+(?:\.\d+)*")


def _format_java_version(descriptor: ReleaseDescriptor) -> str | None:
    version = descriptor.java_version
    if version.is_prerelease:
        log.debug("Skipping pre-release %s of %s", version, descriptor.distribution)
        return None
    if len(version.components) > MAX_VERSION_COMPONENTS:
        log.debug("Skipping %s of %s: too many components", version, descriptor.distribution)
        return None
    parts = [version.feature, version.interim, version.update]
    if version.patch:
        parts.append(version.patch)
    return ".".join(str(part) for part in parts)


def _format_distribution_version(descriptor: ReleaseDescriptor) -> str | None:
    # vendors that ship their own dotted build scheme (e.g. Corretto 17.0.2.8.1)
    if descriptor.java_version.is_prerelease:
        return None
    value = descriptor.distribution_version.strip()
    if not _DOTTED_NUMERIC.fullmatch(value):
        log.debug("Skipping %s: distribution version %r", descriptor.distribution, value)
        return None
    return value


def _format_graalvm_ce(descriptor: ReleaseDescriptor) -> str | None:
    base = _format_distribution_version(descriptor)
    if base is None:
        return None
    return f"{base}.r{descriptor.java_version.feature}"


VERSION_RULES: Final[Mapping[str, VersionRule]] = MappingProxyType(
    {
        "corretto": _format_distribution_version,
        "graalvm_ce8": _format_graalvm_ce,
        "graalvm_ce11": _format_graalvm_ce,
        "graalvm_ce16": _format_graalvm_ce,
        "graalvm_ce17": _format_graalvm_ce,
        "graalvm_ce19": _format_graalvm_ce,
        "graalvm_ce20": _format_graalvm_ce,
    }
)


def format_version(descriptor: ReleaseDescriptor) -> str | None:
    """Return the SDKMAN version for ``descriptor``, or ``None`` if it has no SDKMAN form.

    ``None`` means "skip this release"; it is never an error.
    """

    rule = VERSION_RULES.get(descriptor.distribution, _format_java_version)
    return rule(descriptor)
