"""Platform identifiers for the two SDKMAN subsystems.

The broker (used to check whether a version exists) and the release API (used
to register one) name platforms differently. Each namespace has its own table;
neither is derived from the other.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .errors import UnsupportedPlatformError

if TYPE_CHECKING:
    from collections.abc import Mapping

PlatformKey = tuple[str, str]

_OPERATING_SYSTEMS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "linux": "linux",
        "macos": "darwin",
        "darwin": "darwin",
        "windows": "windows",
    }
)

_ARCHITECTURES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "x64": "x64",
        "amd64": "x64",
        "x86_64": "x64",
        "aarch64": "arm64",
        "arm64": "arm64",
        "x86": "x32",
        "x32": "x32",
        "i386": "x32",
        "i586": "x32",
        "i686": "x32",
        "arm": "arm32",
        "arm32": "arm32",
        "aarch32": "arm32",
    }
)

BROKER_PLATFORMS: Final[Mapping[PlatformKey, str]] = MappingProxyType(
    {
        ("linux", "x64"): "linuxx64",
        ("linux", "arm64"): "linuxarm64",
        ("linux", "x32"): "linuxx32",
        ("linux", "arm32"): "linuxarm32hf",
        ("darwin", "x64"): "darwinx64",
        ("darwin", "arm64"): "darwinarm64",
        ("windows", "x64"): "windowsx64",
    }
)

RELEASE_PLATFORMS: Final[Mapping[PlatformKey, str]] = MappingProxyType(
    {
        ("linux", "x64"): "LINUX_64",
        ("linux", "arm64"): "LINUX_ARM64",
        ("linux", "x32"): "LINUX_32",
        ("linux", "arm32"): "LINUX_ARM32HF",
        ("darwin", "x64"): "MAC_OSX",
        ("darwin", "arm64"): "MAC_ARM64",
        ("windows", "x64"): "WINDOWS_64",
    }
)


def _normalize(operating_system: str, architecture: str) -> PlatformKey:
    os_key = operating_system.strip().lower()
    arch_key = architecture.strip().lower()
    return _OPERATING_SYSTEMS.get(os_key, os_key), _ARCHITECTURES.get(arch_key, arch_key)


def _lookup(
    table: Mapping[PlatformKey, str],
    namespace: str,
    operating_system: str,
    architecture: str,
) -> str:
    try:
        return table[_normalize(operating_system, architecture)]
    except KeyError:
        raise UnsupportedPlatformError(namespace, operating_system, architecture) from None


def broker_platform(operating_system: str, architecture: str) -> str:
    """Platform id understood by the SDKMAN broker's download endpoint."""

    return _lookup(BROKER_PLATFORMS, "broker", operating_system, architecture)


def release_platform(operating_system: str, architecture: str) -> str:
    """Platform id understood by the SDKMAN release API."""

    return _lookup(RELEASE_PLATFORMS, "release", operating_system, architecture)
