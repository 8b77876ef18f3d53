from __future__ import annotations

from types import MappingProxyType

import pytest

from javamigrate.domain import platforms
from javamigrate.domain.errors import UnsupportedPlatformError
from javamigrate.domain.platforms import broker_platform, release_platform


@pytest.mark.parametrize(
    ("operating_system", "architecture", "broker", "release"),
    [
        ("linux", "x64", "linuxx64", "LINUX_64"),
        ("linux", "amd64", "linuxx64", "LINUX_64"),
        ("linux", "aarch64", "linuxarm64", "LINUX_ARM64"),
        ("linux", "x86", "linuxx32", "LINUX_32"),
        ("linux", "arm", "linuxarm32hf", "LINUX_ARM32HF"),
        ("macos", "x64", "darwinx64", "MAC_OSX"),
        ("macos", "aarch64", "darwinarm64", "MAC_ARM64"),
        ("windows", "x64", "windowsx64", "WINDOWS_64"),
        ("Linux", "X86_64", "linuxx64", "LINUX_64"),
    ],
)
def test_platform_namespaces(
    operating_system: str, architecture: str, broker: str, release: str
) -> None:
    assert broker_platform(operating_system, architecture) == broker
    assert release_platform(operating_system, architecture) == release


def test_linux_x64_differs_between_namespaces() -> None:
    assert broker_platform("linux", "x64") != release_platform("linux", "x64")


def test_namespaces_are_looked_up_independently(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        platforms,
        "RELEASE_PLATFORMS",
        MappingProxyType({("linux", "x64"): "CUSTOM_RELEASE_ID"}),
    )

    assert release_platform("linux", "x64") == "CUSTOM_RELEASE_ID"
    assert broker_platform("linux", "x64") == "linuxx64"

    monkeypatch.setattr(
        platforms,
        "BROKER_PLATFORMS",
        MappingProxyType({("linux", "x64"): "custombroker"}),
    )

    assert broker_platform("linux", "x64") == "custombroker"
    assert release_platform("linux", "x64") == "CUSTOM_RELEASE_ID"


def test_unmapped_platform_fails_loudly() -> None:
    with pytest.raises(UnsupportedPlatformError) as exc:
        broker_platform("aix", "ppc64")

    assert exc.value.namespace == "broker"
    assert exc.value.operating_system == "aix"

    with pytest.raises(UnsupportedPlatformError, match="release"):
        release_platform("linux", "s390x")
