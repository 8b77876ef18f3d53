"""Foojay distribution to SDKMAN vendor mapping."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .errors import UnknownDistributionError

if TYPE_CHECKING:
    from collections.abc import Mapping

FOOJAY_SDKMAN_VENDORS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "bisheng": "bsg",
        "corretto": "amzn",
        "dragonwell": "albba",
        "gluon_graalvm": "gln",
        "graalvm": "graal",
        "graalvm_ce8": "grl",
        "graalvm_ce11": "grl",
        "graalvm_ce16": "grl",
        "graalvm_ce17": "grl",
        "graalvm_ce19": "grl",
        "graalvm_ce20": "grl",
        "graalvm_community": "graalce",
        "jetbrains": "jbr",
        "kona": "kona",
        "liberica": "librca",
        "liberica_native": "nik",
        "mandrel": "mandrel",
        "microsoft": "ms",
        "oracle": "oracle",
        "oracle_open_jdk": "open",
        "sap_machine": "sapmchn",
        "semeru": "sem",
        "temurin": "tem",
        "trava": "trava",
        "zulu": "zulu",
    }
)


def vendor_for(distribution: str) -> str:
    """Return the SDKMAN vendor tag for a Foojay distribution id."""

    try:
        return FOOJAY_SDKMAN_VENDORS[distribution]
    except KeyError:
        raise UnknownDistributionError(distribution) from None


def version_with_vendor(version: str, vendor: str) -> str:
    return f"{version}-{vendor}"
