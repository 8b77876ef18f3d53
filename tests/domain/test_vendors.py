from __future__ import annotations

import pytest

from javamigrate.domain.errors import LookupTableError, UnknownDistributionError
from javamigrate.domain.vendors import FOOJAY_SDKMAN_VENDORS, vendor_for, version_with_vendor


@pytest.mark.parametrize(
    ("distribution", "vendor"),
    [
        ("temurin", "tem"),
        ("zulu", "zulu"),
        ("liberica", "librca"),
        ("corretto", "amzn"),
        ("graalvm_ce17", "grl"),
        ("sap_machine", "sapmchn"),
    ],
)
def test_vendor_for_known_distributions(distribution: str, vendor: str) -> None:
    assert vendor_for(distribution) == vendor


def test_vendor_for_unknown_distribution_fails_loudly() -> None:
    with pytest.raises(UnknownDistributionError) as exc:
        vendor_for("homebrew_jdk")

    assert isinstance(exc.value, LookupTableError)
    assert exc.value.distribution == "homebrew_jdk"
    assert "homebrew_jdk" in str(exc.value)


def test_vendor_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        FOOJAY_SDKMAN_VENDORS["new"] = "x"  # type: ignore[index]


def test_version_with_vendor_is_hyphen_joined() -> None:
    assert version_with_vendor("17.0.2", "tem") == "17.0.2-tem"
