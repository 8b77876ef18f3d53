"""Pick the release to reconcile from a catalog search result."""

from __future__ import annotations

from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from .types import QueryResultSet, ReleaseDescriptor

    ExclusionRule = Callable[[ReleaseDescriptor], bool]

log = getLogger(__name__)


def liberica_lite_package(descriptor: ReleaseDescriptor) -> bool:
    """Liberica publishes trimmed "lite" bundles next to the full JDK."""

    return "lite" in descriptor.filename.lower()


EXCLUSION_RULES: Final[Mapping[str, tuple[ExclusionRule, ...]]] = MappingProxyType(
    {
        "liberica": (liberica_lite_package,),
    }
)


def is_eligible(
    descriptor: ReleaseDescriptor,
    rules: Mapping[str, tuple[ExclusionRule, ...]] | None = None,
) -> bool:
    """Return ``False`` when any exclusion rule of the descriptor's distribution matches."""

    active_rules = EXCLUSION_RULES if rules is None else rules
    for rule in active_rules.get(descriptor.distribution, ()):
        if rule(descriptor):
            log.debug("Excluding %s (%s)", descriptor.filename, rule.__name__)
            return False
    return True


def eligible_candidates(
    result_set: QueryResultSet | None,
    rules: Mapping[str, tuple[ExclusionRule, ...]] | None = None,
) -> list[ReleaseDescriptor]:
    if result_set is None or result_set.is_empty:
        return []
    return [descriptor for descriptor in _iter_result(result_set) if is_eligible(descriptor, rules)]


def select_candidate(
    result_set: QueryResultSet | None,
    rules: Mapping[str, tuple[ExclusionRule, ...]] | None = None,
) -> ReleaseDescriptor | None:
    """Return the eligible release with the highest Java version, if any.

    When several eligible releases share the highest version, which one is
    returned is unspecified; today it is the first in catalog order.
    """

    candidates = eligible_candidates(result_set, rules)
    if not candidates:
        return None
    return max(candidates, key=lambda descriptor: descriptor.java_version)


def _iter_result(result_set: QueryResultSet) -> Iterable[ReleaseDescriptor]:
    return result_set.result or ()
