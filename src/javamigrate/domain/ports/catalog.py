"""Port for the upstream release catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from javamigrate.domain.types import DetailResultSet, QueryResultSet


@runtime_checkable
class ReleaseCatalog(Protocol):
    """Searchable catalog of Java packages (Foojay)."""

    @property
    def default_query_params(self) -> Mapping[str, Sequence[str]]:
        """Parameters applied to every search unless the caller overrides them."""
        ...

    def query_packages(
        self,
        base_url: str,
        query_params: Mapping[str, Sequence[str]],
    ) -> QueryResultSet | None: ...

    def query_url(self, uri: str) -> DetailResultSet | None: ...


__all__ = ["ReleaseCatalog"]
