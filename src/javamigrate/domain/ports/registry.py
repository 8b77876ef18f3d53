"""Port for the downstream release registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from javamigrate.domain.types import PublishRequest


@runtime_checkable
class ReleaseRegistry(Protocol):
    """Registry holding published releases (SDKMAN).

    ``find_version`` and ``new_version`` talk to different subsystems, each with
    its own base URL and platform naming.
    """

    def find_version(self, base_url: str, version_with_vendor: str, platform: str) -> bool: ...

    def new_version(self, base_url: str, request: PublishRequest) -> str | None: ...


__all__ = ["ReleaseRegistry"]
