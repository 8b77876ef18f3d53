"""Errors raised when a static lookup table does not cover an upstream value."""

from __future__ import annotations


class LookupTableError(LookupError):
    """Raised when the catalog hands us a value our mapping tables do not cover.

    These are configuration defects, not transient conditions: the pass must stop.
    """


class UnknownDistributionError(LookupTableError):
    def __init__(self, distribution: str) -> None:
        super().__init__(f"No SDKMAN vendor mapped for distribution {distribution!r}")
        self.distribution = distribution


class UnsupportedPlatformError(LookupTableError):
    def __init__(self, namespace: str, operating_system: str, architecture: str) -> None:
        super().__init__(
            f"No {namespace} platform mapped for {operating_system!r}/{architecture!r}"
        )
        self.namespace = namespace
        self.operating_system = operating_system
        self.architecture = architecture
