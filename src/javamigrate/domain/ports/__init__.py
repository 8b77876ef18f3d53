"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import ReleaseCatalog
from .registry import ReleaseRegistry

__all__ = ["ReleaseCatalog", "ReleaseRegistry"]
