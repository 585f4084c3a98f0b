# src/cache/base_cache_store.py - v2
"""Abstract collection store interface.

Every component that touches cached views receives a store instance and
goes through ``read``/``write``; there is no module-level cache.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from linksync.cache.models import CachedView, ViewFingerprint


class BaseCollectionStore(ABC):
    """Unified interface for cached view storage."""

    @abstractmethod
    def read(self, fingerprint: ViewFingerprint) -> CachedView:
        """Return the cached view for ``fingerprint``.

        Raises:
            NotFound: If no fetch has completed for that fingerprint.
        """

    @abstractmethod
    def write(self, fingerprint: ViewFingerprint, view: CachedView) -> None:
        """Replace the stored view for ``fingerprint`` (total overwrite)."""

    @abstractmethod
    def fingerprints(self) -> list[ViewFingerprint]:
        """List fingerprints that currently hold a view."""

    def contains(self, fingerprint: ViewFingerprint) -> bool:
        """Whether a view is cached for ``fingerprint``."""
        return fingerprint in self.fingerprints()
