# src/cache/memory_store.py - v1
"""In-memory collection store (the only persisted state of the core).

Views are deep-copied on the way in and out, so a caller holding a view it
read cannot change the cache without calling ``write``.
"""

from __future__ import annotations

import logging

from linksync.cache.base_cache_store import BaseCollectionStore
from linksync.cache.models import CachedView, ViewFingerprint
from linksync.core.errors import NotFound

logger = logging.getLogger(__name__)


class MemoryCollectionStore(BaseCollectionStore):
    """Dict-backed store keyed by the fingerprint's canonical key."""

    def __init__(self) -> None:
        self._views: dict[str, CachedView] = {}

    def read(self, fingerprint: ViewFingerprint) -> CachedView:
        view = self._views.get(fingerprint.key)
        if view is None:
            raise NotFound(fingerprint)
        return view.model_copy(deep=True)

    def write(self, fingerprint: ViewFingerprint, view: CachedView) -> None:
        if view.fingerprint != fingerprint:
            view = view.model_copy(update={"fingerprint": fingerprint})
        self._views[fingerprint.key] = view.model_copy(deep=True)
        logger.debug("Wrote %d links under %s", len(view.items), fingerprint.key)

    def fingerprints(self) -> list[ViewFingerprint]:
        return [view.fingerprint for view in self._views.values()]

    def contains(self, fingerprint: ViewFingerprint) -> bool:
        return fingerprint.key in self._views

    def __len__(self) -> int:
        return len(self._views)
