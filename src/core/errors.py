# src/core/errors.py - v1
"""Error taxonomy for cache synchronization.

``NotFound`` and ``ItemNotFound`` are expected, local outcomes: they end a
reconcile or merge attempt without touching the store and are swallowed at
the facade and subscription boundaries. Only ``TransportError`` surfaces to
the presentation layer, as a generic error state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linksync.cache.models import ViewFingerprint


class LinkSyncError(Exception):
    """Base class for all linksync errors."""


class NotFound(LinkSyncError):
    """No fetch has completed for the requested fingerprint."""

    def __init__(self, fingerprint: ViewFingerprint):
        self.fingerprint = fingerprint
        super().__init__(f"No cached view for {fingerprint.key}")


class ItemNotFound(LinkSyncError):
    """Target link is absent from the addressed cached view."""

    def __init__(self, fingerprint: ViewFingerprint, item_id: str):
        self.fingerprint = fingerprint
        self.item_id = item_id
        super().__init__(f"Link {item_id!r} not in cached view {fingerprint.key}")


class EventDecodeError(LinkSyncError):
    """A pushed message matched no known event shape."""


class TransportError(LinkSyncError):
    """A fetch or vote round trip failed."""
