# src/api/facade.py - v2
"""Public API facade: one feed, one store, one active fingerprint.

Usage:
    from linksync.api.facade import LinkFeed
    feed = LinkFeed(transport)
    await feed.load(page_number=1, is_paged_view=True)
    links = feed.links()

Load, vote and event merges all read the active fingerprint, which is
only ever produced by the pagination controller.
"""

from __future__ import annotations

import logging
from typing import Any

from linksync.api.models import GENERIC_ERROR, FeedState
from linksync.cache.base_cache_store import BaseCollectionStore
from linksync.cache.memory_store import MemoryCollectionStore
from linksync.cache.models import CachedView, ViewFingerprint
from linksync.config.settings import Settings
from linksync.core.errors import ItemNotFound, NotFound, TransportError
from linksync.core.models import Link
from linksync.logging.context import set_operation_context, set_view_context
from linksync.pagination.controller import PaginationController
from linksync.sync.subscription import EventSubscription
from linksync.sync.vote_reconciler import reconcile_vote
from linksync.transport.base_transport import BaseTransport
from linksync.view.materializer import materialize, mode_for

logger = logging.getLogger(__name__)


class LinkFeed:
    """Keeps the cached view behind a link listing in sync with the server."""

    def __init__(
        self,
        transport: BaseTransport,
        store: BaseCollectionStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.transport = transport
        self.store = store if store is not None else MemoryCollectionStore()
        self.pagination = PaginationController(self.settings)
        self.state = FeedState()
        self._fingerprint: ViewFingerprint | None = None

    @property
    def fingerprint(self) -> ViewFingerprint | None:
        """Fingerprint of the listing currently shown."""
        return self._fingerprint

    async def load(self, page_number: int, is_paged_view: bool) -> FeedState:
        """Fetch a page and replace its cached view.

        A failed fetch sets the error state and leaves any view already
        cached for that fingerprint untouched.
        """
        fingerprint = self.pagination.build_fingerprint(page_number, is_paged_view)
        self._fingerprint = fingerprint
        set_view_context(fingerprint.key, page_number)
        set_operation_context("load")
        self.state = FeedState(
            status="loading", page_number=page_number, is_paged_view=is_paged_view,
        )

        try:
            result = await self.transport.fetch_links(fingerprint)
        except TransportError as e:
            logger.warning("Fetch failed for %s: %s", fingerprint.key, e)
            self.state = self.state.model_copy(
                update={"status": "error", "error": GENERIC_ERROR}
            )
            return self.state

        view = CachedView(
            fingerprint=fingerprint,
            items=result.links,
            total_count=result.total_count,
        )
        self.store.write(fingerprint, view)
        logger.info(
            "Loaded %d links for %s (total=%s)",
            len(result.links), fingerprint.key, result.total_count,
        )
        self.state = self.state.model_copy(update={"status": "ready"})
        return self.state

    def links(self) -> list[Link]:
        """Links to render for the active listing; empty before any fetch."""
        view = self._active_view()
        if view is None:
            return []
        return materialize(view, mode_for(self.state.is_paged_view))

    async def vote(self, link_id: str) -> bool:
        """Cast a vote and reconcile the server's vote list into the view.

        Returns:
            True if the active view was updated. A link outside the cached
            page or a failed round trip both return False without touching
            any cached view.
        """
        set_operation_context("vote")
        # Reconcile against the page the vote was cast on, even if the
        # user navigates while the mutation is in flight.
        fingerprint = self._fingerprint
        if fingerprint is None:
            return False

        try:
            server_votes = await self.transport.create_vote(link_id)
        except TransportError as e:
            logger.warning("Vote on %s failed: %s", link_id, e)
            return False

        try:
            reconcile_vote(self.store, fingerprint, link_id, server_votes)
        except (NotFound, ItemNotFound) as e:
            logger.debug("Vote not reconciled: %s", e)
            return False
        return True

    def subscribe(self) -> EventSubscription:
        """Subscription merging pushed events into the active view."""
        return EventSubscription(
            self.store,
            lambda: self._fingerprint,
            policy=self.settings.create_event_policy,
        )

    def handle_event(self, message: dict[str, Any]) -> bool:
        """Merge one pushed message; see ``EventSubscription.handle``."""
        return self.subscribe().handle(message)

    def total_count(self) -> int | None:
        view = self._active_view()
        return None if view is None else view.total_count

    def can_advance(self) -> bool:
        return self.state.is_paged_view and self.pagination.can_advance(
            self.state.page_number, self.total_count()
        )

    def can_retreat(self) -> bool:
        return self.state.is_paged_view and self.pagination.can_retreat(
            self.state.page_number
        )

    def _active_view(self) -> CachedView | None:
        if self._fingerprint is None:
            return None
        try:
            return self.store.read(self._fingerprint)
        except NotFound:
            return None
