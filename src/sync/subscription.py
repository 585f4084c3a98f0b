# src/sync/subscription.py - v1
"""Consume an event channel and merge each message into the active view."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Callable
from typing import Any

from linksync.cache.base_cache_store import BaseCollectionStore
from linksync.cache.models import ViewFingerprint
from linksync.core.errors import EventDecodeError, ItemNotFound, NotFound
from linksync.logging.context import set_operation_context
from linksync.sync.event_merger import CreatePolicy, apply_event
from linksync.sync.events import decode_event

logger = logging.getLogger(__name__)


class EventSubscription:
    """Apply pushed events, in channel order, to whichever view is active.

    The active fingerprint is resolved per message, so page navigation
    while subscribed redirects later merges to the new page.
    """

    def __init__(
        self,
        store: BaseCollectionStore,
        fingerprint_provider: Callable[[], ViewFingerprint | None],
        policy: CreatePolicy = "prepend",
    ) -> None:
        self._store = store
        self._fingerprint_provider = fingerprint_provider
        self._policy = policy
        self._active = True
        self.applied = 0
        self.skipped = 0

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop merging future messages. Past merges stay in the store."""
        self._active = False

    def handle(self, message: dict[str, Any]) -> bool:
        """Decode and merge one message.

        Missing views, links outside the cached page and undecodable
        messages are expected and only logged.

        Returns:
            True if the active view was rewritten.
        """
        if not self._active:
            return False

        fingerprint = self._fingerprint_provider()
        if fingerprint is None:
            self.skipped += 1
            return False

        set_operation_context("merge_event")
        try:
            event = decode_event(message)
            changed = apply_event(self._store, fingerprint, event, policy=self._policy)
        except (EventDecodeError, NotFound, ItemNotFound) as e:
            logger.debug("Event not merged: %s", e)
            self.skipped += 1
            return False

        if changed:
            self.applied += 1
        else:
            self.skipped += 1
        return changed

    async def run(self, source: AsyncIterable[dict[str, Any]]) -> None:
        """Merge messages from ``source`` until it ends or we unsubscribe."""
        async for message in source:
            if not self._active:
                break
            self.handle(message)
        logger.info(
            "Event subscription ended: %d applied, %d skipped",
            self.applied, self.skipped,
        )
