# src/sync/event_merger.py - v1
"""Merge server-pushed link events into a cached view.

Each merge is one synchronous read-modify-write on a single fingerprint,
so events apply in arrival order and merges on different fingerprints
never interact.
"""

from __future__ import annotations

import logging
from typing import Literal

from linksync.cache.base_cache_store import BaseCollectionStore
from linksync.cache.models import ViewFingerprint
from linksync.core.errors import ItemNotFound
from linksync.core.models import Link
from linksync.sync.events import LinkCreated, VoteRecorded

logger = logging.getLogger(__name__)

CreatePolicy = Literal["prepend", "first_page_only"]


def merge_create(
    store: BaseCollectionStore,
    fingerprint: ViewFingerprint,
    link: Link,
    policy: CreatePolicy = "prepend",
) -> bool:
    """Prepend a newly created link to the view under ``fingerprint``.

    New links are assumed newest-first: they are not re-sorted against
    ``order_by`` nor trimmed to ``first``, so a bounded page grows by one
    per creation until the next fetch replaces it. With ``first_page_only``
    pages with a non-zero ``skip`` are left untouched.

    Returns:
        True if the view was rewritten.

    Raises:
        NotFound: If nothing is cached under ``fingerprint``.
    """
    view = store.read(fingerprint)
    if policy == "first_page_only" and fingerprint.skip > 0:
        logger.debug(
            "Skipped creation of %s: %s is not the first page",
            link.id, fingerprint.key,
        )
        return False

    view.items.insert(0, link)
    store.write(fingerprint, view)
    logger.debug("Prepended %s to %s", link.id, fingerprint.key)
    return True


def merge_update(
    store: BaseCollectionStore,
    fingerprint: ViewFingerprint,
    link: Link,
) -> None:
    """Replace the cached link with the same id by the full pushed payload.

    Raises:
        NotFound: If nothing is cached under ``fingerprint``.
        ItemNotFound: If the link lies outside the cached page. The store
            is not written in that case.
    """
    view = store.read(fingerprint)
    index = view.index_of(link.id)
    if index is None:
        raise ItemNotFound(fingerprint, link.id)

    view.items[index] = link
    store.write(fingerprint, view)
    logger.debug("Replaced %s at index %d in %s", link.id, index, fingerprint.key)


def apply_event(
    store: BaseCollectionStore,
    fingerprint: ViewFingerprint,
    event: LinkCreated | VoteRecorded,
    policy: CreatePolicy = "prepend",
) -> bool:
    """Dispatch a decoded event to the matching merge.

    Returns:
        True if the view was rewritten.
    """
    if isinstance(event, LinkCreated):
        return merge_create(store, fingerprint, event.link, policy=policy)
    if isinstance(event, VoteRecorded):
        merge_update(store, fingerprint, event.link)
        return True
    raise TypeError(f"Unsupported event type: {type(event).__name__}")
