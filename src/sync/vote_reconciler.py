# src/sync/vote_reconciler.py - v1
"""Apply a server-confirmed vote result to one cached view."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from linksync.cache.base_cache_store import BaseCollectionStore
from linksync.cache.models import ViewFingerprint
from linksync.core.errors import ItemNotFound
from linksync.core.models import Vote

logger = logging.getLogger(__name__)


def reconcile_vote(
    store: BaseCollectionStore,
    fingerprint: ViewFingerprint,
    item_id: str,
    server_votes: Sequence[Vote],
) -> None:
    """Replace the votes of link ``item_id`` with the authoritative list.

    The list returned by the vote mutation wins outright: it is never added
    to the locally known count. Only the view under ``fingerprint`` is
    rewritten; views cached under other fingerprints stay stale until their
    own re-fetch.

    Raises:
        NotFound: If nothing is cached under ``fingerprint``.
        ItemNotFound: If the link is not in that view. The store is not
            written in that case.
    """
    view = store.read(fingerprint)
    index = view.index_of(item_id)
    if index is None:
        raise ItemNotFound(fingerprint, item_id)

    link = view.items[index]
    view.items[index] = link.model_copy(update={"votes": list(server_votes)})
    store.write(fingerprint, view)
    logger.debug(
        "Reconciled %d votes on %s in %s",
        len(server_votes), item_id, fingerprint.key,
    )
