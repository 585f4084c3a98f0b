# src/cache/fingerprint.py - v3
"""Fingerprint construction and page navigation rules.

``build_fingerprint`` is the only place query variables are derived from a
page number and listing mode. Loading, vote reconciliation and event
merging all key the store with its result; a caller that rebuilt the
variables on its own could diverge and silently miss its cached view.
"""

from __future__ import annotations

from linksync.cache.models import ViewFingerprint

PAGE_SIZE = 5
LIST_CAP = 100


def build_fingerprint(
    page_number: int,
    is_paged_view: bool,
    page_size: int = PAGE_SIZE,
    list_cap: int = LIST_CAP,
) -> ViewFingerprint:
    """Compute the fingerprint for a page of the new or top listing.

    Args:
        page_number: 1-based page number (ignored for the top listing).
        is_paged_view: True for the newest-first paged listing.
        page_size: Links per page in the paged listing.
        list_cap: Fixed limit for the unpaged top listing.

    Returns:
        ViewFingerprint with first/skip/order_by filled in.

    Raises:
        ValueError: If page_number is lower than 1.
    """
    if page_number < 1:
        raise ValueError(f"page_number must be >= 1, got {page_number}")

    if is_paged_view:
        return ViewFingerprint(
            first=page_size,
            skip=(page_number - 1) * page_size,
            order_by="createdAt_DESC",
        )
    return ViewFingerprint(first=list_cap, skip=0, order_by="none")


def can_advance(
    page_number: int, total_count: int | None, page_size: int = PAGE_SIZE
) -> bool:
    """Whether "next" is allowed from ``page_number``.

    Compares against the fractional quotient, so moving onto a final
    partially-filled page is allowed but moving past it is not.
    """
    if total_count is None:
        return False
    return page_number <= total_count / page_size


def can_retreat(page_number: int) -> bool:
    """Whether "previous" is allowed from ``page_number``."""
    return page_number > 1
