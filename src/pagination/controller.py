# src/pagination/controller.py - v1
"""Page navigation for the new (paged) and top (unpaged) listings.

All fingerprints come from ``cache.fingerprint.build_fingerprint``; the
controller only binds the configured page size and list cap.
"""

from __future__ import annotations

from linksync.cache import fingerprint as fp
from linksync.cache.models import ViewFingerprint
from linksync.config.settings import Settings


class PaginationController:
    """Computes fingerprints and navigation targets. Holds no cache state."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or Settings()
        self.page_size = settings.page_size
        self.list_cap = settings.list_cap

    def build_fingerprint(self, page_number: int, is_paged_view: bool) -> ViewFingerprint:
        return fp.build_fingerprint(
            page_number, is_paged_view,
            page_size=self.page_size, list_cap=self.list_cap,
        )

    def can_advance(self, page_number: int, total_count: int | None) -> bool:
        return fp.can_advance(page_number, total_count, page_size=self.page_size)

    def can_retreat(self, page_number: int) -> bool:
        return fp.can_retreat(page_number)

    def next_page(self, page_number: int, total_count: int | None) -> int | None:
        """Target of a "next" navigation, or None when it is not permitted."""
        if not self.can_advance(page_number, total_count):
            return None
        return page_number + 1

    def previous_page(self, page_number: int) -> int | None:
        """Target of a "previous" navigation, or None on the first page."""
        if not self.can_retreat(page_number):
            return None
        return page_number - 1
