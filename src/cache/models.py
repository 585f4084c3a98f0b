# src/cache/models.py - v2
"""Cache domain models: ViewFingerprint, CachedView.

A fingerprint is the full set of query variables for one page/sort
combination. Two fingerprints that differ in any variable address
different cache entries; they never share storage.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from linksync.core.models import Link

OrderBy = Literal["none", "createdAt_DESC"]


class ViewFingerprint(BaseModel):
    """Query variables identifying one cached page of links."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first: int | None = Field(default=None, ge=1)
    skip: int = Field(default=0, ge=0)
    order_by: OrderBy = Field(default="none", alias="orderBy")

    @property
    def key(self) -> str:
        """Canonical string form, used as the store key and in logs."""
        first = "all" if self.first is None else str(self.first)
        return f"first={first}:skip={self.skip}:orderBy={self.order_by}"

    def as_variables(self) -> dict[str, Any]:
        """Return the query variables sent to the transport."""
        return {"first": self.first, "skip": self.skip, "orderBy": self.order_by}


class CachedView(BaseModel):
    """Materialized result of one fetch, stored under its fingerprint.

    ``items`` follows the fingerprint's ``order_by`` except right after a
    creation merge, which prepends.
    """

    fingerprint: ViewFingerprint
    items: list[Link] = Field(default_factory=list)
    total_count: int | None = None

    def index_of(self, item_id: str) -> int | None:
        """Position of the link with ``item_id``, or None."""
        for i, item in enumerate(self.items):
            if item.id == item_id:
                return i
        return None
