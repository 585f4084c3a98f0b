# src/transport/base_transport.py - v1
"""Abstract transport boundary: fetch a page of links, cast a vote.

Query construction and network mechanics live in implementations.
Implementations raise ``TransportError`` on any failed round trip.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from linksync.cache.models import ViewFingerprint
from linksync.core.models import Link, Vote


class FetchResult(BaseModel):
    """Links returned for one fingerprint plus the collection's total size."""

    links: list[Link] = Field(default_factory=list)
    total_count: int | None = None


class BaseTransport(ABC):
    """Unified interface for the remote data source."""

    @abstractmethod
    async def fetch_links(self, fingerprint: ViewFingerprint) -> FetchResult:
        """Run the link query with ``fingerprint.as_variables()``."""

    @abstractmethod
    async def create_vote(self, link_id: str) -> list[Vote]:
        """Cast a vote and return the link's authoritative vote list."""
