# tests/conftest.py - v2
"""Shared test fixtures for unit and integration tests.

Provides sample links, a two-per-page first page fingerprint, a populated
in-memory store and a mock transport. No network I/O.
"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from linksync.cache.memory_store import MemoryCollectionStore
from linksync.cache.models import CachedView, ViewFingerprint
from linksync.core.models import Link, PostedBy, Vote, VoteUser
from linksync.transport.base_transport import FetchResult


def make_votes(count: int, prefix: str = "v") -> list[Vote]:
    """Build ``count`` distinct votes."""
    return [
        Vote(id=f"{prefix}{i}", user=VoteUser(id=f"user_{prefix}{i}"))
        for i in range(count)
    ]


def make_link(link_id: str, votes: int = 0, day: int = 1) -> Link:
    """Build a link created on 2026-10-<day>."""
    return Link(
        id=link_id,
        created_at=datetime(2026, 10, day, tzinfo=timezone.utc),
        url=f"https://example.com/{link_id.lower()}",
        description=f"Link {link_id}",
        posted_by=PostedBy(id="user_1", name="Ada"),
        votes=make_votes(votes, prefix=f"{link_id}_"),
    )


# === FIXTURES: Sample data ===


@pytest.fixture
def link_a() -> Link:
    return make_link("A", votes=1, day=3)


@pytest.fixture
def link_b() -> Link:
    return make_link("B", votes=0, day=2)


@pytest.fixture
def link_c() -> Link:
    return make_link("C", votes=0, day=4)


@pytest.fixture
def page_fp() -> ViewFingerprint:
    """First page of the new listing with two links per page."""
    return ViewFingerprint(first=2, skip=0, order_by="createdAt_DESC")


@pytest.fixture
def store(page_fp, link_a, link_b) -> MemoryCollectionStore:
    """Store holding [A(votes=1), B(votes=0)] under ``page_fp``."""
    s = MemoryCollectionStore()
    s.write(page_fp, CachedView(fingerprint=page_fp, items=[link_a, link_b], total_count=4))
    return s


# === FIXTURES: Mock transport ===


@pytest.fixture
def mock_transport(link_a, link_b) -> AsyncMock:
    """Mock BaseTransport returning [A, B] out of 12 links."""
    transport = AsyncMock()
    transport.fetch_links = AsyncMock(
        return_value=FetchResult(links=[link_a, link_b], total_count=12)
    )
    transport.create_vote = AsyncMock(return_value=make_votes(2, prefix="srv"))
    return transport


# === FIXTURES: Factories ===


@pytest.fixture
def link_factory():
    """Factory for extra links: ``link_factory("D", votes=2, day=5)``."""
    return make_link


@pytest.fixture
def votes_factory():
    """Factory for vote lists: ``votes_factory(3, prefix="x")``."""
    return make_votes
