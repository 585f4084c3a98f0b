# tests/unit/core/test_unit_core_models.py - v1
"""Tests for core/models.py - Link, Vote, PostedBy."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from linksync.core.models import Link, Vote


class TestLink:
    def test_from_wire_payload(self):
        link = Link.model_validate({
            "id": "L1",
            "createdAt": "2026-10-19T08:00:00Z",
            "url": "https://example.com",
            "description": "Example",
            "postedBy": {"id": "u1", "name": "Ada"},
            "votes": [{"id": "v1", "user": {"id": "u2"}}],
        })
        assert link.created_at == datetime(2026, 10, 19, 8, tzinfo=timezone.utc)
        assert link.posted_by is not None
        assert link.posted_by.name == "Ada"
        assert link.vote_count == 1

    def test_field_names_accepted(self):
        link = Link(
            id="L1",
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            url="https://example.com",
            description="Example",
        )
        assert link.posted_by is None
        assert link.votes == []
        assert link.vote_count == 0

    def test_missing_url_rejected(self):
        with pytest.raises(ValidationError):
            Link.model_validate({"id": "L1", "createdAt": "2026-01-01T00:00:00Z", "description": "x"})


class TestVote:
    def test_create(self):
        vote = Vote.model_validate({"id": "v1", "user": {"id": "u1"}})
        assert vote.user.id == "u1"
