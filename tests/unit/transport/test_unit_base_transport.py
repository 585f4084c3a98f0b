# tests/unit/transport/test_unit_base_transport.py - v1
"""Tests for transport/base_transport.py - BaseTransport ABC and FetchResult."""

from __future__ import annotations

import pytest

from linksync.transport.base_transport import BaseTransport, FetchResult


class TestBaseTransport:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseTransport()  # type: ignore[abstract]

    def test_has_required_methods(self):
        for method in ["fetch_links", "create_vote"]:
            assert hasattr(BaseTransport, method)


class TestFetchResult:
    def test_defaults(self):
        r = FetchResult()
        assert r.links == []
        assert r.total_count is None

    def test_from_wire_links(self):
        r = FetchResult.model_validate({
            "links": [{
                "id": "L1", "createdAt": "2026-10-19T00:00:00Z",
                "url": "https://example.com", "description": "x",
            }],
            "total_count": 1,
        })
        assert r.links[0].id == "L1"
