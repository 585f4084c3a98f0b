# tests/unit/sync/test_unit_subscription.py - v1
"""Tests for sync/subscription.py - channel consumption and swallow policy."""

from __future__ import annotations

import pytest

from linksync.cache.models import ViewFingerprint
from linksync.sync.subscription import EventSubscription


def _message(link, kind="created"):
    return {"kind": kind, "link": link.model_dump(by_alias=True, mode="json")}


async def _channel(messages):
    for message in messages:
        yield message


class TestEventSubscriptionHandle:
    def test_applies_created(self, store, page_fp, link_c):
        sub = EventSubscription(store, lambda: page_fp)
        assert sub.handle(_message(link_c)) is True
        assert store.read(page_fp).items[0].id == "C"
        assert sub.applied == 1

    def test_swallows_item_outside_page(self, store, page_fp, link_factory):
        before = store.read(page_fp)
        sub = EventSubscription(store, lambda: page_fp)
        assert sub.handle(_message(link_factory("Z", votes=1), kind="vote_recorded")) is False
        assert store.read(page_fp) == before
        assert sub.skipped == 1

    def test_swallows_missing_view(self, store, link_c):
        sub = EventSubscription(store, lambda: ViewFingerprint(first=100))
        assert sub.handle(_message(link_c)) is False

    def test_swallows_undecodable(self, store, page_fp):
        sub = EventSubscription(store, lambda: page_fp)
        assert sub.handle({"Comment": {}}) is False
        assert sub.skipped == 1

    def test_no_active_view(self, store, link_c):
        sub = EventSubscription(store, lambda: None)
        assert sub.handle(_message(link_c)) is False

    def test_policy_passed_through(self, store, link_a, link_c):
        from linksync.cache.models import CachedView

        page2 = ViewFingerprint(first=2, skip=2, order_by="createdAt_DESC")
        store.write(page2, CachedView(fingerprint=page2, items=[link_a]))
        sub = EventSubscription(store, lambda: page2, policy="first_page_only")
        assert sub.handle(_message(link_c)) is False
        assert [link.id for link in store.read(page2).items] == ["A"]

    def test_unsubscribe_keeps_past_merges(self, store, page_fp, link_c, link_factory):
        sub = EventSubscription(store, lambda: page_fp)
        sub.handle(_message(link_c))
        sub.unsubscribe()
        assert sub.active is False
        assert sub.handle(_message(link_factory("D", day=5))) is False
        assert [link.id for link in store.read(page_fp).items] == ["C", "A", "B"]

    def test_follows_active_fingerprint(self, store, page_fp, link_a, link_c):
        from linksync.cache.models import CachedView

        top = ViewFingerprint(first=100, skip=0, order_by="none")
        store.write(top, CachedView(fingerprint=top, items=[link_a]))
        active = {"fp": page_fp}
        sub = EventSubscription(store, lambda: active["fp"])
        active["fp"] = top
        sub.handle(_message(link_c))
        assert [link.id for link in store.read(top).items] == ["C", "A"]
        assert [link.id for link in store.read(page_fp).items] == ["A", "B"]


class TestEventSubscriptionRun:
    @pytest.mark.asyncio
    async def test_applies_in_channel_order(self, store, page_fp, link_c, link_factory):
        messages = [
            _message(link_c),
            _message(link_factory("B", votes=3, day=2), kind="vote_recorded"),
            _message(link_factory("Z", votes=1), kind="vote_recorded"),
            _message(link_factory("D", day=5)),
        ]
        sub = EventSubscription(store, lambda: page_fp)
        await sub.run(_channel(messages))
        view = store.read(page_fp)
        assert [link.id for link in view.items] == ["D", "C", "A", "B"]
        assert view.items[3].vote_count == 3
        assert sub.applied == 3
        assert sub.skipped == 1

    @pytest.mark.asyncio
    async def test_stops_after_unsubscribe(self, store, page_fp, link_c, link_factory):
        sub = EventSubscription(store, lambda: page_fp)

        async def channel():
            yield _message(link_c)
            sub.unsubscribe()
            yield _message(link_factory("D", day=5))

        await sub.run(channel())
        assert [link.id for link in store.read(page_fp).items] == ["C", "A", "B"]
        assert sub.applied == 1
