# src/view/materializer.py - v1
"""Derive the rendered link sequence from a cached view.

Pure projection: the cached view is never reordered or written back.
"""

from __future__ import annotations

from typing import Literal

from linksync.cache.models import CachedView
from linksync.core.models import Link

ViewMode = Literal["paged", "ranked"]


def materialize(view: CachedView, mode: ViewMode) -> list[Link]:
    """Return the links to render for ``view`` in ``mode``.

    ``paged`` trusts the server's skip/limit/order and passes items
    through. ``ranked`` sorts a copy by descending vote count; ``sorted``
    is stable, so ties keep their cached relative order.
    """
    if mode == "paged":
        return list(view.items)
    if mode == "ranked":
        return sorted(view.items, key=lambda link: link.vote_count, reverse=True)
    raise ValueError(f"Unsupported view mode: {mode!r}")


def mode_for(is_paged_view: bool) -> ViewMode:
    """Materialization mode for the new (paged) or top (ranked) listing."""
    return "paged" if is_paged_view else "ranked"
