# src/api/models.py - v2
"""Public API models: FeedState."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

GENERIC_ERROR = "Error"


class FeedState(BaseModel):
    """What the presentation layer needs to pick loading/error/list output."""

    status: Literal["idle", "loading", "ready", "error"] = "idle"
    page_number: int = 1
    is_paged_view: bool = True
    error: str | None = None

    @property
    def loading(self) -> bool:
        return self.status == "loading"
