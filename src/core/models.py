# src/core/models.py - v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
Models accept both the camelCase wire names (``createdAt``, ``postedBy``)
and the Python field names.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# === VOTES ===


class VoteUser(BaseModel):
    """User reference carried by a vote."""

    id: str


class Vote(BaseModel):
    """A single vote cast on a link. Append-only from the client's side."""

    id: str
    user: VoteUser


# === LINKS ===


class PostedBy(BaseModel):
    """Author of a link."""

    id: str
    name: str


class Link(BaseModel):
    """A voteable link; ``id`` is the identity every merge keys on."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: datetime = Field(alias="createdAt")
    url: str
    description: str
    posted_by: PostedBy | None = Field(default=None, alias="postedBy")
    votes: list[Vote] = Field(default_factory=list)

    @property
    def vote_count(self) -> int:
        return len(self.votes)
