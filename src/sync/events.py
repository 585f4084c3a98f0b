# src/sync/events.py - v1
"""Tagged events pushed by the server, decoded once at the channel edge.

Two wire shapes are accepted:

- tagged: ``{"kind": "created" | "vote_recorded", "link": {...}}``
- subscription payloads: ``{"Link": {"mutation": "CREATED", "node": {...}}}``
  for a new link and ``{"Vote": {"mutation": "CREATED", "node": {"link":
  {...}}}}`` for a vote recorded on an existing link.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from linksync.core.errors import EventDecodeError
from linksync.core.models import Link


class LinkCreated(BaseModel):
    """A new link was posted."""

    kind: Literal["created"] = "created"
    link: Link


class VoteRecorded(BaseModel):
    """A vote changed an existing link; carries the full updated link."""

    kind: Literal["vote_recorded"] = "vote_recorded"
    link: Link


FeedEvent = Annotated[Union[LinkCreated, VoteRecorded], Field(discriminator="kind")]

_event_adapter: TypeAdapter[LinkCreated | VoteRecorded] = TypeAdapter(FeedEvent)


def decode_event(message: dict[str, Any]) -> LinkCreated | VoteRecorded:
    """Decode a raw channel message into a tagged event.

    Raises:
        EventDecodeError: If the message has no recognised shape or its
            link payload is invalid.
    """
    if not isinstance(message, dict):
        raise EventDecodeError(f"Expected an object, got {type(message).__name__}")

    try:
        if "kind" in message:
            return _event_adapter.validate_python(message)
        if "Link" in message:
            return LinkCreated(link=_node(message["Link"]))
        if "Vote" in message:
            node = _node(message["Vote"])
            if "link" not in node:
                raise EventDecodeError("Vote event carries no link")
            return VoteRecorded(link=node["link"])
    except ValidationError as e:
        raise EventDecodeError(f"Invalid event payload: {e}") from e

    raise EventDecodeError(f"Unrecognised event keys: {sorted(message)}")


def _node(envelope: Any) -> dict[str, Any]:
    """Extract the ``node`` of a subscription envelope."""
    if not isinstance(envelope, dict) or not isinstance(envelope.get("node"), dict):
        raise EventDecodeError("Subscription envelope has no node")
    mutation = envelope.get("mutation", "CREATED")
    if mutation != "CREATED":
        raise EventDecodeError(f"Unsupported mutation type: {mutation!r}")
    return envelope["node"]
