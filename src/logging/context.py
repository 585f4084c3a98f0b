# src/logging/context.py - v2
"""Contextual logging support: attach the active view and operation to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per load/vote/merge.
_view: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "view", default=None
)
_page: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "page", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    view: str | None = None
    page: int | None = None
    operation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        view=_view.get(),
        page=_page.get(),
        operation=_operation.get(),
    )


def set_view_context(view: str, page: int | None = None) -> None:
    """Set view-level context (called when the active fingerprint changes)."""
    _view.set(view)
    _page.set(page)


def set_operation_context(operation: str) -> None:
    """Set the operation in progress (load, vote, merge_event)."""
    _operation.set(operation)


def clear_context() -> None:
    """Reset all context variables."""
    _view.set(None)
    _page.set(None)
    _operation.set(None)
