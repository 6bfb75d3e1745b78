# src/logging/context.py — v1
"""Contextual logging support — attach session_id, request_id, component to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging — set per assistant session / search call.
_session_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "session_id", default=None
)
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_component: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "component", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    session_id: str | None = None
    request_id: str | None = None
    component: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        session_id=_session_id.get(),
        request_id=_request_id.get(),
        component=_component.get(),
    )


def set_session_context(session_id: str) -> None:
    """Set the assistant session id (called once per session)."""
    _session_id.set(session_id)


def set_request_context(request_id: str, component: str | None = None) -> None:
    """Set per-call context (one search request or one assistant turn)."""
    _request_id.set(request_id)
    _component.set(component)


def clear_context() -> None:
    """Reset all context variables."""
    _session_id.set(None)
    _request_id.set(None)
    _component.set(None)
