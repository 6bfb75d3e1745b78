# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
Records are frozen: the matcher and the assistant only ever read them.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Sender = Literal["user", "assistant"]


# === DIRECTORY RECORDS ===


class ProfessionalRecord(BaseModel):
    """A service professional as listed in the directory."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    profession: str
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    price: float = Field(default=0.0, ge=0.0)  # hourly
    distance: float = Field(default=0.0, ge=0.0)  # miles from the searcher
    verified: bool = False
    services: tuple[str, ...] = ()
    image_url: str | None = None


class CategoryRecord(BaseModel):
    """Category taxonomy entry. Icon and color are presentation-only."""

    model_config = ConfigDict(frozen=True)

    id: int | str
    name: str
    description: str | None = None
    icon: str | None = None
    color: str | None = None


class Directory(BaseModel):
    """Snapshot of everything searchable at query time."""

    model_config = ConfigDict(frozen=True)

    professionals: tuple[ProfessionalRecord, ...] = ()
    categories: tuple[CategoryRecord, ...] = ()


# === SEARCH CONSTRAINTS ===


class ConstraintSet(BaseModel):
    """Numeric/boolean filters applied after text and category filtering.

    Defaults describe "no constraint".
    """

    model_config = ConfigDict(frozen=True)

    max_distance: float = math.inf
    min_rating: float = 0.0
    max_price: float = math.inf
    verified_only: bool = False

    @property
    def is_unconstrained(self) -> bool:
        return (
            self.max_distance == math.inf
            and self.min_rating <= 0.0
            and self.max_price == math.inf
            and not self.verified_only
        )


# === ASSISTANT ===


class SuggestionRule(BaseModel):
    """One row of the assistant rule table.

    A rule with no keywords never matches text and serves as the fallback.
    """

    model_config = ConfigDict(frozen=True)

    rule_id: str
    keywords: tuple[str, ...] = ()
    reply: str
    suggestions: tuple[str, ...] = ()

    @property
    def is_fallback(self) -> bool:
        return not self.keywords


class AssistantReply(BaseModel):
    """Outcome of evaluating user text against the rule table."""

    model_config = ConfigDict(frozen=True)

    reply_text: str
    suggestions: tuple[str, ...] = ()
    rule_id: str


class ConversationTurn(BaseModel):
    """A single message in the assistant conversation."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    sender: Sender
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    suggestions: tuple[str, ...] = ()


# === MESSAGING ===


class ConversationSummary(BaseModel):
    """Inbox row for a conversation with another user."""

    model_config = ConfigDict(frozen=True)

    id: int | str
    name: str
    last_message: str = ""
    unread: int = Field(default=0, ge=0)
    online: bool = False
    role: Literal["client", "professional"] = "client"
