# src/matching/contacts.py — v1
"""Inbox filter — narrow the conversation list by contact name."""

from __future__ import annotations

from collections.abc import Iterable

from fixerhub.core.models import ConversationSummary


def filter_conversations(
    conversations: Iterable[ConversationSummary], query: str = ""
) -> list[ConversationSummary]:
    """Keep conversations whose contact name contains the query (case-insensitive).

    An empty query keeps everything. Input order is preserved.
    """
    q = query.lower()
    return [c for c in conversations if q in c.name.lower()]
