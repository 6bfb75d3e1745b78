# src/assistant/session.py — v1
"""Assistant conversation session.

Owns the append-only history of one conversation, from the greeting to
either a hand-off (the user picked an actionable suggestion) or an
explicit close. Reply generation is delegated to the engine; the typing
delay to a ReplyScheduler.
"""

from __future__ import annotations

import itertools
import logging
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from fixerhub.assistant.engine import is_actionable, respond
from fixerhub.assistant.rules import DEFAULT_RULES, GREETING_SUGGESTIONS, GREETING_TEXT, validate_rules
from fixerhub.assistant.scheduler import PendingReply, ReplyScheduler
from fixerhub.core.models import ConversationTurn, Sender, SuggestionRule
from fixerhub.logging.context import set_session_context

logger = logging.getLogger(__name__)

ServiceSelectedCallback = Callable[[str], None]


@dataclass(frozen=True)
class SuggestionOutcome:
    """What happened when the user picked a suggestion.

    kind == "handoff": `query` is the service label to search for and the
    session is closed. kind == "message": the suggestion was sent as user
    text and `pending` resolves to the assistant's answer.
    """

    kind: Literal["handoff", "message"]
    suggestion: str
    query: str | None = None
    pending: PendingReply[ConversationTurn] | None = None


class AssistantSession:
    """One conversation with the service assistant."""

    def __init__(
        self,
        rules: Sequence[SuggestionRule] = DEFAULT_RULES,
        scheduler: ReplyScheduler | None = None,
        on_service_selected: ServiceSelectedCallback | None = None,
        session_id: str | None = None,
    ) -> None:
        if rules is not DEFAULT_RULES:
            validate_rules(rules)
        self._rules = tuple(rules)
        self._scheduler = scheduler or ReplyScheduler()
        self._on_service_selected = on_service_selected
        self._session_id = session_id or uuid.uuid4().hex[:8]
        self._turn_ids = itertools.count(1)
        self._history: list[ConversationTurn] = []
        self._closed = False

        self._append(GREETING_TEXT, "assistant", GREETING_SUGGESTIONS)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def history(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._history)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_turn(self) -> ConversationTurn:
        return self._history[-1]

    def submit(self, text: str) -> PendingReply[ConversationTurn] | None:
        """Append the user's turn and schedule the assistant's reply.

        Blank input and input to a closed session are ignored (None).
        Must be called with a running event loop.
        """
        if self._closed:
            logger.debug("Ignoring input to closed session %s", self._session_id)
            return None

        cleaned = text.strip()
        if not cleaned:
            return None

        set_session_context(self._session_id)
        self._append(cleaned, "user")
        logger.info("User turn %d received", len(self._history))

        return self._scheduler.schedule(lambda: self._reply_to(cleaned))

    def select_suggestion(self, suggestion: str) -> SuggestionOutcome | None:
        """Handle a tap on one of the assistant's suggestions.

        Actionable suggestions end the conversation and are handed to the
        service-selected callback as a search query. Anything else is sent
        back through the rule table as ordinary user text.
        """
        if self._closed:
            return None

        if is_actionable(suggestion):
            logger.info("Suggestion %r handed off to search", suggestion)
            self.close()
            if self._on_service_selected is not None:
                self._on_service_selected(suggestion)
            return SuggestionOutcome(kind="handoff", suggestion=suggestion, query=suggestion)

        pending = self.submit(suggestion)
        if pending is None:
            return None
        return SuggestionOutcome(kind="message", suggestion=suggestion, pending=pending)

    def close(self) -> None:
        """Dismiss the conversation and cancel any reply still being typed."""
        if self._closed:
            return
        self._closed = True
        cancelled = self._scheduler.cancel_all()
        logger.info(
            "Session %s closed after %d turns (%d pending replies cancelled)",
            self._session_id, len(self._history), cancelled,
        )

    # --- internals ---

    def _reply_to(self, text: str) -> ConversationTurn:
        reply = respond(text, self._rules)
        return self._append(reply.reply_text, "assistant", reply.suggestions)

    def _append(
        self, text: str, sender: Sender, suggestions: Sequence[str] = ()
    ) -> ConversationTurn:
        turn = ConversationTurn(
            id=f"turn_{next(self._turn_ids):04d}",
            text=text,
            sender=sender,
            suggestions=tuple(suggestions),
        )
        self._history.append(turn)
        return turn
