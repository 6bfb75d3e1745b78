# src/assistant/engine.py — v1
"""Suggestion engine — map free text to a canned reply and follow-ups.

Keyword substring lookup over an ordered rule table; there is no language
understanding. The input is lower-cased for matching only.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fixerhub.assistant.rules import DEFAULT_RULES
from fixerhub.core.models import AssistantReply, SuggestionRule

logger = logging.getLogger(__name__)

# Case-sensitive verbs that mark a suggestion as a concrete service request.
ACTIONABLE_VERBS: tuple[str, ...] = ("Repair", "Install", "Fix", "Clean")


def respond(
    user_text: str, rules: Sequence[SuggestionRule] = DEFAULT_RULES
) -> AssistantReply:
    """Evaluate user text against the rule table.

    Args:
        user_text: Raw user input. Any string is valid.
        rules: Ordered rule table ending with a fallback rule.

    Returns:
        AssistantReply from the first rule with a keyword hit, or from the
        fallback rule when nothing matches.
    """
    rule = match_rule(user_text, rules)
    logger.debug("Assistant rule %s selected", rule.rule_id)
    return AssistantReply(
        reply_text=rule.reply,
        suggestions=rule.suggestions,
        rule_id=rule.rule_id,
    )


def match_rule(
    user_text: str, rules: Sequence[SuggestionRule] = DEFAULT_RULES
) -> SuggestionRule:
    """Return the first rule whose keywords hit the text (first match wins)."""
    normalized = user_text.lower()
    fallback: SuggestionRule | None = None
    for rule in rules:
        if rule.is_fallback:
            fallback = fallback or rule
            continue
        if any(keyword in normalized for keyword in rule.keywords):
            return rule
    if fallback is None:
        raise ValueError("Rule table has no fallback rule")
    return fallback


def is_actionable(suggestion: str) -> bool:
    """True if the suggestion reads as a service request rather than a question.

    Plain substring check on the suggestion's own text, so a suggestion that
    merely mentions one of the verbs also counts.
    """
    return any(verb in suggestion for verb in ACTIONABLE_VERBS)
