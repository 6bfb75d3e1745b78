# src/assistant/rules.py — v1
"""Default assistant rule table.

Rules are evaluated top to bottom and the first keyword hit wins, so the
order below is part of the behavior. The last row is the fallback.
"""

from __future__ import annotations

from collections.abc import Sequence

from fixerhub.core.models import SuggestionRule

GREETING_TEXT = (
    "Hi! I'm here to help you find the perfect service. "
    "What do you need help with today?"
)

GREETING_SUGGESTIONS: tuple[str, ...] = (
    "My kitchen appliance is broken",
    "I need electrical work done",
    "Looking for plumbing help",
    "Need home cleaning service",
)

DEFAULT_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        rule_id="kitchen",
        keywords=("kitchen", "appliance", "refrigerator", "stove"),
        reply=(
            "I can help you with kitchen appliance repairs! Based on what "
            "you've described, here are some specific services that might help:"
        ),
        suggestions=(
            "Refrigerator Repair",
            "Stove/Oven Repair",
            "Dishwasher Repair",
            "Microwave Repair",
        ),
    ),
    SuggestionRule(
        rule_id="electrical",
        keywords=("electrical", "light", "outlet", "wiring"),
        reply=(
            "Electrical issues can be tricky! Let me suggest some specific "
            "electrical services:"
        ),
        suggestions=(
            "Fix Light Switch",
            "Electrical Outlet Repair",
            "Install Ceiling Fan",
            "Circuit Breaker Repair",
        ),
    ),
    SuggestionRule(
        rule_id="plumbing",
        keywords=("plumbing", "leak", "toilet", "drain"),
        reply=(
            "Plumbing problems need quick attention! Here are some plumbing "
            "services I can help you find:"
        ),
        suggestions=(
            "Leak Repair",
            "Drain Cleaning",
            "Toilet Installation",
            "Water Heater Repair",
        ),
    ),
    SuggestionRule(
        rule_id="cleaning",
        keywords=("clean", "house", "home"),
        reply=(
            "Great! I can help you find cleaning services. "
            "What type of cleaning do you need?"
        ),
        suggestions=(
            "House Cleaning",
            "Deep Cleaning",
            "Move-in/Move-out Cleaning",
            "Office Cleaning",
        ),
    ),
    SuggestionRule(
        rule_id="fallback",
        reply=(
            "I understand you need help with that. Could you provide a bit more "
            "detail about the specific issue or service you're looking for? "
            "This will help me suggest the most relevant professionals."
        ),
        suggestions=(
            "Tell me more about the problem",
            "What room is this for?",
            "Is this urgent?",
            "What's your budget range?",
        ),
    ),
)


def validate_rules(rules: Sequence[SuggestionRule]) -> None:
    """Check a rule table is usable: unique ids and exactly one trailing fallback.

    Raises:
        ValueError: If the table is empty or malformed.
    """
    if not rules:
        raise ValueError("Rule table is empty")

    ids = [r.rule_id for r in rules]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate rule ids: {duplicates}")

    fallbacks = [i for i, r in enumerate(rules) if r.is_fallback]
    if fallbacks != [len(rules) - 1]:
        raise ValueError("Rule table must end with exactly one fallback rule")


def get_rule(rule_id: str, rules: Sequence[SuggestionRule] = DEFAULT_RULES) -> SuggestionRule | None:
    """Look up a rule by id."""
    for rule in rules:
        if rule.rule_id == rule_id:
            return rule
    return None


validate_rules(DEFAULT_RULES)
