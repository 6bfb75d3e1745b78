# src/matching/matcher.py — v1
"""Professional matcher — select the directory subset relevant to a search.

Three filters run in sequence over the caller's directory:
  1. Text: case-insensitive substring of name, profession or any service
  2. Category: profession contains the category name (loose match)
  3. Constraints: distance, rating, price, verification

The result keeps the input order; nothing is ranked. An unknown
category id skips step 2 instead of emptying the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from fixerhub.core.models import CategoryRecord, ConstraintSet, ProfessionalRecord

logger = logging.getLogger(__name__)

_NO_CONSTRAINTS = ConstraintSet()


def search(
    directory: Sequence[ProfessionalRecord],
    query: str = "",
    category_id: int | str | None = None,
    constraints: ConstraintSet | None = None,
    categories: Iterable[CategoryRecord] = (),
) -> list[ProfessionalRecord]:
    """Filter a professional directory against a search intent.

    Args:
        directory: Professionals to search. Never mutated.
        query: Free text, possibly empty. Matched case-insensitively.
        category_id: Optional category selector, resolved against `categories`.
        constraints: Numeric/boolean filters. None = no constraint.
        categories: Category taxonomy used to resolve `category_id`.

    Returns:
        Matching professionals in their original directory order.
    """
    constraints = constraints or _NO_CONSTRAINTS

    results = [p for p in directory if matches_query(p, query)]
    after_text = len(results)

    category = resolve_category(categories, category_id)
    if category is not None:
        needle = category.name.lower()
        results = [p for p in results if needle in p.profession.lower()]
    elif category_id is not None:
        logger.debug("Unknown category id %r, category filter skipped", category_id)
    after_category = len(results)

    results = [p for p in results if matches_constraints(p, constraints)]

    logger.debug(
        "search query=%r category=%r: %d -> text %d -> category %d -> constraints %d",
        query, category_id, len(directory), after_text, after_category, len(results),
    )
    return results


def matches_query(professional: ProfessionalRecord, query: str) -> bool:
    """True if the query is empty or a substring of name, profession or a service."""
    if not query:
        return True
    q = query.lower()
    if q in professional.name.lower() or q in professional.profession.lower():
        return True
    return any(q in service.lower() for service in professional.services)


def matches_constraints(
    professional: ProfessionalRecord, constraints: ConstraintSet
) -> bool:
    """True if the professional satisfies every bound of the constraint set."""
    return (
        professional.distance <= constraints.max_distance
        and professional.rating >= constraints.min_rating
        and professional.price <= constraints.max_price
        and (not constraints.verified_only or professional.verified)
    )


def resolve_category(
    categories: Iterable[CategoryRecord], category_id: int | str | None
) -> CategoryRecord | None:
    """Find a category by id. Returns None for a missing or unknown id."""
    if category_id is None:
        return None
    for category in categories:
        if category.id == category_id:
            return category
    return None
