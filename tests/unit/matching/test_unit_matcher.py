# tests/unit/matching/test_matcher.py — v1
"""Tests for matching/matcher.py — text, category and constraint filters."""

from __future__ import annotations

import math

import pytest

from fixerhub.core.models import CategoryRecord, ConstraintSet, ProfessionalRecord
from fixerhub.matching.matcher import (
    matches_constraints,
    matches_query,
    resolve_category,
    search,
)


def _names(results: list[ProfessionalRecord]) -> list[str]:
    return [p.name for p in results]


# ---------------------------------------------------------------------------
# Text filter
# ---------------------------------------------------------------------------

class TestTextFilter:
    def test_plumb_returns_only_the_plumber(self, seed_professionals):
        results = search(seed_professionals, query="plumb")
        assert len(results) == 1
        assert results[0].name == "Sarah Johnson"
        assert results[0].price == 85
        assert results[0].rating == 4.9

    def test_empty_query_keeps_everything(self, seed_professionals):
        assert search(seed_professionals, query="") == list(seed_professionals)

    def test_case_insensitive_name(self, seed_professionals):
        assert _names(search(seed_professionals, query="EMMA")) == ["Emma Davis"]

    def test_matches_service_label(self, seed_professionals):
        assert _names(search(seed_professionals, query="ceiling fan")) == ["John Smith"]

    def test_service_match_spans_professions(self, seed_professionals):
        # "Repair" appears in services of three professionals
        assert _names(search(seed_professionals, query="repair")) == [
            "John Smith", "Sarah Johnson", "Mike Wilson",
        ]

    def test_no_match_returns_empty(self, seed_professionals):
        assert search(seed_professionals, query="zzz-no-such-service") == []

    def test_query_is_not_trimmed(self, seed_professionals):
        assert search(seed_professionals, query=" plumber ") == []

    @pytest.mark.parametrize("query,expected", [
        ("", True),
        ("ana", True),
        ("electric", True),
        ("panel", True),
        ("plumber", False),
    ])
    def test_matches_query(self, sample_professional, query, expected):
        assert matches_query(sample_professional, query) is expected


# ---------------------------------------------------------------------------
# Category filter
# ---------------------------------------------------------------------------

class TestCategoryFilter:
    def test_category_matches_profession_substring(self, seed_professionals, seed_categories):
        results = search(seed_professionals, category_id=3, categories=seed_categories)
        assert _names(results) == ["Mike Wilson"]

    def test_category_is_a_loose_match(self, seed_professionals, seed_categories):
        # "Electrical" is not a substring of "Electrician"
        assert search(seed_professionals, category_id=1, categories=seed_categories) == []

    def test_unknown_category_fails_open(self, seed_professionals, seed_categories):
        results = search(seed_professionals, category_id=999, categories=seed_categories)
        assert results == list(seed_professionals)

    def test_category_without_taxonomy_fails_open(self, seed_professionals):
        assert search(seed_professionals, category_id=2) == list(seed_professionals)

    def test_category_combines_with_query(self, seed_professionals, seed_categories):
        results = search(
            seed_professionals, query="repair", category_id=3, categories=seed_categories,
        )
        assert _names(results) == ["Mike Wilson"]

    def test_string_category_ids(self, seed_professionals):
        categories = [CategoryRecord(id="clean", name="Cleaner")]
        results = search(seed_professionals, category_id="clean", categories=categories)
        assert _names(results) == ["Emma Davis"]

    def test_resolve_category(self, seed_categories):
        assert resolve_category(seed_categories, 2).name == "Plumbing"
        assert resolve_category(seed_categories, None) is None
        assert resolve_category(seed_categories, "2") is None


# ---------------------------------------------------------------------------
# Constraint filter
# ---------------------------------------------------------------------------

class TestConstraintFilter:
    def test_max_price(self, seed_professionals):
        results = search(seed_professionals, constraints=ConstraintSet(max_price=50))
        assert _names(results) == ["Emma Davis"]
        assert results[0].price == 45

    def test_max_distance_is_inclusive(self, seed_professionals):
        results = search(seed_professionals, constraints=ConstraintSet(max_distance=1.2))
        assert _names(results) == ["John Smith", "Sarah Johnson"]

    def test_min_rating_is_inclusive(self, seed_professionals):
        results = search(seed_professionals, constraints=ConstraintSet(min_rating=4.9))
        assert _names(results) == ["Sarah Johnson", "Emma Davis"]

    def test_verified_only(self, seed_professionals, sample_professional):
        directory = [*seed_professionals, sample_professional]
        results = search(directory, constraints=ConstraintSet(verified_only=True))
        assert results == list(seed_professionals)

    def test_unverified_kept_by_default(self, sample_professional):
        assert matches_constraints(sample_professional, ConstraintSet())

    def test_all_bounds_combined(self, sample_professional):
        constraints = ConstraintSet(max_distance=3.0, min_rating=4.5, max_price=60)
        assert matches_constraints(sample_professional, constraints)
        assert not matches_constraints(
            sample_professional, constraints.model_copy(update={"max_price": 59.99})
        )

    def test_impossible_constraints_return_empty(self, seed_professionals):
        results = search(seed_professionals, constraints=ConstraintSet(max_price=-1))
        assert results == []


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

class TestSearchProperties:
    def test_default_constraints_are_identity(self, seed_professionals):
        assert search(seed_professionals, constraints=ConstraintSet()) == list(seed_professionals)
        assert search(seed_professionals, constraints=None) == list(seed_professionals)

    def test_result_is_ordered_subset(self, seed_professionals):
        directory = list(reversed(seed_professionals))
        results = search(directory, query="e", constraints=ConstraintSet(max_price=80))
        positions = [directory.index(p) for p in results]
        assert positions == sorted(positions)
        assert all(p in directory for p in results)

    def test_idempotent(self, seed_professionals, seed_categories):
        kwargs = dict(query="clean", category_id=5, constraints=ConstraintSet(min_rating=4))
        first = search(seed_professionals, categories=seed_categories, **kwargs)
        second = search(seed_professionals, categories=seed_categories, **kwargs)
        assert first == second

    def test_input_not_mutated(self, seed_professionals):
        directory = list(seed_professionals)
        search(directory, query="plumb", constraints=ConstraintSet(max_price=10))
        assert directory == list(seed_professionals)

    def test_empty_directory(self):
        assert search([], query="anything") == []

    def test_unbounded_defaults(self):
        c = ConstraintSet()
        assert c.max_distance == math.inf
        assert c.max_price == math.inf
        assert c.is_unconstrained
