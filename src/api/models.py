# src/api/models.py — v1
"""API-level models: SearchRequest, SearchResult."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fixerhub.core.models import ConstraintSet, ProfessionalRecord


class SearchRequest(BaseModel):
    """A search intent as collected by the presentation layer.

    `constraints=None` means "use the configured default constraints".
    """

    query: str = ""
    category_id: int | str | None = None
    constraints: ConstraintSet | None = None


class SearchResult(BaseModel):
    """Return value of facade.find_professionals()."""

    request_id: str
    query: str = ""
    category_id: int | str | None = None
    category_name: str | None = None  # None when no category or an unknown id
    professionals: list[ProfessionalRecord] = Field(default_factory=list)
    total_found: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_found == 0

    @property
    def heading(self) -> str:
        """Title shown above the result list."""
        if self.category_name:
            return f"{self.category_name} Professionals"
        if self.query:
            return f'Results for "{self.query}"'
        return "Top Professionals Near You"
