# src/directory/memory_source.py — v1
"""In-memory directory source over caller-supplied records."""

from __future__ import annotations

from collections.abc import Iterable

from fixerhub.core.models import CategoryRecord, ProfessionalRecord
from fixerhub.directory.base_directory_source import BaseDirectorySource


class InMemoryDirectorySource(BaseDirectorySource):
    """Serves a fixed list of records. Useful for tests and embedding."""

    def __init__(
        self,
        professionals: Iterable[ProfessionalRecord] = (),
        categories: Iterable[CategoryRecord] = (),
    ) -> None:
        self._professionals = tuple(professionals)
        self._categories = tuple(categories)

    def professionals(self) -> tuple[ProfessionalRecord, ...]:
        return self._professionals

    def categories(self) -> tuple[CategoryRecord, ...]:
        return self._categories
