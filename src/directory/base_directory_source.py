# src/directory/base_directory_source.py — v1
"""Abstract directory source interface.

A source hands out fresh, read-only snapshots of the professionals and
categories that a search runs against. The matcher itself never holds data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fixerhub.core.models import CategoryRecord, Directory, ProfessionalRecord


class DirectorySourceError(Exception):
    """Raised when a directory source cannot produce a snapshot."""


class BaseDirectorySource(ABC):
    """Unified interface for directory data providers."""

    @abstractmethod
    def professionals(self) -> tuple[ProfessionalRecord, ...]:
        """Return the current professional records, in directory order."""

    @abstractmethod
    def categories(self) -> tuple[CategoryRecord, ...]:
        """Return the current category taxonomy."""

    def snapshot(self) -> Directory:
        """Capture professionals and categories together for one query."""
        return Directory(
            professionals=self.professionals(),
            categories=self.categories(),
        )

    @property
    def source_name(self) -> str:
        return type(self).__name__
