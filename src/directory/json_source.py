# src/directory/json_source.py — v1
"""JSON file-based directory source (DIRECTORY_BACKEND=json).

Expected layout:
    {"professionals": [{...}, ...], "categories": [{...}, ...]}

The file is re-read on every snapshot so edits show up on the next query.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fixerhub.core.models import CategoryRecord, Directory, ProfessionalRecord
from fixerhub.directory.base_directory_source import BaseDirectorySource, DirectorySourceError

logger = logging.getLogger(__name__)


class JsonDirectorySource(BaseDirectorySource):
    """Loads the directory from a single JSON document."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def professionals(self) -> tuple[ProfessionalRecord, ...]:
        return self.snapshot().professionals

    def categories(self) -> tuple[CategoryRecord, ...]:
        return self.snapshot().categories

    def snapshot(self) -> Directory:
        """Read and validate the file in one pass."""
        data = self._read()
        try:
            directory = Directory(
                professionals=tuple(
                    ProfessionalRecord(**item) for item in data.get("professionals", [])
                ),
                categories=tuple(
                    CategoryRecord(**item) for item in data.get("categories", [])
                ),
            )
        except (ValidationError, TypeError) as e:
            raise DirectorySourceError(f"Invalid directory records in {self._path}: {e}") from e

        logger.debug(
            "Loaded %d professionals and %d categories from %s",
            len(directory.professionals), len(directory.categories), self._path,
        )
        return directory

    def write(self, directory: Directory) -> None:
        """Persist a directory snapshot in the layout this source reads."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(directory.model_dump_json(indent=2), encoding="utf-8")

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            raise DirectorySourceError(f"Directory file not found: {self._path}")
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DirectorySourceError(f"Unreadable directory file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise DirectorySourceError(
                f"Directory file {self._path} must contain a JSON object"
            )
        return data
