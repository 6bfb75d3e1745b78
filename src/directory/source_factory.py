# src/directory/source_factory.py — v1
"""Factory for directory source instantiation."""

from __future__ import annotations

from fixerhub.config.settings import Settings
from fixerhub.directory.base_directory_source import BaseDirectorySource


def create_directory_source(settings: Settings | None = None) -> BaseDirectorySource:
    """Instantiate the configured directory backend.

    Args:
        settings: Application settings. Defaults to the seed directory.

    Returns:
        Configured BaseDirectorySource implementation.
    """
    backend = "seed" if settings is None else settings.directory_backend

    if backend == "seed":
        from fixerhub.directory.seed import SeedDirectorySource
        return SeedDirectorySource()

    if backend == "json":
        from fixerhub.directory.json_source import JsonDirectorySource
        if settings is None or settings.directory_path is None:
            raise ValueError(
                "DIRECTORY_PATH must be set when DIRECTORY_BACKEND=json"
            )
        return JsonDirectorySource(settings.directory_path)

    raise ValueError(f"Unsupported directory backend: {backend!r}")
