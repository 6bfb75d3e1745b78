# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides the seed directory, small hand-built directories and settings
with no .env lookup. No I/O beyond tmp_path.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fixerhub.config.settings import Settings
from fixerhub.core.models import CategoryRecord, ConversationSummary, ProfessionalRecord
from fixerhub.directory.memory_source import InMemoryDirectorySource
from fixerhub.directory.seed import SEED_CATEGORIES, SEED_PROFESSIONALS


# === FIXTURES: Directory data ===


@pytest.fixture
def seed_professionals() -> tuple[ProfessionalRecord, ...]:
    """The four demo professionals, in directory order."""
    return SEED_PROFESSIONALS


@pytest.fixture
def seed_categories() -> tuple[CategoryRecord, ...]:
    """The eight demo categories."""
    return SEED_CATEGORIES


@pytest.fixture
def sample_professional() -> ProfessionalRecord:
    """Minimal valid ProfessionalRecord."""
    return ProfessionalRecord(
        id="p_001",
        name="Ana Lopez",
        profession="Electrician",
        rating=4.5,
        review_count=12,
        price=60,
        distance=3.0,
        verified=False,
        services=("Panel Upgrade", "Install Ceiling Fan"),
    )


@pytest.fixture
def memory_source(
    seed_professionals: tuple[ProfessionalRecord, ...],
    seed_categories: tuple[CategoryRecord, ...],
) -> InMemoryDirectorySource:
    """In-memory source serving the seed directory."""
    return InMemoryDirectorySource(seed_professionals, seed_categories)


@pytest.fixture
def sample_conversations() -> list[ConversationSummary]:
    """Inbox rows as shown on the messages screen."""
    return [
        ConversationSummary(id=1, name="Sarah Johnson", last_message="When can you start the plumbing work?", unread=2, online=True, role="client"),
        ConversationSummary(id=2, name="Mike Wilson", last_message="The electrical repair is complete.", role="professional"),
        ConversationSummary(id=3, name="Emma Davis", last_message="Thank you for the great service!", unread=1, online=True, role="client"),
        ConversationSummary(id=4, name="John Smith", last_message="I can help with your air conditioning issue.", role="professional"),
    ]


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Default settings without reading .env, with no typing delay."""
    return Settings(_env_file=None, assistant_reply_delay_s=0.0)


@pytest.fixture
def directory_file(tmp_path: Path, memory_source: InMemoryDirectorySource) -> Path:
    """JSON directory file holding the seed directory."""
    from fixerhub.directory.json_source import JsonDirectorySource

    path = tmp_path / "directory.json"
    JsonDirectorySource(path).write(memory_source.snapshot())
    return path
