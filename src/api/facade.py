# src/api/facade.py — v1
"""Public API facade — entry points for search and the service assistant.

Usage:
    from fixerhub.api.facade import find_professionals, open_assistant

    result = find_professionals(SearchRequest(query="plumb"))
    session = open_assistant(on_service_selected=handle_service)
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import TYPE_CHECKING

from fixerhub.api.models import SearchRequest, SearchResult
from fixerhub.config.settings import Settings
from fixerhub.logging.context import set_request_context
from fixerhub.matching.matcher import resolve_category, search

if TYPE_CHECKING:
    from fixerhub.assistant.session import AssistantSession, ServiceSelectedCallback
    from fixerhub.core.models import SuggestionRule
    from fixerhub.directory.base_directory_source import BaseDirectorySource

logger = logging.getLogger(__name__)


def find_professionals(
    request: SearchRequest,
    source: BaseDirectorySource | None = None,
    settings: Settings | None = None,
) -> SearchResult:
    """Run a search against a fresh snapshot of the directory.

    Args:
        request: Query text, optional category and constraints.
        source: Directory provider. Built from settings if None.
        settings: Global settings. Loaded from .env if None.

    Returns:
        SearchResult with matches in directory order.

    Raises:
        DirectorySourceError: If the source cannot produce a snapshot.
    """
    if source is None:
        from fixerhub.directory.source_factory import create_directory_source

        settings = settings or Settings()
        source = create_directory_source(settings)

    constraints = request.constraints
    if constraints is None:
        constraints = (settings or Settings()).default_constraints()

    request_id = _generate_request_id()
    set_request_context(request_id, component="search")

    directory = source.snapshot()
    professionals = search(
        directory.professionals,
        query=request.query,
        category_id=request.category_id,
        constraints=constraints,
        categories=directory.categories,
    )
    category = resolve_category(directory.categories, request.category_id)

    logger.info(
        "Search %s over %s: %d of %d professionals",
        request_id, source.source_name, len(professionals), len(directory.professionals),
    )

    return SearchResult(
        request_id=request_id,
        query=request.query,
        category_id=request.category_id,
        category_name=category.name if category else None,
        professionals=professionals,
        total_found=len(professionals),
    )


def open_assistant(
    on_service_selected: ServiceSelectedCallback | None = None,
    settings: Settings | None = None,
    rules: Sequence[SuggestionRule] | None = None,
) -> AssistantSession:
    """Start an assistant conversation with the configured reply delay.

    Args:
        on_service_selected: Called with the service label when the user
            picks an actionable suggestion.
        settings: Global settings. Loaded from .env if None.
        rules: Custom rule table. Defaults to the built-in table.
    """
    from fixerhub.assistant.rules import DEFAULT_RULES
    from fixerhub.assistant.scheduler import ReplyScheduler
    from fixerhub.assistant.session import AssistantSession

    settings = settings or Settings()
    session = AssistantSession(
        rules=DEFAULT_RULES if rules is None else rules,
        scheduler=ReplyScheduler(delay_s=settings.assistant_reply_delay_s),
        on_service_selected=on_service_selected,
    )
    logger.info("Assistant session %s opened", session.session_id)
    return session


def _generate_request_id() -> str:
    """Generate a short unique request ID."""
    return uuid.uuid4().hex[:12]
