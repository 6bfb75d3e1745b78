# src/main.py — v1
"""CLI entry point — search, categories, chat, export commands.

Usage:
    fixerhub search [query] [--category ID] [--max-price N] [options]
    fixerhub categories
    fixerhub chat
    fixerhub export FILE
"""

from __future__ import annotations

import argparse
import asyncio
import math
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from fixerhub.logging.logger import get_logger
from fixerhub.version import __version__

if TYPE_CHECKING:
    from fixerhub.api.models import SearchResult
    from fixerhub.config.settings import Settings
    from fixerhub.core.models import ConversationTurn

logger = get_logger("main")

_EXIT_COMMANDS = {"/done", "/quit", "/exit"}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fixerhub",
        description=f"FixerHub v{__version__} — find service professionals",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--directory", type=Path, default=None,
        help="JSON directory file (default: DIRECTORY_BACKEND from .env)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- search ---
    p_search = subparsers.add_parser(
        "search", help="Search professionals",
    )
    p_search.add_argument("query", nargs="?", default="", help="Free-text query")
    p_search.add_argument(
        "-c", "--category", dest="category_id", default=None,
        help="Category id to narrow the results",
    )
    p_search.add_argument(
        "--max-distance", type=float, default=None,
        help="Maximum distance in miles",
    )
    p_search.add_argument(
        "--min-rating", type=float, default=None,
        help="Minimum average rating (0-5)",
    )
    p_search.add_argument(
        "--max-price", type=float, default=None,
        help="Maximum hourly price",
    )
    p_search.add_argument(
        "--verified-only", action="store_true",
        help="Only show verified professionals",
    )
    p_search.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Print the result as JSON",
    )
    p_search.set_defaults(func=_cmd_search)

    # --- categories ---
    p_categories = subparsers.add_parser(
        "categories", help="List service categories",
    )
    p_categories.set_defaults(func=_cmd_categories)

    # --- chat ---
    p_chat = subparsers.add_parser(
        "chat", help="Talk to the service assistant",
    )
    p_chat.set_defaults(func=_cmd_chat)

    # --- export ---
    p_export = subparsers.add_parser(
        "export", help="Write the configured directory to a JSON file",
    )
    p_export.add_argument("output", type=Path, help="Destination JSON file")
    p_export.set_defaults(func=_cmd_export)

    return parser


async def _cmd_search(args: argparse.Namespace) -> int:
    """Execute a one-shot search."""
    from fixerhub.api.facade import find_professionals
    from fixerhub.api.models import SearchRequest

    settings = _load_settings(args)
    defaults = settings.default_constraints()
    constraints = defaults.model_copy(
        update={
            k: v for k, v in {
                "max_distance": args.max_distance,
                "min_rating": args.min_rating,
                "max_price": args.max_price,
                "verified_only": args.verified_only or None,
            }.items() if v is not None
        }
    )

    request = SearchRequest(
        query=args.query,
        category_id=_parse_category_id(args.category_id),
        constraints=constraints,
    )
    result = find_professionals(request, settings=settings)

    if args.as_json:
        print(result.model_dump_json(indent=2))
    else:
        _print_search_result(result)
    return 0


async def _cmd_categories(args: argparse.Namespace) -> int:
    """List the category taxonomy of the configured directory."""
    from fixerhub.directory.source_factory import create_directory_source

    source = create_directory_source(_load_settings(args))
    categories = source.categories()
    if not categories:
        print("No categories defined.")
        return 0
    for category in categories:
        print(f"  {category.id!s:>4}  {category.name}")
    return 0


async def _cmd_chat(args: argparse.Namespace) -> int:
    """Interactive assistant conversation; a picked service runs a search."""
    from fixerhub.api.facade import find_professionals, open_assistant
    from fixerhub.api.models import SearchRequest

    settings = _load_settings(args)
    selected: list[str] = []
    session = open_assistant(on_service_selected=selected.append, settings=settings)

    print("Type a message, a suggestion number, or /done to leave.\n")
    _print_turn(session.last_turn)

    while not session.closed:
        line = await asyncio.to_thread(_read_line)
        if line is None or line.strip().lower() in _EXIT_COMMANDS:
            session.close()
            break

        suggestion = _pick_suggestion(line, session.last_turn.suggestions)
        if suggestion is not None:
            outcome = session.select_suggestion(suggestion)
            pending = outcome.pending if outcome else None
        else:
            pending = session.submit(line)

        if pending is not None:
            turn = await pending
            if turn is not None:
                _print_turn(turn)

    if selected:
        result = find_professionals(SearchRequest(query=selected[-1]), settings=settings)
        _print_search_result(result)
    return 0


async def _cmd_export(args: argparse.Namespace) -> int:
    """Snapshot the configured directory into a file usable with --directory."""
    from fixerhub.directory.json_source import JsonDirectorySource
    from fixerhub.directory.source_factory import create_directory_source

    snapshot = create_directory_source(_load_settings(args)).snapshot()
    JsonDirectorySource(args.output).write(snapshot)
    logger.info("Exported directory to %s", args.output)
    print(
        f"Wrote {len(snapshot.professionals)} professionals and "
        f"{len(snapshot.categories)} categories to {args.output}"
    )
    return 0


def _load_settings(args: argparse.Namespace) -> Settings:
    """Load settings and apply their logging configuration.

    --directory points the run at a JSON directory file.
    """
    from fixerhub.config.settings import load_settings
    from fixerhub.logging.logger import setup_logging

    if args.directory is not None:
        settings = load_settings(directory_backend="json", directory_path=args.directory)
    else:
        settings = load_settings()

    setup_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    return settings


def _parse_category_id(raw: str | None) -> int | str | None:
    """Category ids are numeric in the seed directory; keep others as text."""
    if raw is None:
        return None
    raw = raw.strip()
    return int(raw) if raw.isdigit() else raw


def _pick_suggestion(line: str, suggestions: tuple[str, ...]) -> str | None:
    """Map a typed suggestion number (1-based) to its text."""
    token = line.strip()
    if not token.isdigit():
        return None
    index = int(token) - 1
    if 0 <= index < len(suggestions):
        return suggestions[index]
    return None


def _read_line() -> str | None:
    try:
        return input("> ")
    except EOFError:
        return None


def _print_turn(turn: ConversationTurn) -> None:
    """Print an assistant or user turn with numbered suggestions."""
    speaker = "Assistant" if turn.sender == "assistant" else "You"
    print(f"{speaker}: {turn.text}")
    for i, suggestion in enumerate(turn.suggestions, start=1):
        print(f"  [{i}] {suggestion}")
    print()


def _print_search_result(result: SearchResult) -> None:
    """Print a human-readable summary of a SearchResult."""
    print(f"\n{result.heading} ({result.total_found} found)")
    if result.is_empty:
        print("  No professionals found. Try adjusting your search or ask the assistant.")
        return
    for p in result.professionals:
        badge = " ✓" if p.verified else ""
        print(
            f"  {p.name}{badge} — {p.profession}, "
            f"{p.rating:.1f}★ ({p.review_count}), ${_format_amount(p.price)}/hr, "
            f"{p.distance:.1f} mi"
        )


def _format_amount(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:.2f}"


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from fixerhub.logging.logger import setup_logging

    setup_logging(level="DEBUG" if verbose else "WARNING", log_format="text")


if __name__ == "__main__":
    sys.exit(main())
