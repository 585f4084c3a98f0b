# src/main.py - v2
"""CLI entry point: page, replay commands.

Usage:
    linksync page <n> [--top] [--total N]
    linksync replay <snapshot.json> [--events events.jsonl] [--top]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from linksync.version import __version__

logger = logging.getLogger(__name__)


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
        prog="linksync",
        description=f"linksync v{__version__} - link feed cache synchronization",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- page ---
    p_page = subparsers.add_parser(
        "page", help="Show query variables and navigation for a page",
    )
    p_page.add_argument("page_number", type=int, help="1-based page number")
    p_page.add_argument(
        "--top", action="store_true",
        help="Use the unpaged top listing instead of the new listing",
    )
    p_page.add_argument(
        "--total", type=int, default=None,
        help="Known total link count (enables the next-page check)",
    )
    p_page.set_defaults(func=_cmd_page)

    # --- replay ---
    p_replay = subparsers.add_parser(
        "replay", help="Apply recorded events to a fetched page snapshot",
    )
    p_replay.add_argument("snapshot", type=Path, help="JSON page snapshot")
    p_replay.add_argument(
        "--events", type=Path, default=None,
        help="JSONL file of pushed events, in server order",
    )
    p_replay.add_argument(
        "--top", action="store_true",
        help="Treat the snapshot as the unpaged top listing",
    )
    p_replay.add_argument(
        "--policy", choices=["prepend", "first_page_only"], default=None,
        help="Creation merge policy (default: from settings)",
    )
    p_replay.set_defaults(func=_cmd_replay)

    return parser


async def _cmd_page(args: argparse.Namespace) -> int:
    """Print the fingerprint and navigation state for one page."""
    from linksync.pagination.controller import PaginationController

    controller = PaginationController()
    fingerprint = controller.build_fingerprint(args.page_number, not args.top)

    print(f"\nPage {args.page_number} ({'top' if args.top else 'new'}):")
    print(f"  Variables:  {json.dumps(fingerprint.as_variables())}")
    print(f"  Next:       {controller.next_page(args.page_number, args.total)}")
    print(f"  Previous:   {controller.previous_page(args.page_number)}")
    return 0


async def _cmd_replay(args: argparse.Namespace) -> int:
    """Load a snapshot into the store, merge events, print the result."""
    from linksync.cache.memory_store import MemoryCollectionStore
    from linksync.cache.models import CachedView
    from linksync.config.settings import Settings
    from linksync.pagination.controller import PaginationController
    from linksync.sync.subscription import EventSubscription
    from linksync.view.materializer import materialize, mode_for

    snapshot_path: Path = args.snapshot
    if not snapshot_path.exists():
        logger.error("File not found: %s", snapshot_path)
        return 1

    settings = Settings()
    is_paged_view = not args.top
    snapshot = json.loads(snapshot_path.read_text(encoding="utf-8"))
    page_number = int(snapshot.get("page", 1))

    fingerprint = PaginationController(settings).build_fingerprint(
        page_number, is_paged_view
    )
    view = CachedView(
        fingerprint=fingerprint,
        items=snapshot.get("allLinks", []),
        total_count=(snapshot.get("_allLinksMeta") or {}).get("count"),
    )
    store = MemoryCollectionStore()
    store.write(fingerprint, view)

    subscription = EventSubscription(
        store,
        lambda: fingerprint,
        policy=args.policy or settings.create_event_policy,
    )
    if args.events is not None:
        if not args.events.exists():
            logger.error("File not found: %s", args.events)
            return 1
        for message in _read_jsonl(args.events):
            subscription.handle(message)

    links = materialize(store.read(fingerprint), mode_for(is_paged_view))
    print(f"\nReplay of {snapshot_path.name} under {fingerprint.key}:")
    print(f"  Events applied: {subscription.applied}")
    print(f"  Events skipped: {subscription.skipped}")
    for i, link in enumerate(links, start=1):
        print(f"  {i:>3}. [{link.vote_count} votes] {link.description} ({link.url})")
    return 0


def _read_jsonl(path: Path) -> list[dict]:
    """Read one JSON object per non-blank line."""
    messages = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if line.strip():
            messages.append(json.loads(line))
    return messages


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from linksync.config.settings import Settings
    from linksync.logging.logger import setup_logging_from_settings

    setup_logging_from_settings(
        Settings(), level="DEBUG" if verbose else "WARNING", log_format="text",
    )


if __name__ == "__main__":
    sys.exit(main())
