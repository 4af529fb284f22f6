"""
Command-line interface for the listing catalog.

Runs ranked searches against the configured storage backend and performs
maintenance on the listings table.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from listing_catalog.config import MAX_PAGE_SIZE, get_settings
from listing_catalog.db import close_db, get_listing_repository, get_pg_pool, init_db
from listing_catalog.error_handling import CatalogError
from listing_catalog.models import FilterCriterion
from listing_catalog.services import ListingQueryOrchestrator


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_QUERY = 2


def parse_filter(text: str) -> FilterCriterion:
    """Parse a FIELD:OPERATOR:VALUE filter argument."""
    parts = text.split(":", 2)
    if len(parts) != 3 or not all(parts[:2]):
        raise argparse.ArgumentTypeError(
            f"Filter must look like FIELD:OPERATOR:VALUE, got '{text}'"
        )
    field, operator, value = parts
    return FilterCriterion(field=field, operator=operator, value=value)


def format_listing(rank: int, listing) -> str:
    location = listing.location
    return (
        f"{rank:>3}. {listing.name} | {listing.price.amount} {listing.price.currency} | "
        f"{listing.category.value} | {location.municipality}, {location.country} "
        f"({location.geohash})"
    )


async def run_search(
    page: int,
    page_size: int,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    criteria: Optional[List[FilterCriterion]] = None
) -> int:
    """Run one ranked query and print the requested page."""
    await init_db()
    try:
        orchestrator = ListingQueryOrchestrator(get_listing_repository())
        result = await orchestrator.execute(page, page_size, latitude, longitude, criteria)
    except CatalogError as e:
        print(f"Invalid query: {e}", file=sys.stderr)
        return EXIT_INVALID_QUERY
    finally:
        await close_db()

    first_rank = (page - 1) * page_size + 1
    for offset, listing in enumerate(result.items):
        print(format_listing(first_rank + offset, listing))
    print(f"Page {page}: {len(result.items)} of {result.total_count} listings")
    return EXIT_OK


async def run_clear() -> int:
    """Delete every listing from the PostgreSQL listings table."""
    settings = get_settings()
    if settings.storage_backend == "memory":
        print("Nothing to clear: the memory backend keeps no data between runs", file=sys.stderr)
        return EXIT_ERROR

    await init_db(settings)
    try:
        async with get_pg_pool().acquire() as conn:
            status = await conn.execute("DELETE FROM listings")
    finally:
        await close_db()

    logger.info(f"Cleared listings table: {status}")
    print(f"Cleared listings table: {status}")
    return EXIT_OK


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="listing-catalog",
        description="Search and maintain the marketplace listing catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Nearest listings to Austin, cheapest first on ties
  listing-catalog search --latitude 30.2672 --longitude -97.7431

  # Music listings in Sweden, second page of 20
  listing-catalog search --filter category:equals:Music \\
      --filter location.country:contains:SE --page 2 --page-size 20

  # Empty the listings table
  listing-catalog clear --yes
        """
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Run a ranked listing query")
    search.add_argument("--page", type=int, default=1, help="1-based page number")
    search.add_argument(
        "--page-size",
        type=int,
        default=get_settings().search.default_page_size,
        help=f"Items per page (max {MAX_PAGE_SIZE})"
    )
    search.add_argument("--latitude", type=float, default=None, help="Reference latitude")
    search.add_argument("--longitude", type=float, default=None, help="Reference longitude")
    search.add_argument(
        "--filter",
        dest="filters",
        type=parse_filter,
        action="append",
        default=[],
        metavar="FIELD:OPERATOR:VALUE",
        help="Filter criterion, e.g. name:contains:bike (repeatable)"
    )

    clear = subparsers.add_parser("clear", help="Delete every listing")
    clear.add_argument(
        "--yes",
        action="store_true",
        help="Confirm deletion of every listing"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, 2 for an invalid query, 1 for other errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_settings().log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.command == "clear" and not args.yes:
        print("Refusing to delete every listing without --yes", file=sys.stderr)
        return EXIT_ERROR

    try:
        if args.command == "search":
            return asyncio.run(run_search(
                page=args.page,
                page_size=args.page_size,
                latitude=args.latitude,
                longitude=args.longitude,
                criteria=args.filters
            ))
        return asyncio.run(run_clear())
    except Exception as e:
        logger.exception(f"Command {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
