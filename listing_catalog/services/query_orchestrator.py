"""
Query orchestrator - validates a listing query, fetches candidates, ranks and paginates.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from listing_catalog.config import MAX_PAGE_SIZE
from listing_catalog.error_handling import InvalidPageSizeError
from listing_catalog.filtering import compile_filters
from listing_catalog.geo import Coordinate
from listing_catalog.models import Listing
from listing_catalog.ranking import rank_listings
from listing_catalog.repositories import ListingStore


logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """One page of ranked listings and the total number of matches"""
    items: List[Listing] = field(default_factory=list)
    total_count: int = 0


class ListingQueryOrchestrator:
    """Run paginated, filtered, proximity-ranked listing queries"""

    def __init__(self, store: ListingStore):
        self.store = store

    def validate_page(self, page: int, page_size: int) -> None:
        """
        Check page bounds. Oversized pages are rejected, never clamped.

        Raises:
            InvalidPageSizeError: If page < 1 or page_size is outside [1, MAX_PAGE_SIZE]
        """
        if page < 1:
            raise InvalidPageSizeError(f"Page must be >= 1, got {page}")
        if page_size < 1:
            raise InvalidPageSizeError(f"Page size must be >= 1, got {page_size}")
        if page_size > MAX_PAGE_SIZE:
            raise InvalidPageSizeError(
                f"Page size cannot exceed {MAX_PAGE_SIZE} items, got {page_size}"
            )

    async def execute(
        self,
        page: int,
        page_size: int,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        criteria: Optional[Iterable[Any]] = None
    ) -> QueryResult:
        """
        Execute a listing query.

        Validation (page bounds, reference point, filters) completes before
        the store is called. The full candidate set is ranked before the
        requested page is sliced, so ordering is global rather than per page.

        Args:
            page: 1-based page number
            page_size: Items per page
            latitude: Optional reference latitude
            longitude: Optional reference longitude
            criteria: Optional filter criteria

        Returns:
            QueryResult with the requested page and the total match count
        """
        self.validate_page(page, page_size)
        reference = Coordinate.from_optional(latitude, longitude)
        predicate = compile_filters(criteria)

        candidates, total_count = await self.store.fetch_candidates(predicate)
        ranked = rank_listings(candidates, reference)

        offset = (page - 1) * page_size
        items = ranked[offset:offset + page_size]

        logger.info(
            f"Query page={page} page_size={page_size} filters={len(predicate.conditions)} "
            f"proximity={reference is not None}: {len(items)} of {total_count} listings"
        )
        return QueryResult(items=items, total_count=total_count)
