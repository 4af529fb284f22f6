"""Listing services"""

from .query_orchestrator import ListingQueryOrchestrator, QueryResult, MAX_PAGE_SIZE
from .listing_service import ListingService

__all__ = ["ListingQueryOrchestrator", "QueryResult", "MAX_PAGE_SIZE", "ListingService"]
