"""Listing repositories"""

from .base import ListingStore
from .memory_repository import InMemoryListingRepository
from .postgres_repository import PostgresListingRepository, build_where_clause, row_to_listing

__all__ = [
    "ListingStore",
    "InMemoryListingRepository",
    "PostgresListingRepository",
    "build_where_clause",
    "row_to_listing",
]
