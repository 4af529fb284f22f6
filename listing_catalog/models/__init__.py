"""Data models for the listing catalog"""

from .listing import Category, Price, Location, ListingBase, ListingCreate, Listing
from .search import (
    FilterCriterion,
    SearchRequest,
    PaginatedListingsResponse,
    SearchResponse,
)

__all__ = [
    "Category",
    "Price",
    "Location",
    "ListingBase",
    "ListingCreate",
    "Listing",
    "FilterCriterion",
    "SearchRequest",
    "PaginatedListingsResponse",
    "SearchResponse",
]
