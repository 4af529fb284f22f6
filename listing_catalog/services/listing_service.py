"""Listing service - CRUD operations and ranked queries for the routes."""

from typing import Optional
from uuid import UUID, uuid4

from listing_catalog.models import (
    Listing,
    ListingCreate,
    PaginatedListingsResponse,
    SearchRequest,
    SearchResponse,
)
from listing_catalog.repositories import ListingStore
from .query_orchestrator import ListingQueryOrchestrator


class ListingService:
    """Facade over the listing store and the query orchestrator"""

    def __init__(self, store: ListingStore):
        self.store = store
        self.orchestrator = ListingQueryOrchestrator(store)

    async def create_listing(self, data: ListingCreate) -> Listing:
        listing = Listing(listing_id=uuid4(), **data.model_dump())
        return await self.store.create(listing)

    async def get_listing(self, listing_id: UUID) -> Optional[Listing]:
        return await self.store.get_by_id(listing_id)

    async def update_listing(self, listing_id: UUID, data: ListingCreate) -> Optional[Listing]:
        listing = Listing(listing_id=listing_id, **data.model_dump())
        return await self.store.update(listing)

    async def delete_listing(self, listing_id: UUID) -> bool:
        return await self.store.delete(listing_id)

    async def listing_exists(self, listing_id: UUID) -> bool:
        return await self.store.exists(listing_id)

    async def get_all_listings(
        self,
        page: int,
        page_size: int,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None
    ) -> PaginatedListingsResponse:
        """Rank every listing and return one page"""
        result = await self.orchestrator.execute(page, page_size, latitude, longitude)
        return PaginatedListingsResponse(
            items=result.items,
            total_items=result.total_count,
            page=page,
            page_size=page_size,
        )

    async def search_listings(self, request: SearchRequest) -> SearchResponse:
        """Filter, rank and paginate listings"""
        result = await self.orchestrator.execute(
            request.page,
            request.page_size,
            request.latitude,
            request.longitude,
            request.filters,
        )
        return SearchResponse(
            items=result.items,
            total_items=result.total_count,
            page=request.page,
            page_size=request.page_size,
            applied_filters=request.filters,
        )
