"""
Listing routes: CRUD plus ranked listing and search queries.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from listing_catalog.config import get_settings
from listing_catalog.db import get_listing_repository
from listing_catalog.error_handling import CatalogError
from listing_catalog.models import (
    Listing,
    ListingCreate,
    PaginatedListingsResponse,
    SearchRequest,
    SearchResponse,
)
from listing_catalog.repositories import ListingStore
from listing_catalog.services import ListingService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_listing_service(store: ListingStore = Depends(get_listing_repository)) -> ListingService:
    """Build a per-request listing service"""
    return ListingService(store)


@router.post("/listings", response_model=Listing, status_code=201)
async def create_listing(
    data: ListingCreate,
    service: ListingService = Depends(get_listing_service)
):
    """Create a new listing."""
    try:
        return await service.create_listing(data)
    except Exception as e:
        logger.error(f"Failed to create listing: {e}")
        raise HTTPException(status_code=500, detail="Failed to create listing")


@router.get("/listings", response_model=PaginatedListingsResponse)
async def list_listings(
    page: int = Query(1, description="1-based page number"),
    page_size: int = Query(
        get_settings().search.default_page_size,
        alias="pageSize",
        description="Items per page (max 50)"
    ),
    latitude: Optional[float] = Query(None, description="Reference latitude for proximity sorting"),
    longitude: Optional[float] = Query(None, description="Reference longitude for proximity sorting"),
    service: ListingService = Depends(get_listing_service)
):
    """
    List listings sorted by distance from the reference point, then by price.

    Without a reference point listings are sorted by price only.
    """
    try:
        return await service.get_all_listings(page, page_size, latitude, longitude)
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to retrieve listings: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve listings")


@router.post("/listings/search", response_model=SearchResponse)
async def search_listings(
    request: SearchRequest,
    service: ListingService = Depends(get_listing_service)
):
    """
    Search listings with whitelisted filters.

    `category` supports `equals`; `name`, `description`, `location.country`
    and `location.municipality` support `contains`.
    """
    try:
        return await service.search_listings(request)
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to search listings: {e}")
        raise HTTPException(status_code=500, detail="Failed to search listings")


@router.get("/listings/{listing_id}", response_model=Listing)
async def get_listing(
    listing_id: UUID,
    service: ListingService = Depends(get_listing_service)
):
    """Get a single listing by ID."""
    try:
        listing = await service.get_listing(listing_id)
    except Exception as e:
        logger.error(f"Failed to get listing {listing_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve listing")

    if listing is None:
        raise HTTPException(status_code=404, detail="Listing not found")
    return listing


@router.put("/listings/{listing_id}", response_model=Listing)
async def update_listing(
    listing_id: UUID,
    data: ListingCreate,
    service: ListingService = Depends(get_listing_service)
):
    """Replace a listing."""
    try:
        listing = await service.update_listing(listing_id, data)
    except Exception as e:
        logger.error(f"Failed to update listing {listing_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update listing")

    if listing is None:
        raise HTTPException(status_code=404, detail="Listing not found")
    return listing


@router.delete("/listings/{listing_id}", status_code=204)
async def delete_listing(
    listing_id: UUID,
    service: ListingService = Depends(get_listing_service)
):
    """Delete a listing."""
    try:
        deleted = await service.delete_listing(listing_id)
    except Exception as e:
        logger.error(f"Failed to delete listing {listing_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete listing")

    if not deleted:
        raise HTTPException(status_code=404, detail="Listing not found")
    return Response(status_code=204)
