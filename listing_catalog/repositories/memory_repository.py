"""In-process listing repository used for tests and local development."""

from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from listing_catalog.filtering import CompiledPredicate
from listing_catalog.models import Listing


class InMemoryListingRepository:
    """Keeps listings in insertion order in a dict keyed by listing id."""

    def __init__(self, listings: Iterable[Listing] = ()):
        self._listings: Dict[UUID, Listing] = {}
        for listing in listings:
            self._listings[listing.listing_id] = listing

    async def fetch_candidates(
        self,
        predicate: Optional[CompiledPredicate] = None
    ) -> Tuple[List[Listing], int]:
        if predicate is None or predicate.is_empty:
            matches = list(self._listings.values())
        else:
            matches = [l for l in self._listings.values() if predicate.matches(l)]
        return matches, len(matches)

    async def create(self, listing: Listing) -> Listing:
        self._listings[listing.listing_id] = listing
        return listing

    async def get_by_id(self, listing_id: UUID) -> Optional[Listing]:
        return self._listings.get(listing_id)

    async def update(self, listing: Listing) -> Optional[Listing]:
        if listing.listing_id not in self._listings:
            return None
        self._listings[listing.listing_id] = listing
        return listing

    async def delete(self, listing_id: UUID) -> bool:
        return self._listings.pop(listing_id, None) is not None

    async def exists(self, listing_id: UUID) -> bool:
        return listing_id in self._listings

    async def count(self) -> int:
        return len(self._listings)
