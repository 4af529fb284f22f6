"""Storage contract consumed by the listing services."""

from typing import List, Optional, Protocol, Tuple
from uuid import UUID

from listing_catalog.filtering import CompiledPredicate
from listing_catalog.models import Listing


class ListingStore(Protocol):
    """Listing persistence.

    fetch_candidates must return every matching listing, unpaginated, because
    ranking needs the whole candidate set before a page can be sliced. Rows
    come back oldest first so that equal-ranked listings page the same way on
    every backend.
    """

    async def fetch_candidates(
        self,
        predicate: Optional[CompiledPredicate] = None
    ) -> Tuple[List[Listing], int]:
        ...

    async def create(self, listing: Listing) -> Listing:
        ...

    async def get_by_id(self, listing_id: UUID) -> Optional[Listing]:
        ...

    async def update(self, listing: Listing) -> Optional[Listing]:
        ...

    async def delete(self, listing_id: UUID) -> bool:
        ...

    async def exists(self, listing_id: UUID) -> bool:
        ...

    async def count(self) -> int:
        ...
