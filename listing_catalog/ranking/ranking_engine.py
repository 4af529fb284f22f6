"""
Proximity ranking for catalog listings.

Orders a candidate set by distance from an optional reference point, then by
price. Ranking runs in memory over whatever the repository returned.
"""

import logging
import math
from decimal import Decimal
from typing import List, NamedTuple, Optional, Sequence

from listing_catalog.error_handling import InvalidInputError
from listing_catalog.geo import Coordinate, decode, distance_km
from listing_catalog.models import Listing


logger = logging.getLogger(__name__)

# Distance key for listings that cannot be located
UNKNOWN_DISTANCE = math.inf


class RankedListing(NamedTuple):
    """Sort key tuple for one listing during a ranking pass."""
    listing: Listing
    distance_km: float
    price_amount: Decimal


def listing_distance(listing: Listing, reference: Optional[Coordinate]) -> float:
    """Distance from the reference point to a listing's geohash cell centre.

    Returns UNKNOWN_DISTANCE when there is no reference point or the
    listing's geohash cannot be decoded.
    """
    if reference is None:
        return UNKNOWN_DISTANCE

    try:
        latitude, longitude = decode(listing.location.geohash)
    except InvalidInputError as e:
        logger.warning(f"Listing {listing.listing_id} has undecodable geohash: {e}")
        return UNKNOWN_DISTANCE

    return distance_km(reference.latitude, reference.longitude, latitude, longitude)


def build_ranked_listings(
    listings: Sequence[Listing],
    reference: Optional[Coordinate] = None
) -> List[RankedListing]:
    """Attach distance and price sort keys to every listing, in input order."""
    return [
        RankedListing(
            listing=listing,
            distance_km=listing_distance(listing, reference),
            price_amount=listing.price.amount,
        )
        for listing in listings
    ]


def rank_listings(
    listings: Sequence[Listing],
    reference: Optional[Coordinate] = None
) -> List[Listing]:
    """Order listings by ascending distance, then ascending price.

    The sort is stable: listings tied on both keys keep their input order.
    Without a reference point every distance is UNKNOWN_DISTANCE, so the
    result is in price order.

    Args:
        listings: Candidate listings
        reference: Optional reference point

    Returns:
        New list with the same listings, ranked
    """
    ranked = build_ranked_listings(listings, reference)
    ranked.sort(key=lambda item: (item.distance_km, item.price_amount))
    return [item.listing for item in ranked]
