"""Proximity and price ranking for listings."""

from .ranking_engine import (
    UNKNOWN_DISTANCE,
    RankedListing,
    listing_distance,
    build_ranked_listings,
    rank_listings,
)

__all__ = [
    'UNKNOWN_DISTANCE',
    'RankedListing',
    'listing_distance',
    'build_ranked_listings',
    'rank_listings',
]
