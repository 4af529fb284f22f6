"""Geohash decoding and distance calculation."""

from .coordinate import Coordinate
from .geohash import BASE32, decode, decode_bounds, encode
from .distance import EARTH_RADIUS_KM, distance_km, distance_between

__all__ = [
    'Coordinate',
    'BASE32',
    'decode',
    'decode_bounds',
    'encode',
    'EARTH_RADIUS_KM',
    'distance_km',
    'distance_between',
]
