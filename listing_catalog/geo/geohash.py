"""
Geohash decoding and encoding.

A geohash interleaves bisections of the longitude and latitude ranges, five
bits per base-32 character, starting with longitude.
"""

from typing import Tuple

from listing_catalog.error_handling import InvalidCoordinateError, InvalidInputError


BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
BASE32_MAP = {char: index for index, char in enumerate(BASE32)}

DEFAULT_PRECISION = 7


def decode_bounds(geohash: str) -> Tuple[float, float, float, float]:
    """Decode a geohash into the cell it denotes.

    Args:
        geohash: Geohash string (ASCII, case-insensitive)

    Returns:
        Tuple of (lat_min, lat_max, lon_min, lon_max)

    Raises:
        InvalidInputError: If the geohash is empty or contains an invalid character
    """
    if geohash is None or not geohash.strip():
        raise InvalidInputError("Geohash cannot be null or empty")

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]
    is_lon_bit = True

    for char in geohash:
        # Only ASCII folds; str.lower() maps KELVIN SIGN to "k"
        value = BASE32_MAP.get(char.lower()) if char.isascii() else None
        if value is None:
            raise InvalidInputError(f"Invalid geohash character: {char}", character=char)

        for shift in range(4, -1, -1):
            bit = (value >> shift) & 1
            interval = lon_range if is_lon_bit else lat_range
            mid = (interval[0] + interval[1]) / 2
            if bit:
                interval[0] = mid
            else:
                interval[1] = mid
            is_lon_bit = not is_lon_bit

    return lat_range[0], lat_range[1], lon_range[0], lon_range[1]


def decode(geohash: str) -> Tuple[float, float]:
    """Decode a geohash to the centre of its cell.

    Args:
        geohash: Geohash string (case-insensitive)

    Returns:
        Tuple of (latitude, longitude)

    Raises:
        InvalidInputError: If the geohash is empty or contains an invalid character
    """
    lat_min, lat_max, lon_min, lon_max = decode_bounds(geohash)
    return (lat_min + lat_max) / 2, (lon_min + lon_max) / 2


def encode(latitude: float, longitude: float, precision: int = DEFAULT_PRECISION) -> str:
    """Encode a coordinate as a geohash.

    Args:
        latitude: Latitude in [-90, 90]
        longitude: Longitude in [-180, 180]
        precision: Number of characters to produce

    Returns:
        Lower-case geohash of the given length
    """
    if precision < 1:
        raise InvalidInputError(f"Geohash precision must be positive, got {precision}")
    if not -90.0 <= latitude <= 90.0:
        raise InvalidCoordinateError(f"Latitude must be between -90 and 90 degrees, got {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidCoordinateError(f"Longitude must be between -180 and 180 degrees, got {longitude}")

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]
    is_lon_bit = True
    chars = []
    value = 0
    bits = 0

    while len(chars) < precision:
        if is_lon_bit:
            interval, target = lon_range, longitude
        else:
            interval, target = lat_range, latitude
        mid = (interval[0] + interval[1]) / 2
        if target >= mid:
            value = (value << 1) | 1
            interval[0] = mid
        else:
            value <<= 1
            interval[1] = mid
        is_lon_bit = not is_lon_bit

        bits += 1
        if bits == 5:
            chars.append(BASE32[value])
            value = 0
            bits = 0

    return "".join(chars)
