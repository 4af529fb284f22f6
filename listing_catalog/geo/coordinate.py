"""Geographic coordinate value and reference-point validation."""

from dataclasses import dataclass
from typing import Optional

from listing_catalog.error_handling import InvalidCoordinateError


MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


@dataclass(frozen=True)
class Coordinate:
    """A point on the Earth's surface in decimal degrees.

    Attributes:
        latitude: Latitude in [-90, 90]
        longitude: Longitude in [-180, 180]
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        # Written as negated ranges so NaN is rejected too
        if not MIN_LATITUDE <= self.latitude <= MAX_LATITUDE:
            raise InvalidCoordinateError(
                f"Latitude must be between -90 and 90 degrees, got {self.latitude}"
            )
        if not MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            raise InvalidCoordinateError(
                f"Longitude must be between -180 and 180 degrees, got {self.longitude}"
            )

    @classmethod
    def from_optional(
        cls,
        latitude: Optional[float],
        longitude: Optional[float]
    ) -> Optional['Coordinate']:
        """Build a reference point from optional request parameters.

        Args:
            latitude: Caller-supplied latitude, or None
            longitude: Caller-supplied longitude, or None

        Returns:
            Coordinate when both values are given, None when both are absent

        Raises:
            InvalidCoordinateError: If only one value is given or either is out of range
        """
        if latitude is None and longitude is None:
            return None
        if latitude is None or longitude is None:
            raise InvalidCoordinateError(
                "Both latitude and longitude must be provided together for proximity sorting"
            )
        return cls(latitude=float(latitude), longitude=float(longitude))
