"""
Geographic coordinate value type.

A Coordinate is validated once, at construction, and is immutable afterwards,
so every Coordinate in circulation is a valid point on the globe.
"""

from dataclasses import dataclass
from typing import Tuple
import math
import numbers

from .exceptions import InvalidCoordinate

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


@dataclass(frozen=True, order=True)
class Coordinate:
    """Represents a geographic position with latitude and longitude in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """
        Validate the coordinate range.

        Raises:
            InvalidCoordinate: If |latitude| > 90, |longitude| > 180, or either
                value is not a finite real number.
        """
        for value in (self.latitude, self.longitude):
            # Text goes through parse_point or parse_notation, not the constructor
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidCoordinate(
                    f"Invalid coordinate parameters: ({self.latitude!r}, {self.longitude!r})"
                )
        latitude = float(self.latitude)
        longitude = float(self.longitude)

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise InvalidCoordinate(
                f"Invalid coordinate parameters: ({latitude}, {longitude})"
            )
        if abs(latitude) > MAX_LATITUDE or abs(longitude) > MAX_LONGITUDE:
            raise InvalidCoordinate(
                f"Invalid coordinate parameters: ({latitude}, {longitude})"
            )

        # Normalize ints to float
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    def as_tuple(self) -> Tuple[float, float]:
        """Return (latitude, longitude)."""
        return (self.latitude, self.longitude)


ORIGIN = Coordinate(0.0, 0.0)
