"""
Distance calculations between coordinates.

Two formulas are always available: haversine for nearby points and a
long-range slot. The long-range slot is a spherical formula by default and
can be switched to a WGS84 ellipsoidal geodesic computed by pyproj.
"""

from enum import Enum
from typing import Callable, Dict
import logging
import math
import pyproj

from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Mean Earth radius used by the spherical formulas, in meters
EARTH_RADIUS = 6366707.0195

# Points closer than this (in degrees, on both axes) use the short-range formula
PROXIMITY_THRESHOLD = 1e-3

_WGS84 = pyproj.Geod(ellps="WGS84")


class DistanceFormula(Enum):
    """Enumeration of available distance formulas."""

    HAVERSINE = "haversine"
    PRECISE = "precise"
    ELLIPSOIDAL = "ellipsoidal"

    def __str__(self) -> str:
        return self.value


def haversine_distance(source: Coordinate, target: Coordinate) -> float:
    """
    Calculate the great-circle distance between two coordinates on a sphere.

    Args:
        source: First coordinate
        target: Second coordinate

    Returns:
        Distance in meters
    """
    lat1 = math.radians(source.latitude)
    lat2 = math.radians(target.latitude)
    dlat = math.radians(target.latitude - source.latitude)
    dlon = math.radians(target.longitude - source.longitude)

    a = math.sin(dlat / 2) ** 2 + math.sin(dlon / 2) ** 2 * (
        math.cos(lat1) * math.cos(lat2)
    )
    # Rounding can push a slightly above 1 for antipodal points
    return 2 * EARTH_RADIUS * math.asin(math.sqrt(min(a, 1.0)))


def precise_distance(source: Coordinate, target: Coordinate) -> float:
    """Long-range spherical distance. Same formula as haversine for now."""
    return haversine_distance(source, target)


def ellipsoidal_distance(source: Coordinate, target: Coordinate) -> float:
    """
    Calculate the geodesic distance on the WGS84 ellipsoid.

    Args:
        source: First coordinate
        target: Second coordinate

    Returns:
        Distance in meters
    """
    if source == target:
        return 0.0
    _, _, meters = _WGS84.inv(
        source.longitude, source.latitude, target.longitude, target.latitude
    )
    return abs(meters)


_FORMULAS: Dict[DistanceFormula, Callable[[Coordinate, Coordinate], float]] = {
    DistanceFormula.HAVERSINE: haversine_distance,
    DistanceFormula.PRECISE: precise_distance,
    DistanceFormula.ELLIPSOIDAL: ellipsoidal_distance,
}


def is_nearby(source: Coordinate, target: Coordinate) -> bool:
    """Return True if both coordinate deltas are below the proximity threshold."""
    return (
        abs(source.latitude - target.latitude) < PROXIMITY_THRESHOLD
        and abs(source.longitude - target.longitude) < PROXIMITY_THRESHOLD
    )


class DistanceEngine:
    """Computes distances, choosing the formula from how close the points are."""

    def __init__(
        self,
        long_range: DistanceFormula = DistanceFormula.PRECISE,
        short_range: DistanceFormula = DistanceFormula.HAVERSINE,
    ):
        """Initializes a DistanceEngine.

        Args:
            long_range: Formula used when the points are not nearby.
            short_range: Formula used when the points are within the proximity threshold.
        """
        self.long_range = DistanceFormula(long_range)
        self.short_range = DistanceFormula(short_range)
        logger.debug(
            f"Distance engine: {self.short_range} below {PROXIMITY_THRESHOLD} degrees, {self.long_range} beyond"
        )

    def select_formula(self, source: Coordinate, target: Coordinate) -> DistanceFormula:
        """Pick the formula to use for this pair of coordinates."""
        return self.short_range if is_nearby(source, target) else self.long_range

    def distance(self, source: Coordinate, target: Coordinate) -> float:
        """
        Distance between two coordinates.

        Args:
            source: Starting coordinate
            target: Destination coordinate

        Returns:
            Non-negative distance in meters, zero when source equals target
        """
        return _FORMULAS[self.select_formula(source, target)](source, target)

    def __repr__(self) -> str:
        return f"DistanceEngine(long_range={self.long_range}, short_range={self.short_range})"


DEFAULT_ENGINE = DistanceEngine()


def distance(source: Coordinate, target: Coordinate) -> float:
    """Distance in meters using the default engine."""
    return DEFAULT_ENGINE.distance(source, target)
