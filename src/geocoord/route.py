#!/usr/bin/env python3
"""
Route data model for route optimization.
"""

from typing import Callable, Iterable, Optional, Tuple

from .distance import DEFAULT_ENGINE, DistanceEngine
from .geometry import ORIGIN, Coordinate


class Route:
    """An ordered, immutable visiting sequence of coordinates."""

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[Coordinate]):
        """Initializes a Route object.

        Args:
            coords: Coordinates in visiting order. Repeats are allowed.

        Raises:
            ValueError: If coords is empty.
        """
        coords = tuple(coords)
        if not coords:
            raise ValueError("Route coordinates cannot be empty")
        self._coords: Tuple[Coordinate, ...] = coords

    @property
    def coords(self) -> Tuple[Coordinate, ...]:
        """The coordinates in visiting order."""
        return self._coords

    def swapped(self, first: int, second: int) -> "Route":
        """Return a new route with the coordinates at two positions exchanged."""
        coords = list(self._coords)
        coords[first], coords[second] = coords[second], coords[first]
        return Route(coords)

    def centroid(self) -> Coordinate:
        """
        Arithmetic mean of the route's latitudes and longitudes.

        Latitudes and longitudes are averaged independently, so the result is
        a plain average of degrees, not a point on the sphere's surface.
        """
        count = len(self._coords)
        latitude = sum(c.latitude for c in self._coords) / count
        longitude = sum(c.longitude for c in self._coords) / count
        return Coordinate(latitude, longitude)

    def length(
        self,
        start: Optional[Coordinate] = None,
        engine: Optional[DistanceEngine] = None,
    ) -> float:
        """
        Total distance travelled visiting the coordinates in order.

        Args:
            start: Optional point the tour departs from before the first coordinate
            engine: Distance engine to use (default: the module default engine)

        Returns:
            Tour length in meters
        """
        engine = engine or DEFAULT_ENGINE
        stops = self._coords if start is None else (start,) + self._coords
        return sum(engine.distance(a, b) for a, b in zip(stops, stops[1:]))

    def __len__(self) -> int:
        """Return number of coordinates in route."""
        return len(self._coords)

    def __getitem__(self, index):
        """Allow indexing into coordinates."""
        return self._coords[index]

    def __iter__(self):
        """Allow iteration over coordinates."""
        return iter(self._coords)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self) -> int:
        return hash(self._coords)

    def __repr__(self) -> str:
        return f"Route({list(self._coords)!r})"


Fitness = Callable[[Route], float]


def centroid_fitness(route: Route, engine: Optional[DistanceEngine] = None) -> float:
    """
    Distance in meters from ORIGIN to the route's centroid.

    This does not depend on visiting order: every permutation of the same
    coordinates has the same value.
    """
    engine = engine or DEFAULT_ENGINE
    return engine.distance(ORIGIN, route.centroid())


def tour_length_fitness(
    start: Optional[Coordinate] = None, engine: Optional[DistanceEngine] = None
) -> Fitness:
    """
    Build a fitness function that scores a route by its tour length.

    Args:
        start: Optional departure point prepended to every tour
        engine: Distance engine to use (default: the module default engine)

    Returns:
        Callable mapping a Route to its length in meters
    """

    def fitness(route: Route) -> float:
        return route.length(start=start, engine=engine)

    return fitness
