"""Exceptions raised by geocoord."""


class GeocoordError(Exception):
    """Base class for all geocoord errors."""


class InvalidCoordinate(GeocoordError, ValueError):
    """Latitude or longitude outside the valid range."""


class EmptyCandidateSet(GeocoordError, ValueError):
    """Closest/farthest selection was asked to choose from nothing."""


class InsufficientCandidates(GeocoordError, ValueError):
    """Route optimization needs at least two points to swap."""


class ParseError(GeocoordError, ValueError):
    """Text could not be read as a coordinate."""
