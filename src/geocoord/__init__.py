#!/usr/bin/env python3
"""
Geocoord - geographic coordinates, distances and route ordering.

This package provides an immutable coordinate type together with great-circle
distance, closest/farthest selection and a simulated-annealing route optimizer.
"""
import importlib.metadata

__version__ = importlib.metadata.version("geocoord")

# Import main classes for public API
from .exceptions import (
    GeocoordError,
    InvalidCoordinate,
    EmptyCandidateSet,
    InsufficientCandidates,
    ParseError,
)
from .geometry import Coordinate, ORIGIN
from .distance import DistanceEngine, DistanceFormula, distance
from .notation import parse_notation, format_notation
from .selector import closest, farthest
from .route import Route, centroid_fitness, tour_length_fitness
from .optimizer import RouteOptimizer

__all__ = [
    "GeocoordError",
    "InvalidCoordinate",
    "EmptyCandidateSet",
    "InsufficientCandidates",
    "ParseError",
    "Coordinate",
    "ORIGIN",
    "DistanceEngine",
    "DistanceFormula",
    "distance",
    "parse_notation",
    "format_notation",
    "closest",
    "farthest",
    "Route",
    "centroid_fitness",
    "tour_length_fitness",
    "RouteOptimizer",
]
