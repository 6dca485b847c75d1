"""
Degree-minute-second notation.

Accepts strings such as ``15°46'47"S 47°55'47"W``: a latitude and a longitude,
each ``[-]D°M'S"`` followed by a hemisphere letter, separated by optional
whitespace. Matching is case-insensitive.
"""

import logging
import re
from typing import Tuple

from .exceptions import ParseError
from .geometry import Coordinate

logger = logging.getLogger(__name__)

DMS_PATTERN = re.compile(
    r"(-?)([0-9]{1,2})°([0-5]?[0-9])'([0-5]?[0-9])\"([NS])\s*"
    r"(-?)([0-1]?[0-9]{1,2})°([0-5]?[0-9])'([0-5]?[0-9])\"([EW])",
    re.IGNORECASE,
)


def _component_value(
    sign: str, degrees: str, minutes: str, seconds: str, hemisphere: str
) -> float:
    """Convert one matched DMS component to signed decimal degrees."""
    value = float(degrees) + float(minutes) / 60 + float(seconds) / 3600
    if sign:
        value = -value
    if hemisphere.upper() in ("S", "W"):
        value = -value
    return value


def parse_notation(text: str) -> Coordinate:
    """
    Parse a degree-minute-second coordinate pair.

    Args:
        text: Notation such as ``48°51'12"N 2°20'56"E``

    Returns:
        Coordinate for the parsed latitude and longitude

    Raises:
        ParseError: If text does not match the notation.
        InvalidCoordinate: If the notation is well formed but out of range.
    """
    if not isinstance(text, str):
        raise ParseError(f"Malformed notation: {text!r}")

    match = DMS_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ParseError(f"Malformed notation: {text}")

    groups = match.groups()
    latitude = _component_value(*groups[0:5])
    longitude = _component_value(*groups[5:10])
    logger.debug(f"Parsed '{text}' as ({latitude:.6f}, {longitude:.6f})")
    return Coordinate(latitude, longitude)


def _split_degrees(value: float) -> Tuple[int, int, int]:
    """Split an absolute angle into whole degrees, minutes and rounded seconds."""
    total_seconds = int(round(abs(value) * 3600))
    degrees, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return degrees, minutes, seconds


def format_notation(coordinate: Coordinate) -> str:
    """
    Render a coordinate in degree-minute-second notation, rounded to whole seconds.

    The output is accepted by parse_notation.
    """
    lat_d, lat_m, lat_s = _split_degrees(coordinate.latitude)
    lon_d, lon_m, lon_s = _split_degrees(coordinate.longitude)
    lat_hemisphere = "S" if coordinate.latitude < 0 else "N"
    lon_hemisphere = "W" if coordinate.longitude < 0 else "E"
    return (
        f"{lat_d}°{lat_m}'{lat_s}\"{lat_hemisphere} "
        f"{lon_d}°{lon_m}'{lon_s}\"{lon_hemisphere}"
    )


def parse_point(text: str) -> Coordinate:
    """
    Parse either degree-minute-second notation or a decimal "lat,lon" pair.

    Raises:
        ParseError: If text is neither form.
        InvalidCoordinate: If the values are out of range.
    """
    if "°" in text:
        return parse_notation(text)

    parts = text.split(",")
    if len(parts) != 2:
        raise ParseError(f"Expected 'lat,lon' or DMS notation, got: {text}")
    try:
        latitude, longitude = (float(part) for part in parts)
    except ValueError as e:
        raise ParseError(f"Expected 'lat,lon' or DMS notation, got: {text}") from e
    return Coordinate(latitude, longitude)
