#!/usr/bin/env python3
"""
File utilities: loading candidate points from GPX and naming map output files.
"""

from typing import List, Optional, TextIO
import logging
import os
import gpxpy
import gpxpy.gpx

from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Give up looking for a free map filename after this many numbered variants
MAX_FILENAME_ATTEMPTS = 100


def load_gpx_points(file_input: TextIO) -> List[Coordinate]:
    """
    Read candidate points from GPX data.

    Waypoints are used when present; otherwise route points, and otherwise
    track points, are concatenated in file order.

    Args:
        file_input: File-like object containing GPX data

    Returns:
        List of coordinates, possibly empty

    Raises:
        gpxpy.gpx.GPXException: If the GPX data is malformed.
        InvalidCoordinate: If a point lies outside the valid range.
    """
    gpx_data = gpxpy.parse(file_input)

    points: List[gpxpy.gpx.GPXWaypoint] = list(gpx_data.waypoints)
    source = "waypoints"
    if not points:
        points = [p for route in gpx_data.routes for p in route.points]
        source = "route points"
    if not points:
        points = [
            p
            for track in gpx_data.tracks
            for segment in track.segments
            for p in segment.points
        ]
        source = "track points"

    coords = [Coordinate(p.latitude, p.longitude) for p in points]
    logger.debug(f"Parsed {len(coords)} {source} from GPX data")
    return coords


def load_gpx_file(filename: str) -> List[Coordinate]:
    """
    Load candidate points from a GPX file.

    Raises:
        FileNotFoundError: If file doesn't exist.
        PermissionError: If file can't be read.
        gpxpy.gpx.GPXException: If GPX file is malformed.
    """
    logger.debug(f"Reading GPX file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        return load_gpx_points(f)


def generate_output_filename(input_filename: Optional[str]) -> str:
    """
    Generate an HTML map filename next to the input file and reserve it.

    "trip.gpx" becomes "trip route.html"; if that exists, "trip route (1).html",
    "trip route (2).html" and so on. The name is reserved by creating the file
    exclusively. Without an input file the base name is "route".

    Raises:
        RuntimeError: If no free filename is found.
        ValueError: If the file cannot be created.
    """
    if input_filename:
        input_dir = os.path.dirname(input_filename)
        base_name = os.path.basename(input_filename)
        if base_name.lower().endswith(".gpx"):
            base_name = base_name[:-4]
        base_output = base_name + " route"
    else:
        input_dir = ""
        base_output = "route"

    candidates = [os.path.join(input_dir, base_output + ".html")] + [
        os.path.join(input_dir, f"{base_output} ({i}).html")
        for i in range(1, MAX_FILENAME_ATTEMPTS + 1)
    ]
    for candidate in candidates:
        try:
            with open(candidate, "x"):
                pass
            return candidate
        except FileExistsError:
            continue
        except OSError as e:
            logger.error(f"Cannot create file {candidate}: {e}")
            raise ValueError(f"Cannot create file: {e}") from e

    logger.error(
        f"Could not find an available filename after {MAX_FILENAME_ATTEMPTS} attempts. "
        f"Please clean up your output directory or pass a filename to --map."
    )
    raise RuntimeError(
        f"No available filename found after {MAX_FILENAME_ATTEMPTS} attempts"
    )
