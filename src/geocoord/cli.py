#!/usr/bin/env python3
"""
Geocoord command-line tool.

Computes distances, finds the closest or farthest of a set of points and
orders points into a short route by simulated annealing. Points are given as
degree-minute-second notation (15°46'47"S 47°55'47"W) or decimal "lat,lon"
pairs; use "--" before decimal points with a leading minus sign.
"""

from typing import List, Optional
import argparse
import logging
import os
import sys
import gpxpy.gpx

from . import __version__
from .config import GeocoordConfig
from .distance import DistanceEngine, DistanceFormula
from .exceptions import GeocoordError
from .file_utils import generate_output_filename, load_gpx_file
from .geometry import Coordinate
from .metrics import log_metrics
from .notation import format_notation, parse_point
from .optimizer import RouteOptimizer
from .selector import closest, farthest
from . import visualization

# Configure logging
logger = logging.getLogger("geocoord")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    defaults = GeocoordConfig()
    parser = argparse.ArgumentParser(
        description="Geographic coordinate distance, selection and route tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {defaults.log_level})",
    )
    parser.add_argument(
        "--formula",
        type=str,
        default=defaults.formula,
        choices=[DistanceFormula.PRECISE.value, DistanceFormula.ELLIPSOIDAL.value],
        help=f"Long-range distance formula (default: {defaults.formula})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geocoord {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    distance_parser = subparsers.add_parser(
        "distance", help="Distance in meters between two points"
    )
    distance_parser.add_argument("source", help="Starting point")
    distance_parser.add_argument("target", help="Destination point")

    for name, help_text in (
        ("closest", "Candidate nearest to a reference point"),
        ("farthest", "Candidate farthest from a reference point"),
    ):
        select_parser = subparsers.add_parser(name, help=help_text)
        select_parser.add_argument("reference", help="Reference point")
        select_parser.add_argument("points", nargs="*", help="Candidate points")
        select_parser.add_argument(
            "--gpx", type=str, default=None, help="GPX file with candidate points"
        )

    route_parser = subparsers.add_parser(
        "route", help="Order points into a short route by simulated annealing"
    )
    route_parser.add_argument("points", nargs="*", help="Points to visit")
    route_parser.add_argument(
        "--gpx", type=str, default=None, help="GPX file with points to visit"
    )
    route_parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Departure point for the tour fitness",
    )
    route_parser.add_argument(
        "--fitness",
        type=str,
        default=defaults.fitness,
        choices=["centroid", "tour"],
        help=f"Route fitness function (default: {defaults.fitness})",
    )
    route_parser.add_argument(
        "--seed",
        type=int,
        default=defaults.seed,
        help="Random seed for reproducible runs",
    )
    route_parser.add_argument(
        "--initial-temperature",
        type=float,
        default=defaults.initial_temperature,
        help=f"Starting temperature (default: {defaults.initial_temperature:g})",
    )
    route_parser.add_argument(
        "--cooling-rate",
        type=float,
        default=defaults.cooling_rate,
        help=f"Fractional temperature decay per iteration (default: {defaults.cooling_rate})",
    )
    route_parser.add_argument(
        "--map",
        type=str,
        nargs="?",
        const="",
        default=None,
        help="Write an HTML map of the route (default name derived from --gpx)",
    )
    route_parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured optimizer metrics after processing",
    )
    return parser


def setup_logging(args: argparse.Namespace) -> None:
    """Setup logging configuration."""
    level = getattr(logging, args.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def build_config(args: argparse.Namespace) -> GeocoordConfig:
    """Collect the parsed arguments into a GeocoordConfig."""
    config = GeocoordConfig(log_level=args.log_level, formula=args.formula)
    if args.command == "route":
        config.fitness = args.fitness
        config.seed = args.seed
        config.initial_temperature = args.initial_temperature
        config.cooling_rate = args.cooling_rate
        config.metrics = args.metrics
    return config


def format_point(coordinate: Coordinate) -> str:
    """Format a coordinate as notation plus decimal degrees."""
    return f"{format_notation(coordinate)} ({coordinate.latitude:.5f}, {coordinate.longitude:.5f})"


def collect_points(texts: List[str], gpx_filename: Optional[str]) -> List[Coordinate]:
    """Parse points given on the command line, then append points from a GPX file."""
    points = [parse_point(text) for text in texts]
    if gpx_filename:
        gpx_points = load_gpx_file(gpx_filename)
        logger.info(f"Loaded {len(gpx_points)} points from {gpx_filename}")
        points.extend(gpx_points)
    return points


def run_distance(args: argparse.Namespace, engine: DistanceEngine) -> None:
    source = parse_point(args.source)
    target = parse_point(args.target)
    logger.debug(f"Using {engine.select_formula(source, target)} formula")
    print(f"{engine.distance(source, target):.4f} m")


def run_selection(args: argparse.Namespace, engine: DistanceEngine) -> None:
    reference = parse_point(args.reference)
    candidates = collect_points(args.points, args.gpx)
    select = closest if args.command == "closest" else farthest
    winner = select(reference, candidates, engine=engine)
    print(
        f"{args.command.capitalize()} to {format_point(reference)}: {format_point(winner)} "
        f"at {engine.distance(reference, winner) / 1000:.2f} km"
    )


def run_route(
    args: argparse.Namespace, engine: DistanceEngine, config: GeocoordConfig
) -> None:
    points = collect_points(args.points, args.gpx)
    start = parse_point(args.start) if args.start else None
    if start is not None and config.fitness != "tour":
        logger.warning(
            f"--start only applies to --fitness tour; ignoring it for {config.fitness} fitness"
        )
        start = None

    optimizer = RouteOptimizer.from_config(config, engine=engine, start=start)
    route = optimizer.optimize(points)
    fitness = optimizer.fitness(route)

    print(f"Route ({len(route)} stops, {config.fitness} fitness {fitness:.2f} m):")
    if start is not None:
        print(f"   start {format_point(start)}")
    width = len(str(len(route)))
    for index, stop in enumerate(route, start=1):
        print(f"   {index:{width}d}. {format_point(stop)}")

    if args.map is not None:
        output_filename = args.map or generate_output_filename(args.gpx)
        try:
            visualization.create_route_map(route, output_filename, start, fitness)
        except Exception as e:
            logger.error(f"Failed to create map: {e}")
            # Drop the empty placeholder reserved by generate_output_filename
            if not args.map and os.path.isfile(output_filename):
                if os.path.getsize(output_filename) == 0:
                    os.remove(output_filename)
            sys.exit(1)
        logger.info(f"Map written to {output_filename}")

    if optimizer.last_metrics is not None:
        log_metrics(optimizer.last_metrics, config.metrics)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments and runs the requested command.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args)
    config = build_config(args)

    try:
        engine = DistanceEngine(long_range=DistanceFormula(config.formula))
        if args.command == "distance":
            run_distance(args, engine)
        elif args.command in ("closest", "farthest"):
            run_selection(args, engine)
        else:
            run_route(args, engine, config)
    except FileNotFoundError as e:
        logger.error(f"GPX file not found: {e.filename}")
        sys.exit(1)
    except PermissionError as e:
        logger.error(f"Cannot read file (permission denied): {e.filename}")
        sys.exit(1)
    except gpxpy.gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    except (GeocoordError, RuntimeError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
