from dataclasses import dataclass
from typing import Optional


@dataclass
class GeocoordConfig:
    """Configuration for the geocoord CLI and route optimizer."""

    initial_temperature: float = 100000.0
    cooling_rate: float = 0.003
    stop_temperature: float = 1.0
    seed: Optional[int] = None
    fitness: str = "centroid"
    formula: str = "precise"
    log_level: str = "WARNING"
    metrics: bool = False
