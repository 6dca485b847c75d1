"""
Module for collecting and logging route optimization metrics.
"""

import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)


class AnnealingMetrics(NamedTuple):
    """Container for the statistics of one optimizer run."""

    candidates: int
    iterations: int
    accepted: int
    improvements: int
    initial_fitness: float
    best_fitness: float
    final_temperature: float


def log_metrics(metrics: AnnealingMetrics, enabled: bool = True) -> None:
    """
    Log detailed metrics of an optimizer run.

    Args:
        metrics: AnnealingMetrics collected by RouteOptimizer
        enabled: When False nothing is logged
    """
    if not enabled:
        return

    logger.debug("=== GEOCOORD_METRICS ===")
    logger.debug(f"candidates={metrics.candidates}")
    logger.debug(f"iterations={metrics.iterations}")
    logger.debug(f"accepted_moves={metrics.accepted}")
    logger.debug(f"improvements={metrics.improvements}")
    logger.debug(f"initial_fitness={metrics.initial_fitness:.4f}")
    logger.debug(f"best_fitness={metrics.best_fitness:.4f}")
    logger.debug(f"final_temperature={metrics.final_temperature:.6f}")
    logger.debug("=== END_GEOCOORD_METRICS ===")
