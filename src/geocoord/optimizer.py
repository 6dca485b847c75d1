"""
Simulated-annealing route optimizer.

The optimizer starts from the candidates in their given order and repeatedly
swaps two random positions, accepting worse routes with a probability that
shrinks as the temperature cools. It returns the best route seen.
"""

from typing import Optional, Sequence
import functools
import logging
import math
import random

from .config import GeocoordConfig
from .distance import DistanceEngine
from .exceptions import InsufficientCandidates
from .geometry import Coordinate
from .metrics import AnnealingMetrics
from .route import Fitness, Route, centroid_fitness, tour_length_fitness

logger = logging.getLogger(__name__)

INITIAL_TEMPERATURE = 100000.0
COOLING_RATE = 0.003
STOP_TEMPERATURE = 1.0


def acceptance_probability(
    current_fitness: float, neighbour_fitness: float, temperature: float
) -> float:
    """
    Probability of moving from the current route to a neighbour.

    Better neighbours are always accepted; worse ones with probability
    exp((current - neighbour) / temperature).
    """
    if neighbour_fitness < current_fitness:
        return 1.0
    return math.exp((current_fitness - neighbour_fitness) / temperature)


class RouteOptimizer:
    """Searches for a low-fitness visiting order by simulated annealing."""

    def __init__(
        self,
        fitness: Optional[Fitness] = None,
        initial_temperature: float = INITIAL_TEMPERATURE,
        cooling_rate: float = COOLING_RATE,
        stop_temperature: float = STOP_TEMPERATURE,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initializes a RouteOptimizer.

        Args:
            fitness: Function scoring a route, lower is better (default: centroid fitness)
            initial_temperature: Starting temperature
            cooling_rate: Fraction of the temperature removed after each iteration
            stop_temperature: The search halts once the temperature is at or below this
            seed: Seed for a private random generator (ignored when rng is given)
            rng: Random generator to draw from. Not safe to share across threads.

        Raises:
            ValueError: If the temperatures or cooling rate are out of range.
        """
        if not 0.0 < cooling_rate < 1.0:
            raise ValueError(f"Cooling rate must be in (0, 1), got {cooling_rate}")
        if stop_temperature <= 0.0:
            raise ValueError(
                f"Stop temperature must be positive, got {stop_temperature}"
            )
        if initial_temperature <= stop_temperature:
            raise ValueError(
                f"Initial temperature {initial_temperature} must exceed stop temperature {stop_temperature}"
            )

        self.fitness: Fitness = fitness or centroid_fitness
        self.initial_temperature = initial_temperature
        self.cooling_rate = cooling_rate
        self.stop_temperature = stop_temperature
        self.rng = rng if rng is not None else random.Random(seed)
        self.last_metrics: Optional[AnnealingMetrics] = None

    @classmethod
    def from_config(
        cls,
        config: GeocoordConfig,
        engine: Optional[DistanceEngine] = None,
        start: Optional[Coordinate] = None,
    ) -> "RouteOptimizer":
        """
        Build an optimizer from a GeocoordConfig.

        Args:
            config: Tunables and fitness name ("centroid" or "tour")
            engine: Distance engine for the fitness function
            start: Departure point for the "tour" fitness

        Raises:
            ValueError: If config.fitness is not a known fitness name.
        """
        if config.fitness == "centroid":
            fitness = functools.partial(centroid_fitness, engine=engine)
        elif config.fitness == "tour":
            fitness = tour_length_fitness(start=start, engine=engine)
        else:
            raise ValueError(f"Unknown fitness: {config.fitness}")

        return cls(
            fitness=fitness,
            initial_temperature=config.initial_temperature,
            cooling_rate=config.cooling_rate,
            stop_temperature=config.stop_temperature,
            seed=config.seed,
        )

    def neighbour(self, route: Route) -> Route:
        """Return a copy of route with two distinct random positions swapped."""
        first, second = self.rng.sample(range(len(route)), 2)
        return route.swapped(first, second)

    def optimize(self, candidates: Sequence[Coordinate]) -> Route:
        """
        Search for a low-fitness ordering of the candidates.

        Args:
            candidates: Points to visit; the initial route uses this order

        Returns:
            Best route found. Its fitness is never worse than the initial order's.

        Raises:
            InsufficientCandidates: If fewer than two candidates are given.
        """
        candidates = list(candidates)
        if len(candidates) < 2:
            raise InsufficientCandidates(
                f"Route optimization needs at least two candidates, got {len(candidates)}"
            )

        temperature = self.initial_temperature
        current = Route(candidates)
        best = current
        current_fitness = self.fitness(current)
        best_fitness = current_fitness
        initial_fitness = current_fitness

        iterations = accepted = improvements = 0

        logger.debug(
            f"Annealing {len(candidates)} candidates from temperature {temperature}, initial fitness {initial_fitness:.2f}"
        )

        while temperature > self.stop_temperature:
            candidate = self.neighbour(current)
            candidate_fitness = self.fitness(candidate)

            probability = acceptance_probability(
                current_fitness, candidate_fitness, temperature
            )
            if self.rng.random() < probability:
                current = candidate
                current_fitness = candidate_fitness
                accepted += 1

            if current_fitness < best_fitness:
                best = current
                best_fitness = current_fitness
                improvements += 1

            temperature *= 1 - self.cooling_rate
            iterations += 1

        self.last_metrics = AnnealingMetrics(
            candidates=len(candidates),
            iterations=iterations,
            accepted=accepted,
            improvements=improvements,
            initial_fitness=initial_fitness,
            best_fitness=best_fitness,
            final_temperature=temperature,
        )
        logger.debug(
            f"Annealing finished after {iterations} iterations, best fitness {best_fitness:.2f}"
        )
        return best
