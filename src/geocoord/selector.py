"""
Closest and farthest point selection.

Both selections reduce the candidate list by divide and conquer: each half is
reduced to a single winner and the two winners are merged by comparing their
distance to the reference point. On equal distances the left-hand winner is
kept, so ties always resolve to the earliest candidate.
"""

from typing import Callable, Optional, Sequence
import logging

from .distance import DEFAULT_ENGINE, DistanceEngine
from .exceptions import EmptyCandidateSet
from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Returns True when the right-hand winner should replace the left-hand one
Preference = Callable[[float, float], bool]


def _closer(left_distance: float, right_distance: float) -> bool:
    return right_distance < left_distance


def _farther(left_distance: float, right_distance: float) -> bool:
    return right_distance > left_distance


def _reduce(
    reference: Coordinate,
    candidates: Sequence[Coordinate],
    left: int,
    right: int,
    prefer_right: Preference,
    engine: DistanceEngine,
) -> Coordinate:
    """Reduce candidates[left..right] (inclusive) to a single winner."""
    if left == right:
        return candidates[left]

    mid = (left + right) // 2
    left_winner = _reduce(reference, candidates, left, mid, prefer_right, engine)
    right_winner = _reduce(reference, candidates, mid + 1, right, prefer_right, engine)

    if prefer_right(
        engine.distance(reference, left_winner),
        engine.distance(reference, right_winner),
    ):
        return right_winner
    return left_winner


def _select(
    reference: Coordinate,
    candidates: Sequence[Coordinate],
    prefer_right: Preference,
    engine: Optional[DistanceEngine],
) -> Coordinate:
    candidates = list(candidates)
    if not candidates:
        raise EmptyCandidateSet("At least one candidate is required")

    engine = engine or DEFAULT_ENGINE
    winner = _reduce(
        reference, candidates, 0, len(candidates) - 1, prefer_right, engine
    )
    logger.debug(f"Selected {winner} from {len(candidates)} candidates")
    return winner


def closest(
    reference: Coordinate,
    candidates: Sequence[Coordinate],
    engine: Optional[DistanceEngine] = None,
) -> Coordinate:
    """
    Find the candidate nearest to the reference point.

    Args:
        reference: Point to measure from
        candidates: Non-empty sequence of points to choose from
        engine: Distance engine to use (default: the module default engine)

    Returns:
        The nearest candidate; the earliest one when several are equally near

    Raises:
        EmptyCandidateSet: If candidates is empty.
    """
    return _select(reference, candidates, _closer, engine)


def farthest(
    reference: Coordinate,
    candidates: Sequence[Coordinate],
    engine: Optional[DistanceEngine] = None,
) -> Coordinate:
    """
    Find the candidate farthest from the reference point.

    Args:
        reference: Point to measure from
        candidates: Non-empty sequence of points to choose from
        engine: Distance engine to use (default: the module default engine)

    Returns:
        The farthest candidate; the earliest one when several are equally far

    Raises:
        EmptyCandidateSet: If candidates is empty.
    """
    return _select(reference, candidates, _farther, engine)
