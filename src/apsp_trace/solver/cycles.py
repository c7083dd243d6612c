from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import logging

from apsp_trace.utils.value_utils import UNREACHABLE, is_reachable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CycleResult:
    """
    A cycle found in a converged distance matrix.

    Attributes
    ----------
    cycle : Tuple[int, ...]
        Either `(i,)` for a negative self-loop, or `(i, j, i)` for a round trip.
    weight : float
        The total weight of the cycle.
    """
    cycle: Tuple[int, ...]
    weight: float

    @property
    def is_negative_self_loop(self) -> bool:
        return len(self.cycle) == 1


def find_min_cycle(distances: Sequence[Sequence[float]]) -> Optional[CycleResult]:
    """
    Finds the cheapest simple cycle shape in a solved distance matrix.

    Two shapes are considered. A negative diagonal entry (a negative cycle
    through that vertex) always takes priority and the most negative one is
    reported as a single-vertex cycle. Otherwise the cheapest round trip
    `i -> j -> i` over all pairs `i < j` with both directions reachable is
    reported. This is not a general minimum-cycle search.

    Parameters
    ----------
    distances : Sequence[Sequence[float]]
        A converged distance matrix, e.g. `FloydResult.distances`.

    Returns
    -------
    Optional[CycleResult]
        The cycle and its weight, or None if neither shape exists.
    """
    n = len(distances)

    # --- 1. Negative self-loops ---
    best_loop: Optional[int] = None
    for i in range(n):
        weight = distances[i][i]
        if weight < 0 and (best_loop is None or weight < distances[best_loop][best_loop]):
            best_loop = i

    if best_loop is not None:
        weight = distances[best_loop][best_loop]
        logger.debug(f"Negative self-loop at vertex {best_loop} with weight {weight}")
        return CycleResult(cycle=(best_loop,), weight=weight)

    # --- 2. Cheapest two-vertex round trip ---
    min_weight = UNREACHABLE
    best_pair: Optional[Tuple[int, int]] = None
    for i in range(n):
        for j in range(i + 1, n):
            there, back = distances[i][j], distances[j][i]
            if is_reachable(there) and is_reachable(back):
                cycle_weight = there + back
                if cycle_weight < min_weight:
                    min_weight = cycle_weight
                    best_pair = (i, j)

    if best_pair is None:
        return None

    i, j = best_pair
    return CycleResult(cycle=(i, j, i), weight=min_weight)
