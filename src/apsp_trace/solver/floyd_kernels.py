from __future__ import annotations
from typing import Any, Optional, Tuple
import time
import logging

import numpy as np
import numba as nb

from apsp_trace.structures import coerce_cost_rows
from apsp_trace.solver.floyd_state import DistanceResult

logger = logging.getLogger(__name__)

# Define a float64 representation of infinity for use within Numba-jitted functions.
INF_FLOAT64 = np.float64(np.inf)

# Predecessor marker for "no known previous hop" inside the int64 table.
NO_PRED = -1


# fastmath must stay off: it lets LLVM assume no infinities, which breaks the reachability checks.
@nb.njit(cache=False, fastmath=False)
def init_predecessors(dist: np.ndarray) -> np.ndarray:
    """
    Builds the initial predecessor table for a distance matrix.

    Parameters
    ----------
    dist : np.ndarray
        Square float64 cost matrix.

    Returns
    -------
    np.ndarray
        int64 table with `pred[i, j] = i` for reachable off-diagonal cells and
        `NO_PRED` elsewhere.
    """
    n = dist.shape[0]
    pred = np.full((n, n), NO_PRED, dtype=np.int64)
    for i in range(n):
        for j in range(n):
            if i != j and dist[i, j] != INF_FLOAT64:
                pred[i, j] = i
    return pred


@nb.njit(cache=False, fastmath=False)
def relax_all_pairs(dist: np.ndarray, pred: np.ndarray) -> int:
    """
    Runs the Floyd-Warshall triple loop in place, without tracing.

    The loop order, the reachability guard and the strict less-than tie rule
    are identical to the traced solver, so both produce the same tables.

    Parameters
    ----------
    dist : np.ndarray
        Square float64 distance matrix, relaxed in place.
    pred : np.ndarray
        Square int64 predecessor matrix, updated in place.

    Returns
    -------
    int
        The number of successful relaxations.
    """
    n = dist.shape[0]
    updates = 0
    for k in range(n):
        for i in range(n):
            d_ik = dist[i, k]
            if d_ik == INF_FLOAT64:
                continue
            for j in range(n):
                d_kj = dist[k, j]
                if d_kj == INF_FLOAT64:
                    continue
                candidate = d_ik + d_kj
                if candidate < dist[i, j]:
                    dist[i, j] = candidate
                    pred[i, j] = pred[k, j]
                    updates += 1
                    # Row i column k may itself have just been lowered (k == j, negative dist[k, k]).
                    d_ik = dist[i, k]
    return updates


def solve_arrays(cost: Any) -> Tuple[np.ndarray, np.ndarray]:
    """
    Trace-free solve returning raw numpy tables.

    Parameters
    ----------
    cost : Any
        A square cost matrix (nested sequences or a 2-D numpy array).

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        The float64 distance matrix and the int64 predecessor matrix
        (`NO_PRED` marks an empty cell).
    """
    cost_rows = coerce_cost_rows(cost)
    n = len(cost_rows)
    dist = np.array(cost_rows, dtype=np.float64).reshape(n, n)
    pred = init_predecessors(dist)

    start_time = time.perf_counter()
    updates = relax_all_pairs(dist, pred)
    elapsed = time.perf_counter() - start_time
    logger.info(f"Floyd-Warshall (trace-free) N={n}: {updates} updates in {elapsed * 1000:.1f}ms")

    return dist, pred


def solve_distances(cost: Any) -> DistanceResult:
    """
    Computes all-pairs shortest paths without recording a step log.

    This is the fast path for graphs too large to replay: it returns the same
    distances and predecessors as `solve()` but skips the per-update matrix
    snapshots and runs the relaxation loop as a compiled kernel.

    Parameters
    ----------
    cost : Any
        A square cost matrix indexed `[source][destination]`. Never mutated.

    Returns
    -------
    DistanceResult
        Immutable distances and predecessors (None for empty cells).
    """
    dist, pred = solve_arrays(cost)
    distances = tuple(tuple(float(v) for v in row) for row in dist)
    predecessors: Tuple[Tuple[Optional[int], ...], ...] = tuple(
        tuple(None if p == NO_PRED else int(p) for p in row) for row in pred
    )
    return DistanceResult(distances=distances, predecessors=predecessors)
