from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional
import time
import logging

from tqdm import tqdm

from apsp_trace.errors import GraphTooLargeError
from apsp_trace.structures import coerce_cost_rows
from apsp_trace.solver.floyd_state import FloydState, FloydResult, make_floyd_state, NO_VERTEX
from apsp_trace.utils.value_utils import add_costs, format_value

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FloydWarshallConfig:
    """
    Configuration settings for the traced Floyd-Warshall solver.

    Attributes
    ----------
    verbose : bool
        If True, shows a progress bar over the intermediate vertices.
    max_vertices : Optional[int]
        Upper bound on n. Every update step stores a full n x n snapshot, so
        the traced solver refuses graphs above this size. None means no limit.
    """
    verbose: bool = False
    max_vertices: Optional[int] = None


@dataclass(slots=True)
class FloydWarshallEngine:
    """
    Implements the traced Floyd-Warshall all-pairs shortest-path algorithm.

    The engine relaxes every ordered pair `(i, j)` through each intermediate
    vertex `k` in turn and records every successful relaxation, together with
    a snapshot of the distance matrix, in an append-only step log.

    Attributes
    ----------
    config : FloydWarshallConfig
        A configuration object containing settings for the run.
    """
    config: FloydWarshallConfig = field(default_factory=FloydWarshallConfig)

    def solve(self, cost: Any) -> FloydResult:
        """
        Computes all-pairs shortest paths with a full replay trace.

        Parameters
        ----------
        cost : Any
            A square cost matrix (nested sequences or a 2-D numpy array),
            indexed `[source][destination]`. It is copied and never mutated.

        Returns
        -------
        FloydResult
            Immutable distances, predecessors and the chronological step log.

        Raises
        ------
        NonSquareMatrixError
            If `cost` is not an n x n grid.
        InvalidCostError
            If a cell is NaN or not numeric.
        GraphTooLargeError
            If n exceeds `config.max_vertices`.
        """
        cost_rows = coerce_cost_rows(cost)
        n = len(cost_rows)
        max_vertices = self.config.max_vertices
        if max_vertices is not None and n > max_vertices:
            raise GraphTooLargeError(
                f"Traced solver is limited to {max_vertices} vertices, got {n}; use solve_distances() instead"
            )

        state = make_floyd_state(cost_rows)
        self.fill_all_matrices(state)
        return state.freeze()

    def fill_all_matrices(self, state: FloydState) -> None:
        """
        Executes the main Floyd-Warshall loop over an initialised state.

        Parameters
        ----------
        state : FloydState
            The state whose tables are relaxed in place and whose step log is appended to.
        """
        start_time = time.perf_counter()
        n = state.size
        dist = state.dist_matrix
        pred = state.pred_matrix

        # Initial state marker.
        state.record_boundary(NO_VERTEX)

        if n == 0:
            logger.info("Floyd-Warshall: empty matrix; nothing to relax.")
            return

        logger.info("=" * 60)
        logger.info(f"Floyd-Warshall (traced) for N={n} vertices")
        logger.info(f"Expected complexity: O(N³) ≈ {n ** 3:,} relaxation checks")
        logger.info("=" * 60)

        updates = 0
        show_progress = self.config.verbose
        k_iter = tqdm(range(n), desc="Floyd-Warshall", leave=True, disable=not show_progress)

        for k in k_iter:
            for i in range(n):
                for j in range(n):
                    # add_costs() returns UNREACHABLE when either leg is missing,
                    # which can never be strictly below the current cell.
                    candidate = add_costs(dist.get(i, k), dist.get(k, j))
                    old_value = dist.get(i, j)
                    if candidate < old_value:
                        dist.set(i, j, candidate)
                        # The new path ends with the k -> j leg, so its last hop comes from there.
                        pred.set(i, j, pred.get(k, j))
                        state.record_update(k, i, j, old_value, candidate)
                        updates += 1
                        logger.debug(
                            f"k={k}: dist[{i}][{j}] {format_value(old_value)} -> {format_value(candidate)}"
                        )

            state.record_boundary(k)

        elapsed = time.perf_counter() - start_time
        logger.info(f"Floyd-Warshall completed in {elapsed:.2f}s ({elapsed * 1000:.0f}ms)")
        logger.info(f"Updates: {updates}, recorded steps: {len(state.steps)}")

        negative_diagonal = [i for i in range(n) if dist.get(i, i) < 0]
        if negative_diagonal:
            logger.warning(f"Negative cycle detected through vertices {negative_diagonal}")


def solve(cost: Any, config: Optional[FloydWarshallConfig] = None) -> FloydResult:
    """
    Runs the traced Floyd-Warshall solver on `cost`.

    Convenience wrapper around `FloydWarshallEngine(config).solve(cost)`.

    Parameters
    ----------
    cost : Any
        A square cost matrix indexed `[source][destination]`.
    config : Optional[FloydWarshallConfig]
        Solver settings; defaults to `FloydWarshallConfig()`.

    Returns
    -------
    FloydResult
        Distances, predecessors and the full step log.
    """
    engine = FloydWarshallEngine(config=config if config is not None else FloydWarshallConfig())
    return engine.solve(cost)
