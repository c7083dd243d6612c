from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from apsp_trace.structures import SquareMatrix
from apsp_trace.utils.value_utils import format_value, is_reachable

__all__ = ["FloydStep", "FloydResult", "DistanceResult", "FloydState", "make_floyd_state", "NO_VERTEX"]

DistanceRows = Tuple[Tuple[float, ...], ...]
PredecessorRows = Tuple[Tuple[Optional[int], ...], ...]

# Index used for k/i/j on boundary markers.
NO_VERTEX = -1


@dataclass(frozen=True, slots=True)
class FloydStep:
    """
    One recorded event of a Floyd-Warshall run.

    Steps form the append-only, chronological log that a replay layer walks
    through to animate the algorithm. There are two kinds: update steps,
    emitted each time a cell `(i, j)` is improved through intermediate vertex
    `k`, and boundary markers (`i == j == -1`) emitted once for the initial
    state (`k == -1`) and once at the end of every outer iteration `k`.

    Attributes
    ----------
    k : int
        The intermediate vertex under consideration, or -1 for the initial state.
    i : int
        The source of the improved cell, or -1 on a boundary marker.
    j : int
        The destination of the improved cell, or -1 on a boundary marker.
    old_value : float
        The cell value before the update (0 on boundary markers).
    new_value : float
        The cell value after the update (0 on boundary markers).
    updated : bool
        True for update steps, False for boundary markers.
    matrix : DistanceRows
        Snapshot of the whole distance matrix right after this event.
    """
    k: int
    i: int
    j: int
    old_value: float
    new_value: float
    updated: bool
    matrix: DistanceRows

    @property
    def is_boundary(self) -> bool:
        return self.i == NO_VERTEX and self.j == NO_VERTEX

    def describe(self) -> str:
        """Returns a one-line human readable summary of the step."""
        if self.is_boundary:
            if self.k == NO_VERTEX:
                return "Initial distance matrix"
            return f"Finished intermediate vertex k={self.k}"
        return (
            f"k={self.k}: dist[{self.i}][{self.j}] improved "
            f"{format_value(self.old_value)} -> {format_value(self.new_value)} "
            f"via dist[{self.i}][{self.k}] + dist[{self.k}][{self.j}]"
        )


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """
    Final tables of an all-pairs shortest-path run, without a step log.

    Attributes
    ----------
    distances : DistanceRows
        `distances[i][j]` is the shortest known cost from `i` to `j`, or
        `UNREACHABLE`.
    predecessors : PredecessorRows
        `predecessors[i][j]` is the vertex preceding `j` on the best `i -> j`
        path, or None.
    """
    distances: DistanceRows
    predecessors: PredecessorRows

    @property
    def size(self) -> int:
        return len(self.distances)

    def distance(self, source: int, destination: int) -> float:
        return self.distances[source][destination]

    @property
    def has_negative_cycle(self) -> bool:
        """True if any diagonal distance was driven below zero."""
        return any(self.distances[i][i] < 0 for i in range(self.size))


@dataclass(frozen=True, slots=True)
class FloydResult(DistanceResult):
    """
    Final tables of a traced Floyd-Warshall run plus its full step log.

    Attributes
    ----------
    steps : Tuple[FloydStep, ...]
        Every update step and boundary marker, in the order they happened.
    """
    steps: Tuple[FloydStep, ...] = ()


@dataclass(slots=True)
class FloydState:
    """
    Mutable working state owned by the solver for the duration of one run.

    Attributes
    ----------
    dist_matrix : SquareMatrix[float]
        The working distance table, initialised from a copy of the cost matrix.
    pred_matrix : SquareMatrix[Optional[int]]
        The working predecessor table.
    steps : List[FloydStep]
        The step log being appended to.
    """
    dist_matrix: SquareMatrix[float]
    pred_matrix: SquareMatrix[Optional[int]]
    steps: List[FloydStep] = field(default_factory=list)

    @property
    def size(self) -> int:
        return self.dist_matrix.size

    def record_boundary(self, k: int) -> None:
        """Appends a boundary marker for the end of iteration `k` (or -1 for the start)."""
        self.steps.append(FloydStep(
            k=k,
            i=NO_VERTEX,
            j=NO_VERTEX,
            old_value=0,
            new_value=0,
            updated=False,
            matrix=self.dist_matrix.snapshot(),
        ))

    def record_update(self, k: int, i: int, j: int, old_value: float, new_value: float) -> None:
        """Appends an update step; must be called after the cell was written."""
        self.steps.append(FloydStep(
            k=k,
            i=i,
            j=j,
            old_value=old_value,
            new_value=new_value,
            updated=True,
            matrix=self.dist_matrix.snapshot(),
        ))

    def freeze(self) -> FloydResult:
        """Hands the tables and log to the caller as an immutable bundle."""
        return FloydResult(
            distances=self.dist_matrix.snapshot(),
            predecessors=self.pred_matrix.snapshot(),
            steps=tuple(self.steps),
        )


def make_floyd_state(cost_rows: List[List[float]]) -> FloydState:
    """
    Allocates and initialises the Floyd-Warshall tables from a validated cost matrix.

    Parameters
    ----------
    cost_rows : List[List[float]]
        A square, already validated cost matrix. It is copied, never aliased.

    Returns
    -------
    FloydState
        Fresh state where the distances equal the costs and
        `pred[i][j] = i` for every reachable off-diagonal cell.
    """
    dist_matrix = SquareMatrix.from_rows(cost_rows)
    n = dist_matrix.size
    pred_matrix = SquareMatrix[Optional[int]](n, None)

    # A direct edge i -> j means i is the vertex right before j.
    for i, j in dist_matrix.iter_indices():
        if i != j and is_reachable(dist_matrix.get(i, j)):
            pred_matrix.set(i, j, i)

    return FloydState(dist_matrix=dist_matrix, pred_matrix=pred_matrix)
