from __future__ import annotations
import re
from typing import List, Optional, Sequence

from apsp_trace.errors import VertexIndexError, PredecessorCycleError
from apsp_trace.utils.value_utils import UNREACHABLE, add_costs

# Separators accepted between vertices in a typed path: "->", "→", "," or whitespace.
_PATH_SEPARATORS = re.compile(r"->|→|,|\s+")


def reconstruct_path(
    predecessors: Sequence[Sequence[Optional[int]]],
    source: int,
    destination: int,
) -> List[int]:
    """
    Rebuilds the shortest path from `source` to `destination`.

    Walks the predecessor row of `source` backwards, starting at
    `destination`, until it arrives back at `source`.

    Parameters
    ----------
    predecessors : Sequence[Sequence[Optional[int]]]
        The predecessor table produced by the solver.
    source : int
        The start vertex.
    destination : int
        The end vertex.

    Returns
    -------
    List[int]
        The vertices from `source` to `destination` inclusive, or an empty
        list when no path was recorded (including `source == destination`
        without a self-loop). A recorded self-loop yields `[source]`.

    Raises
    ------
    VertexIndexError
        If either endpoint is not a vertex of the table.
    PredecessorCycleError
        If the walk does not reach `source` within n hops, which only happens
        for tables computed from graphs with negative cycles.
    """
    n = len(predecessors)
    for name, vertex in (("source", source), ("destination", destination)):
        if not 0 <= vertex < n:
            raise VertexIndexError(f"{name} vertex {vertex} is out of range for {n} vertices")

    if predecessors[source][destination] is None:
        return []

    # source == destination stops before the first hop, even when a negative
    # cycle has set a predecessor on the diagonal.
    path: List[int] = []
    current: Optional[int] = destination
    hops = 0

    while current is not None and current != source:
        if hops >= n:
            raise PredecessorCycleError(
                f"Predecessor walk from {destination} back to {source} exceeded {n} hops"
            )
        path.append(current)
        current = predecessors[source][current]
        hops += 1

    if current is None:
        return []

    path.append(source)
    path.reverse()
    return path


def path_cost(cost: Sequence[Sequence[float]], path: Sequence[int]) -> float:
    """
    Sums the original edge costs along consecutive vertices of `path`.

    Parameters
    ----------
    cost : Sequence[Sequence[float]]
        The cost matrix the path was computed from.
    path : Sequence[int]
        A vertex sequence, e.g. from `reconstruct_path()`.

    Returns
    -------
    float
        The total cost; `UNREACHABLE` for an empty path or when an edge on
        the path does not exist; 0 for a single vertex.
    """
    if not path:
        return UNREACHABLE

    total = 0.0
    for u, v in zip(path, path[1:]):
        total = add_costs(total, cost[u][v])
    return total


def format_path(path: Sequence[int]) -> str:
    """Renders a path as `"0 → 1 → 2"`."""
    return " → ".join(str(v) for v in path)


def parse_path(text: str) -> List[int]:
    """
    Leniently parses a typed path such as `"0, 1, 3"` or `"0 -> 1 -> 3"`.

    Tokens that are not integers are dropped.
    """
    vertices: List[int] = []
    for token in _PATH_SEPARATORS.split(text):
        token = token.strip()
        if not token:
            continue
        try:
            vertices.append(int(token))
        except ValueError:
            continue
    return vertices
