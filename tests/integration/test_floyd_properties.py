"""
Property checks of the Floyd-Warshall engine on seeded random graphs.

For each seed a random directed graph is generated with `numpy.random`. The
solver output is checked against an independent reference (repeated
Bellman-Ford style relaxation until nothing changes) and against the
structural properties a replay client relies on: convergence is idempotent,
every update strictly decreases its cell, distances satisfy the triangle
inequality, reconstructed paths cost exactly their distance, and the
trace-free fast path agrees with the traced solver.
"""
import math
from typing import List

import numpy as np
import pytest

from apsp_trace.solver import solve, solve_distances, reconstruct_path, path_cost, find_min_cycle
from apsp_trace.utils.value_utils import UNREACHABLE, is_reachable

SEEDS = list(range(12))


def random_cost_matrix(seed: int, allow_negative: bool = False) -> List[List[float]]:
    """Builds an n x n cost matrix (n in 1..7) with roughly 40% edge density and a zero diagonal."""
    rng = np.random.default_rng(seed)
    n = int(rng.integers(1, 8))
    low = -3 if allow_negative else 1
    weights = rng.integers(low, 10, size=(n, n)).astype(float)
    has_edge = rng.random((n, n)) < 0.4

    cost = [[UNREACHABLE] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i == j:
                cost[i][j] = 0.0
            elif has_edge[i, j]:
                cost[i][j] = float(weights[i, j])
    return cost


def reference_distances(cost: List[List[float]]) -> List[List[float]]:
    """Shortest distances by relaxing every edge from every source until a fixed point."""
    n = len(cost)
    dist = [row[:] for row in cost]
    changed = True
    while changed:
        changed = False
        for s in range(n):
            for u in range(n):
                if not is_reachable(dist[s][u]):
                    continue
                for v in range(n):
                    if u != v and is_reachable(cost[u][v]) and dist[s][u] + cost[u][v] < dist[s][v]:
                        dist[s][v] = dist[s][u] + cost[u][v]
                        changed = True
    return dist


@pytest.mark.parametrize("seed", SEEDS)
def test_matches_reference(seed):
    cost = random_cost_matrix(seed)
    result = solve(cost)
    assert [list(row) for row in result.distances] == reference_distances(cost)


@pytest.mark.parametrize("seed", SEEDS)
def test_idempotent_convergence(seed):
    result = solve(random_cost_matrix(seed))
    again = solve(result.distances)
    assert again.distances == result.distances
    assert not any(step.updated for step in again.steps)


@pytest.mark.parametrize("seed", SEEDS)
def test_updates_strictly_decrease(seed):
    for step in solve(random_cost_matrix(seed)).steps:
        if step.updated:
            assert step.new_value < step.old_value


@pytest.mark.parametrize("seed", SEEDS)
def test_step_log_length(seed):
    cost = random_cost_matrix(seed)
    steps = solve(cost).steps
    updates = sum(1 for step in steps if step.updated)
    assert len(steps) == 1 + len(cost) + updates


@pytest.mark.parametrize("seed", SEEDS)
def test_triangle_inequality(seed):
    distances = solve(random_cost_matrix(seed)).distances
    n = len(distances)
    for i in range(n):
        for j in range(n):
            for k in range(n):
                via = distances[i][k] + distances[k][j]
                if math.isfinite(via):
                    assert distances[i][j] <= via


@pytest.mark.parametrize("seed", SEEDS)
def test_paths_agree_with_distances(seed):
    cost = random_cost_matrix(seed)
    result = solve(cost)
    n = len(cost)
    for source in range(n):
        for destination in range(n):
            path = reconstruct_path(result.predecessors, source, destination)
            if path:
                assert path[0] == source and path[-1] == destination
                assert path_cost(cost, path) == result.distances[source][destination]
            elif source != destination:
                assert result.distances[source][destination] == UNREACHABLE


@pytest.mark.parametrize("seed", SEEDS)
def test_fast_path_agrees_including_negative_weights(seed):
    cost = random_cost_matrix(seed, allow_negative=True)
    traced = solve(cost)
    fast = solve_distances(cost)
    assert fast.distances == traced.distances
    assert fast.predecessors == traced.predecessors


@pytest.mark.parametrize("seed", SEEDS)
def test_negative_diagonal_reported_as_self_loop(seed):
    result = solve(random_cost_matrix(seed, allow_negative=True))
    found = find_min_cycle(result.distances)
    if result.has_negative_cycle:
        assert found is not None and found.is_negative_self_loop
        assert found.weight == min(result.distances[i][i] for i in range(result.size))
    elif found is not None:
        assert len(found.cycle) == 3
