"""
Unit tests for the minimum cycle finder.

The finder works on a converged distance matrix and reports either a
negative self-loop (which always wins) or the cheapest two-vertex round trip.
"""
import math

import pytest

from apsp_trace.solver import solve, find_min_cycle, CycleResult

INF = math.inf


def test_two_vertex_round_trip():
    distances = [
        [0.0, 2.0, INF],
        [3.0, 0.0, INF],
        [INF, INF, 0.0],
    ]
    assert find_min_cycle(distances) == CycleResult(cycle=(0, 1, 0), weight=5.0)


def test_negative_self_loop_has_priority():
    distances = [
        [0.0, 2.0, INF],
        [3.0, 0.0, INF],
        [INF, INF, -4.0],
    ]
    found = find_min_cycle(distances)
    assert found == CycleResult(cycle=(2,), weight=-4.0)
    assert found.is_negative_self_loop


def test_negative_self_loop_beats_cheaper_round_trip():
    """A self-loop is reported even when a round trip is more negative."""
    distances = [
        [0.0, -20.0, INF],
        [-20.0, 0.0, INF],
        [INF, INF, -1.0],
    ]
    assert find_min_cycle(distances) == CycleResult(cycle=(2,), weight=-1.0)


def test_most_negative_self_loop_wins():
    distances = [
        [-1.0, INF, INF],
        [INF, -7.0, INF],
        [INF, INF, -7.0],
    ]
    # Lowest index is kept on ties.
    assert find_min_cycle(distances) == CycleResult(cycle=(1,), weight=-7.0)


def test_round_trip_picks_minimum():
    distances = [
        [0.0, 4.0, 1.0],
        [4.0, 0.0, INF],
        [1.0, INF, 0.0],
    ]
    assert find_min_cycle(distances) == CycleResult(cycle=(0, 2, 0), weight=2.0)


def test_round_trip_ties_keep_first_pair(sample_cost):
    """Every round trip in the demo graph costs 8; the first pair (0, 1) is reported."""
    result = solve(sample_cost)
    assert find_min_cycle(result.distances) == CycleResult(cycle=(0, 1, 0), weight=8.0)


def test_one_way_edges_have_no_cycle():
    distances = [
        [0.0, 1.0, 2.0],
        [INF, 0.0, 1.0],
        [INF, INF, 0.0],
    ]
    assert find_min_cycle(distances) is None


@pytest.mark.parametrize("distances", [[], [[0.0]], [[5.0]]])
def test_trivial_matrices_have_no_cycle(distances):
    assert find_min_cycle(distances) is None


def test_negative_cycle_from_solver():
    result = solve([[0.0, 1.0], [-3.0, 0.0]])
    found = find_min_cycle(result.distances)
    assert found == CycleResult(cycle=(1,), weight=-4.0)
