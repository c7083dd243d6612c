from apsp_trace.solver.floyd_state import FloydStep, FloydResult, DistanceResult, FloydState, make_floyd_state
from apsp_trace.solver.floyd_recurrences import FloydWarshallConfig, FloydWarshallEngine, solve
from apsp_trace.solver.floyd_kernels import solve_distances
from apsp_trace.solver.floyd_traceback import reconstruct_path, path_cost, format_path, parse_path
from apsp_trace.solver.cycles import CycleResult, find_min_cycle

__all__ = [
    "FloydStep",
    "FloydResult",
    "DistanceResult",
    "FloydState",
    "make_floyd_state",
    "FloydWarshallConfig",
    "FloydWarshallEngine",
    "solve",
    "solve_distances",
    "reconstruct_path",
    "path_cost",
    "format_path",
    "parse_path",
    "CycleResult",
    "find_min_cycle",
]
