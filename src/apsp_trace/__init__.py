"""All-pairs shortest paths over dense cost matrices, with a replayable step trace."""
from apsp_trace.errors import (
    APSPError,
    NonSquareMatrixError,
    InvalidCostError,
    GraphTooLargeError,
    VertexIndexError,
    PredecessorCycleError,
)
from apsp_trace.utils.value_utils import UNREACHABLE, format_value, parse_value
from apsp_trace.solver import (
    FloydStep,
    FloydResult,
    DistanceResult,
    FloydWarshallConfig,
    FloydWarshallEngine,
    CycleResult,
    solve,
    solve_distances,
    reconstruct_path,
    find_min_cycle,
)

__version__ = "0.1.0"

__all__ = [
    "APSPError",
    "NonSquareMatrixError",
    "InvalidCostError",
    "GraphTooLargeError",
    "VertexIndexError",
    "PredecessorCycleError",
    "UNREACHABLE",
    "format_value",
    "parse_value",
    "FloydStep",
    "FloydResult",
    "DistanceResult",
    "FloydWarshallConfig",
    "FloydWarshallEngine",
    "CycleResult",
    "solve",
    "solve_distances",
    "reconstruct_path",
    "find_min_cycle",
]
