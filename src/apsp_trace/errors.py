from __future__ import annotations

__all__ = [
    "APSPError",
    "NonSquareMatrixError",
    "InvalidCostError",
    "GraphTooLargeError",
    "VertexIndexError",
    "PredecessorCycleError",
]


class APSPError(Exception):
    """Base class for every error raised by the shortest-path engine."""


class NonSquareMatrixError(APSPError, ValueError):
    """Raised when a cost matrix is not an n x n grid."""


class InvalidCostError(APSPError, ValueError):
    """Raised when a matrix cell is NaN or cannot be read as a number."""


class GraphTooLargeError(APSPError, ValueError):
    """Raised when a graph exceeds the configured vertex limit of the traced solver."""


class VertexIndexError(APSPError, IndexError):
    """Raised when a path endpoint is not a vertex of the solved graph."""


class PredecessorCycleError(APSPError, RuntimeError):
    """
    Raised when walking a predecessor table does not reach the source.

    This only happens when the table was produced from a graph containing a
    negative-weight cycle, where predecessor chains may loop back on themselves.
    """
