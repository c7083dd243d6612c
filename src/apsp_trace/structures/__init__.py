from apsp_trace.structures.square_matrix import SquareMatrix, coerce_cost_rows

__all__ = [
    "SquareMatrix",
    "coerce_cost_rows",
]
