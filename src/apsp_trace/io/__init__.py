from apsp_trace.io.matrix_loader import read_yaml, load_cost_matrix

__all__ = [
    "read_yaml",
    "load_cost_matrix",
]
