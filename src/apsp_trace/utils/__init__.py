from apsp_trace.utils.value_utils import UNREACHABLE, is_reachable, add_costs, format_value, parse_value
from apsp_trace.utils.matrix_utils import make_sample_matrix, format_matrix

__all__ = [
    "UNREACHABLE",
    "is_reachable",
    "add_costs",
    "format_value",
    "parse_value",
    "make_sample_matrix",
    "format_matrix",
]
