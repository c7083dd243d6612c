from typing import List, Sequence

from apsp_trace.utils.value_utils import UNREACHABLE, format_value

# Demo edges (source, destination, weight) added to sample matrices with at least 4 vertices.
SAMPLE_EDGES = (
    (0, 1, 3.0),
    (0, 2, 8.0),
    (1, 2, 2.0),
    (1, 3, 5.0),
    (2, 3, 1.0),
    (3, 0, 2.0),
)


def make_sample_matrix(size: int) -> List[List[float]]:
    """
    Creates a demo cost matrix.

    Parameters
    ----------
    size : int
        The number of vertices.

    Returns
    -------
    List[List[float]]
        A `size` x `size` matrix with a zero diagonal and no edges, plus the
        `SAMPLE_EDGES` when `size >= 4`.

    Raises
    ------
    ValueError
        If `size` is negative.
    """
    if size < 0:
        raise ValueError(f"Matrix size must be non-negative, got {size}")

    matrix = [[0.0 if i == j else UNREACHABLE for j in range(size)] for i in range(size)]

    if size >= 4:
        for i, j, weight in SAMPLE_EDGES:
            matrix[i][j] = weight

    return matrix


def format_matrix(rows: Sequence[Sequence[float]]) -> str:
    """
    Renders a matrix as a right-aligned text table with vertex headers.

    Cells are formatted with `format_value`, so missing edges show as `∞`.
    """
    n = len(rows)
    if n == 0:
        return "(empty matrix)"

    cells = [[format_value(v) for v in row] for row in rows]
    width = max(len(str(n - 1)), *(len(c) for row in cells for c in row))

    header = " " * (width + 1) + " ".join(str(j).rjust(width) for j in range(n))
    lines = [header]
    for i, row in enumerate(cells):
        lines.append(str(i).rjust(width) + " " + " ".join(c.rjust(width) for c in row))
    return "\n".join(lines)
