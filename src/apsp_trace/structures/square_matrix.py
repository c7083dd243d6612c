from __future__ import annotations
import math
import numbers
from typing import Generic, TypeVar, List, Tuple, Iterator, Sequence, Any

import numpy as np

from apsp_trace.errors import NonSquareMatrixError, InvalidCostError

T = TypeVar("T")

Rows = Tuple[Tuple[T, ...], ...]


class SquareMatrix(Generic[T]):
    """
    A dense, mutable n x n matrix for Floyd-Warshall DP tables.

    Cells are stored row-major as a list of lists and addressed as
    `(source, destination)`. The solver keeps its working distance and
    predecessor tables in this structure and hands callers immutable
    tuple-of-tuples snapshots of it.
    """
    __slots__ = ("_size", "_rows")

    def __init__(self, size: int, fill: T):
        if size < 0:
            raise ValueError(f"SquareMatrix size must be non-negative, got {size}")
        self._size = size
        self._rows: List[List[T]] = [[fill for _ in range(size)] for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> SquareMatrix[T]:
        """
        Builds a matrix holding a private copy of `rows`.

        Parameters
        ----------
        rows : Sequence[Sequence[T]]
            Row-major cell values. Must describe an n x n grid.

        Returns
        -------
        SquareMatrix[T]
            A new matrix; later changes to `rows` do not affect it.

        Raises
        ------
        NonSquareMatrixError
            If any row length differs from the number of rows.
        """
        size = len(rows)
        for row_idx, row in enumerate(rows):
            if len(row) != size:
                raise NonSquareMatrixError(
                    f"Row {row_idx} has {len(row)} columns; expected {size} for a {size}x{size} matrix"
                )

        matrix = cls.__new__(cls)
        matrix._size = size
        matrix._rows = [list(row) for row in rows]
        return matrix

    @property
    def size(self) -> int:
        """Returns the number of vertices n."""
        return self._size

    def _check(self, i: int, j: int) -> None:
        if i < 0 or j < 0 or i >= self._size or j >= self._size:
            raise IndexError(f"SquareMatrix invalid index: (i={i}, j={j}) for n={self._size}")

    def get(self, i: int, j: int) -> T:
        """
        Retrieves the value at cell `(i, j)`.

        Parameters
        ----------
        i : int
            The row (source) index, 0-based.
        j : int
            The column (destination) index, 0-based.

        Returns
        -------
        T
            The value stored at the specified cell.
        """
        self._check(i, j)
        return self._rows[i][j]

    def set(self, i: int, j: int, value: T) -> None:
        """Sets the `value` at cell `(i, j)`."""
        self._check(i, j)
        self._rows[i][j] = value

    def iter_indices(self) -> Iterator[Tuple[int, int]]:
        """
        Yields every `(i, j)` index pair in row-major order.

        Yields
        ------
        Iterator[Tuple[int, int]]
            An iterator over all n² ordered pairs.
        """
        n = self._size
        for i in range(n):
            for j in range(n):
                yield i, j

    def snapshot(self) -> Rows:
        """Returns an immutable tuple-of-tuples copy of the current cells."""
        return tuple(tuple(row) for row in self._rows)


def coerce_cost_rows(cost: Any) -> List[List[float]]:
    """
    Validates a caller-supplied cost matrix and copies it into float rows.

    Accepts nested sequences (lists, tuples) or a 2-D `numpy.ndarray`. The
    caller's object is never modified.

    Parameters
    ----------
    cost : Any
        The cost matrix, indexed `[source][destination]`.

    Returns
    -------
    List[List[float]]
        A fresh row-major copy with every cell converted to `float`.

    Raises
    ------
    NonSquareMatrixError
        If the input is not an n x n grid.
    InvalidCostError
        If a cell is NaN or not numeric.
    """
    if isinstance(cost, np.ndarray):
        if cost.ndim != 2 or cost.shape[0] != cost.shape[1]:
            # A 1-D array of length zero is the only acceptable non-2-D input.
            if cost.size == 0 and cost.ndim == 1:
                return []
            raise NonSquareMatrixError(f"Expected an n x n array, got shape {cost.shape}")
        try:
            as_float = cost.astype(np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidCostError(f"Cost array is not numeric: {exc}") from exc
        if np.isnan(as_float).any():
            bad_i, bad_j = np.argwhere(np.isnan(as_float))[0]
            raise InvalidCostError(f"Cell ({bad_i}, {bad_j}) is NaN")
        return as_float.tolist()

    if isinstance(cost, (str, bytes)) or not isinstance(cost, Sequence):
        raise NonSquareMatrixError(f"Expected a sequence of rows, got {type(cost).__name__}")

    size = len(cost)
    rows: List[List[float]] = []
    for row_idx, row in enumerate(cost):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise NonSquareMatrixError(f"Row {row_idx} is not a sequence ({type(row).__name__})")
        if len(row) != size:
            raise NonSquareMatrixError(
                f"Row {row_idx} has {len(row)} columns; expected {size} for a {size}x{size} matrix"
            )
        rows.append([_coerce_cell(cell, row_idx, col_idx) for col_idx, cell in enumerate(row)])

    return rows


def _coerce_cell(cell: Any, i: int, j: int) -> float:
    """Converts one cell to float, rejecting NaN, booleans and non-numbers."""
    if isinstance(cell, bool) or not isinstance(cell, numbers.Real):
        raise InvalidCostError(f"Cell ({i}, {j}) is not a number: {cell!r}")
    value = float(cell)
    if math.isnan(value):
        raise InvalidCostError(f"Cell ({i}, {j}) is NaN")
    return value
