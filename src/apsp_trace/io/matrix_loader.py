from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Union
import logging

import yaml

from apsp_trace.errors import InvalidCostError, NonSquareMatrixError
from apsp_trace.structures import coerce_cost_rows
from apsp_trace.utils.value_utils import UNREACHABLE, parse_value

logger = logging.getLogger(__name__)

# JSON is a subset of YAML, so both go through the same safe loader.
SUPPORTED_SUFFIXES = {".yml", ".yaml", ".json"}


def read_yaml(path: str | Path) -> Union[Dict[str, Any], List[Any]]:
    """
    Read and parse a YAML (or JSON) file.
    """
    path_obj = Path(path)
    if path_obj.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Only YAML or JSON files are supported, got '{path_obj.suffix}'.")

    try:
        document = yaml.safe_load(path_obj.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"{path_obj}: invalid YAML: {exc}") from exc

    return {} if document is None else document


def load_cost_matrix(path: str | Path) -> List[List[float]]:
    """
    Loads a cost matrix from a YAML or JSON file.

    The document is either a bare list of rows or a mapping with a `matrix`
    key holding the rows. Cells may be numbers, YAML `.inf`, `null` (no edge)
    or strings, which are read with `parse_value` so that `"∞"`, `"inf"` and
    `""` all mean "no edge".

    Parameters
    ----------
    path : str | Path
        The file to read.

    Returns
    -------
    List[List[float]]
        A validated square matrix of floats.

    Raises
    ------
    ValueError
        If the file type is unsupported or the document has no matrix.
    NonSquareMatrixError
        If the rows do not form an n x n grid.
    InvalidCostError
        If a cell is neither a number, a string nor null.
    """
    logger.info(f"Loading cost matrix from: {path}")
    document = read_yaml(path)

    if isinstance(document, dict):
        if "matrix" not in document:
            raise ValueError(f"{path}: expected a 'matrix' key or a list of rows")
        raw_rows = document["matrix"]
    else:
        raw_rows = document

    if not isinstance(raw_rows, list):
        raise NonSquareMatrixError(f"{path}: matrix must be a list of rows, got {type(raw_rows).__name__}")

    rows: List[List[float]] = []
    for row_idx, raw_row in enumerate(raw_rows):
        if not isinstance(raw_row, list):
            raise NonSquareMatrixError(f"{path}: row {row_idx} is not a list")
        rows.append([_read_cell(cell, row_idx, col_idx) for col_idx, cell in enumerate(raw_row)])

    matrix = coerce_cost_rows(rows)
    logger.debug(f"Loaded {len(matrix)}x{len(matrix)} cost matrix")
    return matrix


def _read_cell(cell: Any, i: int, j: int) -> float:
    if cell is None:
        return UNREACHABLE
    if isinstance(cell, str):
        return parse_value(cell)
    if isinstance(cell, bool) or not isinstance(cell, (int, float)):
        raise InvalidCostError(f"Cell ({i}, {j}) has unsupported type {type(cell).__name__}: {cell!r}")
    return float(cell)
