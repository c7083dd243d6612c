#!/usr/bin/env python3
"""
Solve all-pairs shortest paths for a cost matrix from the command line.

This script runs Floyd-Warshall on a cost matrix read from a YAML/JSON file
(or on the built-in sample matrix), prints the distance matrix and can
optionally show a shortest path, the cheapest cycle and the full step trace.

Examples:
  - python -m apsp_trace --sample 4 --path 0 3
  - python -m apsp_trace graph.yaml --cycle --steps
  - python -m apsp_trace -vv --fast --json graph.json
"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import math
import sys
import logging
import time
from typing import Any, Dict, List, Optional, Sequence

# --- Local Application Imports ---
from apsp_trace.errors import APSPError
from apsp_trace.io import load_cost_matrix
from apsp_trace.solver import (
    FloydWarshallConfig,
    FloydWarshallEngine,
    DistanceResult,
    FloydResult,
    solve_distances,
    reconstruct_path,
    find_min_cycle,
    format_path,
)
from apsp_trace.utils import format_value, make_sample_matrix, format_matrix
from apsp_trace.utils.logging_utils import setup_solver_logging, cleanup_old_logs, DEFAULT_LOG_DIR

# Set up module logger
logger = logging.getLogger(__name__)


# --------------------------
# Logging Configuration
# --------------------------
def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None) -> None:
    """
    Configures logging for the CLI and the solver modules.

    Parameters
    ----------
    verbose_level : int
        0 for WARNING, 1 for INFO, 2 for DEBUG.
    log_file : Optional[str]
        Explicit log file. Without it, a timestamped file under `var/log/`
        is created when verbosity is above 0, and log files there older than
        a week are removed.
    """
    level_map = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(verbose_level, logging.DEBUG)
    should_log_to_file = (verbose_level > 0) or (log_file is not None)

    setup_solver_logging(
        log_level,
        log_file=log_file,
        enable_file_logging=should_log_to_file,
        extra_loggers=[__name__],
    )

    if should_log_to_file and log_file is None:
        logger.info(f"Logs will be saved to: {DEFAULT_LOG_DIR.resolve()}")
        removed = cleanup_old_logs(DEFAULT_LOG_DIR)
        if removed:
            logger.info(f"Removed {removed} old log file(s) from {DEFAULT_LOG_DIR}")


# --------------------------
# Helpers
# --------------------------
def _json_number(value: float) -> Optional[float]:
    """JSON has no infinity; unreachable (and -inf) cells become null."""
    return value if math.isfinite(value) else None


def _json_rows(rows: Sequence[Sequence[float]]) -> List[List[Optional[float]]]:
    return [[_json_number(v) for v in row] for row in rows]


def run_solver(cost: List[List[float]], fast: bool, max_vertices: Optional[int], verbose: bool) -> DistanceResult:
    """
    Runs either the traced solver or the trace-free fast path.

    Returns
    -------
    DistanceResult
        A `FloydResult` (with steps) unless `fast` is set.
    """
    start_time = time.perf_counter()
    if fast:
        logger.info("Using trace-free solver")
        result: DistanceResult = solve_distances(cost)
    else:
        logger.info("Using traced solver")
        engine = FloydWarshallEngine(FloydWarshallConfig(verbose=verbose, max_vertices=max_vertices))
        result = engine.solve(cost)
    logger.info(f"Solve completed in {time.perf_counter() - start_time:.3f}s")
    return result


# --------------------------
# Command-Line Interface
# --------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="All-pairs shortest paths (Floyd-Warshall) with a replayable trace.")
    parser.add_argument("matrix_file", nargs="?", default=None,
                        help="YAML/JSON file holding the cost matrix (a list of rows or {matrix: [...]}).")
    parser.add_argument("--sample", type=int, default=None, metavar="N",
                        help="Use the built-in N-vertex sample matrix instead of a file.")
    parser.add_argument("--path", type=int, nargs=2, default=None, metavar=("SRC", "DST"),
                        help="Print the shortest path from SRC to DST.")
    parser.add_argument("--cycle", action="store_true",
                        help="Print the minimum cycle (or a negative self-loop).")
    parser.add_argument("--steps", action="store_true",
                        help="Print every recorded step of the run.")
    parser.add_argument("--fast", action="store_true",
                        help="Use the trace-free solver (no step log).")
    parser.add_argument("--max-vertices", type=int, default=None,
                        help="Refuse traced runs on graphs with more vertices than this.")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of human-readable text.")

    # Logging arguments
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file (default: var/log/<logger>_TIMESTAMP.log if verbose)")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress all output except the final result")
    return parser


def main(argv=None) -> int:
    """
    Parses command-line arguments, solves the matrix and prints the results.
    """
    parser = build_parser()
    cli_args = parser.parse_args(argv)

    if (cli_args.matrix_file is None) == (cli_args.sample is None):
        parser.error("give exactly one of MATRIX_FILE or --sample")
    if cli_args.fast and cli_args.steps:
        parser.error("--steps needs the traced solver; drop --fast")

    verbose_level = 0 if cli_args.quiet else cli_args.verbose
    setup_cli_logging(verbose_level, cli_args.log_file)

    # --- Input ---
    try:
        if cli_args.sample is not None:
            cost = make_sample_matrix(cli_args.sample)
        else:
            cost = load_cost_matrix(cli_args.matrix_file)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load cost matrix: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # --- Solve ---
    try:
        result = run_solver(cost, cli_args.fast, cli_args.max_vertices, verbose=verbose_level > 0)
    except APSPError as e:
        logger.error(f"Invalid input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logger.error(f"Solve failed: {e}", exc_info=True)
        print(f"Solve failed: {e}", file=sys.stderr)
        return 1

    # --- Queries ---
    path: Optional[List[int]] = None
    if cli_args.path is not None:
        source, destination = cli_args.path
        try:
            path = reconstruct_path(result.predecessors, source, destination)
        except APSPError as e:
            logger.error(f"Path query failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 2

    cycle = find_min_cycle(result.distances) if cli_args.cycle else None
    steps = result.steps if isinstance(result, FloydResult) else ()

    # --- Output ---
    if cli_args.json:
        payload: Dict[str, Any] = {
            "size": result.size,
            "distances": _json_rows(result.distances),
            "predecessors": [list(row) for row in result.predecessors],
            "has_negative_cycle": result.has_negative_cycle,
        }
        if not cli_args.fast:
            payload["step_count"] = len(steps)
        if cli_args.path is not None:
            source, destination = cli_args.path
            payload["path"] = {
                "source": source,
                "destination": destination,
                "vertices": path,
                "distance": _json_number(result.distance(source, destination)),
            }
        if cli_args.cycle:
            payload["cycle"] = None if cycle is None else {
                "vertices": list(cycle.cycle),
                "weight": _json_number(cycle.weight),
            }
        if cli_args.steps:
            payload["steps"] = [
                {
                    "k": s.k, "i": s.i, "j": s.j,
                    "old_value": _json_number(s.old_value),
                    "new_value": _json_number(s.new_value),
                    "updated": s.updated,
                    "matrix": _json_rows(s.matrix),
                }
                for s in steps
            ]
        print(json.dumps(payload, indent=2))
        return 0

    print("Distance matrix (∞ = no path):")
    print(format_matrix(result.distances))

    if cli_args.steps:
        print()
        print(f"Steps ({len(steps)}):")
        for idx, step in enumerate(steps):
            print(f"  [{idx}] {step.describe()}")

    if cli_args.path is not None:
        source, destination = cli_args.path
        print()
        if path:
            distance = format_value(result.distance(source, destination))
            print(f"Shortest path {source} -> {destination}: [{format_path(path)}] with distance {distance}")
        else:
            print(f"No path exists from {source} to {destination}")

    if cli_args.cycle:
        print()
        if cycle is None:
            print("No cycle found (a cycle needs a path i -> j and back j -> i).")
        elif cycle.is_negative_self_loop:
            print(f"Negative cycle through vertex {cycle.cycle[0]} with weight {format_value(cycle.weight)}")
        else:
            print(f"Minimum cycle: [{format_path(cycle.cycle)}] with weight {format_value(cycle.weight)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
