import logging
import sys
import time
from pathlib import Path
from typing import Optional, Iterable
from datetime import datetime

# Default log directory
DEFAULT_LOG_DIR = Path("var/log")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers that carry solver progress; configured together by the CLI.
SOLVER_LOGGERS = (
    "apsp_trace.solver.floyd_recurrences",
    "apsp_trace.solver.floyd_kernels",
    "apsp_trace.solver.cycles",
    "apsp_trace.io.matrix_loader",
)

logger = logging.getLogger(__name__)


def get_log_file_path(
        logger_name: str,
        log_dir: Optional[Path] = None,
        include_timestamp: bool = True
) -> Path:
    """
    Builds the path of the log file for a logger, creating the directory if needed.

    Parameters
    ----------
    logger_name : str
        Dotted logger name, e.g. "apsp_trace.solver". Dots become underscores.
    log_dir : Optional[Path], optional
        Target directory. Defaults to `DEFAULT_LOG_DIR`.
    include_timestamp : bool, optional
        Append `_YYYYmmdd_HHMMSS` so consecutive runs do not share a file.

    Returns
    -------
    Path
        The log file path.
    """
    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    safe_name = logger_name.replace(".", "_")
    if include_timestamp:
        filename = f"{safe_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    else:
        filename = f"{safe_name}.log"

    return log_dir / filename


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = True,
    console_level: Optional[int] = None,
    file_level: Optional[int] = None,
) -> logging.Logger:
    """
    Configures a logger with a stdout handler and an optional file handler.

    Existing handlers on the logger are removed first, so calling this twice
    does not duplicate output.

    Parameters
    ----------
    name : str
        The logger name, typically a module `__name__`.
    level : int, optional
        Base level for the logger and its handlers, by default `logging.INFO`.
    log_file : Optional[str], optional
        Explicit log file path; takes precedence over `log_dir`.
    log_dir : Optional[Path], optional
        Directory for an automatically named, timestamped log file.
    enable_file_logging : bool, optional
        Whether to create the automatic log file when `log_file` is not given.
    console_level : Optional[int], optional
        Overrides the console handler level.
    file_level : Optional[int], optional
        Overrides the file handler level.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    configured = logging.getLogger(name)
    configured.setLevel(level)
    if configured.hasHandlers():
        configured.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(console_level if console_level is not None else level)
    configured.addHandler(console_handler)

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='a')
    elif enable_file_logging:
        log_path = get_log_file_path(name, log_dir=log_dir, include_timestamp=True)
        file_handler = logging.FileHandler(log_path, mode='a')
        configured.info(f"Logging to file: {log_path}")

    if file_handler:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(file_level if file_level is not None else level)
        configured.addHandler(file_handler)

    return configured


def setup_solver_logging(
    level: int,
    log_file: Optional[str] = None,
    enable_file_logging: bool = False,
    extra_loggers: Iterable[str] = (),
) -> None:
    """Applies `setup_logger` to every solver logger plus `extra_loggers`."""
    for logger_name in (*SOLVER_LOGGERS, *extra_loggers):
        setup_logger(
            logger_name,
            level=level,
            log_file=log_file,
            enable_file_logging=enable_file_logging,
        )


def cleanup_old_logs(log_dir: Optional[Path] = None, days_to_keep: int = 7) -> int:
    """
    Deletes `*.log` files whose modification time is older than `days_to_keep` days.

    Parameters
    ----------
    log_dir : Optional[Path], optional
        Directory to clean. Defaults to `DEFAULT_LOG_DIR`.
    days_to_keep : int, optional
        Maximum age in days, by default 7.

    Returns
    -------
    int
        The number of files removed.
    """
    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR

    if not log_dir.exists():
        return 0

    cutoff_time = time.time() - (days_to_keep * 86400)
    removed = 0
    for log_file in log_dir.glob("*.log"):
        if log_file.stat().st_mtime < cutoff_time:
            log_file.unlink()
            logger.info(f"Removed old log: {log_file}")
            removed += 1
    return removed
