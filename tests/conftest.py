"""
Shared pytest fixtures.

The CLI and the logging tests attach stdout handlers to package loggers;
those handlers keep a reference to the stream that was current when they were
created, so they are detached after every test.
"""
import logging

import pytest

from apsp_trace.utils.logging_utils import SOLVER_LOGGERS


@pytest.fixture(autouse=True)
def reset_package_loggers():
    yield
    names = [name for name in logging.root.manager.loggerDict if name.startswith("apsp_trace")]
    for name in set(names) | set(SOLVER_LOGGERS):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_cost():
    """The 4-vertex demo graph: 0->1 (3), 0->2 (8), 1->2 (2), 1->3 (5), 2->3 (1), 3->0 (2)."""
    inf = float("inf")
    return [
        [0.0, 3.0, 8.0, inf],
        [inf, 0.0, 2.0, 5.0],
        [inf, inf, 0.0, 1.0],
        [2.0, inf, inf, 0.0],
    ]
