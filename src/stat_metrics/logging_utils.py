"""Logger setup for command-line entry points.

Library modules only create module loggers; the scripts call :func:`setup_logger`
once so that progress and warnings from the ``stat_metrics`` namespace reach stderr.
"""

from __future__ import annotations

import logging


def setup_logger(name: str = "stat_metrics", level: int = logging.INFO) -> logging.Logger:
    """Create and configure a logger.

    Parameters
    ----------
    name
        Logger name. The default covers every module in the package.
    level
        Level set on the logger.

    Returns
    -------
    logging.Logger
        The configured logger. Calling again does not add a second handler.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
