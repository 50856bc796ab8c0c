"""Logging helpers.

Logs go to stderr so that report and command output on stdout stay clean.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER = "probedict"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package root logger.

    Calling it again replaces the handler and updates the level.

    Args:
        level: Logging level (int or name such as "INFO")

    Returns:
        The package root logger
    """
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))
    root.addHandler(handler)
    return root


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Return a logger under the ``probedict`` namespace.

    Args:
        name: Logger name; module names inside the package are used as is
        level: Optional level to set on the returned logger

    Returns:
        logging.Logger
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
