"""Utilities module for probedict."""

from probedict.utils.logging import configure_logging, get_logger
from probedict.utils.timing import Timer

__all__ = [
    "configure_logging",
    "get_logger",
    "Timer",
]
