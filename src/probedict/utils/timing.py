"""Timing utilities."""

import logging
import time
from typing import Optional

from .logging import get_logger


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, name: str = "Operation", logger: Optional[logging.Logger] = None):
        """
        Initialize timer.

        Args:
            name: Name/description of the operation being timed
            logger: Logger receiving the elapsed time at INFO level
        """
        self.name = name
        self.logger = logger or get_logger("timing")
        self.start_time: Optional[float] = None
        self.elapsed_time: Optional[float] = None

    def __enter__(self) -> "Timer":
        """Start timing."""
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Stop timing and record elapsed time."""
        if self.start_time is not None:
            self.elapsed_time = time.perf_counter() - self.start_time
            self.logger.info("%s took %.4f seconds", self.name, self.elapsed_time)

    @property
    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.elapsed_time is None:
            raise ValueError("Timer has not been used as context manager yet")
        return self.elapsed_time
