"""Command-line interface for probedict."""

from .commands import CommandProcessor
from .run import main

__all__ = ["CommandProcessor", "main"]
