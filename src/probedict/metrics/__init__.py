"""Metrics module for probedict."""

from probedict.metrics.occupancy import gini, occupancy_summary, run_lengths
from probedict.metrics.stats import StatsRecorder, StatsSnapshot

__all__ = [
    "StatsRecorder",
    "StatsSnapshot",
    "gini",
    "occupancy_summary",
    "run_lengths",
]
