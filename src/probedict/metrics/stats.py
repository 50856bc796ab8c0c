"""Probe-count statistics.

Load-phase and interactive-phase counters are kept apart: bulk loading
measures how well keys spread over the table, interactive counters measure
what a user pays per operation afterwards.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np


@dataclass(frozen=True)
class StatsSnapshot:
    """Point-in-time copy of the statistics.

    Attributes:
        total_probes: Sum of probes over load-phase inserts
        max_probes: Longest load-phase probe run
        item_count: Keys placed by load-phase inserts
        not_hashed: Load-phase inserts that found the table full
        histogram: Load-phase probe histogram, index = probe count (clamped)
        user_ops: Interactive operations (search, insert, delete)
        user_probes: Sum of probes over interactive operations
    """

    total_probes: int
    max_probes: int
    item_count: int
    not_hashed: int
    histogram: Tuple[int, ...]
    user_ops: int
    user_probes: int

    @property
    def average_load_probes(self) -> float:
        if self.item_count == 0:
            return 0.0
        return self.total_probes / self.item_count

    @property
    def average_user_probes(self) -> float:
        if self.user_ops == 0:
            return 0.0
        return self.user_probes / self.user_ops

    def histogram_rows(self) -> List[Tuple[int, int]]:
        """Non-zero (probes, keys) rows, starting at one probe."""
        return [(p, n) for p, n in enumerate(self.histogram) if p >= 1 and n]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "load": {
                "average_probes": self.average_load_probes,
                "max_probes": self.max_probes,
                "total_probes": self.total_probes,
                "item_count": self.item_count,
                "not_hashed": self.not_hashed,
                "histogram": {str(p): n for p, n in self.histogram_rows()},
            },
            "interactive": {
                "average_probes": self.average_user_probes,
                "user_ops": self.user_ops,
                "user_probes": self.user_probes,
            },
        }


class StatsRecorder:
    """Accumulates probe counts for one table."""

    def __init__(self, histogram_max: int = 100):
        """
        Initialize recorder.

        Args:
            histogram_max: Last histogram bucket; longer runs land in it
        """
        self.histogram_max = histogram_max
        self.reset()

    def reset(self) -> None:
        """Zero every counter."""
        self.total_probes = 0
        self.max_probes = 0
        self.item_count = 0
        self.not_hashed = 0
        self.histogram = np.zeros(self.histogram_max + 1, dtype=np.int64)
        self.user_ops = 0
        self.user_probes = 0

    def record_load(self, probes: int, placed: bool = False, failed: bool = False) -> None:
        """
        Record one load-phase insert.

        Args:
            probes: Slots visited by the insert
            placed: The insert created a new entry
            failed: The insert found the table full
        """
        self.total_probes += probes
        self.max_probes = max(self.max_probes, probes)
        self.histogram[min(probes, self.histogram_max)] += 1
        if placed:
            self.item_count += 1
        if failed:
            self.not_hashed += 1

    def record_interactive(self, probes: int) -> None:
        """Record one interactive search, insert or delete."""
        self.user_ops += 1
        self.user_probes += probes

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            total_probes=int(self.total_probes),
            max_probes=int(self.max_probes),
            item_count=int(self.item_count),
            not_hashed=int(self.not_hashed),
            histogram=tuple(int(n) for n in self.histogram),
            user_ops=int(self.user_ops),
            user_probes=int(self.user_probes),
        )
