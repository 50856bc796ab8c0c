"""Slot occupancy and clustering metrics."""

from typing import Dict, List, Sequence

import numpy as np

from ..table.slots import SlotState


def gini(counts: Sequence[int]) -> float:
    """Compute Gini coefficient for inequality measure.

    Range: [0, 1] where 0 = perfect equality, 1 = maximum inequality.

    Args:
        counts: Non-negative counts

    Returns:
        Gini coefficient as float
    """
    values = np.sort(np.asarray(counts, dtype=np.float64))
    if len(values) == 0 or np.all(values == 0):
        return 0.0

    n = len(values)
    index = np.arange(1, n + 1)
    # G = (2 * sum(i * x_i)) / (n * sum(x_i)) - (n + 1) / n
    return float((2 * np.sum(index * values)) / (n * np.sum(values)) - (n + 1) / n)


def run_lengths(states: np.ndarray) -> List[int]:
    """Lengths of maximal runs of non-empty slots.

    The slot array is treated as circular, so a run touching both ends is
    counted once.

    Args:
        states: Array of SlotState codes

    Returns:
        Run lengths (empty list for an all-empty table)
    """
    used = np.asarray(states) != SlotState.EMPTY
    n = len(used)
    if n == 0 or not used.any():
        return []
    if used.all():
        return [n]

    # Rotate so the array starts right after an empty slot
    first_empty = int(np.argmin(used))
    used = np.roll(used, -(first_empty + 1))

    padded = np.concatenate(([False], used, [False])).astype(np.int8)
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return [int(e - s) for s, e in zip(starts, ends)]


def occupancy_summary(states: np.ndarray) -> Dict:
    """
    Summarize slot usage of a table.

    Args:
        states: Array of SlotState codes, as returned by HashEngine.slot_states()

    Returns:
        Dictionary with:
        - capacity: int
        - occupied: int
        - tombstones: int
        - empty: int
        - load_factor: float (occupied / capacity)
        - used_factor: float ((occupied + tombstones) / capacity)
        - longest_run: int (longest circular run of non-empty slots)
        - mean_run: float
        - run_gini: float (Gini coefficient of run lengths)
    """
    states = np.asarray(states)
    capacity = int(len(states))
    occupied = int(np.sum(states == SlotState.OCCUPIED))
    tombstones = int(np.sum(states == SlotState.TOMBSTONE))
    runs = run_lengths(states)

    return {
        "capacity": capacity,
        "occupied": occupied,
        "tombstones": tombstones,
        "empty": capacity - occupied - tombstones,
        "load_factor": occupied / capacity if capacity else 0.0,
        "used_factor": (occupied + tombstones) / capacity if capacity else 0.0,
        "longest_run": max(runs) if runs else 0,
        "mean_run": float(np.mean(runs)) if runs else 0.0,
        "run_gini": gini(runs),
    }
