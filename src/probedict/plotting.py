"""Figure and JSON export of table statistics."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import matplotlib
# Use Agg backend (non-interactive, PDF-compatible)
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .metrics.stats import StatsSnapshot


def save_figure(fig, path: Path) -> None:
    """Save figure with tight layout.

    Args:
        fig: Matplotlib figure
        path: Output path; the suffix selects the format (pdf, png, ...)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)


def save_histogram_figure(snapshot: StatsSnapshot, path: Path, title: Optional[str] = None) -> Path:
    """
    Plot the load-phase probe histogram as a bar chart.

    Args:
        snapshot: Statistics snapshot
        path: Output path
        title: Optional figure title

    Returns:
        The path written
    """
    rows = snapshot.histogram_rows()
    probes = [p for p, _ in rows]
    counts = [n for _, n in rows]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(probes, counts, color="tab:blue")
    ax.set_xlabel("Probes")
    ax.set_ylabel("Count of keys")
    ax.set_yscale("log" if counts and max(counts) > 100 else "linear")
    ax.set_title(title or f"Probe histogram ({snapshot.item_count} items)")
    ax.axvline(snapshot.average_load_probes, color="tab:red", linestyle="--",
               label=f"mean = {snapshot.average_load_probes:.2f}")
    ax.legend()
    ax.grid(True, alpha=0.3)

    save_figure(fig, path)
    return Path(path)


def write_stats_json(
    path: Path,
    snapshot: StatsSnapshot,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """Write statistics as JSON.

    Args:
        path: Output JSON path
        snapshot: Statistics snapshot
        config: Table configuration used for the run
    """
    payload = {
        "timestamp": datetime.now().isoformat(),
        "config": config or {},
        "stats": snapshot.as_dict(),
    }

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)
