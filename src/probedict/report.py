"""Text rendering of table statistics."""

from typing import Dict

from .metrics.stats import StatsSnapshot

ROW_SEPARATOR = "-------------"


def format_load_report(snapshot: StatsSnapshot) -> str:
    """
    Render load-phase statistics and the probe histogram.

    Only non-zero histogram rows are listed. The layout matches the
    historical report byte for byte when every key was hashed.

    Args:
        snapshot: Statistics snapshot

    Returns:
        Report text ending with a newline
    """
    attempted = snapshot.item_count + snapshot.not_hashed
    lines = [
        "",
        "Hash Table",
        f"  average number of probes:               {snapshot.average_load_probes:.2f}",
        f"  max_run of probes:                      {snapshot.max_probes}",
        f"  total PROBES (for {snapshot.item_count} items) :     {snapshot.total_probes}",
        f"  items NOT hashed (out of {attempted}):         {snapshot.not_hashed}",
        "",
        "Probes|Count of keys",
        ROW_SEPARATOR,
    ]
    for probes, count in snapshot.histogram_rows():
        lines.append(f"{probes:6d}|{count:6d}")
        lines.append(ROW_SEPARATOR)
    return "\n".join(lines) + "\n"


def format_interactive_summary(snapshot: StatsSnapshot) -> str:
    """Render the average probe count of interactive operations."""
    return f"\nAverage probes per operation:     {snapshot.average_user_probes:.2f}\n"


def format_occupancy(summary: Dict) -> str:
    """Render an occupancy_summary() dictionary."""
    return "\n".join([
        "",
        "Occupancy",
        f"  slots:                                  {summary['capacity']}",
        "  occupied / tombstones / empty:          "
        f"{summary['occupied']} / {summary['tombstones']} / {summary['empty']}",
        f"  load factor:                            {summary['load_factor']:.4f}",
        f"  longest run of used slots:              {summary['longest_run']}",
        f"  mean run of used slots:                 {summary['mean_run']:.2f}",
        f"  run length gini:                        {summary['run_gini']:.4f}",
    ]) + "\n"
