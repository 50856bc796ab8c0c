"""Tests for report rendering."""

import numpy as np

from probedict import StatsRecorder, format_interactive_summary, format_load_report
from probedict.metrics import occupancy_summary
from probedict.report import format_occupancy


def test_load_report_layout():
    stats = StatsRecorder()
    for probes in (1, 1, 1, 2, 4):
        stats.record_load(probes, placed=True)

    expected = (
        "\n"
        "Hash Table\n"
        "  average number of probes:               1.80\n"
        "  max_run of probes:                      4\n"
        "  total PROBES (for 5 items) :     9\n"
        "  items NOT hashed (out of 5):         0\n"
        "\n"
        "Probes|Count of keys\n"
        "-------------\n"
        "     1|     3\n"
        "-------------\n"
        "     2|     1\n"
        "-------------\n"
        "     4|     1\n"
        "-------------\n"
    )
    assert format_load_report(stats.snapshot()) == expected


def test_load_report_empty_table():
    text = format_load_report(StatsRecorder().snapshot())
    assert "average number of probes:               0.00" in text
    assert text.endswith("Probes|Count of keys\n-------------\n")


def test_load_report_counts_not_hashed():
    stats = StatsRecorder()
    stats.record_load(3, placed=True)
    stats.record_load(3, failed=True)
    text = format_load_report(stats.snapshot())
    assert "  items NOT hashed (out of 2):         1\n" in text
    assert "  total PROBES (for 1 items) :     6\n" in text


def test_interactive_summary():
    stats = StatsRecorder()
    assert format_interactive_summary(stats.snapshot()) == (
        "\nAverage probes per operation:     0.00\n"
    )
    for probes in (1, 2, 2):
        stats.record_interactive(probes)
    assert format_interactive_summary(stats.snapshot()) == (
        "\nAverage probes per operation:     1.67\n"
    )


def test_occupancy_block():
    states = np.array([1, 1, 0, 2, 0, 0, 0], dtype=np.uint8)
    text = format_occupancy(occupancy_summary(states))
    assert "occupied / tombstones / empty:          2 / 1 / 4" in text
    assert "longest run of used slots:              2" in text
