"""Dictionary file input."""

from .loader import LoadReport, load_dictionary, read_pairs, split_line

__all__ = [
    "LoadReport",
    "load_dictionary",
    "read_pairs",
    "split_line",
]
