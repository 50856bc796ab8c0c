"""probedict: fixed-capacity double-hashing dictionary index with probe statistics."""

from .config import TableConfig, load_config
from .hashing import DoubleHash, ProbeHash, h1, h2, is_prime
from .io import LoadReport, load_dictionary, read_pairs
from .metrics import StatsRecorder, StatsSnapshot, occupancy_summary
from .report import format_interactive_summary, format_load_report, format_occupancy
from .table import (
    DeleteResult,
    Entry,
    HashEngine,
    InsertResult,
    InsertStatus,
    KeyTooLongError,
    Origin,
    ProbeDictError,
    SearchResult,
    SlotState,
    TableFullError,
    TombstonePolicy,
    ValueTooLongError,
)
from .utils import Timer, configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Core table
    "HashEngine",
    "Entry",
    "SlotState",
    "Origin",
    "TombstonePolicy",
    "InsertStatus",
    "InsertResult",
    "SearchResult",
    "DeleteResult",
    # Errors
    "ProbeDictError",
    "KeyTooLongError",
    "ValueTooLongError",
    "TableFullError",
    # Hashing
    "ProbeHash",
    "DoubleHash",
    "h1",
    "h2",
    "is_prime",
    # Statistics
    "StatsRecorder",
    "StatsSnapshot",
    "occupancy_summary",
    # Loading and reporting
    "LoadReport",
    "load_dictionary",
    "read_pairs",
    "format_load_report",
    "format_interactive_summary",
    "format_occupancy",
    # Utils
    "TableConfig",
    "load_config",
    "get_logger",
    "configure_logging",
    "Timer",
]
