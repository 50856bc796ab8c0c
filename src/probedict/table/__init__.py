"""Hash table modules."""

from .engine import HashEngine
from .errors import (
    KeyTooLongError,
    LengthExceededError,
    ProbeDictError,
    TableFullError,
    ValueTooLongError,
)
from .slots import (
    DeleteResult,
    Entry,
    InsertResult,
    InsertStatus,
    Origin,
    SearchResult,
    SlotState,
    TombstonePolicy,
)

__all__ = [
    "HashEngine",
    "Entry",
    "SlotState",
    "Origin",
    "TombstonePolicy",
    "InsertStatus",
    "InsertResult",
    "SearchResult",
    "DeleteResult",
    "ProbeDictError",
    "LengthExceededError",
    "KeyTooLongError",
    "ValueTooLongError",
    "TableFullError",
]
