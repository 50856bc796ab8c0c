"""Slot states, entries and operation results."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .errors import TableFullError


class SlotState(IntEnum):
    """State of a single slot. Codes are used in numpy state arrays."""

    EMPTY = 0
    OCCUPIED = 1
    TOMBSTONE = 2


class Origin(Enum):
    """Where an operation came from; selects the statistics it feeds."""

    LOAD = "load"
    INTERACTIVE = "interactive"


class TombstonePolicy(Enum):
    """Where a new key goes when its probe sequence crosses a tombstone.

    SCAN keeps walking past tombstones until an empty slot, a live entry for
    the same key, or the end of the sequence, then reuses the first tombstone
    seen. FIRST_FREE places the key at the first empty or tombstoned slot,
    which can leave two live entries for one key.
    """

    SCAN = "scan"
    FIRST_FREE = "first_free"


@dataclass(frozen=True)
class Entry:
    """Immutable copy of a stored key/value pair."""

    key: str
    value: str

    @property
    def translations(self) -> list[str]:
        return self.value.split(";")


class _Slot:
    __slots__ = ("state", "key", "value")

    def __init__(self) -> None:
        self.state = SlotState.EMPTY
        self.key: Optional[str] = None
        self.value: Optional[str] = None

    def fill(self, key: str, value: str) -> None:
        self.state = SlotState.OCCUPIED
        self.key = key
        self.value = value

    def matches(self, key: str) -> bool:
        return self.state is SlotState.OCCUPIED and self.key == key


class InsertStatus(Enum):
    PLACED = "placed"
    MERGED = "merged"
    TABLE_FULL = "table_full"


@dataclass(frozen=True)
class InsertResult:
    """Outcome of an insert.

    Attributes:
        status: PLACED, MERGED or TABLE_FULL
        probes: Number of slots visited
        index: Slot that now holds the key (None when the table is full)
        key: Normalized key
    """

    status: InsertStatus
    probes: int
    index: Optional[int]
    key: str

    @property
    def ok(self) -> bool:
        return self.status is not InsertStatus.TABLE_FULL

    def raise_for_status(self) -> "InsertResult":
        """Raise TableFullError for a failed placement, else return self."""
        if not self.ok:
            raise TableFullError(self.key, self.probes)
        return self


@dataclass(frozen=True)
class SearchResult:
    entry: Optional[Entry]
    probes: int
    index: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.entry is not None


@dataclass(frozen=True)
class DeleteResult:
    deleted: bool
    probes: int
