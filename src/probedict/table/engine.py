"""Open-addressing hash engine with double hashing and tombstones."""

from typing import List, Optional, Tuple, Union

import numpy as np

from ..config import TableConfig
from ..hashing.base import ProbeHash
from ..hashing.double_hash import DoubleHash
from ..metrics.stats import StatsRecorder
from ..utils.logging import get_logger
from .errors import KeyTooLongError, ValueTooLongError
from .slots import (
    DeleteResult,
    Entry,
    InsertResult,
    InsertStatus,
    Origin,
    SearchResult,
    SlotState,
    TombstonePolicy,
    _Slot,
)

logger = get_logger(__name__)

SEPARATOR = ";"


class HashEngine:
    """
    Fixed-capacity key/value table.

    Collisions are resolved by walking the key's probe sequence. Deleted
    slots become tombstones: searches walk past them, inserts may reuse them.
    Every operation reports how many slots it visited and feeds the owned
    StatsRecorder, either as load-phase or interactive-phase work.

    Keys are lowercased before hashing and comparison. Capacity never changes.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        tombstone_policy: Union[TombstonePolicy, str] = TombstonePolicy.SCAN,
        max_key_bytes: int = 99,
        max_value_bytes: int = 9999,
        hash_fn: Optional[ProbeHash] = None,
        stats: Optional[StatsRecorder] = None,
    ):
        """
        Initialize an empty table.

        Args:
            capacity: Number of slots (N), prime. Defaults to 20011, or to
                hash_fn.capacity when a hash function is supplied
            tombstone_policy: Placement rule for keys crossing tombstones
            max_key_bytes: Largest accepted key, in UTF-8 bytes
            max_value_bytes: Largest accepted value, in UTF-8 bytes
            hash_fn: Probe-sequence generator (default: DoubleHash(capacity))
            stats: Statistics recorder (default: a fresh StatsRecorder)
        """
        if hash_fn is None:
            hash_fn = DoubleHash(capacity if capacity is not None else 20011)
        elif capacity is not None and capacity != hash_fn.capacity:
            raise ValueError(
                f"capacity ({capacity}) does not match hash_fn.capacity ({hash_fn.capacity})"
            )
        if max_key_bytes <= 0 or max_value_bytes <= 0:
            raise ValueError("length limits must be positive")

        self.hash_fn = hash_fn
        self._capacity = hash_fn.capacity
        self.tombstone_policy = TombstonePolicy(tombstone_policy)
        self.max_key_bytes = max_key_bytes
        self.max_value_bytes = max_value_bytes
        self.stats = stats if stats is not None else StatsRecorder()

        self._slots: List[_Slot] = [_Slot() for _ in range(self._capacity)]
        self._item_count = 0

    @classmethod
    def from_config(cls, config: TableConfig, hash_fn: Optional[ProbeHash] = None) -> "HashEngine":
        """Build an engine from a validated TableConfig."""
        return cls(
            capacity=config.capacity,
            tombstone_policy=config.tombstone_policy,
            max_key_bytes=config.max_key_bytes,
            max_value_bytes=config.max_value_bytes,
            hash_fn=hash_fn,
            stats=StatsRecorder(histogram_max=config.histogram_max),
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def item_count(self) -> int:
        """Number of occupied (live) slots."""
        return self._item_count

    @property
    def load_factor(self) -> float:
        return self._item_count / self._capacity

    def __len__(self) -> int:
        return self._item_count

    def normalize_key(self, key: str) -> str:
        """
        Lowercase a key and check its length.

        Raises:
            KeyTooLongError: If the key exceeds max_key_bytes
        """
        key = key.lower()
        length = len(key.encode("utf-8"))
        if length > self.max_key_bytes:
            raise KeyTooLongError(length, self.max_key_bytes)
        return key

    def check_value(self, value: str) -> str:
        """
        Check a value's length.

        Raises:
            ValueTooLongError: If the value exceeds max_value_bytes
        """
        length = len(value.encode("utf-8"))
        if length > self.max_value_bytes:
            raise ValueTooLongError(length, self.max_value_bytes)
        return value

    def insert(self, key: str, value: str, origin: Origin = Origin.LOAD) -> InsertResult:
        """
        Insert a key, or append the value to an existing entry for it.

        A duplicate key gets ``";" + value`` appended to its stored value.
        A new key goes into the first free slot of its probe sequence; with
        TombstonePolicy.SCAN the walk first continues past tombstones to make
        sure no live entry for the key exists further along.

        Args:
            key: Key (lowercased here)
            value: Value to store or append
            origin: Origin.LOAD or Origin.INTERACTIVE (or their string values),
                selects the stats fed

        Returns:
            InsertResult with status PLACED, MERGED or TABLE_FULL

        Raises:
            ValueError: If origin is not a valid Origin
            KeyTooLongError: If the key exceeds max_key_bytes
            ValueTooLongError: If the value, or the merged value, exceeds
                max_value_bytes. The table and stats are left unchanged.
        """
        origin = Origin(origin)
        key = self.normalize_key(key)
        self.check_value(value)

        probes = 0
        free_index: Optional[int] = None
        result: Optional[InsertResult] = None

        for index in self.hash_fn.sequence(key):
            probes += 1
            slot = self._slots[index]
            if slot.state is SlotState.EMPTY:
                if free_index is None:
                    free_index = index
                break
            if slot.state is SlotState.TOMBSTONE:
                if free_index is None:
                    free_index = index
                if self.tombstone_policy is TombstonePolicy.FIRST_FREE:
                    break
                continue
            if slot.key == key:
                merged = self.check_value(f"{slot.value}{SEPARATOR}{value}")
                slot.value = merged
                result = InsertResult(InsertStatus.MERGED, probes, index, key)
                break

        if result is None:
            if free_index is None:
                logger.warning(
                    "Table full: %r not placed after %d probes (capacity %d)",
                    key, probes, self._capacity,
                )
                result = InsertResult(InsertStatus.TABLE_FULL, probes, None, key)
            else:
                self._slots[free_index].fill(key, value)
                self._item_count += 1
                result = InsertResult(InsertStatus.PLACED, probes, free_index, key)

        if origin is Origin.LOAD:
            self.stats.record_load(
                probes,
                placed=result.status is InsertStatus.PLACED,
                failed=result.status is InsertStatus.TABLE_FULL,
            )
        else:
            self.stats.record_interactive(probes)
        return result

    def _find(self, key: str) -> Tuple[Optional[int], int]:
        """Walk the probe sequence; return (index of live match or None, probes)."""
        probes = 0
        for index in self.hash_fn.sequence(key):
            probes += 1
            slot = self._slots[index]
            if slot.state is SlotState.EMPTY:
                return None, probes
            if slot.matches(key):
                return index, probes
        return None, probes

    def search(self, key: str) -> SearchResult:
        """
        Look up a key. Always counted as an interactive operation.

        Returns:
            SearchResult with a copy of the entry (or None) and the probe count

        Raises:
            KeyTooLongError: If the key exceeds max_key_bytes
        """
        key = self.normalize_key(key)
        index, probes = self._find(key)
        self.stats.record_interactive(probes)
        if index is None:
            return SearchResult(None, probes)
        slot = self._slots[index]
        return SearchResult(Entry(slot.key, slot.value), probes, index)

    def delete(self, key: str) -> DeleteResult:
        """
        Delete a key by turning its slot into a tombstone.

        The lookup is a regular search and is counted as one interactive
        operation. The slot is never returned to the empty state.

        Raises:
            KeyTooLongError: If the key exceeds max_key_bytes
        """
        found = self.search(key)
        if not found.found:
            return DeleteResult(False, found.probes)
        slot = self._slots[found.index]
        slot.state = SlotState.TOMBSTONE
        slot.key = None
        slot.value = None
        self._item_count -= 1
        return DeleteResult(True, found.probes)

    def slot_states(self) -> np.ndarray:
        """Return slot states as a uint8 array of SlotState codes."""
        return np.fromiter(
            (int(slot.state) for slot in self._slots), dtype=np.uint8, count=self._capacity
        )

    def entries(self) -> List[Entry]:
        """Return copies of all live entries in slot order."""
        return [
            Entry(slot.key, slot.value)
            for slot in self._slots
            if slot.state is SlotState.OCCUPIED
        ]
