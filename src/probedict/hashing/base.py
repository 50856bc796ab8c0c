"""Base probe-sequence interface."""

from typing import Iterator, Protocol


class ProbeHash(Protocol):
    """
    Protocol for probe-sequence generators used by the hash engine.

    A probe hash maps a key to an ordered sequence of slot indices. It must be
    deterministic and yield at most ``capacity`` indices per key.
    """

    capacity: int

    def sequence(self, key: str) -> Iterator[int]:
        """
        Yield the slot indices to visit for ``key``, in probe order.

        Args:
            key: Normalized (lowercased) key

        Returns:
            Iterator over slot indices in [0, capacity)
        """
        ...
