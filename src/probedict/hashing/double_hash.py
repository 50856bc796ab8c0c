"""Double-hashing probe sequence."""

from typing import Iterator, Tuple

from .mix import h1, h2, is_prime


class DoubleHash:
    """
    Double-hashing probe sequence.

    The i-th probe for a key is ``(h1 + i * h2) % N``. With N prime and the
    step never congruent to 0 mod N, the first N probes visit every slot
    exactly once.
    """

    def __init__(self, capacity: int):
        """
        Initialize probe sequence generator.

        Args:
            capacity: Number of slots (N), must be prime
        """
        if not is_prime(capacity):
            raise ValueError(f"capacity must be a prime number, got {capacity}")
        self.capacity = capacity

    def offsets(self, key: str) -> Tuple[int, int]:
        """
        Compute the start slot and step for a key.

        Args:
            key: Normalized key

        Returns:
            (start, step) with 0 <= start < N and 0 < step < N
        """
        start = h1(key) % self.capacity
        step = h2(key) % self.capacity
        if step == 0:
            # A zero step would revisit the start slot forever
            step = 1
        return start, step

    def sequence(self, key: str) -> Iterator[int]:
        """
        Yield the probe sequence for a key.

        Args:
            key: Normalized key

        Returns:
            Iterator over N distinct slot indices
        """
        start, step = self.offsets(key)
        for i in range(self.capacity):
            yield (start + i * step) % self.capacity
