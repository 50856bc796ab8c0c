"""Error conditions raised by the hash table."""


class ProbeDictError(Exception):
    """Base class for probedict errors."""


class LengthExceededError(ProbeDictError, ValueError):
    """A key or value is longer than its bound.

    Attributes:
        field: "key" or "value"
        length: Actual length in UTF-8 bytes
        limit: Largest accepted length in UTF-8 bytes
    """

    field = "value"

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"{self.field} too long: {length} bytes (max {limit} bytes)"
        )


class KeyTooLongError(LengthExceededError):
    field = "key"


class ValueTooLongError(LengthExceededError):
    field = "value"


class TableFullError(ProbeDictError):
    """No free slot or matching key along the full probe sequence."""

    def __init__(self, key: str, probes: int):
        self.key = key
        self.probes = probes
        super().__init__(f"table full: could not place {key!r} after {probes} probes")
