"""String hash functions for double hashing.

Both functions operate on Python ints and wrap every step to an unsigned
64-bit word, so results are platform-independent and stable across runs.
Keys are hashed over their UTF-8 bytes, each byte read as a signed char.
"""


def u64(x: int) -> int:
    """Force integer into unsigned 64-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 64-bit integer (value modulo 2^64)
    """
    return x & 0xFFFFFFFFFFFFFFFF


def signed_bytes(key: str) -> list[int]:
    """Return the UTF-8 bytes of ``key`` as signed char values.

    Bytes >= 0x80 map to negative values in [-128, -1].

    Args:
        key: Input string

    Returns:
        List of ints in [-128, 127]
    """
    return [b - 256 if b >= 0x80 else b for b in key.encode("utf-8")]


def h1(key: str) -> int:
    """Primary hash (djb2).

    Accumulator seeded with 5381; each byte step is ``acc * 33 + c``.

    Args:
        key: Input string

    Returns:
        Unsigned 64-bit hash value

    Example:
        >>> h1("")
        5381
        >>> h1("a")
        177670
    """
    acc = 5381
    for c in signed_bytes(key):
        acc = u64((acc << 5) + acc + c)
    return acc


def h2(key: str) -> int:
    """Secondary hash for the probe step.

    Accumulator seeded with 0; each byte step is ``acc * 131 + c``. The
    result is mapped to ``acc * 2 + 1`` so it is always odd.

    Args:
        key: Input string

    Returns:
        Unsigned 64-bit odd hash value

    Example:
        >>> h2("a")
        195
    """
    acc = 0
    for c in signed_bytes(key):
        acc = u64(acc * 131 + c)
    return u64(acc * 2 + 1)


def is_prime(n: int) -> bool:
    """Trial-division primality test (capacities are small)."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True
