"""Hashing modules for probedict."""

from .base import ProbeHash
from .double_hash import DoubleHash
from .mix import h1, h2, is_prime, signed_bytes, u64

__all__ = [
    "ProbeHash",
    "DoubleHash",
    "h1",
    "h2",
    "is_prime",
    "signed_bytes",
    "u64",
]
