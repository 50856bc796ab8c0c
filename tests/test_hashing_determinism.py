"""Test hash functions and probe sequences."""

import random

import pytest

from probedict import DoubleHash, h1, h2, is_prime
from probedict.hashing import signed_bytes


def test_h1_known_values():
    """djb2: seed 5381, acc * 33 + c."""
    assert h1("") == 5381
    assert h1("a") == 177670
    assert h1("ab") == 177670 * 33 + 98


def test_h2_known_values():
    """Seed 0, acc * 131 + c, then 2 * acc + 1."""
    assert h2("") == 1
    assert h2("a") == 195
    assert h2("ab") == (97 * 131 + 98) * 2 + 1


def test_hashes_stay_in_64_bits():
    """Long keys wrap instead of growing without bound."""
    key = "supercalifragilisticexpialidocious" * 4
    assert 0 <= h1(key) < 2**64
    assert 0 <= h2(key) < 2**64
    assert h2(key) % 2 == 1, "h2 must be odd"


def test_non_ascii_bytes_are_signed():
    """UTF-8 continuation bytes hash as negative chars."""
    assert signed_bytes("ñ") == [0xC3 - 256, 0xB1 - 256]
    assert h1("ñ") == ((5381 * 33 + (0xC3 - 256)) * 33 + (0xB1 - 256))


def test_hash_determinism():
    """Same key, same hashes."""
    for key in ["cat", "gato", "árbol", ""]:
        assert h1(key) == h1(key)
        assert h2(key) == h2(key)


@pytest.mark.parametrize("capacity", [2, 3, 11, 13, 101, 20011])
def test_is_prime_accepts_primes(capacity):
    assert is_prime(capacity)


@pytest.mark.parametrize("capacity", [-7, 0, 1, 4, 9, 25, 20001, 20013])
def test_is_prime_rejects_composites(capacity):
    assert not is_prime(capacity)


def test_double_hash_rejects_non_prime_capacity():
    with pytest.raises(ValueError, match="prime"):
        DoubleHash(10)


def test_step_is_never_zero():
    """h2("a") = 195 = 13 * 15, so its step on 13 slots is forced to 1."""
    hash_fn = DoubleHash(13)
    assert hash_fn.offsets("a") == (177670 % 13, 1)


@pytest.mark.parametrize("capacity", [3, 11, 13, 101])
def test_probe_sequence_is_permutation(capacity):
    """With a prime capacity every key visits each slot exactly once."""
    hash_fn = DoubleHash(capacity)
    rng = random.Random(capacity)
    keys = ["a", "cat", "perro"] + [
        "".join(rng.choice("abcdefghijklmnopqrstuvwxyz") for _ in range(rng.randint(1, 12)))
        for _ in range(50)
    ]
    for key in keys:
        seq = list(hash_fn.sequence(key))
        assert len(seq) == capacity
        assert sorted(seq) == list(range(capacity)), f"{key!r} does not cover all slots"


def test_probe_sequence_follows_formula():
    hash_fn = DoubleHash(11)
    start, step = hash_fn.offsets("cat")
    assert start == h1("cat") % 11
    assert 0 < step < 11
    seq = list(hash_fn.sequence("cat"))
    assert seq == [(start + i * step) % 11 for i in range(11)]
