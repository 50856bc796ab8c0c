"""Pytest configuration and fixtures."""

import random

import pytest

from probedict import HashEngine


class LinearProbe:
    """Probe sequence that starts at slot 0 and steps by 1 for every key."""

    def __init__(self, capacity: int):
        self.capacity = capacity

    def sequence(self, key):
        return iter(range(self.capacity))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    random.seed(42)
    yield


@pytest.fixture
def small_table():
    """Empty 11-slot double-hashing table."""
    return HashEngine(capacity=11)


@pytest.fixture
def make_linear_table():
    """Factory for tables where every key shares the probe sequence 0, 1, 2, ..."""

    def _make(capacity: int = 7, **kwargs):
        return HashEngine(hash_fn=LinearProbe(capacity), **kwargs)

    return _make


@pytest.fixture
def linear_table(make_linear_table):
    """Empty 7-slot table where every key shares one probe sequence."""
    return make_linear_table()


@pytest.fixture
def write_dictionary(tmp_path):
    """Write dictionary text to a temporary file and return its path."""

    def _write(text: str, name: str = "dict.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
