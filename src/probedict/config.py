"""Configuration loading utilities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .hashing.mix import is_prime

TOMBSTONE_POLICIES = ("scan", "first_free")


@dataclass(frozen=True)
class TableConfig:
    """Configuration for a hash table.

    Attributes:
        capacity: Number of slots (N), fixed for the table's lifetime, prime
        tombstone_policy: "scan" | "first_free" (see TombstonePolicy)
        max_key_bytes: Largest accepted key, in UTF-8 bytes
        max_value_bytes: Largest accepted (merged) value, in UTF-8 bytes
        histogram_max: Last probe-histogram bucket; longer runs are clamped
    """

    capacity: int = 20011
    tombstone_policy: str = "scan"
    max_key_bytes: int = 99
    max_value_bytes: int = 9999
    histogram_max: int = 100

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not is_prime(self.capacity):
            raise ValueError(f"capacity must be a prime number, got {self.capacity}")
        if self.tombstone_policy not in TOMBSTONE_POLICIES:
            raise ValueError(
                f"tombstone_policy must be one of {TOMBSTONE_POLICIES}, "
                f"got {self.tombstone_policy!r}"
            )
        if self.max_key_bytes <= 0:
            raise ValueError("max_key_bytes must be positive")
        if self.max_value_bytes <= 0:
            raise ValueError("max_value_bytes must be positive")
        if self.histogram_max <= 0:
            raise ValueError("histogram_max must be positive")

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "TableConfig":
        """Build a config from the ``table`` and ``limits`` sections of a mapping.

        Unknown keys are ignored; missing keys fall back to the defaults.
        """
        table = dict(config.get("table") or {})
        limits = dict(config.get("limits") or {})
        kwargs: Dict[str, Any] = {}
        for name in ("capacity", "tombstone_policy", "histogram_max"):
            if name in table:
                kwargs[name] = table[name]
        for name in ("max_key_bytes", "max_value_bytes"):
            if name in limits:
                kwargs[name] = limits[name]
        return cls(**kwargs)


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValueError: If the top level is not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")

    return config
