"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from probedict import HashEngine, TableConfig, TombstonePolicy, load_config

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_defaults():
    cfg = TableConfig()
    assert cfg.capacity == 20011
    assert cfg.tombstone_policy == "scan"
    assert cfg.max_key_bytes == 99
    assert cfg.max_value_bytes == 9999
    assert cfg.histogram_max == 100


@pytest.mark.parametrize(
    "kwargs",
    [
        {"capacity": 20},
        {"capacity": 1},
        {"tombstone_policy": "reuse"},
        {"max_key_bytes": 0},
        {"max_value_bytes": -1},
        {"histogram_max": 0},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        TableConfig(**kwargs)


def test_from_dict():
    cfg = TableConfig.from_dict({
        "table": {"capacity": 13, "tombstone_policy": "first_free", "unknown": 1},
        "limits": {"max_key_bytes": 20},
        "logging": {"level": "INFO"},
    })
    assert cfg == TableConfig(capacity=13, tombstone_policy="first_free", max_key_bytes=20)


def test_from_dict_empty_sections():
    assert TableConfig.from_dict({"table": None}) == TableConfig()


def test_load_config_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("table:\n  capacity: 101\nlimits:\n  max_value_bytes: 50\n")
    raw = load_config(path)
    assert raw == {"table": {"capacity": 101}, "limits": {"max_value_bytes": 50}}
    assert TableConfig.from_dict(raw).capacity == 101


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_requires_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_shipped_default_config():
    cfg = TableConfig.from_dict(load_config(REPO_ROOT / "configs" / "default.yaml"))
    assert cfg == TableConfig()


def test_engine_from_config():
    cfg = TableConfig(capacity=13, tombstone_policy="first_free", max_key_bytes=5, histogram_max=10)
    engine = HashEngine.from_config(cfg)
    assert engine.capacity == 13
    assert engine.tombstone_policy is TombstonePolicy.FIRST_FREE
    assert engine.max_key_bytes == 5
    assert len(engine.stats.histogram) == 11
