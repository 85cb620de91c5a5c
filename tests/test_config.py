import json
import os

import pytest

from pwordgen.config import DEFAULTS, coerce_value, config_path, load_config, save_config


def test_defaults_when_missing(config_dir):
    assert not os.path.exists(config_path())
    assert load_config() == DEFAULTS


def test_config_path_uses_appdata(config_dir):
    assert config_path() == str(config_dir / "config.json")


def test_save_and_load(config_dir):
    cfg = DEFAULTS.copy()
    cfg["length"] = 24
    cfg["exclude_similar"] = True
    save_config(cfg)
    loaded = load_config()
    assert loaded["length"] == 24
    assert loaded["exclude_similar"] is True
    assert loaded["symbols"] is True


def test_partial_file_merges_defaults(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(json.dumps({"digits": False}), encoding="utf-8")
    cfg = load_config()
    assert cfg["digits"] is False
    assert cfg["length"] == DEFAULTS["length"]


def test_malformed_file_falls_back(config_dir, caplog):
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS
    assert "unreadable config" in caplog.text


def test_non_object_file_falls_back(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text("[1, 2]", encoding="utf-8")
    assert load_config() == DEFAULTS


def test_unknown_keys_dropped(config_dir, caplog):
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(json.dumps({"colour": "red", "length": 9}), encoding="utf-8")
    cfg = load_config()
    assert "colour" not in cfg
    assert cfg["length"] == 9
    assert "colour" in caplog.text


@pytest.mark.parametrize(
    "key, raw, expected",
    [
        ("length", "20", 20),
        ("copies", "3", 3),
        ("symbols", "false", False),
        ("symbols", "YES", True),
        ("exclude_similar", "1", True),
        ("require_each_selected_class", "off", False),
        ("custom", "xyz", "xyz"),
        ("exclude", "", ""),
    ],
)
def test_coerce_value(key, raw, expected):
    assert coerce_value(key, raw) == expected


@pytest.mark.parametrize(
    "key, raw",
    [("length", "abc"), ("length", "0"), ("digits", "maybe"), ("nope", "1")],
)
def test_coerce_value_rejects(key, raw):
    with pytest.raises(ValueError):
        coerce_value(key, raw)


def test_wrong_typed_values_dropped(config_dir, caplog):
    config_dir.mkdir(parents=True)
    data = {
        "custom": 5,
        "symbols": "false",
        "length": "20",
        "copies": 0,
        "digits": 1,
        "require_each_selected_class": True,
        "exclude": "xyz",
    }
    (config_dir / "config.json").write_text(json.dumps(data), encoding="utf-8")
    cfg = load_config()
    assert cfg["custom"] == DEFAULTS["custom"]
    assert cfg["symbols"] is True
    assert cfg["length"] == DEFAULTS["length"]
    assert cfg["copies"] == DEFAULTS["copies"]
    assert cfg["digits"] is True
    assert cfg["require_each_selected_class"] is True
    assert cfg["exclude"] == "xyz"
    assert "'custom'" in caplog.text
    assert "'symbols'" in caplog.text
