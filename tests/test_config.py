# tests/test_config.py
import json

import pytest

from listing_autocompleter.utils.config_manager import DEFAULTS, Config


def test_missing_file_created_with_defaults(tmp_path):
    path = tmp_path / "cfg" / "config.json"
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"order": "frequency", "max_suggestions": 5}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("order") == "frequency"
    assert cfg.limit == 5
    assert cfg.get("parallel_ingest") is False


def test_invalid_json_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert cfg.limit is None


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("max_suggestions", "7")
    cfg.set("parallel_ingest", "yes")
    cfg.set("sources", "remax, zolo")
    saved = json.loads(path.read_text(encoding="utf8"))
    assert saved["max_suggestions"] == 7
    assert saved["parallel_ingest"] is True
    assert saved["sources"] == ["remax", "zolo"]
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")


def test_bad_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "order": "popular",
        "log_level": "LOUD",
        "max_suggestions": "lots",
        "sources": "remax",
        "data_dir": "exports",
    }), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("order") == "alpha"
    assert cfg.get("log_level") == "INFO"
    assert cfg.get("max_suggestions") == 0
    assert cfg.limit is None
    assert cfg.get("sources") == []
    # good values in the same file still apply
    assert cfg.get("data_dir") == "exports"
    text = (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")
    assert "order must be one of" in text
    assert "max_suggestions must be a whole number" in text


def test_negative_limit_and_lowercase_level(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": -3, "log_level": "debug"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 0
    assert cfg.get("log_level") == "DEBUG"


def test_set_rejects_bad_values(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    with pytest.raises(ValueError):
        cfg.set("order", "popular")
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "-1")
    with pytest.raises(ValueError):
        cfg.set("log_level", "LOUD")
    assert cfg.get("order") == "alpha"
    cfg.set("order", "frequency")
    assert json.loads(path.read_text(encoding="utf8"))["order"] == "frequency"
