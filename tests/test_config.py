from __future__ import annotations

import logging
from pathlib import Path

import pytest

from conftest import write_json

from coinfmt.config import DEFAULT_LOG_FORMAT, Config


def test_config_defaults():
    cfg = Config()
    assert cfg.log_level == "WARNING"
    assert cfg.log_format == DEFAULT_LOG_FORMAT


def test_config_normalizes_level_case_and_rejects_unknown():
    assert Config(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValueError, match="Invalid log_level"):
        Config(log_level="chatty")
    with pytest.raises(ValueError, match="Invalid log_format"):
        Config(log_format="  ")


def test_config_from_file_missing_keys_keep_defaults(tmp_path: Path):
    p = tmp_path / "cfg.json"
    write_json(p, {"logLevel": "info"})

    cfg = Config.from_file(p)

    assert cfg.log_level == "INFO"
    assert cfg.log_format == DEFAULT_LOG_FORMAT


def test_config_from_file_errors(tmp_path: Path):
    with pytest.raises(ValueError, match="Failed to load config"):
        Config.from_file(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to load config"):
        Config.from_file(bad)

    not_obj = tmp_path / "list.json"
    write_json(not_obj, [1])
    with pytest.raises(ValueError, match="expected JSON object"):
        Config.from_file(not_obj)


def test_config_update_and_to_dict():
    cfg = Config().update(log_level="ERROR")
    assert cfg.to_dict() == {"logLevel": "ERROR", "logFormat": DEFAULT_LOG_FORMAT}


def test_configure_logging_sets_root_level():
    Config(log_level="DEBUG").configure_logging()
    assert logging.getLogger().level == logging.DEBUG
    Config().configure_logging()
    assert logging.getLogger().level == logging.WARNING
