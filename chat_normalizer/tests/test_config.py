from __future__ import annotations

import json
import logging

import pytest

from chat_normalizer.base.logging import BASE_LOGGER_NAME, configure_logger
from chat_normalizer.config import DEFAULTS, apply_logging_config, get_logging_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "CHAT_NORMALIZER_CONFIG_FILE",
        "CHAT_NORMALIZER_LOG_LEVEL",
        "CHAT_NORMALIZER_LOG_JSON",
        "CHAT_NORMALIZER_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_nothing_is_set():
    assert get_logging_config() == DEFAULTS == {"level": "INFO", "json": True, "file": None}


def test_yaml_file_section_is_used(tmp_path, monkeypatch):
    cfg_file = tmp_path / "normalizer.yaml"
    cfg_file.write_text("logging:\n  level: DEBUG\n  json: false\n  unrelated: 1\n", encoding="utf-8")
    monkeypatch.setenv("CHAT_NORMALIZER_CONFIG_FILE", str(cfg_file))

    assert get_logging_config() == {"level": "DEBUG", "json": False, "file": None}


def test_json_file_is_parsed(tmp_path, monkeypatch):
    cfg_file = tmp_path / "normalizer.json"
    cfg_file.write_text(json.dumps({"logging": {"level": "ERROR"}}), encoding="utf-8")
    monkeypatch.setenv("CHAT_NORMALIZER_CONFIG_FILE", str(cfg_file))

    assert get_logging_config()["level"] == "ERROR"


def test_missing_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("CHAT_NORMALIZER_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    assert get_logging_config() == DEFAULTS


def test_env_beats_file_and_overrides_beat_env(tmp_path, monkeypatch):
    cfg_file = tmp_path / "normalizer.yaml"
    cfg_file.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("CHAT_NORMALIZER_CONFIG_FILE", str(cfg_file))
    monkeypatch.setenv("CHAT_NORMALIZER_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("CHAT_NORMALIZER_LOG_JSON", "no")

    cfg = get_logging_config()
    assert cfg["level"] == "WARNING"
    assert cfg["json"] is False

    cfg = get_logging_config({"level": "CRITICAL", "file": None})
    assert cfg["level"] == "CRITICAL"


def test_apply_logging_config_attaches_file_handler(tmp_path):
    log_file = tmp_path / "out" / "normalizer.log"
    try:
        logger = apply_logging_config({"level": "DEBUG", "file": str(log_file)})
        assert logger.name == BASE_LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert any(getattr(h, "baseFilename", None) == str(log_file) for h in logger.handlers)
    finally:
        configure_logger(level=logging.INFO, file_path=None)
