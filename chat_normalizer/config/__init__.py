"""Configuration layer for the normalizer.

Only logging is configurable; the deferred-response markers in
:mod:`chat_normalizer.config.defaults` are fixed constants.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``CHAT_NORMALIZER_CONFIG_FILE``; its ``logging`` section is used
    3. Environment variables (``CHAT_NORMALIZER_LOG_LEVEL``,
       ``CHAT_NORMALIZER_LOG_JSON``, ``CHAT_NORMALIZER_LOG_FILE``)
    4. In-code overrides passed to the helper

External config file example::

    logging:
      level: DEBUG
      json: false
      file: ~/.cache/chat_normalizer/normalizer.log

Public API
----------
* get_logging_config(overrides: dict | None = None) -> dict
* apply_logging_config(overrides: dict | None = None) -> logging.Logger
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    CONFIG_FILE_ENV,
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_ENV,
    LOG_JSON_ENV,
    LOG_LEVEL_ENV,
)

DEFAULTS: Dict[str, Any] = {
    "level": DEFAULT_LOG_LEVEL,
    "json": DEFAULT_LOG_JSON,
    "file": None,
}

_TRUTHY = {"1", "true", "yes", "on"}


def _load_external_config() -> Dict[str, Any]:
    """Read the file named by ``CHAT_NORMALIZER_CONFIG_FILE``.

    JSON is tried first, then YAML. A missing file yields an empty mapping;
    a file that parses to something other than a mapping is ignored.
    """
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if (level := os.getenv(LOG_LEVEL_ENV)) is not None:
        out["level"] = level
    if (json_mode := os.getenv(LOG_JSON_ENV)) is not None:
        out["json"] = json_mode.strip().lower() in _TRUTHY
    if (file_path := os.getenv(LOG_FILE_ENV)) is not None:
        out["file"] = file_path or None
    return out


def get_logging_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged logging configuration.

    Merge order (later wins): defaults -> config file -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)

    file_cfg = _load_external_config().get("logging")
    if isinstance(file_cfg, dict):
        cfg |= {k: v for k, v in file_cfg.items() if k in DEFAULTS}

    cfg |= _env_overrides()

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def apply_logging_config(overrides: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Resolve the logging configuration and apply it to the shared logger."""
    from ..base.logging import configure_logger

    cfg = get_logging_config(overrides)
    return configure_logger(
        level=cfg["level"],
        file_path=cfg["file"],
        json_mode=bool(cfg["json"]),
    )


__all__ = [
    "DEFAULTS",
    "get_logging_config",
    "apply_logging_config",
]
