"""chat_normalizer.config.defaults
===============================

Central place for small, stable constants used across the package.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Deferred acknowledgments ----
# The server sends only ``request_id`` for deferred completions. The parser
# fills the fields a completion would carry with these markers so consumers
# can keep reading ``object`` and ``model`` without None checks.
DEFERRED_OBJECT = "deferred.completion"
UNKNOWN_MODEL = "unknown"

# ---- Logging ----
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_JSON = True

# ---- Environment variable names ----
CONFIG_FILE_ENV = "CHAT_NORMALIZER_CONFIG_FILE"
LOG_LEVEL_ENV = "CHAT_NORMALIZER_LOG_LEVEL"
LOG_JSON_ENV = "CHAT_NORMALIZER_LOG_JSON"
LOG_FILE_ENV = "CHAT_NORMALIZER_LOG_FILE"

__all__ = [
    "DEFERRED_OBJECT",
    "UNKNOWN_MODEL",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
    "CONFIG_FILE_ENV",
    "LOG_LEVEL_ENV",
    "LOG_JSON_ENV",
    "LOG_FILE_ENV",
]
