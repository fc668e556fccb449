"""
Normalized response error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the parser, the response value
accessors and error classification. Values are lowercase snake_case and are
considered a stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    MALFORMED_INPUT = "malformed_input"
    API_ERROR = "api_error"
    MISSING_FIELD = "missing_field"
    KEY_NOT_FOUND = "key_not_found"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
