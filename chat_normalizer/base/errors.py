"""Unified response error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chat_normalizer.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.response_error import (
    ApiError,
    KeyNotFoundError,
    MalformedInputError,
    MissingFieldError,
    ResponseError,
)
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "ResponseError",
    "MalformedInputError",
    "ApiError",
    "MissingFieldError",
    "KeyNotFoundError",
    "classify_exception",
]
