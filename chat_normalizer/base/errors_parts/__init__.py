"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chat_normalizer.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .response_error import (
    ApiError,
    KeyNotFoundError,
    MalformedInputError,
    MissingFieldError,
    ResponseError,
)
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "ResponseError",
    "MalformedInputError",
    "ApiError",
    "MissingFieldError",
    "KeyNotFoundError",
    "classify_exception",
]
