"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Used by the parser to tag ``response.error`` log events, including failures
propagated unchanged from the choice/usage sub-parsers.
"""
from __future__ import annotations

from pydantic import ValidationError

from .error_code import ErrorCode
from .response_error import ResponseError


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ResponseError passthrough.
        2. Sub-parser validation failures (pydantic, type and value errors).
        3. Plain ``KeyError`` from raw field access.
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ResponseError):
        return exc.code
    if isinstance(exc, (ValidationError, TypeError, ValueError)):
        return ErrorCode.VALIDATION
    if isinstance(exc, KeyError):
        return ErrorCode.MISSING_FIELD
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
