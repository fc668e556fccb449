"""
Structured response error exception types.

Every failure raised while normalizing a chat-completion payload is a
`ResponseError` carrying a normalized `ErrorCode` and a human-readable message.
The concrete subclasses also derive from the matching builtin exception so
callers that only know about ``KeyError``/``ValueError`` keep working.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .error_code import ErrorCode


@dataclass(eq=False)
class ResponseError(Exception):
    """Represents a structured response error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


class MalformedInputError(ResponseError, ValueError):
    """The payload was not structured (e.g. a bare string from the transport).

    For string payloads the message is the string itself, verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.MALFORMED_INPUT, message=message)


class ApiError(ResponseError):
    """The server answered with an error payload; ``message`` is taken verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.API_ERROR, message=message)


class MissingFieldError(ResponseError, KeyError):
    """A required payload field is absent or has the wrong shape."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=message or f"missing or invalid field '{field}'",
        )
        self.field = field


class KeyNotFoundError(ResponseError, KeyError):
    """Indexed read of a key that is not part of the response wire shape."""

    def __init__(self, key: Any) -> None:
        super().__init__(
            code=ErrorCode.KEY_NOT_FOUND,
            message=f"unknown response key {key!r}",
        )
        self.key = key


__all__ = [
    "ResponseError",
    "MalformedInputError",
    "ApiError",
    "MissingFieldError",
    "KeyNotFoundError",
]
