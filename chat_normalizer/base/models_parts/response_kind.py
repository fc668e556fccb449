"""Discriminant for parsed chat-completion responses.

Error payloads never become a response value (they raise), so only the two
successful variants are enumerated.
"""
from __future__ import annotations

from enum import Enum


class ResponseKind(str, Enum):
    """Which payload variant a :class:`ChatCompletionResponse` was parsed from."""

    COMPLETION = "completion"
    DEFERRED = "deferred"


__all__ = ["ResponseKind"]
