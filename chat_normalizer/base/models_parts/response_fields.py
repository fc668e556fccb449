"""Canonical wire-field table for chat-completion responses.

Both indexed access on :class:`ChatCompletionResponse` and the serializer are
driven by this tuple. Attribute names equal the wire names, and the order is
the order of keys in the serialized mapping.
"""
from __future__ import annotations

from typing import FrozenSet, Tuple

RESPONSE_FIELDS: Tuple[str, ...] = (
    "id",
    "object",
    "created",
    "model",
    "system_fingerprint",
    "choices",
    "request_id",
    "usage",
)

RESPONSE_FIELD_SET: FrozenSet[str] = frozenset(RESPONSE_FIELDS)

__all__ = ["RESPONSE_FIELDS", "RESPONSE_FIELD_SET"]
