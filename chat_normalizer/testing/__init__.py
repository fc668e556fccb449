"""Test helpers for code that consumes parsed chat-completion responses."""

from .fakes import FAKE_COMPLETION, FAKE_HEADERS, fake_meta, fake_payload, fake_response

__all__ = [
    "FAKE_COMPLETION",
    "FAKE_HEADERS",
    "fake_meta",
    "fake_payload",
    "fake_response",
]
