"""Shared fixtures for the chat_normalizer test suite."""

from __future__ import annotations

import copy
import io
import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from chat_normalizer.base.log_support import JsonFormatter
from chat_normalizer.base.logging import BASE_LOGGER_NAME, get_logger
from chat_normalizer.base.models import MetaInformation


COMPLETION_PAYLOAD: Dict[str, Any] = {
    "id": "chatcmpl-9Xz",
    "object": "chat.completion",
    "created": 1715000000,
    "model": "gpt-4o-mini",
    "system_fingerprint": "fp_abc123",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "First answer"},
            "logprobs": None,
            "finish_reason": "stop",
        },
        {
            "index": 1,
            "message": {"role": "assistant", "content": "Second answer"},
            "logprobs": None,
            "finish_reason": "length",
        },
    ],
    "usage": {"prompt_tokens": 12, "completion_tokens": 7, "total_tokens": 19},
}


@pytest.fixture()
def meta() -> MetaInformation:
    return MetaInformation.from_headers({"x-request-id": "req-meta-1", "openai-model": "gpt-4o-mini"})


@pytest.fixture()
def completion_payload() -> Dict[str, Any]:
    """A fresh two-choice completion payload (safe to mutate per test)."""
    return copy.deepcopy(COMPLETION_PAYLOAD)


class CapturedEvents:
    """In-memory JSON log sink attached to the shared base logger."""

    def __init__(self, stream: io.StringIO) -> None:
        self._stream = stream

    def events(self) -> List[Dict[str, Any]]:
        return [json.loads(line) for line in self._stream.getvalue().splitlines() if line]

    def named(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events() if e.get("event") == event]


@pytest.fixture()
def log_events() -> Iterator[CapturedEvents]:
    """Capture structured log events emitted through the base logger."""
    base_logger = get_logger(BASE_LOGGER_NAME)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    base_logger.addHandler(handler)
    try:
        yield CapturedEvents(stream)
    finally:
        base_logger.removeHandler(handler)
