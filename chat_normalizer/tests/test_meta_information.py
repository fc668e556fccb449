from __future__ import annotations

import dataclasses

import pytest

from chat_normalizer.base.models import MetaInformation, MetaInformationRateLimit
from chat_normalizer.testing import FAKE_HEADERS


def test_from_headers_reads_all_known_fields():
    meta = MetaInformation.from_headers(FAKE_HEADERS)

    assert meta.request_id == "3813fa4fa3f17bdf0d7654f0f49ebab4"
    assert meta.openai_model == "gpt-3.5-turbo-0613"
    assert meta.openai_organization == "org-1234"
    assert meta.openai_processing_ms == 410
    assert meta.openai_version == "2020-10-01"
    assert meta.request_limit == MetaInformationRateLimit(limit=3000, remaining=2999, reset="20ms")
    assert meta.token_limit == MetaInformationRateLimit(limit=250000, remaining=249989, reset="2ms")


def test_header_names_are_case_insensitive_and_lists_take_first():
    meta = MetaInformation.from_headers({"X-Request-Id": ["abc", "def"], "OpenAI-Processing-Ms": ["12"]})

    assert meta.request_id == "abc"
    assert meta.openai_processing_ms == 12


def test_missing_headers_leave_fields_empty():
    meta = MetaInformation.from_headers({"openai-processing-ms": "not-a-number"})

    assert meta.openai_processing_ms is None
    assert meta.request_limit is None
    assert meta.token_limit is None
    assert meta.to_dict() == {}


def test_to_dict_round_trips_headers():
    meta = MetaInformation.from_headers(FAKE_HEADERS)
    data = meta.to_dict()

    assert data["openai-processing-ms"] == 410
    assert data["x-ratelimit-limit-tokens"] == 250000
    assert MetaInformation.from_headers({k: str(v) for k, v in data.items()}) == meta


def test_meta_is_frozen():
    meta = MetaInformation(request_id="r")
    with pytest.raises(dataclasses.FrozenInstanceError):
        meta.request_id = "other"  # type: ignore[misc]
