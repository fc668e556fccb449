from __future__ import annotations

from chat_normalizer import MetaInformation, ResponseKind
from chat_normalizer.testing import FAKE_COMPLETION, fake_meta, fake_payload, fake_response


def test_fake_response_defaults():
    resp = fake_response()

    assert resp.kind is ResponseKind.COMPLETION
    assert resp.id == "chatcmpl-123"
    assert resp.choices[0].message.content == "\n\nHello there, how may I assist you today?"
    assert resp.usage.total_tokens == 21
    assert resp.meta == fake_meta()
    assert resp.to_dict() == FAKE_COMPLETION


def test_overrides_merge_recursively_without_touching_the_fixture():
    payload = fake_payload({"model": "gpt-4o", "usage": {"completion_tokens": 1}})

    assert payload["model"] == "gpt-4o"
    assert payload["usage"] == {"prompt_tokens": 9, "completion_tokens": 1, "total_tokens": 21}
    assert FAKE_COMPLETION["usage"]["completion_tokens"] == 12


def test_fake_response_with_custom_meta():
    meta = MetaInformation(request_id="custom")
    resp = fake_response({"choices": []}, meta=meta)

    assert resp.choices == ()
    assert resp.meta is meta
