from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from chat_normalizer.base.errors import (
    ApiError,
    ErrorCode,
    KeyNotFoundError,
    MalformedInputError,
    MissingFieldError,
    ResponseError,
    classify_exception,
)


class _Strict(BaseModel):
    n: int


def _validation_error() -> ValidationError:
    with pytest.raises(ValidationError) as excinfo:
        _Strict.model_validate({"n": "nope"})
    return excinfo.value


def test_codes_and_messages():
    cases = [
        (MalformedInputError("bad body"), ErrorCode.MALFORMED_INPUT, "bad body"),
        (ApiError("rate limited"), ErrorCode.API_ERROR, "rate limited"),
        (MissingFieldError("choices"), ErrorCode.MISSING_FIELD, "missing or invalid field 'choices'"),
        (KeyNotFoundError("nope"), ErrorCode.KEY_NOT_FOUND, "unknown response key 'nope'"),
    ]
    for exc, code, message in cases:
        assert isinstance(exc, ResponseError)
        assert exc.code is code
        assert exc.message == message
        assert str(exc) == message


def test_builtin_compatibility():
    assert isinstance(MalformedInputError("x"), ValueError)
    assert isinstance(MissingFieldError("id"), KeyError)
    assert isinstance(KeyNotFoundError("id"), KeyError)
    assert not isinstance(ApiError("x"), KeyError)


def test_missing_field_custom_message():
    exc = MissingFieldError("model", "model must be set on completions")
    assert exc.field == "model"
    assert str(exc) == "model must be set on completions"


def test_classify_passthrough_and_fallbacks():
    assert classify_exception(ApiError("x")) is ErrorCode.API_ERROR
    assert classify_exception(KeyNotFoundError("k")) is ErrorCode.KEY_NOT_FOUND
    assert classify_exception(_validation_error()) is ErrorCode.VALIDATION
    assert classify_exception(TypeError("x")) is ErrorCode.VALIDATION
    assert classify_exception(KeyError("object")) is ErrorCode.MISSING_FIELD
    assert classify_exception(RuntimeError("boom")) is ErrorCode.UNKNOWN


def test_error_code_values_are_stable():
    assert {c.value for c in ErrorCode} == {
        "malformed_input",
        "api_error",
        "missing_field",
        "key_not_found",
        "validation",
        "unknown",
    }
