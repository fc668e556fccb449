"""
Response parser: raw decoded payload -> :class:`ChatCompletionResponse`.

Discrimination order
--------------------
The checks below run in a fixed order and the first match wins. A payload that
satisfies several conditions (for example ``request_id`` together with a valid
``choices`` list) therefore always resolves the same way.

1. Malformed input: a bare ``str`` (the transport hands back the undecoded
   body) raises :class:`MalformedInputError` with the string as message. Any
   other non-mapping raises the same error describing the type.
2. Deferred acknowledgment: ``request_id`` is a non-empty string and
   ``choices`` absent. Any other ``request_id`` falls through to step 3.
   Builds a deferred value with synthesized ``object``/``created``/``model``.
   Never fails.
3. Error shape: ``choices`` absent or not a list. Raises :class:`ApiError`
   with the server ``message`` when there is one, else
   :class:`MissingFieldError` for ``choices``.
4. Completion: every choice goes through ``ChoiceDTO.from_dict`` and
   ``usage`` through ``UsageDTO.from_dict``; their errors propagate unchanged.
   ``object``/``model`` must be strings and ``created`` an integer; ``id``,
   ``system_fingerprint`` and ``request_id`` must be strings when present.
   A wrong type raises :class:`MissingFieldError` naming the key.

A key whose value is ``null`` is treated as absent throughout.

Parsing is all-or-nothing: the value is constructed only after every field has
parsed, so no partial response escapes. Each failure is logged as a
``response.error`` event before it propagates.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Sequence

from ...config.defaults import DEFERRED_OBJECT, UNKNOWN_MODEL
from ..dto import ChoiceDTO, UsageDTO
from ..errors import ApiError, MalformedInputError, MissingFieldError, classify_exception
from ..logging import LogContext, get_logger, log_event
from ..models import ChatCompletionResponse, ResponseKind

logger = get_logger(__name__)


_TYPE_NAMES = {str: "a string", int: "an integer"}


def _check_type(key: str, value: Any, expected: type) -> Any:
    # bool is an int subclass but never a valid count or timestamp
    if not isinstance(value, expected) or isinstance(value, bool):
        raise MissingFieldError(key, f"field '{key}' must be {_TYPE_NAMES[expected]}, got {type(value).__name__}")
    return value


def _require(payload: Mapping[str, Any], key: str, expected: type) -> Any:
    value = payload.get(key)
    if value is None:
        raise MissingFieldError(key)
    return _check_type(key, value, expected)


def _optional(payload: Mapping[str, Any], key: str, expected: type) -> Any:
    value = payload.get(key)
    return None if value is None else _check_type(key, value, expected)


def _log_context(payload: Any) -> LogContext:
    if not isinstance(payload, Mapping):
        return LogContext(extra={"payload_type": type(payload).__name__})
    return LogContext(
        model=payload.get("model") if isinstance(payload.get("model"), str) else None,
        request_id=payload.get("request_id") if isinstance(payload.get("request_id"), str) else None,
        response_id=payload.get("id") if isinstance(payload.get("id"), str) else None,
    )


def _parse_deferred(payload: Mapping[str, Any], meta: Any) -> ChatCompletionResponse:
    # The server sends nothing but the tracking token; object/created/model are
    # filled so readers of a deferred value see the same non-optional fields.
    return ChatCompletionResponse(
        id=None,
        object=DEFERRED_OBJECT,
        created=int(time.time()),
        model=UNKNOWN_MODEL,
        system_fingerprint=None,
        choices=(),
        request_id=payload["request_id"],
        usage=None,
        kind=ResponseKind.DEFERRED,
        meta=meta,
    )


def _parse_completion(payload: Mapping[str, Any], choices: Sequence[Any], meta: Any) -> ChatCompletionResponse:
    parsed_choices = tuple(ChoiceDTO.from_dict(choice) for choice in choices)
    usage = payload.get("usage")
    return ChatCompletionResponse(
        id=_optional(payload, "id", str),
        object=_require(payload, "object", str),
        created=_require(payload, "created", int),
        model=_require(payload, "model", str),
        system_fingerprint=_optional(payload, "system_fingerprint", str),
        choices=parsed_choices,
        request_id=_optional(payload, "request_id", str),
        usage=UsageDTO.from_dict(usage) if usage is not None else None,
        kind=ResponseKind.COMPLETION,
        meta=meta,
    )


def _discriminate(payload: Any, meta: Any) -> ChatCompletionResponse:
    if isinstance(payload, str):
        raise MalformedInputError(payload)
    if not isinstance(payload, Mapping):
        raise MalformedInputError(f"expected a mapping payload, got {type(payload).__name__}")

    request_id = payload.get("request_id")
    if isinstance(request_id, str) and request_id and payload.get("choices") is None:
        return _parse_deferred(payload, meta)

    choices = payload.get("choices")
    if not isinstance(choices, (list, tuple)):
        message = payload.get("message")
        if message is not None:
            raise ApiError(str(message))
        raise MissingFieldError("choices")

    return _parse_completion(payload, choices, meta)


def parse_response(payload: Any, meta: Any) -> ChatCompletionResponse:
    """Parse a decoded chat-completion payload into a response value.

    Parameters
    ----------
    payload: Any
        Decoded JSON body. Normally a mapping; a bare string signals that the
        transport could not decode the body.
    meta: Any
        Metadata supplied by the transport (usually :class:`MetaInformation`).
        Attached verbatim; must not be ``None``.

    Returns
    -------
    ChatCompletionResponse
        A completion or deferred value.

    Raises
    ------
    MalformedInputError
        ``payload`` is not a mapping.
    ApiError
        The payload is a server error message.
    MissingFieldError
        ``choices`` or a required completion field is missing.
    pydantic.ValidationError
        A choice or the usage block failed to parse.
    TypeError
        ``meta`` is ``None``.
    """
    if meta is None:
        raise TypeError("parse_response() requires response metadata, got None")

    ctx = _log_context(payload)
    try:
        response = _discriminate(payload, meta)
    except Exception as exc:
        log_event(
            logger,
            "response.error",
            ctx,
            level=logging.WARNING,
            error_code=classify_exception(exc).value,
            error=str(exc),
        )
        raise

    if response.is_deferred:
        log_event(logger, "response.deferred", ctx, level=logging.INFO)
    else:
        log_event(
            logger,
            "response.parse",
            ctx,
            level=logging.DEBUG,
            kind=response.kind.value,
            choices=len(response.choices),
        )
    return response


__all__ = ["parse_response"]
