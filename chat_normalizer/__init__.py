"""chat_normalizer package

Response normalization layer for chat-completion APIs.

Purpose:
    Turn the decoded JSON body of a chat-completion call (a completion, a
    deferred acknowledgment, or an error message) into one immutable
    :class:`ChatCompletionResponse`, and project it back to the canonical
    wire mapping. Transport and authentication live elsewhere; callers pass
    the decoded body plus the metadata their transport collected.

Public API (re-exported):
    - Version: ``__version__``
    - Parsing: :func:`parse_response`, :func:`to_mapping`
    - Models: :class:`ChatCompletionResponse`, :class:`ResponseKind`,
      :class:`MetaInformation`, ``RESPONSE_FIELDS``
    - Sub-models: :class:`ChoiceDTO`, :class:`UsageDTO`
    - Exceptions: :class:`ResponseError` and subclasses, :class:`ErrorCode`

Example::

    meta = MetaInformation.from_headers(http_response.headers)
    resp = parse_response(http_response.json(), meta)
    if resp.is_deferred:
        schedule_poll(resp.request_id)
    else:
        print(resp.choices[0].message.content)
"""

from .base.dto import ChoiceDTO, UsageDTO
from .base.errors import (
    ApiError,
    ErrorCode,
    KeyNotFoundError,
    MalformedInputError,
    MissingFieldError,
    ResponseError,
)
from .base.models import (
    RESPONSE_FIELDS,
    ChatCompletionResponse,
    MetaInformation,
    MetaInformationRateLimit,
    ResponseKind,
)
from .base.parsing import parse_response, to_mapping

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse_response",
    "to_mapping",
    "ChatCompletionResponse",
    "ResponseKind",
    "MetaInformation",
    "MetaInformationRateLimit",
    "RESPONSE_FIELDS",
    "ChoiceDTO",
    "UsageDTO",
    "ResponseError",
    "ErrorCode",
    "MalformedInputError",
    "ApiError",
    "MissingFieldError",
    "KeyNotFoundError",
]
