"""Models parts package public surface.

Re-exports individual models so callers can import from
`chat_normalizer.base.models_parts` if needed, while `chat_normalizer.base.models`
remains the primary stable import path.
"""

from .response_kind import ResponseKind
from .response_fields import RESPONSE_FIELDS, RESPONSE_FIELD_SET
from .meta_information import MetaInformation, MetaInformationRateLimit
from .chat_completion_response import ChatCompletionResponse

__all__ = [
    "ResponseKind",
    "RESPONSE_FIELDS",
    "RESPONSE_FIELD_SET",
    "MetaInformation",
    "MetaInformationRateLimit",
    "ChatCompletionResponse",
]
