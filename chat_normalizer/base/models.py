"""
Response models public surface.

This module re-exports the one-class-per-file implementations under
``chat_normalizer.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.response_kind import ResponseKind
from .models_parts.response_fields import RESPONSE_FIELDS, RESPONSE_FIELD_SET
from .models_parts.meta_information import MetaInformation, MetaInformationRateLimit
from .models_parts.chat_completion_response import ChatCompletionResponse

__all__ = [
    "ResponseKind",
    "RESPONSE_FIELDS",
    "RESPONSE_FIELD_SET",
    "MetaInformation",
    "MetaInformationRateLimit",
    "ChatCompletionResponse",
]
