"""
ChatCompletionResponse value representing a normalized chat-completion payload.

Instances are created by :func:`chat_normalizer.base.parsing.parse_response`
and are terminal: the dataclass is frozen, sequences are tuples and the
choice/usage sub-models are frozen pydantic models.

Two read styles are supported. Attribute access (``resp.model``) and indexed
access by wire name (``resp["model"]``) resolve through the same field table,
:data:`RESPONSE_FIELDS`. Metadata is reachable only as ``resp.meta``; it is not
part of the wire shape.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from ..errors import KeyNotFoundError
from ..dto import ChoiceDTO, UsageDTO
from .response_fields import RESPONSE_FIELD_SET
from .response_kind import ResponseKind

if TYPE_CHECKING:
    from .meta_information import MetaInformation


@dataclass(frozen=True)
class ChatCompletionResponse:
    """A parsed completion or deferred acknowledgment.

    Attributes:
        id: Completion id; ``None`` for deferred responses or when not sent.
        object: Payload type label (``"deferred.completion"`` for deferred).
        created: Unix epoch seconds; parse time for deferred responses.
        model: Producing model; ``"unknown"`` for deferred responses.
        system_fingerprint: Backend configuration fingerprint, when sent.
        choices: Ranked generations in server order; empty when deferred.
        request_id: Deferred-completion tracking token, when sent.
        usage: Token accounting, when sent.
        kind: Which variant the payload was.
        meta: Transport metadata attached at parse time.
    """

    id: Optional[str]
    object: str
    created: int
    model: str
    system_fingerprint: Optional[str]
    choices: Tuple[ChoiceDTO, ...]
    request_id: Optional[str]
    usage: Optional[UsageDTO]
    kind: ResponseKind
    meta: "MetaInformation" = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.meta is None:
            raise TypeError("ChatCompletionResponse requires response metadata, got None")
        if not isinstance(self.choices, tuple):
            raise TypeError(f"choices must be a tuple, got {type(self.choices).__name__}")

    @classmethod
    def from_payload(cls, payload: Any, meta: Any) -> "ChatCompletionResponse":
        """Parse ``payload``; see :func:`chat_normalizer.base.parsing.parse_response`."""
        from ..parsing.parser import parse_response

        return parse_response(payload, meta)

    @property
    def is_deferred(self) -> bool:
        return self.kind is ResponseKind.DEFERRED

    def to_dict(self) -> Dict[str, Any]:
        """Return the canonical wire mapping with absent fields omitted."""
        from ..parsing.serializer import to_mapping

        return to_mapping(self)

    def __getitem__(self, key: str) -> Any:
        if not isinstance(key, str) or key not in RESPONSE_FIELD_SET:
            raise KeyNotFoundError(key)
        return getattr(self, key)

    def __contains__(self, key: object) -> bool:
        # mirrors presence in to_dict(): known key with a non-None value
        return isinstance(key, str) and key in RESPONSE_FIELD_SET and getattr(self, key) is not None


__all__ = ["ChatCompletionResponse"]
