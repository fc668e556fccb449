"""
Pydantic DTOs for the ``choices`` entries of a chat completion.

Purpose
-------
Parse and re-serialize one ranked candidate generation: its message (role,
nullable content, url-citation annotations, legacy function call, tool calls),
optional token log-probabilities and finish reason.

External dependencies: Pydantic only. No I/O.

Failure semantics: ``from_dict`` raises ``pydantic.ValidationError`` when the
mapping does not match the expected shape. The response parser lets it
propagate unchanged.

Serialization mirrors the wire shape: ``index``, ``message``, ``logprobs`` and
``finish_reason`` are always emitted (the last two possibly ``None``); message
extras are emitted only when present.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class _FrozenDTO(BaseModel):
    model_config = ConfigDict(frozen=True)


class FunctionCallDTO(_FrozenDTO):
    """Function name plus raw JSON ``arguments`` string as sent by the server."""

    name: str
    arguments: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "arguments": self.arguments}


class ToolCallDTO(_FrozenDTO):
    """A single tool call requested by the assistant."""

    id: str
    type: str
    function: FunctionCallDTO

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type, "function": self.function.to_dict()}


class UrlCitationDTO(_FrozenDTO):
    start_index: int
    end_index: int
    title: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_index": self.start_index,
            "end_index": self.end_index,
            "title": self.title,
            "url": self.url,
        }


class AnnotationDTO(_FrozenDTO):
    """Message annotation; only ``url_citation`` annotations are defined."""

    type: str
    url_citation: UrlCitationDTO

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "url_citation": self.url_citation.to_dict()}


class ChoiceMessageDTO(_FrozenDTO):
    """Assistant message within a choice.

    Attributes:
        role: Author role, usually ``"assistant"``.
        content: Generated text; ``None`` for pure tool/function calls.
        annotations: Url citations attached to ``content``.
        function_call: Legacy single function call descriptor.
        tool_calls: Tool call descriptors in the order the model emitted them.
    """

    role: str
    content: Optional[str] = None
    annotations: Optional[Tuple[AnnotationDTO, ...]] = None
    function_call: Optional[FunctionCallDTO] = None
    tool_calls: Optional[Tuple[ToolCallDTO, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"role": self.role, "content": self.content}
        if self.annotations:
            data["annotations"] = [a.to_dict() for a in self.annotations]
        if self.function_call is not None:
            data["function_call"] = self.function_call.to_dict()
        if self.tool_calls:
            data["tool_calls"] = [t.to_dict() for t in self.tool_calls]
        return data


class TopLogprobDTO(_FrozenDTO):
    token: str
    logprob: float
    bytes: Optional[Tuple[int, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "logprob": self.logprob,
            "bytes": list(self.bytes) if self.bytes is not None else None,
        }


class TokenLogprobDTO(_FrozenDTO):
    """Log-probability of one generated token, plus the runner-up candidates."""

    token: str
    logprob: float
    bytes: Optional[Tuple[int, ...]] = None
    top_logprobs: Optional[Tuple[TopLogprobDTO, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "token": self.token,
            "logprob": self.logprob,
            "bytes": list(self.bytes) if self.bytes is not None else None,
        }
        if self.top_logprobs is not None:
            data["top_logprobs"] = [t.to_dict() for t in self.top_logprobs]
        return data


class LogprobsDTO(_FrozenDTO):
    content: Optional[Tuple[TokenLogprobDTO, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [c.to_dict() for c in self.content] if self.content is not None else None,
        }


class ChoiceDTO(_FrozenDTO):
    """One ranked candidate generation (``index`` 0 is the primary one)."""

    index: int
    message: ChoiceMessageDTO
    logprobs: Optional[LogprobsDTO] = None
    finish_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChoiceDTO":
        """Parse one ``choices`` entry; raises ``pydantic.ValidationError``."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "message": self.message.to_dict(),
            "logprobs": self.logprobs.to_dict() if self.logprobs is not None else None,
            "finish_reason": self.finish_reason,
        }


def choices_to_list(choices: Tuple[ChoiceDTO, ...]) -> List[Dict[str, Any]]:
    """Serialize choices preserving their order."""
    return [c.to_dict() for c in choices]


__all__ = [
    "FunctionCallDTO",
    "ToolCallDTO",
    "UrlCitationDTO",
    "AnnotationDTO",
    "ChoiceMessageDTO",
    "TopLogprobDTO",
    "TokenLogprobDTO",
    "LogprobsDTO",
    "ChoiceDTO",
    "choices_to_list",
]
