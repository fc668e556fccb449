"""Pydantic DTOs for token usage accounting.

Counts are stored as reported; no arithmetic between them is checked.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict


class PromptTokensDetailsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    cached_tokens: Optional[int] = None
    audio_tokens: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in (("cached_tokens", self.cached_tokens), ("audio_tokens", self.audio_tokens)) if v is not None}


class CompletionTokensDetailsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    audio_tokens: Optional[int] = None
    reasoning_tokens: Optional[int] = None
    accepted_prediction_tokens: Optional[int] = None
    rejected_prediction_tokens: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        pairs = (
            ("audio_tokens", self.audio_tokens),
            ("reasoning_tokens", self.reasoning_tokens),
            ("accepted_prediction_tokens", self.accepted_prediction_tokens),
            ("rejected_prediction_tokens", self.rejected_prediction_tokens),
        )
        return {k: v for k, v in pairs if v is not None}


class UsageDTO(BaseModel):
    """Token usage for one request/response pair.

    Attributes:
        prompt_tokens: Tokens consumed by the prompt.
        completion_tokens: Tokens generated; ``None`` when the server omits it.
        total_tokens: Reported total.
        prompt_tokens_details: Optional breakdown of prompt tokens.
        completion_tokens_details: Optional breakdown of completion tokens.
    """

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int
    completion_tokens: Optional[int] = None
    total_tokens: int
    prompt_tokens_details: Optional[PromptTokensDetailsDTO] = None
    completion_tokens_details: Optional[CompletionTokensDetailsDTO] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UsageDTO":
        """Parse a ``usage`` block; raises ``pydantic.ValidationError``."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }
        if self.prompt_tokens_details is not None:
            data["prompt_tokens_details"] = self.prompt_tokens_details.to_dict()
        if self.completion_tokens_details is not None:
            data["completion_tokens_details"] = self.completion_tokens_details.to_dict()
        return data


__all__ = [
    "PromptTokensDetailsDTO",
    "CompletionTokensDetailsDTO",
    "UsageDTO",
]
