"""Choice and usage sub-parsers (pydantic DTOs)."""

from .choice import (
    AnnotationDTO,
    ChoiceDTO,
    ChoiceMessageDTO,
    FunctionCallDTO,
    LogprobsDTO,
    TokenLogprobDTO,
    ToolCallDTO,
    TopLogprobDTO,
    UrlCitationDTO,
    choices_to_list,
)
from .usage import CompletionTokensDetailsDTO, PromptTokensDetailsDTO, UsageDTO

__all__ = [
    "AnnotationDTO",
    "ChoiceDTO",
    "ChoiceMessageDTO",
    "FunctionCallDTO",
    "LogprobsDTO",
    "TokenLogprobDTO",
    "ToolCallDTO",
    "TopLogprobDTO",
    "UrlCitationDTO",
    "choices_to_list",
    "CompletionTokensDetailsDTO",
    "PromptTokensDetailsDTO",
    "UsageDTO",
]
