"""Response serializer: :class:`ChatCompletionResponse` -> canonical mapping.

Only true absence is dropped. The projection is built as an ordered list of
``(wire_key, value)`` pairs and pairs whose value is ``None`` are filtered
out, so an empty ``choices`` list or a zero count stays in the output.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from ..dto import choices_to_list
from ..models import RESPONSE_FIELDS, ChatCompletionResponse

# wire keys whose values need their own serializer
_PROJECTORS: Dict[str, Callable[[Any], Any]] = {
    "choices": choices_to_list,
    "usage": lambda usage: usage.to_dict(),
}


def _pairs(value: ChatCompletionResponse) -> List[Tuple[str, Optional[Any]]]:
    pairs: List[Tuple[str, Optional[Any]]] = []
    for key in RESPONSE_FIELDS:
        raw = getattr(value, key)
        project = _PROJECTORS.get(key)
        pairs.append((key, project(raw) if project is not None and raw is not None else raw))
    return pairs


def to_mapping(value: ChatCompletionResponse) -> Dict[str, Any]:
    """Project ``value`` onto the canonical wire keys, omitting absent fields."""
    return {key: item for key, item in _pairs(value) if item is not None}


__all__ = ["to_mapping"]
