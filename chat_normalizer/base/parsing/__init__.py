"""Parsing and serialization of chat-completion payloads."""

from .parser import parse_response
from .serializer import to_mapping

__all__ = ["parse_response", "to_mapping"]
