"""
Response metadata model.

Encapsulates the out-of-band information the transport reads from HTTP
response headers (request id, serving model, organization, API version,
processing time and rate-limit state). The parser attaches it to every
response verbatim and never interprets it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Union

HeaderValue = Union[str, Sequence[str]]


def _header(headers: Mapping[str, HeaderValue], name: str) -> Optional[str]:
    """Return the first value of ``name`` (case-insensitive) or ``None``."""
    for key, value in headers.items():
        if key.lower() != name:
            continue
        if isinstance(value, str):
            return value
        return value[0] if value else None
    return None


def _int_or_none(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class MetaInformationRateLimit:
    """Rate-limit window state for either requests or tokens.

    Attributes:
        limit: Maximum allowed in the window.
        remaining: Still available in the current window.
        reset: Time until the window resets, as sent by the server (e.g. ``"6m0s"``).
    """

    limit: Optional[int]
    remaining: Optional[int]
    reset: Optional[str]

    @classmethod
    def from_headers(cls, headers: Mapping[str, HeaderValue], subject: str) -> Optional["MetaInformationRateLimit"]:
        limit = _int_or_none(_header(headers, f"x-ratelimit-limit-{subject}"))
        remaining = _int_or_none(_header(headers, f"x-ratelimit-remaining-{subject}"))
        reset = _header(headers, f"x-ratelimit-reset-{subject}")
        if limit is None and remaining is None and reset is None:
            return None
        return cls(limit=limit, remaining=remaining, reset=reset)

    def to_headers(self, subject: str) -> Dict[str, Any]:
        pairs = (
            (f"x-ratelimit-limit-{subject}", self.limit),
            (f"x-ratelimit-remaining-{subject}", self.remaining),
            (f"x-ratelimit-reset-{subject}", self.reset),
        )
        return {k: v for k, v in pairs if v is not None}


@dataclass(frozen=True)
class MetaInformation:
    """Metadata about the HTTP exchange that produced a response.

    Attributes:
        request_id: ``x-request-id`` assigned by the server.
        openai_model: Model that served the request, as reported by headers.
        openai_organization: Organization the request was billed to.
        openai_version: API version string.
        openai_processing_ms: Server-side processing time in milliseconds.
        request_limit: Requests rate-limit window, when reported.
        token_limit: Tokens rate-limit window, when reported.

    Methods:
        from_headers: Build from a header mapping (values may be lists).
        to_dict: Return the header-shaped mapping with absent values omitted.
    """

    request_id: Optional[str] = None
    openai_model: Optional[str] = None
    openai_organization: Optional[str] = None
    openai_version: Optional[str] = None
    openai_processing_ms: Optional[int] = None
    request_limit: Optional[MetaInformationRateLimit] = None
    token_limit: Optional[MetaInformationRateLimit] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, HeaderValue]) -> "MetaInformation":
        return cls(
            request_id=_header(headers, "x-request-id"),
            openai_model=_header(headers, "openai-model"),
            openai_organization=_header(headers, "openai-organization"),
            openai_version=_header(headers, "openai-version"),
            openai_processing_ms=_int_or_none(_header(headers, "openai-processing-ms")),
            request_limit=MetaInformationRateLimit.from_headers(headers, "requests"),
            token_limit=MetaInformationRateLimit.from_headers(headers, "tokens"),
        )

    def to_dict(self) -> Dict[str, Any]:
        pairs = (
            ("openai-model", self.openai_model),
            ("openai-organization", self.openai_organization),
            ("openai-processing-ms", self.openai_processing_ms),
            ("openai-version", self.openai_version),
            ("x-request-id", self.request_id),
        )
        data: Dict[str, Any] = {k: v for k, v in pairs if v is not None}
        if self.request_limit is not None:
            data |= self.request_limit.to_headers("requests")
        if self.token_limit is not None:
            data |= self.token_limit.to_headers("tokens")
        return data


__all__ = ["MetaInformation", "MetaInformationRateLimit"]
