"""Response media type classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ContentKind(str, Enum):
    JSON = "json"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"
    ABSENT = "absent"


@dataclass(frozen=True)
class ContentType:
    """Classified ``Content-Type`` header with the raw value it was derived from."""

    kind: ContentKind
    raw: str | None = None

    def describe(self) -> str:
        if self.kind is ContentKind.ABSENT:
            return "empty content type"
        return f"`{self.raw}` content type"


def classify_content_type(header: str | None) -> ContentType:
    """Map a ``Content-Type`` header value to exactly one content kind."""
    if header is None or not header.strip():
        return ContentType(ContentKind.ABSENT, header)

    normalized = header.strip().lower()
    if normalized.startswith("application/json"):
        return ContentType(ContentKind.JSON, header)
    if normalized.startswith("application/pdf"):
        return ContentType(ContentKind.PDF, header)
    return ContentType(ContentKind.UNSUPPORTED, header)
