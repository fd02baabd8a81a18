"""Unit tests for response Content-Type classification."""

from __future__ import annotations

import pytest

from pedidosya_courier.client.content_type import ContentKind
from pedidosya_courier.client.content_type import classify_content_type


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("application/json", ContentKind.JSON),
        ("application/json; charset=utf-8", ContentKind.JSON),
        ("Application/JSON", ContentKind.JSON),
        ("application/pdf", ContentKind.PDF),
        ("text/html; charset=utf-8", ContentKind.UNSUPPORTED),
        ("application/problem+json", ContentKind.UNSUPPORTED),
        (None, ContentKind.ABSENT),
        ("   ", ContentKind.ABSENT),
    ],
)
def test_classify_content_type_maps_header_to_single_kind(header: str | None, expected: ContentKind) -> None:
    assert classify_content_type(header).kind is expected


def test_unsupported_content_type_keeps_raw_header() -> None:
    classified = classify_content_type("text/plain")

    assert classified.raw == "text/plain"
    assert classified.describe() == "`text/plain` content type"


def test_absent_content_type_describes_itself_as_empty() -> None:
    assert classify_content_type(None).describe() == "empty content type"
