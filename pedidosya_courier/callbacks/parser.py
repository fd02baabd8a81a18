"""Helpers for integrators receiving courier API callbacks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pedidosya_courier.core.errors import CourierDecodeError
from pedidosya_courier.schemas.callback import CANCEL_REASONS
from pedidosya_courier.schemas.callback import CallbackRequest
from pedidosya_courier.schemas.callback import CallbackShippingStatus
from pedidosya_courier.schemas.callback import CancelCode


def parse_callback_request(payload: bytes | str | Mapping[str, Any]) -> CallbackRequest:
    """Validate an inbound callback body posted to a subscribed url."""
    try:
        if isinstance(payload, Mapping):
            return CallbackRequest.model_validate(dict(payload))
        return CallbackRequest.model_validate_json(payload)
    except ValidationError as exc:
        raise CourierDecodeError(f"Invalid callback payload: {exc}", content=_as_text(payload)) from exc


def _as_text(payload: bytes | str | Mapping[str, Any]) -> str | None:
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    if isinstance(payload, str):
        return payload
    return None


def cancel_reason_text(code: CancelCode | str) -> str:
    """Return the Spanish reason text the API sends for a cancel code."""
    try:
        return CANCEL_REASONS[CancelCode(code)]
    except ValueError as exc:
        raise ValueError(f"Unknown cancel code `{code}`") from exc


def is_cancelled(callback: CallbackRequest) -> bool:
    return callback.data is not None and callback.data.status is CallbackShippingStatus.CANCELLED
