"""Operation descriptors and the shared response interpreter.

Both the cooperative and the blocking client fetch a response with their own HTTP
library and hand status, ``Content-Type`` header and body bytes to
:func:`interpret_response`, which holds the only copy of the decision table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Generic
from typing import TypeVar
from urllib.parse import quote
import json

from pydantic import BaseModel
from pydantic import ValidationError

from pedidosya_courier.client.content_type import ContentKind
from pedidosya_courier.client.content_type import classify_content_type
from pedidosya_courier.client.variants import ConfirmShippingError
from pedidosya_courier.client.variants import ErrorVariant
from pedidosya_courier.client.variants import EstimateShippingError
from pedidosya_courier.client.variants import WebhooksConfigurationError
from pedidosya_courier.core.errors import CourierDecodeError
from pedidosya_courier.core.errors import CourierResponseError
from pedidosya_courier.schemas.base import CourierModel
from pedidosya_courier.schemas.shipping import ConfirmShippingResponse
from pedidosya_courier.schemas.shipping import EstimationShippingResponse
from pedidosya_courier.schemas.webhook import WebhookConfiguration

ResponseT = TypeVar("ResponseT", bound=BaseModel)
VariantT = TypeVar("VariantT", bound=ErrorVariant)


@dataclass(frozen=True)
class Operation(Generic[ResponseT, VariantT]):
    """Static description of one courier API endpoint."""

    name: str
    method: str
    path: str
    response_model: type[ResponseT]
    error_model: type[VariantT]

    def build_path(self, **params: Any) -> str:
        """Fill the path template, percent-encoding every parameter."""
        if not params:
            return self.path
        encoded = {key: quote(str(value), safe="") for key, value in params.items()}
        return self.path.format(**encoded)


ESTIMATE_SHIPPING: Operation[EstimationShippingResponse, EstimateShippingError] = Operation(
    name="estimate_shipping",
    method="POST",
    path="/v3/shippings/estimates",
    response_model=EstimationShippingResponse,
    error_model=EstimateShippingError,
)
CONFIRM_SHIPPING: Operation[ConfirmShippingResponse, ConfirmShippingError] = Operation(
    name="confirm_shipping",
    method="POST",
    path="/v3/shippings/estimates/{estimate_id}/confirm",
    response_model=ConfirmShippingResponse,
    error_model=ConfirmShippingError,
)
GET_WEBHOOKS_CONFIGURATION: Operation[WebhookConfiguration, WebhooksConfigurationError] = Operation(
    name="get_webhooks_configuration",
    method="GET",
    path="/v3/webhooks-configuration",
    response_model=WebhookConfiguration,
    error_model=WebhooksConfigurationError,
)
UPDATE_WEBHOOKS_CONFIGURATION: Operation[WebhookConfiguration, WebhooksConfigurationError] = Operation(
    name="update_webhooks_configuration",
    method="PUT",
    path="/v3/webhooks-configuration",
    response_model=WebhookConfiguration,
    error_model=WebhooksConfigurationError,
)

OPERATIONS: tuple[Operation[Any, Any], ...] = (
    ESTIMATE_SHIPPING,
    CONFIRM_SHIPPING,
    GET_WEBHOOKS_CONFIGURATION,
    UPDATE_WEBHOOKS_CONFIGURATION,
)


def serialize_body(body: CourierModel | None) -> dict[str, Any] | None:
    """Return the JSON-ready request body, or ``None`` for bodiless calls."""
    if body is None:
        return None
    return body.to_wire()


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def interpret_response(
    operation: Operation[ResponseT, VariantT],
    *,
    status_code: int,
    content_type: str | None,
    content: bytes,
) -> ResponseT:
    """Turn one fetched response into a success model or a single typed error.

    Raises ``CourierDecodeError`` when the body cannot be decoded into the expected
    shape and ``CourierResponseError`` for non-success statuses with a JSON body.
    """
    classified = classify_content_type(content_type)
    text = content.decode("utf-8", errors="replace")

    if is_success_status(status_code):
        if classified.kind is ContentKind.JSON:
            try:
                return operation.response_model.model_validate_json(content)
            except ValidationError as exc:
                raise CourierDecodeError(
                    f"Response body for `{operation.name}` does not match "
                    f"`{operation.response_model.__name__}`: {exc}",
                    status_code=status_code,
                    content_type=content_type,
                    content=text,
                ) from exc
        if classified.kind is ContentKind.PDF:
            message = (
                "Received `application/pdf` content type response that cannot be converted "
                f"to `{operation.response_model.__name__}`"
            )
        else:
            message = (
                f"Received {classified.describe()} response that cannot be converted "
                f"to `{operation.response_model.__name__}`"
            )
        raise CourierDecodeError(
            message,
            status_code=status_code,
            content_type=content_type,
            content=text,
        )

    if classified.kind is not ContentKind.JSON:
        raise CourierDecodeError(
            f"Received {classified.describe()} error response with status {status_code} "
            "that cannot be interpreted",
            status_code=status_code,
            content_type=content_type,
            content=text,
        )

    try:
        raw_error = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CourierDecodeError(
            f"Error response with status {status_code} is not valid JSON",
            status_code=status_code,
            content_type=content_type,
            content=text,
        ) from exc

    entity = operation.error_model.from_json(raw_error)
    raise CourierResponseError(status_code=status_code, content=text, entity=entity)
