"""Client SDK for the PedidosYa courier (last-mile delivery) API."""

from pedidosya_courier.callbacks.parser import cancel_reason_text
from pedidosya_courier.callbacks.parser import parse_callback_request
from pedidosya_courier.client.async_client import CourierClient
from pedidosya_courier.client.blocking import BlockingCourierClient
from pedidosya_courier.client.variants import ConfirmShippingError
from pedidosya_courier.client.variants import ErrorVariant
from pedidosya_courier.client.variants import EstimateShippingError
from pedidosya_courier.client.variants import WebhooksConfigurationError
from pedidosya_courier.core.config import CourierSettings
from pedidosya_courier.core.config import get_courier_settings
from pedidosya_courier.core.errors import CourierClientError
from pedidosya_courier.core.errors import CourierDecodeError
from pedidosya_courier.core.errors import CourierResponseError
from pedidosya_courier.core.errors import CourierTransportError

__all__ = [
    "BlockingCourierClient",
    "ConfirmShippingError",
    "CourierClient",
    "CourierClientError",
    "CourierDecodeError",
    "CourierResponseError",
    "CourierSettings",
    "CourierTransportError",
    "ErrorVariant",
    "EstimateShippingError",
    "WebhooksConfigurationError",
    "cancel_reason_text",
    "get_courier_settings",
    "parse_callback_request",
]
