"""Wire schemas for the courier API."""

from pedidosya_courier.schemas.callback import CANCEL_REASONS
from pedidosya_courier.schemas.callback import CallbackRequest
from pedidosya_courier.schemas.callback import CallbackRequestData
from pedidosya_courier.schemas.callback import CallbackShippingStatus
from pedidosya_courier.schemas.callback import CancelCode
from pedidosya_courier.schemas.error import HttpErrorResponse
from pedidosya_courier.schemas.shipping import ConfirmEstimationShippingRequest
from pedidosya_courier.schemas.shipping import ConfirmShippingResponse
from pedidosya_courier.schemas.shipping import DeliveryOffer
from pedidosya_courier.schemas.shipping import DeliveryTime
from pedidosya_courier.schemas.shipping import EstimationShippingRequest
from pedidosya_courier.schemas.shipping import EstimationShippingResponse
from pedidosya_courier.schemas.shipping import Route
from pedidosya_courier.schemas.shipping import ShippingItemRequest
from pedidosya_courier.schemas.shipping import ShippingResponse
from pedidosya_courier.schemas.shipping import ShippingRoute
from pedidosya_courier.schemas.shipping import ShippingRoutePricing
from pedidosya_courier.schemas.shipping import ShippingStatus
from pedidosya_courier.schemas.shipping import Urls
from pedidosya_courier.schemas.shipping import WayPointModel
from pedidosya_courier.schemas.shipping import WayPointModelResponse
from pedidosya_courier.schemas.shipping import WayPointType
from pedidosya_courier.schemas.webhook import NotificationType
from pedidosya_courier.schemas.webhook import Topic
from pedidosya_courier.schemas.webhook import WebhookConfiguration
from pedidosya_courier.schemas.webhook import WebhooksConfigModel
from pedidosya_courier.schemas.webhook import WebhookUrl

__all__ = [
    "CANCEL_REASONS",
    "CallbackRequest",
    "CallbackRequestData",
    "CallbackShippingStatus",
    "CancelCode",
    "ConfirmEstimationShippingRequest",
    "ConfirmShippingResponse",
    "DeliveryOffer",
    "DeliveryTime",
    "EstimationShippingRequest",
    "EstimationShippingResponse",
    "HttpErrorResponse",
    "NotificationType",
    "Route",
    "ShippingItemRequest",
    "ShippingResponse",
    "ShippingRoute",
    "ShippingRoutePricing",
    "ShippingStatus",
    "Topic",
    "Urls",
    "WayPointModel",
    "WayPointModelResponse",
    "WayPointType",
    "WebhookConfiguration",
    "WebhooksConfigModel",
    "WebhookUrl",
]
