"""Pydantic schemas for shipping estimation and confirmation payloads."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field
from pydantic import model_validator

from pedidosya_courier.schemas.base import CourierModel


class ShippingStatus(str, Enum):
    PREORDER = "PREORDER"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    NEAR_PICKUP = "NEAR_PICKUP"
    PICKED_UP = "PICKED_UP"
    NEAR_DROPOFF = "NEAR_DROPOFF"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class WayPointType(str, Enum):
    PICK_UP = "PICK_UP"
    DROP_OFF = "DROP_OFF"


class ShippingItemRequest(CourierModel):
    """Single item shipped in the package."""

    type: str | None = None
    value: float | None = None
    description: str | None = None
    sku: str | None = None
    quantity: int | None = None
    volume: float | None = None
    weight: float | None = None


class WayPointModel(CourierModel):
    """Geographical point the transport should go to.

    Waypoints must be inside the fleet's working zone.
    """

    type: WayPointType | None = None
    address_street: str | None = None
    address_additional: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    name: str | None = None
    instructions: str | None = None
    order: int | None = None
    collect_money: float | None = None


class WayPointModelResponse(WayPointModel):
    """Waypoint as echoed back by the API, with dynamic time estimates."""

    estimated_arrival_time: datetime | None = None
    arrival_time: datetime | None = None


class ShippingRoutePricing(CourierModel):
    """Price breakdown for a delivery offer."""

    subtotal: float | None = None
    taxes: float | None = None
    total: float | None = None
    currency: str | None = None


class DeliveryTime(CourierModel):
    estimated_pickup_time: datetime | None = None
    estimated_dropoff_time: datetime | None = None


class DeliveryOffer(CourierModel):
    """Delivery type, price and time information for an estimation."""

    delivery_offer_id: str | None = None
    delivery_mode: str | None = None
    pricing: ShippingRoutePricing | None = None
    confirmation_time_limit: datetime | None = None
    delivery_time: DeliveryTime | None = None


class Route(CourierModel):
    distance: float | None = None


class ShippingRoute(CourierModel):
    """Route assigned to a confirmed shipping."""

    distance: float | None = None
    url: str | None = None


class Urls(CourierModel):
    tracking: str | None = None
    share_location: str | None = None


class EstimationShippingRequest(CourierModel):
    """Payload to request a shipping estimate order."""

    reference_id: str | None = None
    is_test: bool | None = None
    notification_mail: str | None = None
    delivery_time: datetime | None = None
    items: list[ShippingItemRequest] = Field(min_length=1)
    waypoints: list[WayPointModel]

    @model_validator(mode="after")
    def _check_waypoints(self) -> EstimationShippingRequest:
        types = {waypoint.type for waypoint in self.waypoints}
        if len(self.waypoints) != 2 or types != {WayPointType.PICK_UP, WayPointType.DROP_OFF}:
            raise ValueError("waypoints must contain exactly one PICK_UP and one DROP_OFF")
        return self


class EstimationShippingResponse(CourierModel):
    """Shipping estimate order returned by the estimation endpoint."""

    estimate_id: str | None = None
    shipping_id: str | None = None
    reference_id: str | None = None
    is_test: bool | None = None
    items: list[ShippingItemRequest] | None = None
    waypoints: list[WayPointModelResponse] | None = None
    delivery_offers: list[DeliveryOffer] | None = None
    route: Route | None = None
    notification_mail: str | None = None


# Generic shipping estimate order; same wire shape as the estimation response.
ShippingResponse = EstimationShippingResponse


class ConfirmEstimationShippingRequest(CourierModel):
    """Payload to confirm a previously estimated shipping order."""

    delivery_offer_id: str


class ConfirmShippingResponse(CourierModel):
    """Confirmed shipping order."""

    shipping_id: str | None = None
    reference_id: str | None = None
    is_test: bool | None = None
    status: ShippingStatus | None = None
    confirmation_code: str | None = None
    items: list[ShippingItemRequest] | None = None
    waypoints: list[WayPointModelResponse] | None = None
    delivery_offer: DeliveryOffer | None = None
    route: ShippingRoute | None = None
    urls: Urls | None = None
    online_support_url: str | None = None
    notification_mail: str | None = None
    created_at: datetime | None = None
    last_updated: datetime | None = None
