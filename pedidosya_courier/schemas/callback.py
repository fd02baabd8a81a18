"""Pydantic schemas for callbacks pushed by the courier API to integrator endpoints."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pedidosya_courier.schemas.base import CourierModel
from pedidosya_courier.schemas.webhook import Topic


class CallbackShippingStatus(str, Enum):
    """Shipping statuses that trigger a callback."""

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    IN_PROGRESS = "IN_PROGRESS"
    NEAR_PICKUP = "NEAR_PICKUP"
    PICKED_UP = "PICKED_UP"
    NEAR_DROPOFF = "NEAR_DROPOFF"
    COMPLETED = "COMPLETED"


class CancelCode(str, Enum):
    """Reason codes sent only when the shipping status is CANCELLED."""

    ADDRESS_DATA_MISSING = "ADDRESS_DATA_MISSING"
    NO_RIDER_AVAILABLE = "NO_RIDER_AVAILABLE"
    OUT_OF_DELIVERY_ZONE = "OUT_OF_DELIVERY_ZONE"
    DELAYED_DELIVERY_SCHEDULE = "DELAYED_DELIVERY_SCHEDULE"
    COORDINATE_ERROR = "COORDINATE_ERROR"
    PACKAGE_DAMAGE_LOOSE = "PACKAGE_DAMAGE_LOOSE"
    ORDER_NOT_DELIVERED = "ORDER_NOT_DELIVERED"
    INAPPROPRIATE_CONDUCT = "INAPPROPRIATE_CONDUCT"
    UNREACHABLE_RIDER = "UNREACHABLE_RIDER"
    TYC_PACKAGE_CONTRADICTION = "TYC_PACKAGE_CONTRADICTION"
    PURCHASE_REQUESTED = "PURCHASE_REQUESTED"
    USER_CANNOT_PAY = "USER_CANNOT_PAY"
    COUPON_NOT_APPLIED = "COUPON_NOT_APPLIED"
    DUPLICATED_ORDER = "DUPLICATED_ORDER"
    UNREACHABLE_USER_DROPOFF = "UNREACHABLE_USER_DROPOFF"
    SUSPICIOUS_CLIENT = "SUSPICIOUS_CLIENT"
    USER_CANCELLED = "USER_CANCELLED"
    TECHNICAL_PROBLEM = "TECHNICAL_PROBLEM"
    BAD_WEATHER = "BAD_WEATHER"
    UNREACHABLE_USER_PICKUP = "UNREACHABLE_USER_PICKUP"
    CONTENT_WRONG = "CONTENT_WRONG"
    ORDER_MODIFICATION = "ORDER_MODIFICATION"
    OUT_OF_FLEET_TIME = "OUT_OF_FLEET_TIME"
    TEST_ORDER = "TEST_ORDER"
    CONTENT_WRONG_RIDER = "CONTENT_WRONG_RIDER"


# Spanish text the API sends in `cancelReason` for each code.
CANCEL_REASONS: dict[CancelCode, str] = {
    CancelCode.ADDRESS_DATA_MISSING: "Rider no encuentra el pickup/dropoff",
    CancelCode.NO_RIDER_AVAILABLE: "No hay cadete disponible en este momento",
    CancelCode.OUT_OF_DELIVERY_ZONE: "Fuera de área de cobertura del servicio",
    CancelCode.DELAYED_DELIVERY_SCHEDULE: "Cancelado debido a horario de entrega retrasado",
    CancelCode.COORDINATE_ERROR: "Coordenadas no concuerdan con la dirección ingresada",
    CancelCode.PACKAGE_DAMAGE_LOOSE: "Se produjo un problema con el producto o paquete",
    CancelCode.ORDER_NOT_DELIVERED: "Pedido no entregado",
    CancelCode.INAPPROPRIATE_CONDUCT: "Cancelado por problemas con el rider",
    CancelCode.UNREACHABLE_RIDER: "Cancelado por problemas con el rider",
    CancelCode.TYC_PACKAGE_CONTRADICTION: "Pedido incorrecto. Paquete o producto no respeta TyC.",
    CancelCode.PURCHASE_REQUESTED: "Pedido realizado por error",
    CancelCode.USER_CANNOT_PAY: "Solicitud de envío pendiente de pago. El usuario no puede pagar el pedido.",
    CancelCode.COUPON_NOT_APPLIED: "No fue posible aplicar el cupón.",
    CancelCode.DUPLICATED_ORDER: "Pedido duplicado",
    CancelCode.UNREACHABLE_USER_DROPOFF: "No es posible contactar al cliente en Punto de Entrega",
    CancelCode.SUSPICIOUS_CLIENT: "Pedido incorrecto.",
    CancelCode.USER_CANCELLED: "Cancelado a solicitud del usuario",
    CancelCode.TECHNICAL_PROBLEM: "Cancelado por problemas técnicos",
    CancelCode.BAD_WEATHER: "Condiciones climáticas adversas",
    CancelCode.UNREACHABLE_USER_PICKUP: "No es posible contactar al cliente en Punto de Retiro",
    CancelCode.CONTENT_WRONG: "Producto despachado no es correcto.",
    CancelCode.ORDER_MODIFICATION: "No es posible modificar punto de origen o destino",
    CancelCode.OUT_OF_FLEET_TIME: "Fuera de horario de servicio",
    CancelCode.TEST_ORDER: "Orden de prueba - TEST",
    CancelCode.CONTENT_WRONG_RIDER: "Producto despachado no es correcto",
}


class CallbackRequestData(CourierModel):
    """Topic-specific callback data.

    For SHIPPING_STATUS the API sends ``status``, and ``cancelCode`` / ``cancelReason``
    when the status is CANCELLED. Pickup and dropoff estimates are refreshed while the
    shipping is in flight.
    """

    status: CallbackShippingStatus | None = None
    cancel_code: CancelCode | None = None
    cancel_reason: str | None = None
    estimated_pick_up_time: datetime | None = None
    estimated_drop_off_time: datetime | None = None


class CallbackRequest(CourierModel):
    """Callback body posted by the courier API to a subscribed url."""

    topic: Topic | None = None
    id: str | None = None
    reference_id: str | None = None
    generated: datetime | None = None
    transmitted: datetime | None = None
    data: CallbackRequestData | None = None
