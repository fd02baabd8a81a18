"""Pydantic schemas for webhook configuration payloads."""

from __future__ import annotations

from enum import Enum

from pedidosya_courier.schemas.base import CourierModel


class Topic(str, Enum):
    SHIPPING_STATUS = "SHIPPING_STATUS"


class NotificationType(str, Enum):
    WEBHOOK = "WEBHOOK"


class WebhookUrl(CourierModel):
    """Integrator endpoint receiving callbacks, with the key sent as its Authorization header."""

    url: str
    auth_key: str | None = None


class WebhooksConfigModel(CourierModel):
    """Subscription of a set of urls to one callback topic."""

    is_test: bool | None = None
    topic: Topic | None = None
    notification_type: NotificationType | None = None
    urls: list[WebhookUrl] | None = None


class WebhookConfiguration(CourierModel):
    """Full webhook configuration of the account."""

    webhooks_configuration: list[WebhooksConfigModel] = []
