"""Blocking courier API client for callers without an event loop."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import requests

from pedidosya_courier.client.dispatch import CONFIRM_SHIPPING
from pedidosya_courier.client.dispatch import ESTIMATE_SHIPPING
from pedidosya_courier.client.dispatch import GET_WEBHOOKS_CONFIGURATION
from pedidosya_courier.client.dispatch import UPDATE_WEBHOOKS_CONFIGURATION
from pedidosya_courier.client.dispatch import Operation
from pedidosya_courier.client.dispatch import ResponseT
from pedidosya_courier.client.dispatch import VariantT
from pedidosya_courier.client.dispatch import interpret_response
from pedidosya_courier.client.dispatch import serialize_body
from pedidosya_courier.client.headers import build_default_headers
from pedidosya_courier.core.config import CourierSettings
from pedidosya_courier.core.errors import CourierResponseError
from pedidosya_courier.core.errors import CourierTransportError
from pedidosya_courier.schemas.base import CourierModel
from pedidosya_courier.schemas.shipping import ConfirmEstimationShippingRequest
from pedidosya_courier.schemas.shipping import ConfirmShippingResponse
from pedidosya_courier.schemas.shipping import EstimationShippingRequest
from pedidosya_courier.schemas.shipping import EstimationShippingResponse
from pedidosya_courier.schemas.webhook import WebhookConfiguration

logger = logging.getLogger(__name__)


class BlockingCourierClient:
    """Send courier API requests over a ``requests.Session``, one call at a time."""

    def __init__(
        self,
        *,
        api_token: str,
        settings: CourierSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        settings = settings or CourierSettings()
        base_url = settings.base_url.rstrip("/")
        if not base_url:
            raise ValueError("base_url is required")
        if settings.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._base_url = base_url
        self._headers = build_default_headers(api_token, settings.user_agent)
        self._timeout_seconds = settings.timeout_seconds
        self._owns_session = session is None
        self._session = session or requests.Session()
        logger.debug("Initialized blocking courier client with settings=%s", settings.safe_for_logging())

    @classmethod
    def from_settings(cls, settings: CourierSettings) -> BlockingCourierClient:
        return cls(api_token=settings.api_token, settings=settings)

    def __enter__(self) -> BlockingCourierClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this instance created it."""
        if self._owns_session:
            self._session.close()

    def estimate_shipping(self, request: EstimationShippingRequest) -> EstimationShippingResponse:
        return self.send(ESTIMATE_SHIPPING, request)

    def confirm_shipping(
        self,
        estimate_id: str,
        request: ConfirmEstimationShippingRequest,
    ) -> ConfirmShippingResponse:
        if not estimate_id:
            raise ValueError("estimate_id is required")
        return self.send(CONFIRM_SHIPPING, request, estimate_id=estimate_id)

    def get_webhooks_configuration(self) -> WebhookConfiguration:
        """Read the account webhook configuration."""
        return self.send(GET_WEBHOOKS_CONFIGURATION)

    def update_webhooks_configuration(self, configuration: WebhookConfiguration) -> WebhookConfiguration:
        """Replace the account webhook configuration and return the stored result."""
        return self.send(UPDATE_WEBHOOKS_CONFIGURATION, configuration)

    def send(
        self,
        operation: Operation[ResponseT, VariantT],
        body: CourierModel | None = None,
        **path_params: Any,
    ) -> ResponseT:
        """Dispatch one operation and interpret its response."""
        path = operation.build_path(**path_params)
        url = f"{self._base_url}{path}"
        logger.debug("Dispatching %s %s", operation.method, path)

        try:
            response = self._session.request(
                operation.method,
                url,
                headers=self._headers,
                json=serialize_body(body),
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("Courier request %s %s failed: %s", operation.method, path, exc)
            raise CourierTransportError(f"Courier request {operation.method} {path} failed") from exc

        try:
            return interpret_response(
                operation,
                status_code=response.status_code,
                content_type=response.headers.get("Content-Type"),
                content=response.content,
            )
        except CourierResponseError as exc:
            logger.info(
                "Courier request %s %s returned status=%s variant=%s",
                operation.method,
                path,
                exc.status_code,
                exc.entity.kind,
            )
            raise
