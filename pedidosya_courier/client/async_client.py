"""Cooperative courier API client built on ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

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


class CourierClient:
    """Send courier API requests over one shared ``httpx.AsyncClient``.

    The default headers are fixed at construction and sent with every request, so one
    instance can serve concurrent calls. A caller-supplied ``http_client`` is used as is
    and left open by :meth:`aclose`.
    """

    def __init__(
        self,
        *,
        api_token: str,
        settings: CourierSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = settings or CourierSettings()
        headers = build_default_headers(api_token, settings.user_agent)
        base_url = settings.base_url.rstrip("/")
        if not base_url:
            raise ValueError("base_url is required")
        if settings.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._base_url = base_url
        self._headers = headers
        self._timeout_seconds = settings.timeout_seconds
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            headers=headers,
            timeout=settings.timeout_seconds,
            transport=transport,
        )
        logger.debug("Initialized courier client with settings=%s", settings.safe_for_logging())

    @classmethod
    def from_settings(cls, settings: CourierSettings) -> CourierClient:
        return cls(api_token=settings.api_token, settings=settings)

    async def __aenter__(self) -> CourierClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._http_client.aclose()

    async def estimate_shipping(self, request: EstimationShippingRequest) -> EstimationShippingResponse:
        """Request price and time offers for a shipping order."""
        return await self.send(ESTIMATE_SHIPPING, request)

    async def confirm_shipping(
        self,
        estimate_id: str,
        request: ConfirmEstimationShippingRequest,
    ) -> ConfirmShippingResponse:
        """Commit a previously estimated shipping order with the chosen delivery offer."""
        if not estimate_id:
            raise ValueError("estimate_id is required")
        return await self.send(CONFIRM_SHIPPING, request, estimate_id=estimate_id)

    async def get_webhooks_configuration(self) -> WebhookConfiguration:
        return await self.send(GET_WEBHOOKS_CONFIGURATION)

    async def update_webhooks_configuration(self, configuration: WebhookConfiguration) -> WebhookConfiguration:
        return await self.send(UPDATE_WEBHOOKS_CONFIGURATION, configuration)

    async def send(
        self,
        operation: Operation[ResponseT, VariantT],
        body: CourierModel | None = None,
        **path_params: Any,
    ) -> ResponseT:
        """Dispatch one operation and interpret its response."""
        path = operation.build_path(**path_params)
        logger.debug("Dispatching %s %s", operation.method, path)

        try:
            response = await self._http_client.request(
                operation.method,
                f"{self._base_url}{path}",
                headers=self._headers,
                json=serialize_body(body),
                timeout=self._timeout_seconds,
            )
        except httpx.HTTPError as exc:
            logger.warning("Courier request %s %s failed: %s", operation.method, path, exc)
            raise CourierTransportError(f"Courier request {operation.method} {path} failed") from exc

        try:
            return interpret_response(
                operation,
                status_code=response.status_code,
                content_type=response.headers.get("content-type"),
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
