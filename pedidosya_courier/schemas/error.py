"""Error envelope returned by the courier API on failed requests."""

from __future__ import annotations

from pydantic import StrictInt

from pedidosya_courier.schemas.base import CourierModel


class HttpErrorResponse(CourierModel):
    """Uniform error payload shared by every courier API operation."""

    status: StrictInt | None = None
    message: str | None = None
    code: str | None = None
