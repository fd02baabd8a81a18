"""SDK configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_COURIER_API_BASE_URL = "https://courier-api.pedidosya.com"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "pedidosya-courier/0.1"


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    return float(raw)


def redact_secret(secret: str) -> str:
    """Return a non-recoverable placeholder for sensitive values."""
    if not secret:
        return "<empty>"
    return "<redacted>"


@dataclass(frozen=True)
class CourierSettings:
    """Runtime settings for courier API calls."""

    base_url: str = DEFAULT_COURIER_API_BASE_URL
    api_token: str = ""
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    def safe_for_logging(self) -> dict[str, str | float]:
        """Return courier settings safe for logs."""
        return {
            "base_url": self.base_url,
            "api_token": redact_secret(self.api_token),
            "timeout_seconds": self.timeout_seconds,
            "user_agent": self.user_agent,
        }


@lru_cache(maxsize=1)
def get_courier_settings() -> CourierSettings:
    """Load courier settings from the environment."""
    return CourierSettings(
        base_url=os.getenv("PEDIDOSYA_COURIER_BASE_URL", DEFAULT_COURIER_API_BASE_URL),
        api_token=os.getenv("PEDIDOSYA_COURIER_API_TOKEN", ""),
        timeout_seconds=_get_float_env("PEDIDOSYA_COURIER_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS),
        user_agent=os.getenv("PEDIDOSYA_COURIER_USER_AGENT", DEFAULT_USER_AGENT),
    )
