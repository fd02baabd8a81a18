"""Unit tests for environment-driven SDK settings."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from pedidosya_courier.client.blocking import BlockingCourierClient
from pedidosya_courier.core.config import DEFAULT_COURIER_API_BASE_URL
from pedidosya_courier.core.config import CourierSettings
from pedidosya_courier.core.config import get_courier_settings
from pedidosya_courier.core.config import redact_secret


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    get_courier_settings.cache_clear()
    yield
    get_courier_settings.cache_clear()


def test_settings_default_to_public_courier_host(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PEDIDOSYA_COURIER_BASE_URL",
        "PEDIDOSYA_COURIER_API_TOKEN",
        "PEDIDOSYA_COURIER_TIMEOUT_SECONDS",
        "PEDIDOSYA_COURIER_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_courier_settings()

    assert settings.base_url == DEFAULT_COURIER_API_BASE_URL == "https://courier-api.pedidosya.com"
    assert settings.api_token == ""
    assert settings.timeout_seconds == 30.0


def test_settings_read_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PEDIDOSYA_COURIER_BASE_URL", "https://sandbox.example.com")
    monkeypatch.setenv("PEDIDOSYA_COURIER_API_TOKEN", "env-token")
    monkeypatch.setenv("PEDIDOSYA_COURIER_TIMEOUT_SECONDS", "7.5")

    settings = get_courier_settings()

    assert settings.base_url == "https://sandbox.example.com"
    assert settings.api_token == "env-token"
    assert settings.timeout_seconds == 7.5


def test_malformed_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PEDIDOSYA_COURIER_TIMEOUT_SECONDS", "soon")

    with pytest.raises(ValueError):
        get_courier_settings()


def test_safe_for_logging_redacts_token() -> None:
    settings = CourierSettings(api_token="top-secret-token")

    safe = settings.safe_for_logging()

    assert safe["api_token"] == "<redacted>"
    assert "top-secret-token" not in str(safe)
    assert redact_secret("") == "<empty>"


def test_client_from_settings_requires_a_token() -> None:
    with pytest.raises(ValueError, match="api_token"):
        BlockingCourierClient.from_settings(CourierSettings())
