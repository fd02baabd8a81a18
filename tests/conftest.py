"""Shared pytest fixtures for courier SDK test suites."""

from pathlib import Path
from typing import Any
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def estimation_payload() -> dict[str, Any]:
    """Wire-format estimation request with one item and both waypoints."""
    return {
        "referenceId": "order-1001",
        "isTest": True,
        "notificationMail": "buyer@example.com",
        "items": [
            {
                "type": "STANDARD",
                "value": 1250.5,
                "description": "Running shoes",
                "sku": "SKU-42",
                "quantity": 1,
                "volume": 3.5,
                "weight": 1.2,
            }
        ],
        "waypoints": [
            {
                "type": "PICK_UP",
                "addressStreet": "Av. Corrientes 1234",
                "city": "Buenos Aires",
                "latitude": -34.6037,
                "longitude": -58.3816,
                "phone": "+5491100000000",
                "name": "Warehouse",
                "order": 1,
            },
            {
                "type": "DROP_OFF",
                "addressStreet": "Av. Santa Fe 4321",
                "addressAdditional": "Piso 3",
                "city": "Buenos Aires",
                "latitude": -34.5889,
                "longitude": -58.4113,
                "phone": "+5491111111111",
                "name": "Ana",
                "instructions": "Ring twice",
                "order": 2,
                "collectMoney": 0,
            },
        ],
    }


@pytest.fixture
def estimation_response_payload() -> dict[str, Any]:
    return {
        "estimateId": "est-789",
        "referenceId": "order-1001",
        "isTest": True,
        "deliveryOffers": [
            {
                "deliveryOfferId": "offer-1",
                "deliveryMode": "EXPRESS",
                "pricing": {"subtotal": 500.0, "taxes": 105.0, "total": 605.0, "currency": "ARS"},
                "confirmationTimeLimit": "2026-02-20T11:10:00Z",
                "deliveryTime": {
                    "estimatedPickupTime": "2026-02-20T11:20:00Z",
                    "estimatedDropoffTime": "2026-02-20T11:50:00Z",
                },
            }
        ],
        "route": {"distance": 3450.0},
    }


@pytest.fixture
def confirmation_response_payload() -> dict[str, Any]:
    return {
        "shippingId": "ship-555",
        "referenceId": "order-1001",
        "isTest": True,
        "status": "CONFIRMED",
        "confirmationCode": "7731",
        "deliveryOffer": {"deliveryOfferId": "offer-1", "deliveryMode": "EXPRESS"},
        "route": {"distance": 3450.0, "url": "https://maps.example.com/route/555"},
        "urls": {"tracking": "https://track.example.com/555"},
        "createdAt": "2026-02-20T11:05:00Z",
        "lastUpdated": "2026-02-20T11:05:30Z",
    }


@pytest.fixture
def webhook_payload() -> dict[str, Any]:
    return {
        "webhooksConfiguration": [
            {
                "isTest": False,
                "topic": "SHIPPING_STATUS",
                "notificationType": "WEBHOOK",
                "urls": [{"url": "https://merchant.example.com/callbacks", "authKey": "cb-secret"}],
            }
        ]
    }
