"""Pytest configuration and fixtures."""

import json
import os
from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("STRIPE_API_KEY", "sk_test_stripe_api_key")
os.environ.setdefault("STRIPE_WEBHOOK_SECRET", "whsec_test_webhook_secret")

TEST_WEBHOOK_SECRET = os.environ["STRIPE_WEBHOOK_SECRET"]


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from hosted_checkout.core.config import get_settings

    # Clear the cache to ensure fresh settings
    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    # Clean up cache after tests
    get_settings.cache_clear()


@pytest.fixture
def webhook_secret() -> str:
    """Provide the webhook signing secret used by the test application."""
    return TEST_WEBHOOK_SECRET


@pytest.fixture
def make_event() -> Callable[..., bytes]:
    """Provide a factory for serialized Stripe event envelopes."""

    def _make_event(event_type: str, obj: dict[str, Any], event_id: str = "evt_test_123") -> bytes:
        event = {
            "id": event_id,
            "object": "event",
            "type": event_type,
            "data": {"object": obj},
        }
        return json.dumps(event).encode("utf-8")

    return _make_event


@pytest.fixture
def sign(webhook_secret: str) -> Callable[..., str]:
    """Provide a signer producing Stripe-Signature header values."""
    from hosted_checkout.services.signature_verifier import sign_payload

    def _sign(body: bytes, secret: str | None = None, timestamp: int | None = None) -> str:
        return sign_payload(body, secret or webhook_secret, timestamp)

    return _sign


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Provide a test client for the FastAPI application.

    Yields:
        TestClient: FastAPI test client.
    """
    from hosted_checkout.main import app

    with TestClient(app) as test_client:
        yield test_client
