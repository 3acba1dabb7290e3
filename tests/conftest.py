"""Pytest configuration and fixtures"""
import os
import pytest
from typing import Any, Dict, List

# Set test environment variables before the app reads them
os.environ.setdefault("RAZORPAY_KEY_ID", "rzp_test_key")
os.environ.setdefault("RAZORPAY_KEY_SECRET", "test_secret")

from fastapi.testclient import TestClient

from payment_relay.config import Settings, get_settings
from payment_relay.gateway import get_payment_client
from payment_relay.main import app

TEST_SECRET = "test_secret"


class _FakeOrders:
    def __init__(self, error: Exception = None):
        self.calls: List[Dict[str, Any]] = []
        self.error = error

    def create(self, data):
        self.calls.append(data)
        if self.error is not None:
            raise self.error
        return {
            "id": "order_fake123",
            "entity": "order",
            "amount": data["amount"],
            "currency": data["currency"],
            "receipt": data["receipt"],
            "notes": data["notes"],
            "status": "created",
        }


class FakeRazorpayClient:
    def __init__(self, error: Exception = None):
        self.order = _FakeOrders(error)


@pytest.fixture
def settings():
    return Settings(razorpay_key_id="rzp_test_key", razorpay_key_secret=TEST_SECRET)


@pytest.fixture
def fake_client():
    return FakeRazorpayClient()


@pytest.fixture
def client(settings, fake_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_payment_client] = lambda: fake_client
    yield TestClient(app)
    app.dependency_overrides.clear()
