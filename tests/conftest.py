"""Pytest fixtures for the Paymentez backend tests."""

import httpx
import pytest
from fastapi.testclient import TestClient

from paymentez_backend.api import create_app
from paymentez_backend.api.routers.payments import get_paymentez_service
from paymentez_backend.config import get_settings
from paymentez_backend.services.paymentez_service import PaymentezService

BASE_URL = "https://gateway.test"


class FakeGateway:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: dict | list = {"status": "success"}
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture(autouse=True)
def paymentez_env(monkeypatch):
    """Credentials for get_settings(); the cache is reset around each test."""
    monkeypatch.setenv("PAYMENTEZ_APP_CODE", "TEST-CODE")
    monkeypatch.setenv("PAYMENTEZ_APP_KEY", "test-key")
    monkeypatch.setenv("PAYMENTEZ_BASE_URL", BASE_URL)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def service(gateway):
    return PaymentezService(
        app_code="TEST-CODE",
        app_key="test-key",
        base_url=BASE_URL,
        transport=httpx.MockTransport(gateway.handler),
    )


@pytest.fixture
def client(service):
    app = create_app()
    app.dependency_overrides[get_paymentez_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
