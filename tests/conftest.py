"""Pytest configuration and shared fixtures for openapi-fetch-core tests."""

import json
import os

import httpx
import pytest

from openapi_fetch_core.client import Client
from openapi_fetch_core.testing import mock_transport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing settings resolution.
    """
    test_prefixes = ("TEST_", "API_", "CLIENT_", "OPENAPI_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def captured_requests():
    """Requests seen by the ``echo_client`` fixture, in order."""
    return []


@pytest.fixture
async def echo_client(captured_requests):
    """Client whose server echoes the request back as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(
            200,
            json={
                "method": request.method,
                "url": str(request.url),
                "body": json.loads(request.content) if request.content else None,
            },
        )

    transport = mock_transport(handler)
    async with Client("https://api.example.com", transport=transport) as client:
        yield client
    await transport.aclose()
