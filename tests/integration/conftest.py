"""Fixtures for integration tests against a mocked product image API."""

from collections.abc import AsyncGenerator, Mapping
from typing import Any, Protocol

import pytest
from aioresponses import aioresponses as aioresponses_cls

from api_smoke_test.client import ApiClient
from api_smoke_test.scenarios.product_images import UNKNOWN_IMAGE_ID
from api_smoke_test.testing.payloads import (
    DEFAULT_IMAGE_ID,
    delete_response,
    error_envelope,
    generate_response,
    get_response,
    list_response,
    login_response,
    logout_response,
    me_response,
)

API_URL = "http://api.test/api"
IMAGE_ID = DEFAULT_IMAGE_ID

type Reply = tuple[int, Any]


class MockApiFn(Protocol):
    """Protocol for the mocked API setup function."""

    def __call__(self, **overrides: Reply) -> None:
        """Register every endpoint, replacing the replies named in overrides."""


def default_routes() -> Mapping[str, tuple[str, str, Reply]]:
    """Endpoint key to (method, url, reply) for a healthy API."""
    return {
        "unauthorized": (
            "GET",
            f"{API_URL}/product-images",
            (401, error_envelope(message="Not logged in")),
        ),
        "invalid_token": (
            "GET",
            f"{API_URL}/product-images",
            (401, error_envelope(message="Invalid token")),
        ),
        "login": ("POST", f"{API_URL}/auth/login", (200, login_response())),
        "me": ("GET", f"{API_URL}/auth/me", (200, me_response())),
        "generate": (
            "POST",
            f"{API_URL}/product-images/generate",
            (201, generate_response(image_id=IMAGE_ID)),
        ),
        "list": (
            "GET",
            f"{API_URL}/product-images?page=1&limit=10",
            (200, list_response()),
        ),
        "search": (
            "GET",
            f"{API_URL}/product-images?search=test",
            (200, list_response()),
        ),
        "background": (
            "GET",
            f"{API_URL}/product-images?backgroundType=studio",
            (200, list_response()),
        ),
        "status": (
            "GET",
            f"{API_URL}/product-images?status=completed",
            (200, list_response()),
        ),
        "get": (
            "GET",
            f"{API_URL}/product-images/{IMAGE_ID}",
            (200, get_response(image_id=IMAGE_ID)),
        ),
        "ownership": (
            "GET",
            f"{API_URL}/product-images/{UNKNOWN_IMAGE_ID}",
            (404, error_envelope()),
        ),
        "delete": (
            "DELETE",
            f"{API_URL}/product-images/{IMAGE_ID}",
            (200, delete_response()),
        ),
        "logout": ("POST", f"{API_URL}/auth/logout", (200, logout_response())),
    }


@pytest.fixture
def mock_api(aioresponses: aioresponses_cls) -> MockApiFn:
    """Return a function registering the whole API on aioresponses."""

    def _mock(**overrides: Reply) -> None:
        for key, (method, url, reply) in default_routes().items():
            status, payload = overrides.get(key, reply)
            aioresponses.add(url, method=method, status=status, payload=payload)

    return _mock


@pytest.fixture
async def client(aioresponses: aioresponses_cls) -> AsyncGenerator[ApiClient, None]:
    """Create client with managed session."""
    async with ApiClient.from_base_url(API_URL) as impl:
        yield impl
