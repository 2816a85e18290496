"""Integration tests for the HTTP client adapter."""

import json

import aiohttp
import pytest
from aioresponses import aioresponses as aioresponses_cls
from yarl import URL

from api_smoke_test.client import ApiClient, InvalidResponseError, bearer

from .conftest import API_URL


class TestRequest:
    """Tests for ApiClient.request."""

    async def test_appends_endpoint_to_base_url(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """Endpoint is concatenated to the base URL, keeping its path prefix."""
        aioresponses.get(f"{API_URL}/auth/me", status=200, payload={"success": True})

        response = await client.request("/auth/me")

        assert response.status == 200
        assert response.body == {"success": True}
        assert ("GET", URL(f"{API_URL}/auth/me")) in aioresponses.requests

    async def test_sends_json_content_type_by_default(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """Requests carry the JSON content type when no headers are given."""
        url = f"{API_URL}/product-images"
        aioresponses.get(url, status=200, payload={"success": True})

        await client.request("/product-images")

        call = aioresponses.requests[("GET", URL(url))][0]
        assert call.kwargs["headers"] == {"Content-Type": "application/json"}

    async def test_merges_caller_headers(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """Caller headers are added next to the default content type."""
        url = f"{API_URL}/product-images"
        aioresponses.get(url, status=200, payload={"success": True})

        await client.request("/product-images", headers=bearer("abc"))

        call = aioresponses.requests[("GET", URL(url))][0]
        assert call.kwargs["headers"] == {
            "Content-Type": "application/json",
            "Authorization": "Bearer abc",
        }

    async def test_caller_headers_take_precedence(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """A caller supplied content type replaces the default one."""
        url = f"{API_URL}/product-images"
        aioresponses.get(url, status=200, payload={"success": True})

        await client.request("/product-images", headers={"Content-Type": "text/plain"})

        call = aioresponses.requests[("GET", URL(url))][0]
        assert call.kwargs["headers"] == {"Content-Type": "text/plain"}

    async def test_sends_body_verbatim(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """The body string is passed through without re-encoding."""
        url = f"{API_URL}/auth/login"
        aioresponses.post(url, status=200, payload={"success": True})
        body = json.dumps({"email": "test@example.com", "password": "secret"})

        await client.request("/auth/login", method="POST", body=body)

        call = aioresponses.requests[("POST", URL(url))][0]
        assert call.kwargs["data"] == body

    async def test_returns_error_status_with_body(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """Error statuses are returned, not raised."""
        aioresponses.get(
            f"{API_URL}/product-images/unknown",
            status=404,
            payload={"success": False, "message": "Not found"},
        )

        response = await client.request("/product-images/unknown")

        assert response.status == 404
        assert response.body == {"success": False, "message": "Not found"}

    async def test_raises_on_invalid_json(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """Non-JSON bodies raise InvalidResponseError."""
        aioresponses.get(
            f"{API_URL}/product-images",
            status=502,
            body="<html>Bad Gateway</html>",
            content_type="text/html",
        )

        with pytest.raises(InvalidResponseError, match="non-JSON body"):
            await client.request("/product-images")

    async def test_raises_on_empty_body(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """An empty body is not valid JSON."""
        aioresponses.delete(f"{API_URL}/product-images/1", status=204, body="")

        with pytest.raises(InvalidResponseError):
            await client.request("/product-images/1", method="DELETE")

    async def test_propagates_connection_errors(
        self, client: ApiClient, aioresponses: aioresponses_cls
    ) -> None:
        """Network failures are not caught by the client."""
        aioresponses.get(
            f"{API_URL}/product-images",
            exception=aiohttp.ClientConnectionError("Connection refused"),
        )

        with pytest.raises(aiohttp.ClientConnectionError):
            await client.request("/product-images")
