"""HTTP client adapter for the API under test."""

import json
import logging
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import aiohttp

log = logging.getLogger(__name__)

DEFAULT_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}


class InvalidResponseError(RuntimeError):
    """Raised when a response body is not valid JSON."""


@dataclass(frozen=True, kw_only=True)
class HttpResponse:
    """Status code and decoded JSON body of a single call."""

    status: int
    body: Any


def bearer(token: str) -> Mapping[str, str]:
    """Build the authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}


@dataclass(frozen=True, kw_only=True)
class ApiClient:
    """Issues requests against a base URL and decodes JSON responses.

    Endpoints are appended to the base URL as-is, so `/auth/login` against
    `http://localhost:5000/api` resolves to `http://localhost:5000/api/auth/login`.
    There is no retry and no timeout: a call that hangs blocks the caller.
    """

    base_url: str
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_base_url(cls, base_url: str) -> AsyncGenerator["ApiClient", None]:
        """Create client with managed session lifecycle."""
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=None),
        ) as session:
            yield cls(base_url=base_url, session=session)

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | None = None,
    ) -> HttpResponse:
        """Send a request and return its status with the parsed JSON body.

        Args:
            endpoint: Path appended to the base URL, including any query string
            method: HTTP method
            headers: Extra headers, overriding the JSON content type on collision
            body: Raw request body, sent verbatim

        Returns:
            Status code and decoded body

        Raises:
            InvalidResponseError: If the response body is not valid JSON
            aiohttp.ClientError: If the request itself fails

        """
        url = f"{self.base_url}{endpoint}"
        merged_headers = {**DEFAULT_HEADERS, **(headers or {})}

        log.debug("%s %s", method, url)
        async with self.session.request(
            method, url, headers=merged_headers, data=body
        ) as response:
            text = await response.text()
            status = response.status

        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidResponseError(
                f"{method} {endpoint} returned non-JSON body (status {status}): "
                f"{text[:200]!r}"
            ) from e

        return HttpResponse(status=status, body=decoded)
