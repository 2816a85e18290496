"""Models for the JSON response envelope used by the product image API."""

from typing import Any

from pydantic import StrictBool, StrictInt, StrictStr

from api_smoke_test.models.base import Model


class Pagination(Model):
    """Pagination metadata attached to list responses."""

    page: StrictInt | None = None
    limit: StrictInt | None = None
    total: StrictInt | None = None
    pages: StrictInt | None = None


class Envelope(Model):
    """Conventional `{success, data, pagination, token}` wrapper.

    Every field is optional: the harness asserts on the presence of fields,
    so a missing key must parse instead of failing validation.
    """

    success: StrictBool | None = None
    data: Any = None
    pagination: Pagination | None = None
    token: StrictStr | None = None
    message: str | None = None

    @classmethod
    def from_body(cls, body: Any) -> "Envelope":
        """Parse a decoded JSON body.

        Non-object bodies yield an envelope with all fields unset; fields of the
        wrong type are unset individually.
        """
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)

    @property
    def auth_token(self) -> str | None:
        """Token from the top level, or nested under `data` as login returns it."""
        if self.token is not None:
            return self.token
        if isinstance(self.data, dict) and isinstance(self.data.get("token"), str):
            return self.data["token"]
        return None

    def data_field(self, key: str) -> Any:
        """Return `data[key]` when `data` is an object, otherwise None."""
        if isinstance(self.data, dict):
            return self.data.get(key)
        return None
