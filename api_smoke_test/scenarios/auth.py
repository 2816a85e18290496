"""Authentication scenarios."""

import dataclasses
import json

from api_smoke_test.client import ApiClient, bearer
from api_smoke_test.harness import AssertionRecorder
from api_smoke_test.models.envelope import Envelope
from api_smoke_test.scenarios.base import RunContext

PROTECTED_ENDPOINT = "/product-images"
MALFORMED_TOKEN = "not-a-valid-token"


async def unauthorized_access(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """A protected endpoint rejects requests carrying no token."""
    response = await client.request(PROTECTED_ENDPOINT, method="GET")

    recorder.check(response.status == 401, "Unauthorized request returns 401")
    return context


async def invalid_token(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """A protected endpoint rejects a token it did not issue."""
    response = await client.request(
        PROTECTED_ENDPOINT, method="GET", headers=bearer(MALFORMED_TOKEN)
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(response.status == 401, "Invalid token returns 401")
    recorder.check(
        envelope.success is False, "Invalid token response indicates failure"
    )
    return context


async def login(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """Log in with the test user and capture the bearer token."""
    credentials = {
        "email": context.email,
        "password": context.password.get_secret_value(),
    }
    response = await client.request(
        "/auth/login", method="POST", body=json.dumps(credentials)
    )
    envelope = Envelope.from_body(response.body)
    token = envelope.auth_token

    recorder.check(response.status == 200, "Login returns 200")
    recorder.check(envelope.success is True, "Login success flag is true")
    recorder.check(token is not None, "Login returns token")

    return dataclasses.replace(context, token=token)


async def current_user(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """The token resolves to the logged in user."""
    response = await client.request(
        "/auth/me", method="GET", headers=context.auth_headers()
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(response.status == 200, "Current user returns 200")
    recorder.check(envelope.success is True, "Current user success flag is true")
    email = envelope.data_field("email")
    recorder.check(
        isinstance(email, str) and email.lower() == context.email.lower(),
        "Current user email matches login",
    )
    return context


async def logout(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    response = await client.request(
        "/auth/logout", method="POST", headers=context.auth_headers()
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(response.status == 200, "Logout returns 200")
    recorder.check(envelope.success is True, "Logout success flag is true")
    return context
