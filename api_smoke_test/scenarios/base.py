"""Scenario definition and the context threaded between scenarios."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from pydantic import SecretStr

from api_smoke_test.client import ApiClient, bearer
from api_smoke_test.harness import AssertionRecorder


class MissingPreconditionError(RuntimeError):
    """Raised when a scenario reads a context value that was never captured."""


@dataclass(frozen=True, kw_only=True)
class RunContext:
    """Values carried from one scenario to the next.

    `token` is set by the login scenario and `image_id` by the generate
    scenario; both stay None when those steps did not produce them.
    """

    email: str
    password: SecretStr
    token: str | None = None
    image_id: str | None = None

    def auth_headers(self) -> Mapping[str, str]:
        """Authorization header for the captured token."""
        match self.token:
            case str(token):
                return bearer(token)
            case None:
                raise MissingPreconditionError("No auth token captured")

    def require_image_id(self) -> str:
        """Return the captured image ID."""
        match self.image_id:
            case str(image_id):
                return image_id
            case None:
                raise MissingPreconditionError("No image ID captured")


type ScenarioFn = Callable[
    [ApiClient, RunContext, AssertionRecorder], Awaitable[RunContext]
]


@dataclass(frozen=True, kw_only=True)
class Scenario:
    """A named step of the smoke test sequence.

    The run function records assertions on the recorder and returns the
    context for the next scenario, updated with anything it captured.
    """

    name: str
    title: str
    run: ScenarioFn
    needs_token: bool = True
    needs_image_id: bool = False
    establishes_token: bool = False
