"""Smoke test scenarios, in execution order."""

from collections.abc import Sequence

from api_smoke_test.scenarios.auth import (
    current_user,
    invalid_token,
    login,
    logout,
    unauthorized_access,
)
from api_smoke_test.scenarios.base import RunContext, Scenario
from api_smoke_test.scenarios.product_images import (
    delete_product_image,
    generate_product_image,
    get_by_id,
    list_product_images,
    list_with_filters,
    ownership_protection,
)

DEFAULT_SCENARIOS: Sequence[Scenario] = (
    Scenario(
        name="unauthorized_access",
        title="Unauthorized Access",
        run=unauthorized_access,
        needs_token=False,
    ),
    Scenario(
        name="invalid_token",
        title="Invalid Token",
        run=invalid_token,
        needs_token=False,
    ),
    Scenario(
        name="login",
        title="Login",
        run=login,
        needs_token=False,
        establishes_token=True,
    ),
    Scenario(name="current_user", title="Current User", run=current_user),
    Scenario(
        name="generate_product_image",
        title="Generate Product Image",
        run=generate_product_image,
    ),
    Scenario(
        name="list_product_images",
        title="List Product Images",
        run=list_product_images,
    ),
    Scenario(
        name="list_with_filters",
        title="List with Filters",
        run=list_with_filters,
    ),
    Scenario(name="get_by_id", title="Get By ID", run=get_by_id, needs_image_id=True),
    Scenario(
        name="ownership_protection",
        title="Ownership Protection",
        run=ownership_protection,
    ),
    Scenario(
        name="delete_product_image",
        title="Delete Product Image",
        run=delete_product_image,
        needs_image_id=True,
    ),
    Scenario(name="logout", title="Logout", run=logout),
)

__all__ = ["DEFAULT_SCENARIOS", "RunContext", "Scenario"]
