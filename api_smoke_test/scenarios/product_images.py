"""Product image scenarios."""

import dataclasses
import json
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlencode

from api_smoke_test.client import ApiClient
from api_smoke_test.harness import AssertionRecorder, log
from api_smoke_test.models.envelope import Envelope
from api_smoke_test.scenarios.base import RunContext

# Syntactically valid ObjectId that no test user owns.
UNKNOWN_IMAGE_ID = "507f1f77bcf86cd799439011"

# Status codes accepted from the generate endpoint. The source image referenced
# below may not exist on the target server, so a client or server error still
# counts as the endpoint responding.
GENERATE_ACCEPTED_STATUSES = frozenset([201, 400, 500])

GENERATE_REQUEST: Mapping[str, Any] = {
    "originalImageUrl": "/uploads/images/test-product.jpg",
    "backgroundType": "studio",
    "useLogo": True,
    "logoPosition": "bottom-right",
    "outputSize": "1:1",
    "useBrandSettings": False,
}

LIST_FILTERS: Sequence[tuple[str, Mapping[str, str]]] = (
    ("Search filter", {"search": "test"}),
    ("Background filter", {"backgroundType": "studio"}),
    ("Status filter", {"status": "completed"}),
)


def list_endpoint(params: Mapping[str, str | int]) -> str:
    """Build the list endpoint path with its query string."""
    return f"/product-images?{urlencode(params)}"


async def generate_product_image(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """Submit a generation job and capture the created image ID on success."""
    response = await client.request(
        "/product-images/generate",
        method="POST",
        headers=context.auth_headers(),
        body=json.dumps(GENERATE_REQUEST),
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(
        response.status in GENERATE_ACCEPTED_STATUSES, "Generate endpoint responds"
    )
    recorder.check(envelope.success is not None, "Response has success field")

    if not (envelope.success and envelope.data is not None):
        return context

    recorder.check(
        envelope.data_field("userId") is not None, "Response includes userId"
    )
    recorder.check(
        envelope.data_field("status") is not None, "Response includes status"
    )

    match envelope.data_field("_id"):
        case str(image_id):
            return dataclasses.replace(context, image_id=image_id)
        case _:
            return context


async def list_product_images(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """List the first page and check the envelope shape."""
    response = await client.request(
        list_endpoint({"page": 1, "limit": 10}),
        method="GET",
        headers=context.auth_headers(),
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(response.status == 200, "List endpoint returns 200")
    recorder.check(envelope.success is True, "List success flag is true")
    recorder.check(isinstance(envelope.data, list), "Response data is an array")
    recorder.check(envelope.pagination is not None, "Response has pagination")
    recorder.check(
        envelope.pagination is not None and envelope.pagination.page == 1,
        "Pagination page is correct",
    )
    return context


async def list_with_filters(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """Each supported filter is accepted by the list endpoint.

    Only the status code is checked, not whether the results match the filter.
    """
    for label, params in LIST_FILTERS:
        response = await client.request(
            list_endpoint(params), method="GET", headers=context.auth_headers()
        )
        recorder.check(response.status == 200, f"{label} returns 200")
    return context


async def get_by_id(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """Fetch the image created by the generate scenario."""
    image_id = context.require_image_id()
    response = await client.request(
        f"/product-images/{image_id}", method="GET", headers=context.auth_headers()
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(response.status == 200, "Get by ID returns 200")
    recorder.check(envelope.success is True, "Get by ID success flag is true")
    recorder.check(
        envelope.data_field("_id") == image_id, "Returned image ID matches"
    )
    return context


async def ownership_protection(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """An image the user does not own is reported as not found."""
    response = await client.request(
        f"/product-images/{UNKNOWN_IMAGE_ID}",
        method="GET",
        headers=context.auth_headers(),
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(response.status == 404, "Non-existent image returns 404")
    recorder.check(envelope.success is False, "Response indicates failure")
    return context


async def delete_product_image(
    client: ApiClient, context: RunContext, recorder: AssertionRecorder
) -> RunContext:
    """Remove the image created by the generate scenario."""
    image_id = context.require_image_id()
    response = await client.request(
        f"/product-images/{image_id}",
        method="DELETE",
        headers=context.auth_headers(),
    )
    envelope = Envelope.from_body(response.body)

    recorder.check(response.status == 200, "Delete returns 200")
    recorder.check(envelope.success is True, "Delete success flag is true")
    if envelope.success:
        log(f"Deleted product image {image_id}", "info")

    return dataclasses.replace(context, image_id=None)
