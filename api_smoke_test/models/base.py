"""Base model configuration for API payloads."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class Model(BaseModel):
    """Base model for upstream payloads, keeping fields we do not model.

    A field whose value has the wrong type is set to None instead of failing
    the whole model, so the remaining fields can still be asserted on.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None
