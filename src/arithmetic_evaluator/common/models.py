"""Pydantic models for calculation results."""
import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class Success(BaseModel):
    """A finite numeric result."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    value: float = Field(..., description="Computed value, never NaN or Infinity")

    @field_validator("value")
    def value_must_be_finite(cls, v: float) -> float:
        """Reject NaN and +/-Infinity."""
        if not math.isfinite(v):
            raise ValueError("Success value must be finite")
        return v


class Error(BaseModel):
    """A failed calculation with a human-readable reason."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str = Field(..., min_length=1, description="Reason the calculation failed")


# Exactly one of the two variants, discriminated by ``kind``
CalculationResult = Annotated[Union[Success, Error], Field(discriminator="kind")]

# Rebuilds either variant from its dumped form (e.g. a stored history record)
result_adapter: TypeAdapter = TypeAdapter(CalculationResult)
