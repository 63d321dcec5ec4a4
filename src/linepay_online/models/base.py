"""Base model for LINE Pay SDK."""
from __future__ import annotations

import math
from typing import Annotated, Any, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# LINE Pay amounts are plain JSON numbers; keep ints as ints on the wire.
Number = Union[int, float]


def is_finite_number(value: Any) -> bool:
    """True for ints and finite floats, False for bools, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def _finite(value: Number) -> Number:
    if not is_finite_number(value):
        raise ValueError("must be a finite number")
    return value


def _non_negative(value: Number) -> Number:
    if _finite(value) < 0:
        raise ValueError("must be non-negative")
    return value


FiniteNumber = Annotated[Number, AfterValidator(_finite)]
NonNegativeNumber = Annotated[Number, AfterValidator(_non_negative)]

# 19-digit transaction ids may arrive as JSON numbers.
TransactionId = Annotated[str, BeforeValidator(lambda v: str(v) if isinstance(v, int) else v)]


class LinePayModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to its camelCase wire dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinePayModel":
        """Create model from a wire dictionary."""
        return cls.model_validate(data)
