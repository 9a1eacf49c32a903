from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from pydantic import BaseModel, StrictFloat, StrictInt, field_validator

from models.financial_event_model import EventType, VALUE_SCALE


MAX_VALUE = 9_999_999_999.99
CENT = Decimal(1).scaleb(-VALUE_SCALE)


class FinancialEventSchema(BaseModel):
    value: Union[StrictInt, StrictFloat]
    type: EventType

    @field_validator("value")
    @classmethod
    def non_negative_magnitude(cls, v):
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("value must be a finite number")
        if v < 0:
            raise ValueError("value must not be negative")
        if v > MAX_VALUE:
            raise ValueError("value is too large")
        exact = Decimal(str(v))
        if exact != exact.quantize(CENT):
            raise ValueError(f"value must have at most {VALUE_SCALE} decimal places")
        return v
