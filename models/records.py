"""Domain models shared across services."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class TemperatureReading(BaseModel):
    """A single temperature value. The scale depends on the caller's context."""

    model_config = ConfigDict(frozen=True)

    temp: float

    @field_validator("temp", mode="before")
    @classmethod
    def _require_finite_real(cls, value: object) -> float:
        # bool is an int subclass but never a temperature.
        if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
            raise ValueError("temperature must be a real number")
        try:
            converted = float(value)
        except (OverflowError, ValueError) as exc:
            raise ValueError("temperature is not representable as a float") from exc
        if not math.isfinite(converted):
            raise ValueError("temperature must be finite")
        return converted
