"""Celsius to Fahrenheit conversion for temperature readings."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Union

from pydantic import ValidationError

from models.records import TemperatureReading

logger = logging.getLogger(__name__)

ReadingLike = Union[TemperatureReading, Mapping[str, Any]]


class InvalidInput(ValueError):
    """Raised when a reading cannot be converted."""

    def __init__(self, reason: str, value: object = None) -> None:
        super().__init__(f"Invalid temperature reading: {reason}")
        self.reason = reason
        self.value = value


def _describe(exc: ValidationError) -> str:
    return "; ".join(error["msg"] for error in exc.errors())


def _reject(reason: str, value: object) -> InvalidInput:
    logger.warning(
        "Rejecting temperature reading",
        extra={"reason": reason, "invalid_value": repr(value)},
    )
    return InvalidInput(reason, value)


def _coerce_reading(value: object) -> TemperatureReading:
    if isinstance(value, TemperatureReading):
        return value
    if not isinstance(value, Mapping):
        raise _reject(f"expected a mapping with a 'temp' field, got {type(value).__name__}", value)
    try:
        # Copy so validation never touches the caller's mapping.
        return TemperatureReading.model_validate(dict(value))
    except ValidationError as exc:
        raise _reject(_describe(exc), value) from exc


def convert_c_to_f(reading: ReadingLike) -> TemperatureReading:
    """Return a new reading holding ``reading.temp`` converted to Fahrenheit.

    ``reading`` may be a :class:`TemperatureReading` or a mapping shaped like
    ``{"temp": <number>}``. The argument is never modified.

    Raises:
        InvalidInput: if ``temp`` is missing, non-numeric or not finite, or if
            the result does not fit in a float.
    """
    celsius = _coerce_reading(reading).temp
    fahrenheit = celsius * 9 / 5 + 32
    if not math.isfinite(fahrenheit):
        raise _reject("converted temperature overflows a float", reading)

    logger.debug(
        "Converted temperature",
        extra={"celsius": celsius, "fahrenheit": fahrenheit},
    )
    return TemperatureReading(temp=fahrenheit)


class TemperatureConverter:
    """Stateless converter that can be injected where a service object is expected."""

    def convert(self, reading: ReadingLike) -> TemperatureReading:
        return convert_c_to_f(reading)
