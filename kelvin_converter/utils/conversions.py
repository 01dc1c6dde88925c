"""
Unit-conversion utilities.

All functions are pure (no side-effects) and operate on ``Decimal`` scalars
so results keep exact base-10 rounding behaviour.
"""

import math
from decimal import Decimal, InvalidOperation

from kelvin_converter.config.constants import (
    CENTIGRADE_KELVIN_OFFSET,
    FAHRENHEIT_RANKINE_OFFSET,
    RANKINE_KELVIN_DENOMINATOR,
    RANKINE_KELVIN_NUMERATOR,
)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce a temperature magnitude to a finite ``Decimal``.

    Floats go through ``repr`` so ``100.12`` becomes ``Decimal("100.12")``
    rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise TypeError(f"Unsupported temperature value type: {type(value).__name__}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Temperature value must be finite, got {value!r}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a decimal temperature value: {value!r}") from None
    else:
        raise TypeError(f"Unsupported temperature value type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Temperature value must be finite, got {value!r}")
    return result


def centigrade_to_kelvin(value: Decimal) -> Decimal:
    """Convert Centigrade to Kelvin."""
    return value + CENTIGRADE_KELVIN_OFFSET


def fahrenheit_to_kelvin(value: Decimal) -> Decimal:
    """Convert Fahrenheit to Kelvin."""
    return (value + FAHRENHEIT_RANKINE_OFFSET) * RANKINE_KELVIN_NUMERATOR / RANKINE_KELVIN_DENOMINATOR


def rankine_to_kelvin(value: Decimal) -> Decimal:
    """Convert Rankine to Kelvin."""
    return value * RANKINE_KELVIN_NUMERATOR / RANKINE_KELVIN_DENOMINATOR


def kelvin_to_kelvin(value: Decimal) -> Decimal:
    return value
