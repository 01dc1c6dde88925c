"""
Kelvin conversion entry point.

Public surface
--------------
``convert(scale, value)`` – map a temperature on a named scale to Kelvin.
                            Pure: same arguments, same ``Decimal`` result.
"""

import decimal
import logging
from decimal import Decimal

from kelvin_converter.config.constants import DECIMAL_PRECISION, DECIMAL_ROUNDING
from kelvin_converter.models.scales import TemperatureScale, UnknownScaleError
from kelvin_converter.services.converter_registry import registry
from kelvin_converter.utils.conversions import to_decimal

logger = logging.getLogger(__name__)


def _conversion_context() -> decimal.Context:
    """Fresh context, independent of whatever context the caller has set."""
    return decimal.Context(
        prec=DECIMAL_PRECISION,
        rounding=DECIMAL_ROUNDING,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )


def convert(scale: str | None, value: Decimal | int | float | str) -> Decimal:
    """
    Convert *value*, expressed on *scale*, to Kelvin.

    Args:
        scale: Scale name. Only the first letter counts (C, F, R or K, any
               case), so ``"Fahrenheitish"`` selects Fahrenheit.
        value: Temperature magnitude. Non-``Decimal`` inputs are coerced
               with :func:`~kelvin_converter.utils.conversions.to_decimal`.

    Returns:
        The Kelvin-equivalent ``Decimal``, unrounded.

    Raises:
        UnknownScaleError: if the first letter selects no scale.
        ValueError / TypeError: if *value* is not a finite number.
    """
    try:
        temperature_scale = TemperatureScale.from_identifier(scale)
    except UnknownScaleError:
        logger.warning("Unknown scale %r", scale)
        raise

    formula = registry.formula_for(temperature_scale)
    magnitude = to_decimal(value)
    with decimal.localcontext(_conversion_context()):
        result = formula(magnitude)

    logger.debug("%s %s -> %s K", magnitude, temperature_scale.name, result)
    return result
