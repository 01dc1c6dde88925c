"""
Decimal rounding helpers.

Kept separate from conversions so each file has a single responsibility.
"""

from decimal import ROUND_HALF_EVEN, Decimal

from kelvin_converter.config.constants import DEFAULT_ROUNDING_PLACES


def round_half_even(value: Decimal, places: int = DEFAULT_ROUNDING_PLACES) -> Decimal:
    """
    Round *value* to *places* decimal places, ties going to the even digit.

    ``round_half_even(Decimal("310.928"))`` → ``Decimal("310.93")``;
    ``round_half_even(Decimal("0.125"))``   → ``Decimal("0.12")``.
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)
