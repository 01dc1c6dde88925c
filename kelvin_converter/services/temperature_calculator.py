"""
Object-style access to the Kelvin converter.

``TemperatureCalculator`` holds a mapper callable and forwards every call to
it, so callers that prefer an injected collaborator over a module function
can swap the mapper in tests.
"""

from decimal import Decimal
from typing import Callable

from kelvin_converter.converter import convert

KelvinConverterMapper = Callable[[str | None, Decimal], Decimal]


class TemperatureCalculator:
    def __init__(self, mapper: KelvinConverterMapper = convert):
        self._mapper = mapper

    def get_temperature_in_kelvins(self, scale: str | None, value: Decimal) -> Decimal:
        """Return *value* on *scale* converted to Kelvin by the held mapper."""
        return self._mapper(scale, value)
