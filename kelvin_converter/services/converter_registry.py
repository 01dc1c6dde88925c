from decimal import Decimal
from typing import Callable, Dict, Mapping

from kelvin_converter.models.scales import TemperatureScale
from kelvin_converter.utils.conversions import (
    centigrade_to_kelvin,
    fahrenheit_to_kelvin,
    kelvin_to_kelvin,
    rankine_to_kelvin,
)

KelvinFormula = Callable[[Decimal], Decimal]


class ConverterRegistry:
    """Scale → Kelvin formula table; refuses to build unless every scale has a formula."""

    def __init__(self, formulas: Mapping[TemperatureScale, KelvinFormula]):
        missing = [scale.name for scale in TemperatureScale if scale not in formulas]
        if missing:
            raise ValueError(f"No Kelvin formula for: {', '.join(missing)}")
        self._formulas: Dict[TemperatureScale, KelvinFormula] = dict(formulas)

    def formula_for(self, scale: TemperatureScale) -> KelvinFormula:
        return self._formulas[scale]


registry = ConverterRegistry({
    TemperatureScale.CENTIGRADE: centigrade_to_kelvin,
    TemperatureScale.FAHRENHEIT: fahrenheit_to_kelvin,
    TemperatureScale.RANKINE: rankine_to_kelvin,
    TemperatureScale.KELVIN: kelvin_to_kelvin,
})
