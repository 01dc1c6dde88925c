# kelvin_converter/__init__.py
from kelvin_converter.converter import convert
from kelvin_converter.models.scales import TemperatureScale, UnknownScaleError
from kelvin_converter.services.temperature_calculator import TemperatureCalculator
from kelvin_converter.utils.math_helpers import round_half_even

__all__ = [
    "convert",
    "TemperatureCalculator",
    "TemperatureScale",
    "UnknownScaleError",
    "round_half_even",
]
