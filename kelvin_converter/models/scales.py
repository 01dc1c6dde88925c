"""
Temperature scales understood by the converter.

A scale name is matched on its first letter only, case-insensitively, so
``"Rankin"``, ``"rankine"`` and ``"R"`` all select :attr:`TemperatureScale.RANKINE`.
"""

from enum import Enum

from kelvin_converter.config.constants import BLANK_SCALE


class UnknownScaleError(KeyError):
    """Raised when a scale name does not start with C, F, R or K."""

    def __init__(self, scale: str | None):
        super().__init__(scale)
        self.scale = scale

    def __str__(self) -> str:
        return f"Unknown scale '{self.scale if self.scale is not None else ''}'"


class TemperatureScale(Enum):
    CENTIGRADE = "C"
    FAHRENHEIT = "F"
    RANKINE = "R"
    KELVIN = "K"

    @classmethod
    def from_identifier(cls, scale: str | None) -> "TemperatureScale":
        """
        Resolve a free-text scale name to a member.

        Args:
            scale: Scale name such as ``"Fahrenheit"``. ``None`` or ``""``
                   is treated as a blank, which never matches.

        Returns:
            The member whose letter equals the upper-cased first character.

        Raises:
            UnknownScaleError: carrying *scale* unchanged.
        """
        letter = (scale or BLANK_SCALE).upper()[0]
        try:
            return cls(letter)
        except ValueError:
            raise UnknownScaleError(scale) from None
