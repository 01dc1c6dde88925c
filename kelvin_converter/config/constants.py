"""
Central configuration and constants.

All magic numbers and logging settings live here so every other module
imports from a single source of truth.
"""

from decimal import ROUND_HALF_EVEN, Decimal

# ── Scale offsets ─────────────────────────────────────────────────────────────
CENTIGRADE_KELVIN_OFFSET: Decimal = Decimal("273.15")
FAHRENHEIT_RANKINE_OFFSET: Decimal = Decimal("459.67")

# Rankine and Kelvin degrees differ by 5/9; kept as parts to preserve
# multiply-then-divide order.
RANKINE_KELVIN_NUMERATOR: int = 5
RANKINE_KELVIN_DENOMINATOR: int = 9

# ── Decimal arithmetic ────────────────────────────────────────────────────────
DECIMAL_PRECISION: int = 28
DECIMAL_ROUNDING: str = ROUND_HALF_EVEN
DEFAULT_ROUNDING_PLACES: int = 2

# ── Scale lookup ──────────────────────────────────────────────────────────────
BLANK_SCALE: str = " "   # stands in for an empty or missing scale name

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
