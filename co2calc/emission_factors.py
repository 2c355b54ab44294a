"""
emission_factors.py – Per-km emission factors and the emission model.

All factors are in kg CO₂ per kilometre travelled, averaged for Brazil.

Rounding
────────
Results are rounded half-up (``decimal.ROUND_HALF_UP``) on the shortest
decimal representation of the float, so ``430 × 0.12`` (51.599999…) gives
51.60 and 2.675 gives 2.68.  Every module rounds through ``round_half_up``.
"""
from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Any, Mapping

from co2calc.constants import EMISSION_DECIMALS, TRANSPORT_MODES, ModeInfo, TransportMode
from co2calc.errors import InvalidInputError
from co2calc.validators import require_non_negative

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
# Factors (kg CO₂ / km)
# ─────────────────────────────────────────────────────────────
DEFAULT_EMISSION_FACTORS: Mapping[TransportMode, float] = MappingProxyType({
    TransportMode.BICYCLE: 0.0,     # zero emissions
    TransportMode.CAR:     0.12,    # ~120 g CO₂/km
    TransportMode.BUS:     0.089,   # ~89 g CO₂/km (shared transport)
    TransportMode.TRUCK:   0.96,    # ~960 g CO₂/km
})


def quantize_half_up(value: float, places: int) -> Decimal:
    """
    *value* as a Decimal with *places* decimals, halves away from zero.

    Precision grows with the magnitude, so any finite float quantizes.
    InvalidInputError for NaN or infinity (e.g. a product that overflowed).
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(f"Result is not a finite number: {value}")
    amount = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_half_up(value: float, places: int) -> float:
    """Round *value* to *places* decimals, halves away from zero."""
    return float(quantize_half_up(value, places))


def mode_info(mode: Any) -> ModeInfo:
    """Return label / icon / colour for *mode*."""
    return TRANSPORT_MODES[TransportMode.parse(mode)]


class EmissionModel:
    """Maps (distance, mode) → kg CO₂ using a fixed factor table."""

    def __init__(self, factors: Mapping[TransportMode, float] = DEFAULT_EMISSION_FACTORS) -> None:
        table: dict[TransportMode, float] = {}
        for key, factor in factors.items():
            table[TransportMode.parse(key)] = require_non_negative(factor, f"factor[{key}]")
        missing = [m.value for m in TransportMode if m not in table]
        if missing:
            raise InvalidInputError(f"No emission factor for mode(s): {', '.join(missing)}")
        self._factors = MappingProxyType({m: table[m] for m in TransportMode})

    @property
    def factors(self) -> Mapping[TransportMode, float]:
        return self._factors

    @property
    def modes(self) -> tuple[TransportMode, ...]:
        """Every mode, in declaration order."""
        return tuple(self._factors)

    def factor_for(self, mode: Any) -> float:
        """kg CO₂ per km for *mode*; InvalidModeError outside the closed set."""
        return self._factors[TransportMode.parse(mode)]

    def emission(self, distance_km: float, mode: Any) -> float:
        """
        Emission for a trip, rounded to 2 decimals.

        Raises InvalidInputError for a negative or non-finite distance and
        InvalidModeError for an unknown mode.
        """
        distance = require_non_negative(distance_km, "distance_km")
        factor = self.factor_for(mode)
        emission_kg = round_half_up(distance * factor, EMISSION_DECIMALS)
        logger.debug(
            "%s | %.1f km × %.3f = %.2f kg CO₂",
            TransportMode.parse(mode).value, distance, factor, emission_kg,
        )
        return emission_kg
