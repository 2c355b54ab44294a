"""
calculations.py – Cross-mode comparison, savings, and carbon-credit estimates.

Formula references
────────────────────────────
 Quantity              Formula                                     Decimals
 ─────────────────────────────────────────────────────────────────────────
 Emission              distance_km × factor(mode)                        2
 % vs car              emission ÷ car_emission × 100  (car = 0 → 0)      2
 Saved kg              baseline − emission  (negative = costs more)      2
 Saved %               saved_kg ÷ baseline × 100  (baseline = 0 → 0)     2
 Credits               emission_kg ÷ kg_per_credit                       4
 Price min / max       credits × price_min / price_max                   2
 Price average         (min + max) ÷ 2                                   2

Every function is pure: identical inputs give identical outputs and nothing
is cached between calls.

Usage
──────
    from co2calc.calculations import ComparisonEngine, CreditEstimator
    from co2calc.config import CreditSettings
    from co2calc.emission_factors import EmissionModel

    engine = ComparisonEngine(EmissionModel())
    ranked = engine.all_modes(430)            # bicycle, bus, car, truck
    estimate = CreditEstimator(CreditSettings()).estimate(51.60)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from co2calc.config import CreditSettings
from co2calc.constants import (
    BASELINE_MODE,
    CREDIT_DECIMALS,
    EMISSION_DECIMALS,
    PERCENT_DECIMALS,
    PRICE_DECIMALS,
    TransportMode,
)
from co2calc.emission_factors import EmissionModel, mode_info, round_half_up
from co2calc.errors import InvalidInputError
from co2calc.validators import require_non_negative

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Result dataclasses
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ModeResult:
    """Emission of one mode for a given distance, relative to the car."""
    mode: TransportMode
    emission: float             # kg CO₂
    percentage_vs_car: float    # car == 100.0

    @property
    def label(self) -> str:
        return mode_info(self.mode).label

    @property
    def icon(self) -> str:
        return mode_info(self.mode).icon

    @property
    def color(self) -> str:
        return mode_info(self.mode).color


@dataclass(frozen=True)
class SavingsResult:
    saved_kg: float
    percentage: float


@dataclass(frozen=True)
class PriceRange:
    min: float
    max: float
    average: float


@dataclass(frozen=True)
class CreditEstimate:
    credits: float
    price: PriceRange


def _percentage(part: float, whole: float) -> float:
    """part ÷ whole × 100 rounded to 2 decimals; 0 when *whole* is 0."""
    if whole == 0:
        return 0.0
    return round_half_up(part / whole * 100, PERCENT_DECIMALS)


# ─────────────────────────────────────────────────────────────────────────────
# Comparison across modes
# ─────────────────────────────────────────────────────────────────────────────

class ComparisonEngine:
    """Ranks every transport mode by emission against a baseline mode."""

    def __init__(self, model: EmissionModel, baseline: Any = BASELINE_MODE) -> None:
        self.model = model
        self.baseline = TransportMode.parse(baseline)

    def all_modes(self, distance_km: float) -> list[ModeResult]:
        """
        One ModeResult per mode, ascending by emission.

        Ties keep declaration order (bicycle, car, bus, truck).  At 0 km every
        percentage is 0.
        """
        baseline_emission = self.model.emission(distance_km, self.baseline)
        results: list[ModeResult] = []
        for mode in self.model.modes:
            emission = self.model.emission(distance_km, mode)
            results.append(ModeResult(
                mode=mode,
                emission=emission,
                percentage_vs_car=_percentage(emission, baseline_emission),
            ))
        ranked = sorted(results, key=lambda r: r.emission)
        logger.debug(
            "Ranked %s km: %s",
            distance_km, ", ".join(f"{r.mode.value}={r.emission:.2f}" for r in ranked),
        )
        return ranked

    def savings(self, emission: float, baseline_emission: float) -> SavingsResult:
        """
        CO₂ saved by choosing *emission* over *baseline_emission*.

        A negative result means the chosen mode emits more than the baseline.
        """
        emission = require_non_negative(emission, "emission")
        baseline_emission = require_non_negative(baseline_emission, "baseline_emission")
        saved_kg = round_half_up(baseline_emission - emission, EMISSION_DECIMALS)
        return SavingsResult(
            saved_kg=saved_kg,
            percentage=_percentage(baseline_emission - emission, baseline_emission),
        )


def best_mode(results: Sequence[ModeResult]) -> ModeResult:
    """Lowest-emission entry; the first one wins a tie."""
    if not results:
        raise InvalidInputError("No mode results to choose from")
    return min(results, key=lambda r: r.emission)


# ─────────────────────────────────────────────────────────────────────────────
# Carbon credits
# ─────────────────────────────────────────────────────────────────────────────

class CreditEstimator:
    """Converts kg CO₂ into carbon credits and an offset price band."""

    def __init__(self, settings: CreditSettings) -> None:
        self.settings = settings

    def credits_for(self, emission_kg: float) -> float:
        """emission_kg ÷ kg_per_credit, 4 decimals."""
        emission_kg = require_non_negative(emission_kg, "emission_kg")
        return round_half_up(emission_kg / self.settings.kg_per_credit, CREDIT_DECIMALS)

    def price_for(self, credits: float) -> PriceRange:
        """Min / max / average offset price for *credits*, 2 decimals each."""
        credits = require_non_negative(credits, "credits")
        low = credits * self.settings.price_min
        high = credits * self.settings.price_max
        return PriceRange(
            min=round_half_up(low, PRICE_DECIMALS),
            max=round_half_up(high, PRICE_DECIMALS),
            average=round_half_up((low + high) / 2, PRICE_DECIMALS),
        )

    def estimate(self, emission_kg: float) -> CreditEstimate:
        credits = self.credits_for(emission_kg)
        estimate = CreditEstimate(credits=credits, price=self.price_for(credits))
        logger.debug(
            "%.2f kg CO₂ → %.4f credit(s), R$ %.2f–%.2f",
            emission_kg, credits, estimate.price.min, estimate.price.max,
        )
        return estimate
