"""
service.py – The "calculate" submit flow, independent of any UI.

Used by the CLI (co2calc.main) and the HTTP API (calculator_api.main).

Steps for one request
---------------------
1. Validate the submitted form values (TripRequest).
2. Resolve the distance: a manual distance wins, otherwise the route table.
3. Emission for the selected mode.
4. Ranked comparison of every mode.
5. Savings against the car (only when the selected mode is not the car).
6. Carbon-credit estimate for the selected emission.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import ValidationError

from co2calc.calculations import (
    ComparisonEngine,
    CreditEstimate,
    CreditEstimator,
    ModeResult,
    SavingsResult,
)
from co2calc.config import CalculatorConfig
from co2calc.constants import (
    DISTANCE_STATUS_FOUND,
    DISTANCE_STATUS_INCOMPLETE,
    DISTANCE_STATUS_MANUAL,
    DISTANCE_STATUS_NOT_FOUND,
    TransportMode,
)
from co2calc.emission_factors import EmissionModel
from co2calc.errors import InvalidInputError
from co2calc.routes import RouteTable
from co2calc.schemas import TripRequest
from co2calc.validators import parse_distance

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Components:
    """The four calculation components built from one configuration."""

    routes: RouteTable
    model: EmissionModel
    comparison: ComparisonEngine
    credits: CreditEstimator

    @classmethod
    def from_config(cls, config: CalculatorConfig) -> "Components":
        model = EmissionModel(config.emission_factors)
        return cls(
            routes=RouteTable(config.routes),
            model=model,
            comparison=ComparisonEngine(model),
            credits=CreditEstimator(config.credits),
        )


@dataclass(frozen=True)
class DistanceLookup:
    """Outcome of resolving the distance field."""

    status: str                     # incomplete | found | not_found | manual
    distance_km: float | None = None


@dataclass(frozen=True)
class TripCalculation:
    """Everything computed for one submitted trip."""

    origin: str
    destination: str
    mode: TransportMode
    distance_km: float
    distance_source: str            # found | manual
    emission: float
    comparison: list[ModeResult]
    savings: SavingsResult | None
    credits: CreditEstimate


# ─────────────────────────────────────────────────────────────────────────────
# Distance
# ─────────────────────────────────────────────────────────────────────────────

def _has_manual_distance(value: Any) -> bool:
    return value is not None and not (isinstance(value, str) and not value.strip())


def resolve_distance(
    table: RouteTable,
    origin: Any,
    destination: Any,
    manual_distance: Any = None,
) -> DistanceLookup:
    """
    Decide which distance a trip uses.

    A non-empty *manual_distance* is parsed and used as-is.  Otherwise both
    cities are required and the route table is consulted.
    """
    if _has_manual_distance(manual_distance):
        return DistanceLookup(DISTANCE_STATUS_MANUAL, parse_distance(manual_distance))

    if not str(origin or "").strip() or not str(destination or "").strip():
        return DistanceLookup(DISTANCE_STATUS_INCOMPLETE)

    distance = table.find_distance(origin, destination)
    if distance is None:
        return DistanceLookup(DISTANCE_STATUS_NOT_FOUND)
    return DistanceLookup(DISTANCE_STATUS_FOUND, distance)


# ─────────────────────────────────────────────────────────────────────────────
# Calculation
# ─────────────────────────────────────────────────────────────────────────────

def _coerce_request(request: TripRequest | Mapping[str, Any]) -> TripRequest:
    if isinstance(request, TripRequest):
        return request
    try:
        return TripRequest.model_validate(request)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid trip request: {exc}") from exc


def calculate_trip(
    request: TripRequest | Mapping[str, Any],
    components: Components,
) -> TripCalculation:
    """
    Run the full calculation for one submitted trip.

    Raises
    ------
    InvalidModeError    mode is not bicycle / car / bus / truck
    InvalidInputError   malformed request, bad manual distance, or a city missing
    RouteNotFoundError  no stored route and no manual distance
    """
    req = _coerce_request(request)
    mode = TransportMode.parse(req.mode)
    if not req.origin.strip() or not req.destination.strip():
        raise InvalidInputError("Origin and destination are required")

    if _has_manual_distance(req.distance_km):
        distance_km = parse_distance(req.distance_km)
        distance_source = DISTANCE_STATUS_MANUAL
    else:
        distance_km = components.routes.require_distance(req.origin, req.destination)
        distance_source = DISTANCE_STATUS_FOUND

    emission = components.model.emission(distance_km, mode)
    comparison = components.comparison.all_modes(distance_km)

    savings: SavingsResult | None = None
    baseline = components.comparison.baseline
    if mode != baseline:
        baseline_emission = components.model.emission(distance_km, baseline)
        savings = components.comparison.savings(emission, baseline_emission)

    credits = components.credits.estimate(emission)

    log.info(
        "%s → %s | %.1f km (%s) by %s = %.2f kg CO₂",
        req.origin.strip(), req.destination.strip(), distance_km, distance_source,
        mode.value, emission,
    )
    return TripCalculation(
        origin=req.origin.strip(),
        destination=req.destination.strip(),
        mode=mode,
        distance_km=distance_km,
        distance_source=distance_source,
        emission=emission,
        comparison=comparison,
        savings=savings,
        credits=credits,
    )
