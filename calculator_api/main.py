"""
main.py – FastAPI JSON API for the trip CO₂ calculator.

Start:
    cd /path/to/project
    uvicorn calculator_api.main:app --reload --port 8000

All endpoints are stateless: every request computes fresh results from the
configuration loaded at startup.
"""
from __future__ import annotations

import logging
from dataclasses import asdict
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from co2calc.config import CalculatorConfig, get_config
from co2calc.emission_factors import mode_info
from co2calc.errors import InvalidInputError, InvalidModeError, RouteNotFoundError
from co2calc.presenter import (
    distance_hint,
    render_comparison,
    render_credits,
    render_results,
)
from co2calc.schemas import TripRequest
from co2calc.service import Components, calculate_trip, resolve_distance

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-8s %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(
    title="Trip CO₂ Calculator API",
    version="1.0.0",
    description="Trip emissions by transport mode, cross-mode comparison and carbon credits.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_settings() -> CalculatorConfig:
    config = get_config()
    logging.getLogger().setLevel(config.log_level)
    log.info("Loaded %d route(s) from %s", len(config.routes), config.routes_source)
    return config


@lru_cache(maxsize=1)
def get_components() -> Components:
    return Components.from_config(get_settings())


@app.get("/api/cities", summary="Every city in the route table")
def cities(components: Components = Depends(get_components)):
    """Sorted, deduplicated city names, as stored."""
    return components.routes.list_cities()


@app.get("/api/modes", summary="Transport modes with factors and display metadata")
def modes(components: Components = Depends(get_components)):
    """Returns [{mode, label, icon, color, factor_kg_per_km}] in declaration order."""
    return [
        {
            "mode": mode.value,
            "label": mode_info(mode).label,
            "icon": mode_info(mode).icon,
            "color": mode_info(mode).color,
            "factor_kg_per_km": factor,
            "baseline": mode == components.comparison.baseline,
        }
        for mode, factor in components.model.factors.items()
    ]


@app.get("/api/distance", summary="Distance between two cities")
def distance(
    origin: str = "",
    destination: str = "",
    components: Components = Depends(get_components),
):
    """
    Returns the lookup status (incomplete | found | not_found), the distance
    when found, and the helper text for the distance field.
    """
    lookup = resolve_distance(components.routes, origin, destination)
    return {
        "origin": origin,
        "destination": destination,
        "status": lookup.status,
        "distance_km": lookup.distance_km,
        "hint": distance_hint(lookup).as_dict(),
    }


@app.get("/api/compare", summary="Every mode ranked by emission for a distance")
def compare(
    distance_km: float = Query(..., description="Distance in km"),
    selected: Optional[str] = Query(None, description="Mode to highlight"),
    components: Components = Depends(get_components),
):
    """Returns the ranked results and the comparison view."""
    try:
        results = components.comparison.all_modes(distance_km)
        view = render_comparison(results, selected)
    except InvalidModeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {
        "distance_km": distance_km,
        "results": [asdict(r) for r in results],
        "view": view.as_dict(),
    }


@app.get("/api/credits", summary="Carbon credits and offset price for an emission")
def credits(
    emission_kg: float = Query(..., description="kg CO₂"),
    config: CalculatorConfig = Depends(get_settings),
    components: Components = Depends(get_components),
):
    try:
        estimate = components.credits.estimate(emission_kg)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {
        "emission_kg": emission_kg,
        "estimate": asdict(estimate),
        "view": render_credits(estimate, config.credits.kg_per_credit).as_dict(),
    }


@app.post("/api/calculate", summary="Full calculation for one trip")
def calculate(
    body: TripRequest,
    config: CalculatorConfig = Depends(get_settings),
    components: Components = Depends(get_components),
):
    """
    Emission for the selected mode, the ranked comparison, savings vs car and
    the carbon-credit estimate, plus the display records for each section.
    """
    try:
        calc = calculate_trip(body, components)
    except RouteNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidModeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "calculation": asdict(calc),
        "results": render_results(calc).as_dict(),
        "comparison": render_comparison(calc.comparison, calc.mode).as_dict(),
        "credits": render_credits(calc.credits, config.credits.kg_per_credit).as_dict(),
    }


@app.get("/health")
def health():
    return {"status": "ok"}
