"""
config.py – Load and validate the calculator configuration.

Emission factors, carbon-credit constants and the route table are static,
load-time data.  Defaults are built in; a few values can be overridden from
environment variables (or a .env file at the project root).  Call
``get_config()`` once at startup and pass the returned object to every
component.

Variables
---------
CO2CALC_ROUTES_FILE      JSON array of routes replacing the built-in table
CO2CALC_KG_PER_CREDIT    kg CO₂ represented by one carbon credit (default 1000)
CO2CALC_PRICE_MIN_BRL    minimum price per credit (default 50)
CO2CALC_PRICE_MAX_BRL    maximum price per credit (default 150)
CO2CALC_LOG_LEVEL        logging level for the CLI / API (default INFO)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from dotenv import load_dotenv

from co2calc.constants import KG_PER_CREDIT, PRICE_MAX_BRL, PRICE_MIN_BRL, TransportMode
from co2calc.emission_factors import DEFAULT_EMISSION_FACTORS
from co2calc.errors import InvalidInputError
from co2calc.routes import Route, builtin_routes, load_routes_file

logger = logging.getLogger(__name__)

# Project root: the directory holding pyproject.toml
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

_env_file = _PROJECT_ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CreditSettings:
    """Carbon-credit size and price band (BRL per credit)."""

    kg_per_credit: float = KG_PER_CREDIT
    price_min: float = PRICE_MIN_BRL
    price_max: float = PRICE_MAX_BRL


@dataclass(frozen=True)
class CalculatorConfig:
    """Validated, immutable calculator configuration."""

    routes: tuple[Route, ...] = field(default_factory=builtin_routes)
    emission_factors: Mapping[TransportMode, float] = field(
        default_factory=lambda: DEFAULT_EMISSION_FACTORS
    )
    credits: CreditSettings = field(default_factory=CreditSettings)
    log_level: str = "INFO"
    routes_source: str = "builtin"

    def __post_init__(self) -> None:
        # Freeze a caller-supplied dict.
        object.__setattr__(
            self, "emission_factors", MappingProxyType(dict(self.emission_factors))
        )


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {raw!r}") from None


def get_config(routes_file: str | None = None) -> CalculatorConfig:
    """
    Read environment variables, validate them, and return a CalculatorConfig.

    Parameters
    ----------
    routes_file:
        Override CO2CALC_ROUTES_FILE (e.g. from a CLI flag).

    Raises
    ------
    EnvironmentError
        If a variable is malformed, the price band is inverted, or the routes
        file cannot be read.
    """
    credits = CreditSettings(
        kg_per_credit=_float_env("CO2CALC_KG_PER_CREDIT", KG_PER_CREDIT),
        price_min=_float_env("CO2CALC_PRICE_MIN_BRL", PRICE_MIN_BRL),
        price_max=_float_env("CO2CALC_PRICE_MAX_BRL", PRICE_MAX_BRL),
    )
    if credits.kg_per_credit <= 0:
        raise EnvironmentError(
            f"CO2CALC_KG_PER_CREDIT must be > 0, got {credits.kg_per_credit}"
        )
    if credits.price_min < 0 or credits.price_min > credits.price_max:
        raise EnvironmentError(
            "Credit price band must satisfy 0 <= CO2CALC_PRICE_MIN_BRL <= "
            f"CO2CALC_PRICE_MAX_BRL (got {credits.price_min} / {credits.price_max})"
        )

    log_level = (os.environ.get("CO2CALC_LOG_LEVEL") or "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise EnvironmentError(
            f"CO2CALC_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
        )

    routes_file = routes_file or os.environ.get("CO2CALC_ROUTES_FILE") or None
    if routes_file:
        path = Path(routes_file)
        if not path.is_absolute() and not path.exists():
            path = _PROJECT_ROOT / path
        try:
            routes = load_routes_file(path)
        except (OSError, InvalidInputError) as exc:
            raise EnvironmentError(f"Cannot load routes file {path}: {exc}") from exc
        routes_source = str(path)
    else:
        routes = builtin_routes()
        routes_source = "builtin"

    if not routes:
        raise EnvironmentError(f"Route table from {routes_source} is empty")

    logger.debug(
        "Config: %d route(s) from %s, %.0f kg/credit, R$ %.2f–%.2f",
        len(routes), routes_source, credits.kg_per_credit,
        credits.price_min, credits.price_max,
    )
    return CalculatorConfig(
        routes=routes,
        credits=credits,
        log_level=log_level,
        routes_source=routes_source,
    )
