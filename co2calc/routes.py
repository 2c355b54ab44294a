"""
routes.py – Static route table with bidirectional distance lookup.

Lookups are case-insensitive and ignore surrounding whitespace; the stored
spelling is what ``list_cities`` returns.  A stored route (A, B) answers both
A → B and B → A with the same distance.

Usage
──────
    from co2calc.routes import RouteTable

    table = RouteTable.builtin()
    table.find_distance(" são paulo, sp ", "RIO DE JANEIRO, RJ")   # 430.0
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from pydantic import ValidationError

from co2calc.errors import InvalidInputError, RouteNotFoundError
from co2calc.routes_data import BUILTIN_ROUTES
from co2calc.schemas import RouteRecord
from co2calc.validators import normalise_city

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    origin: str
    destination: str
    distance_km: float


# ─────────────────────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────────────────────

def routes_from_records(records: Iterable[Mapping[str, Any]]) -> tuple[Route, ...]:
    """
    Validate plain mappings (``origin``, ``destination``, ``distanceKm`` or
    ``distance_km``) and return them as Route objects.

    Raises InvalidInputError naming the first bad row.
    """
    routes: list[Route] = []
    for index, raw in enumerate(records):
        try:
            record = RouteRecord.model_validate(raw)
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid route at index {index}: {exc}") from exc
        routes.append(Route(record.origin, record.destination, record.distance_km))
    return tuple(routes)


def builtin_routes() -> tuple[Route, ...]:
    """The bundled Brazilian route table."""
    return tuple(Route(o, d, float(km)) for o, d, km in BUILTIN_ROUTES)


def load_routes_file(path: str | Path) -> tuple[Route, ...]:
    """
    Read a JSON array of route records from *path*.

    Raises InvalidInputError if the file is not UTF-8 JSON holding an array
    of valid routes.
    OSError propagates for unreadable files.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"{path} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise InvalidInputError(f"{path} must contain a JSON array of routes")
    routes = routes_from_records(data)
    logger.info("Loaded %d route(s) from %s", len(routes), path)
    return routes


# ─────────────────────────────────────────────────────────────
# Table
# ─────────────────────────────────────────────────────────────

class RouteTable:
    """Immutable set of known city-pair distances."""

    def __init__(self, routes: Sequence[Route]) -> None:
        self._routes = tuple(routes)
        # (origin_key, destination_key) → km, both orientations; first route wins.
        index: dict[tuple[str, str], float] = {}
        for route in self._routes:
            a = normalise_city(route.origin)
            b = normalise_city(route.destination)
            index.setdefault((a, b), route.distance_km)
            index.setdefault((b, a), route.distance_km)
        self._index = index
        self._cities = sorted(
            {r.origin for r in self._routes} | {r.destination for r in self._routes}
        )

    @classmethod
    def builtin(cls) -> "RouteTable":
        return cls(builtin_routes())

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "RouteTable":
        return cls(routes_from_records(records))

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def list_cities(self) -> list[str]:
        """Every distinct origin / destination, sorted, verbatim spelling."""
        return list(self._cities)

    def find_distance(self, origin: Any, destination: Any) -> float | None:
        """
        Distance in km between *origin* and *destination* in either direction,
        or None when no stored route matches.  Blank input never matches.
        """
        a = normalise_city(origin)
        b = normalise_city(destination)
        if not a or not b:
            return None
        distance = self._index.get((a, b))
        if distance is None:
            logger.info("No route for '%s' → '%s'", origin, destination)
        return distance

    def require_distance(self, origin: Any, destination: Any) -> float:
        """Like ``find_distance`` but raises RouteNotFoundError on a miss."""
        distance = self.find_distance(origin, destination)
        if distance is None:
            raise RouteNotFoundError(str(origin), str(destination))
        return distance
