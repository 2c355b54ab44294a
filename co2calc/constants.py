"""
constants.py – Transport modes, display metadata, carbon-credit defaults,
and the labels / thresholds used by the presenter.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from co2calc.errors import InvalidModeError


# ── Transport modes (declaration order is the tie-break order) ─
class TransportMode(str, Enum):
    BICYCLE = "bicycle"
    CAR = "car"
    BUS = "bus"
    TRUCK = "truck"

    @classmethod
    def parse(cls, value: Any) -> "TransportMode":
        """
        Coerce *value* to a TransportMode.

        Accepts a member or a string (trimmed, case-insensitive).
        Raises InvalidModeError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidModeError(value)


BASELINE_MODE = TransportMode.CAR


@dataclass(frozen=True)
class ModeInfo:
    """Display metadata for one transport mode."""

    label: str
    icon: str
    color: str


TRANSPORT_MODES: Mapping[TransportMode, ModeInfo] = MappingProxyType({
    TransportMode.BICYCLE: ModeInfo(label="Bicicleta", icon="🚲", color="#3b82f6"),
    TransportMode.CAR:     ModeInfo(label="Carro",     icon="🚗", color="#ef4444"),
    TransportMode.BUS:     ModeInfo(label="Ônibus",    icon="🚌", color="#f59e0b"),
    TransportMode.TRUCK:   ModeInfo(label="Caminhão",  icon="🚚", color="#6366f1"),
})


# ── Carbon credits ────────────────────────────────────────────
KG_PER_CREDIT = 1000.0      # 1 credit = 1 t CO₂
PRICE_MIN_BRL = 50.0
PRICE_MAX_BRL = 150.0

# ── Rounding (decimal places) ─────────────────────────────────
EMISSION_DECIMALS = 2
PERCENT_DECIMALS = 2
CREDIT_DECIMALS = 4
PRICE_DECIMALS = 2

# ── Presenter: number / currency convention (pt-BR) ───────────
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","
CURRENCY_SYMBOL = "R$"

# ── Presenter: comparison bar colours by share of max emission ─
# (upper bound in %, colour); anything above the last bound is red.
BAR_COLOR_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (25.0, "#10b981"),    # green
    (75.0, "#f59e0b"),    # amber
    (100.0, "#f97316"),   # orange
)
BAR_COLOR_OVERFLOW = "#ef4444"

# ── Presenter: tip shown under the comparison ─────────────────
TIP_BY_BEST_MODE: Mapping[TransportMode, str] = MappingProxyType({
    TransportMode.BICYCLE: "🚲 Bicicleta é a opção mais sustentável! Zero emissões de CO₂.",
    TransportMode.BUS: (
        "🚌 Usar ônibus é uma ótima opção! "
        "Compartilhar transporte reduz emissões por pessoa."
    ),
})
TIP_DEFAULT = "⚠️ Considere usar transporte público ou bicicleta para reduzir emissões."

# ── Distance field helper text ────────────────────────────────
DISTANCE_STATUS_INCOMPLETE = "incomplete"
DISTANCE_STATUS_FOUND = "found"
DISTANCE_STATUS_NOT_FOUND = "not_found"
DISTANCE_STATUS_MANUAL = "manual"

HINT_COLOR_NEUTRAL = "#6b7280"
HINT_COLOR_SUCCESS = "#10b981"
HINT_COLOR_WARNING = "#f59e0b"

DISTANCE_HINTS: Mapping[str, tuple[str, str]] = MappingProxyType({
    DISTANCE_STATUS_INCOMPLETE: (
        "A distância será preenchida automaticamente", HINT_COLOR_NEUTRAL,
    ),
    DISTANCE_STATUS_FOUND: (
        "✓ Distância encontrada automaticamente", HINT_COLOR_SUCCESS,
    ),
    DISTANCE_STATUS_NOT_FOUND: (
        '⚠ Rota não encontrada. Marque "inserir distância manualmente" para prosseguir',
        HINT_COLOR_WARNING,
    ),
    DISTANCE_STATUS_MANUAL: (
        "Digite a distância manualmente em quilômetros", HINT_COLOR_NEUTRAL,
    ),
})
