"""
presenter.py – Turn calculation results into display-ready records.

Nothing here computes emissions.  Each ``render_*`` function maps results to
a frozen dataclass whose fields are either already-formatted strings or plain
values a UI can use directly (colours, bar widths, flags).  ``as_dict`` gives
the JSON form used by the HTTP API.

Numbers follow the pt-BR convention (1.234,56) and prices are shown in reais
(R$ 1.234,56).  Formatting quantizes half-up from the shortest float repr, the
same rule the calculations use, so a value rounded upstream is never
re-rounded to different digits.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Sequence

from co2calc.calculations import CreditEstimate, ModeResult, best_mode
from co2calc.constants import (
    BAR_COLOR_OVERFLOW,
    BAR_COLOR_THRESHOLDS,
    BASELINE_MODE,
    CREDIT_DECIMALS,
    CURRENCY_SYMBOL,
    DECIMAL_SEPARATOR,
    DISTANCE_HINTS,
    DISTANCE_STATUS_FOUND,
    DISTANCE_STATUS_MANUAL,
    KG_PER_CREDIT,
    THOUSANDS_SEPARATOR,
    TIP_BY_BEST_MODE,
    TIP_DEFAULT,
    TransportMode,
)
from co2calc.emission_factors import mode_info, quantize_half_up
from co2calc.service import DistanceLookup, TripCalculation

_SEPARATORS = str.maketrans({",": THOUSANDS_SEPARATOR, ".": DECIMAL_SEPARATOR})


# ─────────────────────────────────────────────────────────────
# Number formatting
# ─────────────────────────────────────────────────────────────

def format_number(value: float, decimals: int = 2) -> str:
    """1234.5 → '1.234,50' (decimals=2)."""
    amount = quantize_half_up(value, decimals)
    if amount == 0:
        amount = abs(amount)    # no "-0,00"
    return f"{amount:,.{decimals}f}".translate(_SEPARATORS)


def format_currency(value: float) -> str:
    """1234.5 → 'R$ 1.234,50';  -3 → '-R$ 3,00'."""
    text = format_number(value, 2)
    if text.startswith("-"):
        return f"-{CURRENCY_SYMBOL} {text[1:]}"
    return f"{CURRENCY_SYMBOL} {text}"


# ─────────────────────────────────────────────────────────────
# View records
# ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ModeView:
    mode: str
    label: str
    icon: str
    color: str


@dataclass(frozen=True)
class SavingsView:
    saved_kg: str           # "12,34"
    percentage: str         # "25,8"
    baseline_label: str


@dataclass(frozen=True)
class ResultsView:
    origin: str
    destination: str
    route: str              # "São Paulo, SP → Rio de Janeiro, RJ"
    distance: str           # 1 decimal
    emission: str           # 2 decimals
    mode: ModeView
    savings: SavingsView | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ComparisonItemView:
    mode: ModeView
    emission: str
    percentage_vs_car: str
    selected: bool
    bar_width: float        # 0–100, share of the highest emission
    bar_color: str


@dataclass(frozen=True)
class ComparisonView:
    items: list[ComparisonItemView] = field(default_factory=list)
    best_mode: str = ""
    tip: str = ""

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CreditsView:
    credits: str            # 4 decimals
    price_average: str
    price_range: str        # "R$ 2,58 - R$ 7,74"
    helper: str

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DistanceHint:
    status: str
    message: str
    color: str
    read_only: bool
    distance: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _mode_view(mode: TransportMode) -> ModeView:
    info = mode_info(mode)
    return ModeView(mode=mode.value, label=info.label, icon=info.icon, color=info.color)


def _bar_color(share: float) -> str:
    for upper, color in BAR_COLOR_THRESHOLDS:
        if share <= upper:
            return color
    return BAR_COLOR_OVERFLOW


# ─────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────

def render_results(calc: TripCalculation) -> ResultsView:
    """Summary card: route, distance, emission, mode, and savings vs car."""
    savings = None
    if calc.mode != BASELINE_MODE and calc.savings is not None:
        savings = SavingsView(
            saved_kg=format_number(calc.savings.saved_kg, 2),
            percentage=format_number(calc.savings.percentage, 1),
            baseline_label=mode_info(BASELINE_MODE).label,
        )
    return ResultsView(
        origin=calc.origin,
        destination=calc.destination,
        route=f"{calc.origin} → {calc.destination}",
        distance=format_number(calc.distance_km, 1),
        emission=format_number(calc.emission, 2),
        mode=_mode_view(calc.mode),
        savings=savings,
    )


def render_comparison(
    results: Sequence[ModeResult],
    selected_mode: Any = None,
) -> ComparisonView:
    """
    One item per mode with a bar scaled to the highest emission, plus a tip
    based on the cleanest mode.
    """
    if not results:
        return ComparisonView(tip=TIP_DEFAULT)

    selected = TransportMode.parse(selected_mode) if selected_mode is not None else None
    max_emission = max(r.emission for r in results)

    items: list[ComparisonItemView] = []
    for r in results:
        share = r.emission / max_emission * 100 if max_emission > 0 else 0.0
        items.append(ComparisonItemView(
            mode=_mode_view(r.mode),
            emission=format_number(r.emission, 2),
            percentage_vs_car=format_number(r.percentage_vs_car, 1),
            selected=r.mode == selected,
            bar_width=round(share, 2),
            bar_color=_bar_color(share),
        ))

    best = best_mode(results)
    return ComparisonView(
        items=items,
        best_mode=best.mode.value,
        tip=TIP_BY_BEST_MODE.get(best.mode, TIP_DEFAULT),
    )


def render_credits(estimate: CreditEstimate, kg_per_credit: float = KG_PER_CREDIT) -> CreditsView:
    """Credits needed and the estimated offset price band."""
    return CreditsView(
        credits=format_number(estimate.credits, CREDIT_DECIMALS),
        price_average=format_currency(estimate.price.average),
        price_range=(
            f"{format_currency(estimate.price.min)} - {format_currency(estimate.price.max)}"
        ),
        helper=f"1 crédito = {format_number(kg_per_credit, 0)} kg CO₂",
    )


def distance_hint(lookup: DistanceLookup) -> DistanceHint:
    """Helper text and state for the distance input."""
    message, color = DISTANCE_HINTS[lookup.status]
    distance = None
    if lookup.distance_km is not None and lookup.status == DISTANCE_STATUS_FOUND:
        distance = format_number(lookup.distance_km, 1)
    return DistanceHint(
        status=lookup.status,
        message=message,
        color=color,
        # Only a manual entry unlocks the field.
        read_only=lookup.status != DISTANCE_STATUS_MANUAL,
        distance=distance,
    )
