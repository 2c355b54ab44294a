"""
Unit tests for co2calc/presenter.py

Formatting must reproduce the digits computed upstream; renderers only map
results to view records.
"""
import pytest

from co2calc.calculations import CreditEstimate, ModeResult, PriceRange
from co2calc.constants import TIP_DEFAULT, TransportMode
from co2calc.presenter import (
    distance_hint,
    format_currency,
    format_number,
    render_comparison,
    render_credits,
    render_results,
)
from co2calc.service import DistanceLookup, calculate_trip


# ─────────────────────────────────────────────────────────────────────────────
# Number / currency formatting
# ─────────────────────────────────────────────────────────────────────────────

class TestFormatNumber:

    @pytest.mark.parametrize("value, decimals, expected", [
        (1234.56, 2, "1.234,56"),
        (51.6, 2, "51,60"),
        (0, 2, "0,00"),
        (430, 1, "430,0"),
        (1234567.891, 2, "1.234.567,89"),
        (0.0516, 4, "0,0516"),
        (74.17, 1, "74,2"),
        (1000, 0, "1.000"),
        (-361.2, 2, "-361,20"),
    ])
    def test_pt_br_convention(self, value, decimals, expected):
        assert format_number(value, decimals) == expected

    def test_does_not_re_round_computed_values(self):
        # 51.60 came from 51.599999…; it must not show as 51,59
        assert format_number(430 * 0.12, 2) == "51,60"

    def test_half_up(self):
        assert format_number(2.675, 2) == "2,68"
        assert format_number(0.25, 1) == "0,3"

    def test_no_negative_zero(self):
        assert format_number(-0.001, 2) == "0,00"

    def test_huge_value(self):
        assert format_number(1e30, 2) == "1" + ".000" * 10 + ",00"


class TestFormatCurrency:

    def test_reais(self):
        assert format_currency(1234.5) == "R$ 1.234,50"

    def test_small_value(self):
        assert format_currency(2.58) == "R$ 2,58"

    def test_negative(self):
        assert format_currency(-3) == "-R$ 3,00"


# ─────────────────────────────────────────────────────────────────────────────
# render_results
# ─────────────────────────────────────────────────────────────────────────────

class TestRenderResults:

    def test_bus_trip_shows_savings(self, components):
        calc = calculate_trip(
            {"origin": "São Paulo, SP", "destination": "Rio de Janeiro, RJ", "mode": "bus"},
            components,
        )
        view = render_results(calc)

        assert view.route == "São Paulo, SP → Rio de Janeiro, RJ"
        assert view.distance == "430,0"
        assert view.emission == "38,27"
        assert view.mode.label == "Ônibus"
        assert view.mode.icon == "🚌"
        assert view.savings is not None
        assert view.savings.saved_kg == "13,33"
        assert view.savings.percentage == "25,8"
        assert view.savings.baseline_label == "Carro"

    def test_car_trip_has_no_savings(self, components):
        calc = calculate_trip(
            {"origin": "São Paulo, SP", "destination": "Rio de Janeiro, RJ", "mode": "car"},
            components,
        )
        assert render_results(calc).savings is None

    def test_as_dict_is_plain(self, components):
        calc = calculate_trip(
            {"origin": "Recife, PE", "destination": "Caruaru, PE", "mode": "bicycle"},
            components,
        )
        data = render_results(calc).as_dict()
        assert data["mode"]["mode"] == "bicycle"
        assert data["savings"]["percentage"] == "100,0"


# ─────────────────────────────────────────────────────────────────────────────
# render_comparison
# ─────────────────────────────────────────────────────────────────────────────

class TestRenderComparison:

    def test_items_follow_ranking(self, engine):
        view = render_comparison(engine.all_modes(430), "car")

        assert [i.mode.mode for i in view.items] == ["bicycle", "bus", "car", "truck"]
        assert [i.emission for i in view.items] == ["0,00", "38,27", "51,60", "412,80"]
        assert [i.percentage_vs_car for i in view.items] == ["0,0", "74,2", "100,0", "800,0"]

    def test_selected_flag(self, engine):
        view = render_comparison(engine.all_modes(430), "bus")
        assert [i.selected for i in view.items] == [False, True, False, False]

    def test_bars_scale_to_highest_emission(self, engine):
        view = render_comparison(engine.all_modes(430), None)
        widths = {i.mode.mode: i.bar_width for i in view.items}
        colors = {i.mode.mode: i.bar_color for i in view.items}

        assert widths["truck"] == 100.0
        assert widths["bicycle"] == 0.0
        # 51.60 ÷ 412.80 = 12.5 %
        assert widths["car"] == 12.5
        assert colors["bicycle"] == "#10b981"
        assert colors["car"] == "#10b981"
        assert colors["truck"] == "#f97316"

    def test_mid_range_colour(self):
        results = [
            ModeResult(TransportMode.CAR, 50.0, 100.0),
            ModeResult(TransportMode.TRUCK, 100.0, 200.0),
        ]
        view = render_comparison(results)
        assert view.items[0].bar_color == "#f59e0b"

    def test_zero_distance_has_no_bars(self, engine):
        view = render_comparison(engine.all_modes(0), "car")
        assert all(i.bar_width == 0 for i in view.items)

    def test_bicycle_tip(self, engine):
        view = render_comparison(engine.all_modes(100))
        assert view.best_mode == "bicycle"
        assert "Bicicleta" in view.tip

    def test_bus_tip_when_bus_is_cleanest(self):
        results = [
            ModeResult(TransportMode.BUS, 8.9, 74.17),
            ModeResult(TransportMode.CAR, 12.0, 100.0),
        ]
        view = render_comparison(results)
        assert view.best_mode == "bus"
        assert view.tip.startswith("🚌")

    def test_generic_tip_otherwise(self):
        results = [ModeResult(TransportMode.TRUCK, 96.0, 800.0)]
        assert render_comparison(results).tip == TIP_DEFAULT

    def test_empty_results(self):
        view = render_comparison([])
        assert view.items == []
        assert view.tip == TIP_DEFAULT


# ─────────────────────────────────────────────────────────────────────────────
# render_credits
# ─────────────────────────────────────────────────────────────────────────────

class TestRenderCredits:

    def test_fields(self):
        estimate = CreditEstimate(credits=0.0516, price=PriceRange(2.58, 7.74, 5.16))
        view = render_credits(estimate)

        assert view.credits == "0,0516"
        assert view.price_average == "R$ 5,16"
        assert view.price_range == "R$ 2,58 - R$ 7,74"
        assert view.helper == "1 crédito = 1.000 kg CO₂"


# ─────────────────────────────────────────────────────────────────────────────
# distance_hint
# ─────────────────────────────────────────────────────────────────────────────

class TestDistanceHint:

    def test_found(self):
        hint = distance_hint(DistanceLookup("found", 430.0))
        assert hint.message.startswith("✓")
        assert hint.distance == "430,0"
        assert hint.read_only is True

    def test_not_found_asks_for_manual_entry(self):
        hint = distance_hint(DistanceLookup("not_found"))
        assert "manualmente" in hint.message
        assert hint.color == "#f59e0b"
        assert hint.distance is None

    def test_manual_unlocks_field(self):
        assert distance_hint(DistanceLookup("manual", 12.0)).read_only is False

    def test_incomplete(self):
        hint = distance_hint(DistanceLookup("incomplete"))
        assert hint.read_only is True
        assert hint.as_dict()["status"] == "incomplete"
