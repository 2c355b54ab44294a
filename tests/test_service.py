"""
Unit tests for co2calc/service.py – distance resolution and the full
calculate flow.
"""
from unittest.mock import patch

import pytest

from co2calc.config import CalculatorConfig, CreditSettings
from co2calc.constants import TransportMode
from co2calc.errors import InvalidInputError, InvalidModeError, RouteNotFoundError
from co2calc.routes import Route
from co2calc.schemas import TripRequest
from co2calc.service import Components, DistanceLookup, calculate_trip, resolve_distance


class TestResolveDistance:

    def test_found(self, table):
        assert resolve_distance(table, "Santos, SP", "São Paulo, SP") == DistanceLookup("found", 72)

    def test_not_found(self, table):
        assert resolve_distance(table, "Santos, SP", "Manaus, AM").status == "not_found"

    @pytest.mark.parametrize("origin, destination", [("", "Santos, SP"), ("Santos, SP", "  "), (None, None)])
    def test_incomplete(self, table, origin, destination):
        lookup = resolve_distance(table, origin, destination)
        assert lookup == DistanceLookup("incomplete")

    def test_manual_distance_wins(self, table):
        lookup = resolve_distance(table, "Santos, SP", "São Paulo, SP", "80,5")
        assert lookup == DistanceLookup("manual", 80.5)

    def test_blank_manual_distance_falls_back_to_table(self, table):
        assert resolve_distance(table, "Santos, SP", "São Paulo, SP", "  ").status == "found"

    def test_bad_manual_distance_rejected(self, table):
        with pytest.raises(InvalidInputError):
            resolve_distance(table, "A", "B", "-3")


class TestCalculateTrip:

    def test_car_trip(self, components):
        calc = calculate_trip(
            {"origin": " São Paulo, SP ", "destination": "Rio de Janeiro, RJ", "mode": "car"},
            components,
        )
        assert calc.origin == "São Paulo, SP"
        assert calc.mode is TransportMode.CAR
        assert calc.distance_km == 430
        assert calc.distance_source == "found"
        assert calc.emission == 51.60
        assert calc.savings is None
        assert calc.credits.credits == 0.0516
        assert len(calc.comparison) == 4

    def test_bicycle_saves_everything(self, components):
        calc = calculate_trip(
            TripRequest(origin="São Paulo, SP", destination="Rio de Janeiro, RJ", mode="bicycle"),
            components,
        )
        assert calc.emission == 0
        assert calc.savings.saved_kg == 51.60
        assert calc.savings.percentage == 100.00
        assert calc.credits.price.max == 0

    def test_truck_costs_more(self, components):
        calc = calculate_trip(
            {"origin": "São Paulo, SP", "destination": "Rio de Janeiro, RJ", "mode": "truck"},
            components,
        )
        assert calc.savings.saved_kg < 0
        assert calc.savings.percentage < 0

    def test_manual_distance_for_unknown_route(self, components):
        calc = calculate_trip(
            {"origin": "Lisboa", "destination": "Porto", "mode": "bus", "distance_km": "313"},
            components,
        )
        assert calc.distance_source == "manual"
        assert calc.distance_km == 313.0
        # 313 × 0.089 = 27.857
        assert calc.emission == 27.86

    def test_unknown_route_without_distance(self, components):
        with pytest.raises(RouteNotFoundError):
            calculate_trip({"origin": "Lisboa", "destination": "Porto", "mode": "car"}, components)

    def test_missing_city(self, components):
        with pytest.raises(InvalidInputError, match="required"):
            calculate_trip({"origin": "", "destination": "Porto", "mode": "car", "distance_km": 5}, components)

    def test_unknown_mode(self, components):
        with pytest.raises(InvalidModeError):
            calculate_trip({"origin": "A", "destination": "B", "mode": "plane", "distance_km": 5}, components)

    def test_malformed_request(self, components):
        with pytest.raises(InvalidInputError, match="Invalid trip request"):
            calculate_trip({"origin": "A", "destination": "B"}, components)

    def test_independent_calls(self, components):
        request = {"origin": "Curitiba, PR", "destination": "São Paulo, SP", "mode": "bus"}
        assert calculate_trip(request, components) == calculate_trip(request, components)

    def test_components_follow_config(self):
        config = CalculatorConfig(
            routes=(Route("A", "B", 1000.0),),
            credits=CreditSettings(kg_per_credit=100, price_min=1, price_max=3),
        )
        calc = calculate_trip({"origin": "b", "destination": "a", "mode": "car"}, Components.from_config(config))
        # 1000 × 0.12 = 120 kg → 1.2 credits → R$ 1.20 – 3.60
        assert calc.emission == 120.0
        assert calc.credits.credits == 1.2
        assert calc.credits.price.min == 1.2
        assert calc.credits.price.max == 3.6

    def test_table_is_consulted_once(self, components):
        with patch.object(components.routes, "find_distance", return_value=100.0) as find:
            calc = calculate_trip({"origin": "A", "destination": "B", "mode": "car"}, components)
        find.assert_called_once_with("A", "B")
        assert calc.emission == 12.0

    def test_logs_one_line_per_trip(self, components):
        with patch("co2calc.service.log") as mock_log:
            calculate_trip({"origin": "Recife, PE", "destination": "Caruaru, PE", "mode": "bus"}, components)
        mock_log.info.assert_called_once()
        assert mock_log.info.call_args.args[1:3] == ("Recife, PE", "Caruaru, PE")

    def test_route_lookup_goes_through_require_distance(self, components):
        with patch.object(
            components.routes, "require_distance", side_effect=RouteNotFoundError("A", "B")
        ) as require:
            with pytest.raises(RouteNotFoundError):
                calculate_trip({"origin": "A", "destination": "B", "mode": "car"}, components)
        require.assert_called_once_with("A", "B")

    def test_manual_distance_skips_route_table(self, components):
        with patch.object(components.routes, "require_distance") as require:
            calculate_trip({"origin": "A", "destination": "B", "mode": "car", "distance_km": 10}, components)
        require.assert_not_called()
