"""Shared fixtures: default configuration and the components built from it."""
import pytest

from co2calc.config import CalculatorConfig, CreditSettings
from co2calc.emission_factors import EmissionModel
from co2calc.calculations import ComparisonEngine, CreditEstimator
from co2calc.routes import RouteTable
from co2calc.service import Components


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def components(config):
    return Components.from_config(config)


@pytest.fixture
def table():
    return RouteTable.builtin()


@pytest.fixture
def model():
    return EmissionModel()


@pytest.fixture
def engine(model):
    return ComparisonEngine(model)


@pytest.fixture
def estimator():
    return CreditEstimator(CreditSettings())
