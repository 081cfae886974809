"""Tests for engine/orchestrator.py — explicit time-base routing."""

from __future__ import annotations

from frandy_simulator.config import Scenario, SimulationConfig
from frandy_simulator.engine.activation import simulate
from frandy_simulator.engine.orchestrator import run_scenario
from frandy_simulator.models.results import QuarterlySimulationResult, SimulationResult


def test_default_routes_to_monthly_activation(scenario: Scenario):
    result = run_scenario(scenario)
    assert isinstance(result, SimulationResult)
    assert result.time_base == "monthly_activation"
    assert len(result.monthly_ledger) == 12


def test_matches_direct_call(onboarding_scenario: Scenario):
    s = onboarding_scenario
    direct = simulate(s.tiers, s.allocation, s.brand_distribution, s.onboarding_costs, True)
    assert run_scenario(s) == direct


def test_quarterly_influx_route():
    scenario = Scenario(simulation=SimulationConfig(time_base="quarterly_influx"))
    result = run_scenario(scenario)
    assert isinstance(result, QuarterlySimulationResult)
    assert len(result.quarterly_ledger) == 4


def test_time_bases_differ_for_same_inputs(scenario: Scenario):
    quarterly = scenario.model_copy(update={
        "simulation": SimulationConfig(time_base="quarterly_influx"),
    })
    assert run_scenario(scenario).total_revenue != run_scenario(quarterly).total_revenue


def test_default_scenario_is_balanced_and_runnable(scenario: Scenario):
    assert sum(a.total for a in scenario.allocation) == 45
    assert run_scenario(scenario).total_revenue == 541_000_000
