"""Tests for engine/comparison.py — strategy option evaluation."""

from __future__ import annotations

from frandy_simulator.config import BRACKETS, Scenario, StrategyOption
from frandy_simulator.config.options import default_options
from frandy_simulator.engine.allocation import allocation_bracket_totals
from frandy_simulator.engine.comparison import achievement_rate, apply_option, compare_options


def test_achievement_rate():
    assert achievement_rate(500, 1_000) == 50.0
    assert achievement_rate(500, 0) == 0.0


def test_default_options_scored_in_order(scenario: Scenario):
    outcomes = compare_options(scenario)
    assert [o.option.name for o in outcomes] == [o.name for o in default_options()]


def test_price_doubling_doubles_subscription(scenario: Scenario):
    outcome = compare_options(scenario, [StrategyOption(name="x2", price_multiplier=2.0)])[0]
    assert outcome.result.total_revenue == 1_082_000_000
    assert outcome.achievement_rate_pct == 108.2
    assert outcome.is_recommended
    assert outcome.shortfall == 0


def test_overshoot_not_recommended(scenario: Scenario):
    outcome = compare_options(scenario, [StrategyOption(name="x2.2", price_multiplier=2.2)])[0]
    assert outcome.result.total_revenue == 1_190_200_000
    assert not outcome.is_recommended


def test_shortfall_when_target_missed(scenario: Scenario):
    outcome = compare_options(scenario, [StrategyOption(name="base")])[0]
    assert outcome.result.total_revenue == 541_000_000
    assert outcome.shortfall == 459_000_000
    assert not outcome.is_recommended


def test_explicit_target_overrides_scenario(scenario: Scenario):
    outcome = compare_options(scenario, [StrategyOption(name="base")], target_revenue=541_000_000)[0]
    assert outcome.achievement_rate_pct == 100.0
    assert outcome.is_recommended


def test_option_distribution_reapportions_allocation(scenario: Scenario):
    large_focus = default_options()[2]
    adjusted = apply_option(scenario, large_focus)
    totals = allocation_bracket_totals(adjusted.allocation)
    assert [totals[b] for b in BRACKETS] == [0, 5, 15, 15, 10]
    assert adjusted.tiers[0].price("51-100") == 990_000


def test_onboarding_multiplier_scales_fees(scenario: Scenario):
    option = StrategyOption(name="fees", onboarding_multiplier=1.5)
    adjusted = apply_option(scenario, option)
    assert adjusted.onboarding_costs["1-50"] == 3_000_000
    assert adjusted.onboarding_costs["400+"] == 12_000_000


def test_apply_option_leaves_scenario_untouched(scenario: Scenario):
    before = scenario.model_copy(deep=True)
    apply_option(scenario, default_options()[2])
    assert scenario == before


def test_quarterly_time_base_flows_through():
    scenario = Scenario(simulation={"time_base": "quarterly_influx"})
    outcome = compare_options(scenario, [StrategyOption(name="base")])[0]
    assert outcome.result.time_base == "quarterly_influx"
