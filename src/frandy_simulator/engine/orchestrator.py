"""Scenario entry point — routes to the selected revenue time base.

  - ``"monthly_activation"`` → ``activation.simulate``
  - ``"quarterly_influx"``   → ``influx.simulate_quarterly_influx``

The two models produce different numbers for the same inputs; the
returned result's ``time_base`` field names the one that ran.
"""

from __future__ import annotations

from frandy_simulator.config.scenario import Scenario
from frandy_simulator.engine.activation import simulate
from frandy_simulator.engine.influx import simulate_quarterly_influx
from frandy_simulator.models.results import QuarterlySimulationResult, SimulationResult


def run_scenario(scenario: Scenario) -> SimulationResult | QuarterlySimulationResult:
    """Run ``scenario`` on the time base named in ``scenario.simulation``."""
    sim = scenario.simulation

    if sim.time_base == "quarterly_influx":
        return simulate_quarterly_influx(
            scenario.tiers,
            scenario.allocation,
            scenario.brand_distribution,
            scenario.onboarding_costs,
            sim.include_onboarding,
            sim.monthly_influx,
        )

    return simulate(
        scenario.tiers,
        scenario.allocation,
        scenario.brand_distribution,
        scenario.onboarding_costs,
        sim.include_onboarding,
    )
