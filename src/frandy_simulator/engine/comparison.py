"""Strategy option comparison.

For each option:
  1. scale tier prices and onboarding fees (rounded half-up to whole KRW)
  2. swap in the option's brand distribution, if it defines one
  3. re-derive the allocation for that distribution, keeping the current
     per-bracket tier mix
  4. run the scenario's time base and score it against the revenue target
"""

from __future__ import annotations

from collections.abc import Sequence

from frandy_simulator.config.onboarding import scale_onboarding
from frandy_simulator.config.options import StrategyOption, default_options
from frandy_simulator.config.scenario import Scenario
from frandy_simulator.engine.allocation import reapportion_allocation
from frandy_simulator.engine.orchestrator import run_scenario
from frandy_simulator.models.results import OptionOutcome

RECOMMENDED_MIN_PCT = 100.0
RECOMMENDED_MAX_PCT = 110.0


def achievement_rate(total_revenue: int, target_revenue: int) -> float:
    """Revenue as a percentage of target; 0 when there is no target."""
    if target_revenue <= 0:
        return 0.0
    return total_revenue / target_revenue * 100


def apply_option(scenario: Scenario, option: StrategyOption) -> Scenario:
    """Scenario copy with the option's prices, fees, and distribution."""
    distribution = (
        option.brand_distribution
        if option.brand_distribution is not None
        else scenario.brand_distribution
    )
    return scenario.model_copy(update={
        "tiers": [t.scaled(option.price_multiplier) for t in scenario.tiers],
        "onboarding_costs": scale_onboarding(scenario.onboarding_costs, option.onboarding_multiplier),
        "brand_distribution": distribution,
        "allocation": reapportion_allocation(scenario.allocation, distribution),
    })


def compare_options(
    scenario: Scenario,
    options: Sequence[StrategyOption] | None = None,
    target_revenue: int | None = None,
) -> list[OptionOutcome]:
    """Evaluate every option against the target, in input order."""
    options = default_options() if options is None else options
    target = scenario.simulation.target_revenue if target_revenue is None else target_revenue

    outcomes: list[OptionOutcome] = []
    for option in options:
        adjusted = apply_option(scenario, option)
        result = run_scenario(adjusted)
        rate = achievement_rate(result.total_revenue, target)
        outcomes.append(OptionOutcome(
            option=option,
            result=result,
            total_brands=sum(d.brand_count for d in adjusted.brand_distribution),
            achievement_rate_pct=round(rate, 4),
            is_recommended=RECOMMENDED_MIN_PCT <= rate <= RECOMMENDED_MAX_PCT,
            shortfall=max(target - result.total_revenue, 0),
        ))
    return outcomes
