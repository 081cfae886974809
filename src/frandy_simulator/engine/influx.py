"""Quarterly revenue simulation — proportional brand-influx model.

The alternate time base.  Instead of switching whole tiers on, brands sign
up along a fixed influx curve and every launched tier earns the share of
its full run-rate matching the average signed-up fraction of the quarter:

  new_q        = round(total_brands × rate_q)
  cumulative_q = cumulative_{q-1} + new_q
  proportion_q = (cumulative_q − new_q / 2) / total_brands
  revenue      = run_rate × 3 × proportion_q   (tiers launched by quarter end)

Each (tier, bracket, quarter) contribution is rounded to whole currency
units once, and every aggregate is a sum of those integers, so ledger and
breakdown totals always agree.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from frandy_simulator.config.brackets import BRACKETS, QUARTERS, Bracket, TierId
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.tier import Tier
from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.config.defaults import DEFAULT_MONTHLY_INFLUX
from frandy_simulator.engine.breakdown import (
    allocated_counts,
    avg_stores_by_bracket,
    build_bracket_breakdown,
    build_tier_breakdown,
    unique_tiers,
)
from frandy_simulator.models.results import QuarterlyLedgerEntry, QuarterlySimulationResult

MONTHS_PER_QUARTER = 3


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def quarterly_influx_rates(monthly_influx: Sequence[float]) -> list[float]:
    """Collapse a 12-month influx curve into four quarterly rates."""
    if len(monthly_influx) != len(QUARTERS) * MONTHS_PER_QUARTER:
        raise ValueError(f"monthly influx needs 12 entries, got {len(monthly_influx)}")
    return [
        sum(monthly_influx[q * MONTHS_PER_QUARTER:(q + 1) * MONTHS_PER_QUARTER])
        for q in range(len(QUARTERS))
    ]


def simulate_quarterly_influx(
    tiers: Sequence[Tier],
    allocation: Sequence[TierAllocation],
    distribution: Sequence[BracketDistribution],
    onboarding_costs: Mapping[Bracket, int],
    include_onboarding: bool = False,
    monthly_influx: Sequence[float] | None = None,
) -> QuarterlySimulationResult:
    """Run the four-quarter proportional-influx simulation."""
    rates = quarterly_influx_rates(
        DEFAULT_MONTHLY_INFLUX if monthly_influx is None else monthly_influx
    )
    priced = unique_tiers(tiers)
    counts = allocated_counts(priced, allocation)
    avg_stores = avg_stores_by_bracket(distribution)

    bracket_brands = {b: sum(row[b] for row in counts.values()) for b in BRACKETS}
    total_brands = sum(bracket_brands.values())

    tier_realized: dict[TierId, int] = {t.id: 0 for t in priced}
    bracket_realized: dict[Bracket, int] = {b: 0 for b in BRACKETS}

    ledger: list[QuarterlyLedgerEntry] = []
    cumulative_brands = 0
    total_subscription = 0
    total_onboarding = 0

    for idx, quarter in enumerate(QUARTERS):
        quarter_end_month = (idx + 1) * MONTHS_PER_QUARTER
        new_brands = _round_half_up(total_brands * rates[idx])
        cumulative_brands += new_brands

        if total_brands > 0:
            proportion = (cumulative_brands - new_brands / 2) / total_brands
        else:
            proportion = 0.0

        # ── Subscription: launched tiers at the quarter's average uptake ──
        subscription_revenue = 0
        for tier in priced:
            if tier.launch_month > quarter_end_month:
                continue
            for bracket in BRACKETS:
                monthly = counts[tier.id][bracket] * tier.price(bracket)
                amount = _round_half_up(monthly * MONTHS_PER_QUARTER * proportion)
                subscription_revenue += amount
                tier_realized[tier.id] += amount
                bracket_realized[bracket] += amount

        # ── Onboarding: new brands split by each bracket's allocated share ──
        onboarding_revenue = 0
        if include_onboarding and new_brands > 0 and total_brands > 0:
            for bracket in BRACKETS:
                in_bracket = _round_half_up(bracket_brands[bracket] / total_brands * new_brands)
                onboarding_revenue += in_bracket * onboarding_costs.get(bracket, 0)

        ledger.append(QuarterlyLedgerEntry(
            quarter=quarter,
            new_brands=new_brands,
            cumulative_brands=cumulative_brands,
            subscription_revenue=subscription_revenue,
            onboarding_revenue=onboarding_revenue,
            total_revenue=subscription_revenue + onboarding_revenue,
        ))
        total_subscription += subscription_revenue
        total_onboarding += onboarding_revenue

    return QuarterlySimulationResult(
        total_revenue=total_subscription + total_onboarding,
        subscription_revenue=total_subscription,
        onboarding_revenue=total_onboarding,
        quarterly_ledger=ledger,
        tier_breakdown=build_tier_breakdown(priced, counts, avg_stores, tier_realized),
        bracket_breakdown=build_bracket_breakdown(counts, avg_stores, bracket_realized),
    )
