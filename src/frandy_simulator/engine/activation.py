"""Monthly revenue simulation — tier-launch activation model.

Activation, not proration: a tier's whole allocated brand set goes live in
the tier's launch month and earns its full monthly price from then on.
Each (tier, bracket) pair moves Dormant → Active exactly once and never
back.

Per month m = 1..12:
  1. tiers with launch_month == m activate; their brands count as new and,
     when enabled, pay the bracket's onboarding fee once
  2. cumulative_brands += new_brands
  3. every launched tier earns Σ_bracket active × price
  4. ledger entry: total = subscription + onboarding

Annual figures are sums over the ledger: a tier launching in July earns
six months of its run-rate, not twelve.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from frandy_simulator.config.brackets import BRACKETS, MONTHS_PER_YEAR, Bracket, TierId
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.tier import Tier
from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.engine.breakdown import (
    allocated_counts,
    avg_stores_by_bracket,
    build_bracket_breakdown,
    build_tier_breakdown,
    unique_tiers,
)
from frandy_simulator.models.results import MonthlyLedgerEntry, SimulationResult


def simulate(
    tiers: Sequence[Tier],
    allocation: Sequence[TierAllocation],
    distribution: Sequence[BracketDistribution],
    onboarding_costs: Mapping[Bracket, int],
    include_onboarding: bool = False,
) -> SimulationResult:
    """Run the 12-month activation simulation.

    Pure: inputs are read, never mutated, and identical inputs give an
    identical result.  ``distribution`` only supplies store counts; brand
    counts come from ``allocation``.
    """
    priced = unique_tiers(tiers)
    counts = allocated_counts(priced, allocation)
    avg_stores = avg_stores_by_bracket(distribution)

    active: dict[TierId, dict[Bracket, int]] = {t.id: {b: 0 for b in BRACKETS} for t in priced}
    tier_realized: dict[TierId, int] = {t.id: 0 for t in priced}
    bracket_realized: dict[Bracket, int] = {b: 0 for b in BRACKETS}

    ledger: list[MonthlyLedgerEntry] = []
    cumulative_brands = 0
    total_subscription = 0
    total_onboarding = 0

    for month in range(1, MONTHS_PER_YEAR + 1):
        # ── 1. Activation events ────────────────────────────────────────
        new_brands = 0
        onboarding_revenue = 0
        for tier in priced:
            if tier.launch_month != month:
                continue
            for bracket in BRACKETS:
                newly_active = counts[tier.id][bracket] - active[tier.id][bracket]
                active[tier.id][bracket] = counts[tier.id][bracket]
                new_brands += newly_active
                if include_onboarding:
                    onboarding_revenue += newly_active * onboarding_costs.get(bracket, 0)

        # ── 2. Cumulative brands ────────────────────────────────────────
        cumulative_brands += new_brands

        # ── 3. Subscription from launched tiers ─────────────────────────
        subscription_revenue = 0
        for tier in priced:
            if tier.launch_month > month:
                continue
            for bracket in BRACKETS:
                amount = active[tier.id][bracket] * tier.price(bracket)
                subscription_revenue += amount
                tier_realized[tier.id] += amount
                bracket_realized[bracket] += amount

        # ── 4. Ledger entry ─────────────────────────────────────────────
        ledger.append(MonthlyLedgerEntry(
            month=month,
            new_brands=new_brands,
            cumulative_brands=cumulative_brands,
            subscription_revenue=subscription_revenue,
            onboarding_revenue=onboarding_revenue,
            total_revenue=subscription_revenue + onboarding_revenue,
        ))
        total_subscription += subscription_revenue
        total_onboarding += onboarding_revenue

    return SimulationResult(
        total_revenue=total_subscription + total_onboarding,
        subscription_revenue=total_subscription,
        onboarding_revenue=total_onboarding,
        monthly_ledger=ledger,
        tier_breakdown=build_tier_breakdown(priced, counts, avg_stores, tier_realized),
        bracket_breakdown=build_bracket_breakdown(counts, avg_stores, bracket_realized),
    )
