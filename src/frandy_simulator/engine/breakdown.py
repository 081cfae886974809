"""Aggregate breakdowns shared by both revenue time bases.

Brand and store counts come from the allocation (the ground truth for
revenue), store counts use each bracket's average stores per brand, and
revenue figures are the realized sums the simulators accumulated.
"""

from __future__ import annotations

from collections.abc import Sequence

from frandy_simulator.config.brackets import BRACKETS, Bracket, TierId
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.tier import Tier
from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.models.results import BracketBreakdown, TierBreakdown

CountTable = dict[TierId, dict[Bracket, int]]


def unique_tiers(tiers: Sequence[Tier]) -> list[Tier]:
    """Tiers in input order, first definition of each id wins."""
    seen: set[str] = set()
    result: list[Tier] = []
    for tier in tiers:
        if tier.id not in seen:
            seen.add(tier.id)
            result.append(tier)
    return result


def allocated_counts(tiers: Sequence[Tier], allocation: Sequence[TierAllocation]) -> CountTable:
    """Allocated brands per (tier, bracket) for the priced tiers.

    Allocation entries for tiers missing from ``tiers`` cannot earn revenue
    and are left out; priced tiers without an entry count zero.
    """
    table: CountTable = {t.id: {b: 0 for b in BRACKETS} for t in tiers}
    for alloc in allocation:
        row = table.get(alloc.tier_id)
        if row is None:
            continue
        for bracket, count in alloc.count_by_bracket.items():
            row[bracket] += count
    return table


def avg_stores_by_bracket(distribution: Sequence[BracketDistribution]) -> dict[Bracket, int]:
    avg: dict[Bracket, int] = {b: 0 for b in BRACKETS}
    for dist in distribution:
        avg[dist.bracket] = dist.avg_stores_per_brand
    return avg


def monthly_run_rate(tier: Tier, counts: dict[Bracket, int]) -> int:
    """Monthly subscription of a tier with all its allocated brands active."""
    return sum(counts[b] * tier.price(b) for b in BRACKETS)


def build_tier_breakdown(
    tiers: Sequence[Tier],
    counts: CountTable,
    avg_stores: dict[Bracket, int],
    realized: dict[TierId, int],
) -> list[TierBreakdown]:
    rows: list[TierBreakdown] = []
    for tier in tiers:
        tier_counts = counts[tier.id]
        rows.append(TierBreakdown(
            tier_id=tier.id,
            launch_month=tier.launch_month,
            brand_count=sum(tier_counts.values()),
            store_count=sum(tier_counts[b] * avg_stores[b] for b in BRACKETS),
            monthly_run_rate_revenue=monthly_run_rate(tier, tier_counts),
            realized_annual_revenue=realized.get(tier.id, 0),
        ))
    return rows


def build_bracket_breakdown(
    counts: CountTable,
    avg_stores: dict[Bracket, int],
    realized: dict[Bracket, int],
) -> list[BracketBreakdown]:
    rows: list[BracketBreakdown] = []
    for bracket in BRACKETS:
        brands = sum(tier_counts[bracket] for tier_counts in counts.values())
        rows.append(BracketBreakdown(
            bracket=bracket,
            brand_count=brands,
            store_count=brands * avg_stores[bracket],
            realized_annual_revenue=realized.get(bracket, 0),
        ))
    return rows
