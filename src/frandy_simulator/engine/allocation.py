"""Tier allocation — fresh rebalancing, share-preserving re-derivation, checks.

Two apportioning operations are offered and the caller decides when each
fires; editing a bracket distribution never rebalances implicitly:

  - ``rebalance_allocation``   apportion every bracket afresh from a fixed
                               per-tier ratio table.
  - ``reapportion_allocation`` keep each bracket's current tier mix and
                               scale it to a new bracket total.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from frandy_simulator.config.brackets import BRACKETS, TIER_IDS, Bracket, TierId
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.config.defaults import DEFAULT_TIER_RATIOS
from frandy_simulator.engine.apportion import apportion
from frandy_simulator.models.results import AllocationCheck, BracketCheck


def _brand_counts(distribution: Sequence[BracketDistribution]) -> dict[Bracket, int]:
    counts: dict[Bracket, int] = {b: 0 for b in BRACKETS}
    for dist in distribution:
        counts[dist.bracket] += dist.brand_count
    return counts


def _counts_by_tier(allocation: Sequence[TierAllocation]) -> dict[TierId, dict[Bracket, int]]:
    table: dict[TierId, dict[Bracket, int]] = {t: {b: 0 for b in BRACKETS} for t in TIER_IDS}
    for alloc in allocation:
        for bracket, count in alloc.count_by_bracket.items():
            table[alloc.tier_id][bracket] += count
    return table


def _assemble(columns: dict[Bracket, list[int]]) -> list[TierAllocation]:
    """Turn per-bracket apportioned columns (tier order) into allocations."""
    return [
        TierAllocation(
            tier_id=tier_id,
            count_by_bracket={b: columns[b][i] for b in BRACKETS},
        )
        for i, tier_id in enumerate(TIER_IDS)
    ]


def allocation_bracket_totals(allocation: Sequence[TierAllocation]) -> dict[Bracket, int]:
    """Σ over tiers of allocated brands, per bracket."""
    totals: dict[Bracket, int] = {b: 0 for b in BRACKETS}
    for alloc in allocation:
        for bracket, count in alloc.count_by_bracket.items():
            totals[bracket] += count
    return totals


def rebalance_allocation(
    distribution: Sequence[BracketDistribution],
    tier_ratios: Mapping[TierId, float] | None = None,
) -> list[TierAllocation]:
    """Apportion each bracket's brand count across tiers by ``tier_ratios``.

    Each bracket is apportioned independently, so every bracket's tier
    counts sum exactly to its ``brand_count``.  Tiers absent from the ratio
    table get a zero weight.
    """
    ratios = DEFAULT_TIER_RATIOS if tier_ratios is None else tier_ratios
    weights = [ratios.get(t, 0.0) for t in TIER_IDS]
    counts = _brand_counts(distribution)
    columns = {b: apportion(counts[b], weights) for b in BRACKETS}
    return _assemble(columns)


def initial_allocation(
    distribution: Sequence[BracketDistribution],
    tier_ratios: Mapping[TierId, float] | None = None,
) -> list[TierAllocation]:
    """Starting allocation for a fresh scenario — a rebalance by the ratio table."""
    return rebalance_allocation(distribution, tier_ratios)


def reapportion_allocation(
    allocation: Sequence[TierAllocation],
    new_distribution: Sequence[BracketDistribution],
) -> list[TierAllocation]:
    """Re-derive ``allocation`` for a new distribution, preserving tier mix.

    Per bracket, each tier's share is its current count over the current
    bracket total.  An empty bracket has no mix to preserve and falls back
    to an equal share per tier.
    """
    current = _counts_by_tier(allocation)
    targets = _brand_counts(new_distribution)
    equal_share = 1.0 / len(TIER_IDS)

    columns: dict[Bracket, list[int]] = {}
    for bracket in BRACKETS:
        existing = [current[t][bracket] for t in TIER_IDS]
        existing_total = sum(existing)
        if existing_total > 0:
            shares = [c / existing_total for c in existing]
        else:
            shares = [equal_share] * len(TIER_IDS)
        columns[bracket] = apportion(targets[bracket], shares)
    return _assemble(columns)


def check_allocation(
    distribution: Sequence[BracketDistribution],
    allocation: Sequence[TierAllocation],
) -> AllocationCheck:
    """Compare allocated brands with the nominal distribution.

    Mismatches produce warnings only; the allocation stays the ground truth
    for revenue.
    """
    expected = _brand_counts(distribution)
    allocated = allocation_bracket_totals(allocation)

    per_bracket = [
        BracketCheck(bracket=b, allocated=allocated[b], expected=expected[b])
        for b in BRACKETS
    ]
    allocated_total = sum(allocated.values())
    expected_total = sum(expected.values())

    warnings: list[str] = []
    if allocated_total != expected_total:
        warnings.append(
            f"Allocated brands ({allocated_total:,}) differ from total brands ({expected_total:,})."
        )
    for check in per_bracket:
        if check.difference != 0:
            warnings.append(
                f"Bracket {check.bracket}: allocated {check.allocated:,} "
                f"vs. {check.expected:,} brands in the distribution."
            )

    return AllocationCheck(
        allocated_total=allocated_total,
        expected_total=expected_total,
        per_bracket=per_bracket,
        is_balanced=not warnings,
        warnings=warnings,
    )
