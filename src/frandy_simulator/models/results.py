"""Result types — the contract between engine, API, and dashboard.

Every figure labelled "realized" is a sum over the simulated ledger, i.e.
revenue actually accrued inside the year.  ``monthly_run_rate_revenue`` is
the only instantaneous figure and is never multiplied up to an annual
number.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from frandy_simulator.config.brackets import Bracket, Quarter, TierId
from frandy_simulator.config.options import StrategyOption


# ═══════════════════════════════════════════════════════════════════════════
# Ledgers
# ═══════════════════════════════════════════════════════════════════════════

class MonthlyLedgerEntry(BaseModel):
    """One calendar month of the activation model."""

    month: int
    new_brands: int
    """Brands whose tier launched this month."""
    cumulative_brands: int
    subscription_revenue: int
    onboarding_revenue: int
    total_revenue: int
    """subscription_revenue + onboarding_revenue."""


class QuarterlyLedgerEntry(BaseModel):
    """One quarter of the proportional-influx model."""

    quarter: Quarter
    new_brands: int
    cumulative_brands: int
    subscription_revenue: int
    onboarding_revenue: int
    total_revenue: int


# ═══════════════════════════════════════════════════════════════════════════
# Breakdowns
# ═══════════════════════════════════════════════════════════════════════════

class TierBreakdown(BaseModel):
    """Aggregates for one tier across all brackets."""

    tier_id: TierId
    launch_month: int
    brand_count: int
    store_count: int
    monthly_run_rate_revenue: int
    """Monthly subscription once the tier is fully active (reference only)."""
    realized_annual_revenue: int
    """Subscription revenue actually accrued within the year."""


class BracketBreakdown(BaseModel):
    """Aggregates for one bracket across all tiers."""

    bracket: Bracket
    brand_count: int
    store_count: int
    realized_annual_revenue: int


# ═══════════════════════════════════════════════════════════════════════════
# Simulation results
# ═══════════════════════════════════════════════════════════════════════════

class SimulationResult(BaseModel):
    """Monthly tier-launch activation run."""

    time_base: Literal["monthly_activation"] = "monthly_activation"
    total_revenue: int
    subscription_revenue: int
    onboarding_revenue: int
    monthly_ledger: list[MonthlyLedgerEntry]
    tier_breakdown: list[TierBreakdown]
    bracket_breakdown: list[BracketBreakdown]


class QuarterlySimulationResult(BaseModel):
    """Quarterly proportional-influx run."""

    time_base: Literal["quarterly_influx"] = "quarterly_influx"
    total_revenue: int
    subscription_revenue: int
    onboarding_revenue: int
    quarterly_ledger: list[QuarterlyLedgerEntry]
    tier_breakdown: list[TierBreakdown]
    bracket_breakdown: list[BracketBreakdown]


# ═══════════════════════════════════════════════════════════════════════════
# Allocation advisory
# ═══════════════════════════════════════════════════════════════════════════

class BracketCheck(BaseModel):
    bracket: Bracket
    allocated: int
    expected: int

    @property
    def difference(self) -> int:
        return self.allocated - self.expected


class AllocationCheck(BaseModel):
    """Allocated vs. nominal brand counts.

    A mismatch is advisory: simulations still run on the allocation.
    """

    allocated_total: int
    expected_total: int
    per_bracket: list[BracketCheck]
    is_balanced: bool
    warnings: list[str]


# ═══════════════════════════════════════════════════════════════════════════
# Strategy comparison
# ═══════════════════════════════════════════════════════════════════════════

class OptionOutcome(BaseModel):
    """One strategy option evaluated against the revenue target."""

    option: StrategyOption
    result: SimulationResult | QuarterlySimulationResult
    total_brands: int
    achievement_rate_pct: float
    """total_revenue / target × 100."""
    is_recommended: bool
    """Meets the target without overshooting it by more than 10%."""
    shortfall: int
    """Revenue still missing to reach the target (0 when met)."""
