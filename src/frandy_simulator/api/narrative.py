"""Narrative generator — plain-text interpretation of simulation results.

Turns a ``SimulationResult`` (or its quarterly counterpart) into a
sectioned text block: revenue headline, target verdict, tier and bracket
contributions, and notes on dormant or unpriced tiers.
"""

from __future__ import annotations

from collections.abc import Sequence

from frandy_simulator.config.brackets import MONTHS_PER_YEAR
from frandy_simulator.engine.comparison import achievement_rate
from frandy_simulator.models.results import (
    OptionOutcome,
    QuarterlySimulationResult,
    SimulationResult,
)
from frandy_simulator.reporting.formatting import format_currency, format_number


def _rule(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def generate_narrative(
    result: SimulationResult | QuarterlySimulationResult,
    target_revenue: int,
    warnings: Sequence[str] = (),
) -> str:
    """Sectioned plain-text summary of one simulation run."""
    sections: list[str] = []

    # ── 1. Headline ──
    sections += _rule("REVENUE SUMMARY")
    sections.append(
        f"Time base: {result.time_base}\n"
        f"Total revenue: {format_currency(result.total_revenue)} "
        f"({format_number(result.total_revenue)} KRW)\n"
        f"Subscription: {format_currency(result.subscription_revenue)}\n"
        f"Onboarding: {format_currency(result.onboarding_revenue)}"
    )

    # ── 2. Target ──
    sections.append("")
    sections += _rule("TARGET")
    rate = achievement_rate(result.total_revenue, target_revenue)
    if target_revenue <= 0:
        sections.append("No revenue target set.")
    elif result.total_revenue >= target_revenue:
        sections.append(
            f"Target {format_currency(target_revenue)} reached ({rate:.1f}%)."
        )
    else:
        sections.append(
            f"Target {format_currency(target_revenue)} missed ({rate:.1f}%): "
            f"{format_currency(target_revenue - result.total_revenue)} short."
        )

    # ── 3. Tiers ──
    sections.append("")
    sections += _rule("TIERS (realized vs. run-rate)")
    dormant: list[str] = []
    unpriced: list[str] = []
    for row in result.tier_breakdown:
        sections.append(
            f"  {row.tier_id:10s} brands {row.brand_count:4d}  "
            f"run-rate/mo {format_currency(row.monthly_run_rate_revenue):>12s}  "
            f"realized {format_currency(row.realized_annual_revenue):>12s}"
        )
        if row.brand_count > 0 and row.launch_month > MONTHS_PER_YEAR:
            dormant.append(row.tier_id)
        elif row.brand_count > 0 and row.monthly_run_rate_revenue == 0:
            unpriced.append(row.tier_id)

    # ── 4. Brackets ──
    sections.append("")
    sections += _rule("BRACKETS")
    for row in result.bracket_breakdown:
        share = (
            row.realized_annual_revenue / result.subscription_revenue * 100
            if result.subscription_revenue > 0 else 0.0
        )
        sections.append(
            f"  {row.bracket:8s} brands {row.brand_count:4d}  stores {row.store_count:6d}  "
            f"realized {format_currency(row.realized_annual_revenue):>12s} ({share:5.1f}%)"
        )

    # ── 5. Notes ──
    notes: list[str] = list(warnings)
    if dormant:
        notes.append(
            "Allocated but earning nothing this year (launch after December): "
            + ", ".join(dormant)
        )
    if unpriced:
        notes.append("Allocated but priced at zero in every allocated bracket: " + ", ".join(unpriced))
    if notes:
        sections.append("")
        sections += _rule("NOTES")
        sections += [f"  - {n}" for n in notes]

    return "\n".join(sections)


def generate_comparison_narrative(outcomes: Sequence[OptionOutcome]) -> str:
    """One line per option plus the recommended pick(s)."""
    lines = _rule("STRATEGY OPTIONS")
    for o in outcomes:
        flag = "  [recommended]" if o.is_recommended else ""
        lines.append(
            f"  {o.option.name}: {format_currency(o.result.total_revenue)} "
            f"({o.achievement_rate_pct:.1f}% of target){flag}"
        )
    picks = [o.option.name for o in outcomes if o.is_recommended]
    lines.append("")
    if picks:
        lines.append("Recommended (100–110% of target): " + ", ".join(picks))
    else:
        lines.append("No option lands within 100–110% of target.")
    return "\n".join(lines)
