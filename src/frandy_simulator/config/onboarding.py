"""One-time onboarding fee per brand, by bracket."""

from pydantic import NonNegativeInt

from frandy_simulator.config.brackets import Bracket

OnboardingCostTable = dict[Bracket, NonNegativeInt]
"""Bracket → one-time fee (KRW), charged once per brand at activation."""


def scale_onboarding(costs: OnboardingCostTable, multiplier: float) -> OnboardingCostTable:
    """Scale every fee and round half-up to whole currency units."""
    return {b: int(c * multiplier + 0.5) for b, c in costs.items()}
