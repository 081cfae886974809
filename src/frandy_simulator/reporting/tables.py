"""Allocation grid ↔ DataFrame conversion for the editable dashboard table."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.config.brackets import BRACKETS


def allocation_frame(allocation: Sequence[TierAllocation]) -> pd.DataFrame:
    """One row per tier, one integer column per bracket."""
    return pd.DataFrame(
        [{"tier": a.tier_id, **{b: a.count(b) for b in BRACKETS}} for a in allocation],
        columns=["tier", *BRACKETS],
    )


def allocation_from_frame(frame: pd.DataFrame) -> list[TierAllocation]:
    """Read an edited allocation grid back into allocations.

    Cleared, non-numeric or negative cells count as zero brands.
    """
    counts = (
        frame[list(BRACKETS)]
        .apply(pd.to_numeric, errors="coerce")
        .fillna(0)
        .clip(lower=0)
        .astype(int)
    )
    return [
        TierAllocation(tier_id=tier, count_by_bracket={b: int(row[b]) for b in BRACKETS})
        for tier, (_, row) in zip(frame["tier"], counts.iterrows())
    ]
