"""Fixed store-count brackets and tier identifiers."""

from typing import Literal

Bracket = Literal["1-50", "51-100", "101-200", "201-400", "400+"]
TierId = Literal["basic", "pro1", "pro2", "pro3", "premium"]
Quarter = Literal["Q1", "Q2", "Q3", "Q4"]

BRACKETS: tuple[Bracket, ...] = ("1-50", "51-100", "101-200", "201-400", "400+")
"""Ordered, non-overlapping, exhaustive store-count ranges."""

TIER_IDS: tuple[TierId, ...] = ("basic", "pro1", "pro2", "pro3", "premium")
"""Product packages, cheapest first."""

QUARTERS: tuple[Quarter, ...] = ("Q1", "Q2", "Q3", "Q4")

MONTHS_PER_YEAR = 12
