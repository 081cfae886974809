"""KRW display formatting.

Amounts of 1억 (100,000,000) and above render in 억원 with two decimals;
smaller amounts render as whole 만원 (10,000).
"""

from __future__ import annotations

import math

EOK = 100_000_000
MAN = 10_000


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_number(num: float) -> str:
    """Round to a whole number and group thousands: ``1234567.6 → '1,234,568'``."""
    return f"{_round_half_up(num):,}"


def format_currency(num: float) -> str:
    """``1_234_000_000 → '12.34억원'``, ``35_000_000 → '3500만원'``."""
    eok = num / EOK
    if eok >= 1:
        return f"{eok:.2f}억원"
    return f"{_round_half_up(num / MAN)}만원"


def format_percent(ratio: float) -> str:
    """Ratio to percent with one decimal: ``0.1234 → '12.3%'``."""
    return f"{ratio * 100:.1f}%"
