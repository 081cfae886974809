"""Largest-remainder apportionment.

Splits an integer total across weighted buckets so that the parts are
non-negative integers summing *exactly* to the total:

  1. raw_i   = total × w_i / Σw
  2. floor_i = ⌊raw_i⌋,  frac_i = raw_i − floor_i
  3. remainder = total − Σfloor_i units go one each to the largest
     fractions (ties keep input order)

A zero weight sum falls back to an even split with the leftover units
on the earliest positions.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def apportion(total: int, weights: Sequence[float]) -> list[int]:
    """Apportion ``total`` across ``weights`` by largest remainder.

    Parameters
    ----------
    total : int
        Non-negative integer to split.
    weights : sequence of float
        Non-negative relative weights; only their ratios matter.

    Returns
    -------
    list[int]
        One count per weight, ``sum(result) == total``.

    Raises
    ------
    ValueError
        If ``total`` is negative, a weight is negative or not finite, or
        ``total > 0`` with no weights to receive it.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")

    n = len(weights)
    if n == 0:
        if total == 0:
            return []
        raise ValueError(f"cannot apportion {total} across zero weights")

    w = np.asarray(weights, dtype=np.float64)
    if not np.all(np.isfinite(w)) or np.any(w < 0):
        raise ValueError(f"weights must be finite and non-negative, got {list(weights)}")

    if total == 0:
        return [0] * n

    peak = float(w.max())
    if peak == 0.0:
        base, remainder = divmod(total, n)
        return [base + (1 if i < remainder else 0) for i in range(n)]

    # Normalise to [0, 1] so the sum and product cannot overflow.
    w = w / peak
    weight_sum = float(w.sum())

    raw = total * w / weight_sum
    counts = np.floor(raw).astype(np.int64)
    fracs = raw - counts
    remainder = total - int(counts.sum())

    if remainder > 0:
        if np.all(fracs == 0.0):
            order = np.arange(n)
        else:
            # Stable sort on the negated fractions: largest first, ties by position.
            order = np.argsort(-fracs, kind="stable")
        for k in range(remainder):
            counts[order[k % n]] += 1
    elif remainder < 0:
        # Float overshoot of Σfloor; give units back from the smallest fractions.
        order = np.argsort(fracs, kind="stable")
        k = 0
        while remainder < 0:
            idx = order[k % n]
            if counts[idx] > 0:
                counts[idx] -= 1
                remainder += 1
            k += 1

    return [int(c) for c in counts]
