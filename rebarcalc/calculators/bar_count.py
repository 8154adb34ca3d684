"""
Bar count — how many bars a spacing-governed run needs.

    count = ceil(max(0, span - 2 × cover) / spacing) + 1

Round UP: any remainder of the effective span still needs a bar to cover it.
Not spacing-governed (spacing or span ≤ 0) → a single bar.
A manual override always wins.
"""

import math
from typing import Optional


def estimate_bar_count(span: float, spacing: float, cover: float = 0.0) -> int:
    """Bars needed at `spacing` across `span`, inset by `cover` at each end."""
    if spacing <= 0 or span <= 0:
        return 1
    effective_span = max(0.0, span - 2 * cover)
    return math.ceil(effective_span / spacing) + 1


def resolve_bar_count(span: float, spacing: float, cover: float = 0.0,
                      manual_count: Optional[int] = None,
                      multiplier: int = 1) -> int:
    """
    Final bar count for a schedule row.
    manual_count (even 0) replaces the estimate; multiplier is the number of
    identical members sharing the row.
    """
    if manual_count is not None:
        count = manual_count
    else:
        count = estimate_bar_count(span, spacing, cover)
    return count * max(1, multiplier)
