"""
Cutting length — straight length to cut before bending.

    cutting = max(0, measurement - deduction), then the rounding policy

Rounding policy is a property of the shape / bar type, never of the call site.
"""

import math

NO_ROUNDING = "none"
ROUND_UP_5 = "round_up_5"


def round_up_to(value: float, step: float) -> float:
    """Next multiple of `step` at or above value. Multiples pass through unchanged."""
    return float(math.ceil(value / step) * step)


ROUNDING_POLICIES = {
    NO_ROUNDING: lambda value: value,
    ROUND_UP_5: lambda value: round_up_to(value, 5),
}


def apply_rounding(value: float, policy: str = NO_ROUNDING) -> float:
    """Apply a named rounding policy. Raises ValueError for unknown policy names."""
    if policy not in ROUNDING_POLICIES:
        raise ValueError(
            f"Unknown rounding policy: {policy}. "
            f"Available: {list(ROUNDING_POLICIES.keys())}"
        )
    return ROUNDING_POLICIES[policy](value)


def resolve_cutting_length(measurement: float, deduction: float,
                           policy: str = NO_ROUNDING) -> float:
    """Cutting length in mm, never negative."""
    return apply_rounding(max(0.0, measurement - deduction), policy)
