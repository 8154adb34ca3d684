"""
Bend deductions — length lost at each bend, as a multiple of bar diameter.

    deduction = Σ bends(angle) × multiplier(angle) × diameter

Multipliers come from the bound CodeProfile. Without one the 2D-per-right-angle
convention applies (45° → 1d, 90° → 2d, 135° → 3d).
A manual bend count always wins and is counted as 90° bends.
The engine never invents bends it was not told about: no angles, no override → 0.
"""

from collections import Counter
from typing import Iterable, Optional

from ..profiles import BendDeductions, CodeProfile, DEFAULT_BEND_DEDUCTIONS

ANGLE_CLASSES = (45, 90, 135)


def angle_class(angle: float) -> int:
    """
    Multiplier class for a bend angle.
    45/90/135 map to themselves. 180° hook turns and any non-standard angle
    are deducted at the 90° rate; hook length is added separately.
    """
    if angle in ANGLE_CLASSES:
        return int(angle)
    return 90


def _deductions_for(profile: Optional[CodeProfile]) -> BendDeductions:
    if profile is None:
        return DEFAULT_BEND_DEDUCTIONS
    return profile.bend_deductions


def multiplier(angle: float, profile: Optional[CodeProfile] = None) -> float:
    """Deduction multiplier (× diameter) for one bend of the given angle."""
    deductions = _deductions_for(profile)
    return {
        45: deductions.deg45,
        90: deductions.deg90,
        135: deductions.deg135,
    }[angle_class(angle)]


def bend_deduction(diameter: float, angles: Iterable[float] = (),
                   manual_count: Optional[int] = None,
                   profile: Optional[CodeProfile] = None) -> dict:
    """
    Total bend deduction for one bar.

    Returns:
        {
            "no_of_deductions": int,
            "deduction_amount": float (mm),
            "by_angle": {angle_class: {"count", "multiplier", "amount"}},
        }
    """
    if manual_count is not None:
        counts = Counter({90: manual_count}) if manual_count else Counter()
    else:
        counts = Counter(angle_class(a) for a in angles)

    by_angle = {}
    total = 0.0
    for cls in ANGLE_CLASSES:
        n = counts.get(cls, 0)
        if not n:
            continue
        mult = multiplier(cls, profile)
        amount = n * mult * diameter
        by_angle[cls] = {"count": n, "multiplier": mult, "amount": amount}
        total += amount

    return {
        "no_of_deductions": sum(counts.values()),
        "deduction_amount": total,
        "by_angle": by_angle,
    }


def deduction_amount(bend_count: int, diameter: float,
                     profile: Optional[CodeProfile] = None) -> float:
    """Deduction for `bend_count` right-angle bends."""
    return bend_count * multiplier(90, profile) * diameter
