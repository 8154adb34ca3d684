"""
Measurement aggregation — raw (pre-deduction) bar length from its segments.

Two rules, picked per bar type by its U_TOPOLOGY flag:
    standard: a + b + c + d + e + f + lap
    U-bar:    a + 2b + 2c + 2d + e + f + lap
The U-bar rule doubles the b/c/d legs because a U-shaped bar carries the
same C-shaped return at both ends. With b = c = d = 0 both rules agree.
"""

import math
from typing import Optional

from ..profiles import CodeProfile, DEFAULT_HOOK_MULTIPLIER
from ..schemas import BarMeasurements

SEGMENT_SLOTS = ("a", "b", "c", "d", "e", "f", "lap")

# Ld per diameter (mm) for M30 concrete, Fe500 steel
DEVELOPMENT_LENGTH_M30 = {
    8: 400,
    10: 500,
    12: 699,
    14: 798,
    16: 998,
    20: 1247,
    25: 1995,
    32: 2555,
}

DEVELOPMENT_LENGTH_TABLES = {
    "M30": DEVELOPMENT_LENGTH_M30,
}

DEVELOPMENT_LENGTH_FALLBACK_FACTOR = 50   # Ld = 50d when not tabulated
LAP_FACTOR = 1.3                          # tension lap = 1.3 × Ld


def aggregate_standard(measurements: BarMeasurements) -> float:
    """a + b + c + d + e + f + lap, missing slots count as 0."""
    return sum(measurements.value(slot) for slot in SEGMENT_SLOTS)


def aggregate_u_bar(measurements: BarMeasurements) -> float:
    """a + 2b + 2c + 2d + e + f + lap, C-shaped legs at both ends."""
    m = measurements
    return (m.value("a")
            + 2 * m.value("b") + 2 * m.value("c") + 2 * m.value("d")
            + m.value("e") + m.value("f") + m.value("lap"))


def aggregate(measurements: BarMeasurements, u_topology: bool = False) -> float:
    """Aggregate with the rule selected by the bar type's topology flag."""
    if u_topology:
        return aggregate_u_bar(measurements)
    return aggregate_standard(measurements)


def clamp(value: float) -> float:
    """Negative intermediate lengths (beam narrower than cover, etc.) become 0."""
    return max(0.0, value)


def hook_length(diameter: float, profile: Optional[CodeProfile] = None) -> float:
    """Hook length = hook multiplier × diameter (IS 456: 9d)."""
    multiplier = profile.default_hook_multiplier if profile is not None else DEFAULT_HOOK_MULTIPLIER
    return multiplier * diameter


def development_length(diameter: float, concrete_grade: str = "M30") -> float:
    """Tabulated Ld for the grade, else 50 × diameter."""
    table = DEVELOPMENT_LENGTH_TABLES.get(concrete_grade, DEVELOPMENT_LENGTH_M30)
    if diameter in table:
        return table[diameter]
    return DEVELOPMENT_LENGTH_FALLBACK_FACTOR * diameter


def lap_length(diameter: float, concrete_grade: str = "M30") -> float:
    """Tension lap length, rounded up to the next whole mm."""
    return math.ceil(LAP_FACTOR * development_length(diameter, concrete_grade))
