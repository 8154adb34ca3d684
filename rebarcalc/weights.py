# Rebar weight constants — source: IS 1786 nominal masses, rounded as they appear on site BBS sheets

# Divisor for the per-metre weight approximation: kg/m = D² / 162 (D in mm),
# from steel density 7850 kg/m³
WEIGHT_DIVISOR = 162

# Standard per-metre weights (kg/m) for common bar diameters (mm)
# Table values always win over the formula. 14 mm is not tabulated: it resolves through D² / 162
WEIGHT_PER_METER = {
    6: 0.222,
    8: 0.395,
    10: 0.617,
    12: 0.889,
    16: 1.58,
    20: 2.47,
    25: 3.85,
    32: 6.31,
}

# Canonical diameters stocked by every supplier (mm)
STANDARD_DIAMETERS = (6, 8, 10, 12, 16, 20, 25, 32)


def unit_weight(diameter: float) -> float:
    """
    Weight per metre (kg/m) for a bar diameter in mm.
    Uses WEIGHT_PER_METER first, falls back to D² / 162.
    """
    if diameter in WEIGHT_PER_METER:
        return WEIGHT_PER_METER[diameter]
    return (diameter * diameter) / WEIGHT_DIVISOR


def total_length_m(cutting_length_mm: float, count: int) -> float:
    """Total length in metres for `count` bars of one cutting length."""
    return (cutting_length_mm * count) / 1000.0


def weight_from_length(diameter: float, length_m: float) -> float:
    """Weight in kg for a length of bar in metres."""
    return length_m * unit_weight(diameter)


def weight_from_cut_length(diameter: float, cutting_length_mm: float, count: int = 1) -> float:
    """Weight in kg for `count` bars of one cutting length (mm)."""
    return weight_from_length(diameter, total_length_m(cutting_length_mm, count))


def is_standard_diameter(diameter: float) -> bool:
    """True for the canonical stocked diameters."""
    return diameter in STANDARD_DIAMETERS
