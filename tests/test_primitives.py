"""
Calculation primitive tests — bar count, cutting length, bend deductions,
measurement aggregation, hook / development / lap lengths.

Tests:
1-7.   Bar count
8-12.  Cutting length + rounding policies
13-20. Bend deductions
21-24. Measurement aggregation
25-28. Hook, development and lap length
"""

import pytest

from rebarcalc.calculators.bar_count import estimate_bar_count, resolve_bar_count
from rebarcalc.calculators.cutting_length import (
    NO_ROUNDING,
    ROUND_UP_5,
    apply_rounding,
    resolve_cutting_length,
    round_up_to,
)
from rebarcalc.calculators.deduction import (
    angle_class,
    bend_deduction,
    deduction_amount,
    multiplier,
)
from rebarcalc.calculators.measurement import (
    aggregate,
    aggregate_standard,
    aggregate_u_bar,
    development_length,
    hook_length,
    lap_length,
)
from rebarcalc.schemas import BarMeasurements


# ============================================================
# Bar count
# ============================================================

def test_bar_count_rounds_up():
    """(3000 - 2×20) / 150 = 19.73 → 20 spaces → 21 bars."""
    assert estimate_bar_count(3000, 150, 20) == 21


def test_bar_count_exact_division():
    """3000 / 150 = 20 spaces exactly → 21 bars, no extra."""
    assert estimate_bar_count(3000, 150, 0) == 21


def test_bar_count_not_spacing_governed():
    assert estimate_bar_count(3000, 0, 20) == 1
    assert estimate_bar_count(0, 150, 20) == 1


def test_bar_count_cover_exceeds_span():
    """Effective span clamps to 0 → a single bar."""
    assert estimate_bar_count(100, 150, 60) == 1


def test_manual_count_wins():
    assert resolve_bar_count(3000, 150, 20, manual_count=7) == 7


def test_manual_count_zero_is_respected():
    """An explicit 0 is an override, not a missing value."""
    assert resolve_bar_count(3000, 150, 20, manual_count=0) == 0


def test_member_count_multiplies():
    assert resolve_bar_count(3000, 150, 20, multiplier=3) == 63
    assert resolve_bar_count(3000, 150, 20, manual_count=4, multiplier=2) == 8


# ============================================================
# Cutting length
# ============================================================

def test_round_up_5():
    assert apply_rounding(1232, ROUND_UP_5) == 1235
    assert apply_rounding(1230, ROUND_UP_5) == 1230   # multiples pass through
    assert apply_rounding(1230.2, ROUND_UP_5) == 1235


def test_rounded_lengths_are_floats():
    """Rounded and unrounded cutting lengths serialise the same way."""
    assert isinstance(round_up_to(1232, 5), float)
    assert isinstance(apply_rounding(1230, ROUND_UP_5), float)
    assert isinstance(resolve_cutting_length(3580, 32, ROUND_UP_5), float)


def test_no_rounding():
    assert apply_rounding(1232.4, NO_ROUNDING) == 1232.4


def test_unknown_rounding_policy():
    with pytest.raises(ValueError, match="Unknown rounding policy"):
        apply_rounding(1000, "round_up_7")


def test_cutting_length_never_negative():
    assert resolve_cutting_length(100, 250) == 0.0
    assert resolve_cutting_length(100, 250, ROUND_UP_5) == 0


def test_cutting_length_subtracts_then_rounds():
    assert resolve_cutting_length(1272, 40, ROUND_UP_5) == 1235
    assert round_up_to(11, 10) == 20


# ============================================================
# Bend deductions
# ============================================================

def test_manual_deduction_count(is456):
    """2 bends on a 10 mm bar at 2d → 40 mm."""
    result = bend_deduction(10, manual_count=2, profile=is456)
    assert result["no_of_deductions"] == 2
    assert result["deduction_amount"] == 40
    assert deduction_amount(2, 10) == 40


def test_manual_count_overrides_angles(is456):
    result = bend_deduction(10, angles=(135, 135), manual_count=1, profile=is456)
    assert result["no_of_deductions"] == 1
    assert result["deduction_amount"] == 20


def test_manual_count_zero_means_no_deduction():
    result = bend_deduction(10, angles=(90, 90), manual_count=0)
    assert result["no_of_deductions"] == 0
    assert result["deduction_amount"] == 0
    assert result["by_angle"] == {}


def test_mixed_angles_is456(is456):
    """Stirrup: 4 × 90° at 2d + 2 × 135° at 3d on 10 mm = 80 + 60."""
    result = bend_deduction(10, angles=(90, 90, 90, 90, 135, 135), profile=is456)
    assert result["no_of_deductions"] == 6
    assert result["deduction_amount"] == 140
    assert result["by_angle"][90]["amount"] == 80
    assert result["by_angle"][135]["amount"] == 60


def test_mixed_angles_bs8110(bs8110):
    """BS 8110 multipliers: 90° 1.5d, 135° 2.5d."""
    result = bend_deduction(10, angles=(90, 90, 90, 90, 135, 135), profile=bs8110)
    assert result["deduction_amount"] == pytest.approx(110)


def test_no_bends_no_deduction():
    """The engine never invents bends."""
    result = bend_deduction(12)
    assert result["no_of_deductions"] == 0
    assert result["deduction_amount"] == 0


def test_hook_turn_deducted_at_90_rate(is456):
    assert angle_class(180) == 90
    assert angle_class(60) == 90
    assert angle_class(45) == 45
    assert multiplier(180, is456) == 2


def test_default_policy_without_profile():
    assert multiplier(45) == 1
    assert multiplier(90) == 2
    assert multiplier(135) == 3


# ============================================================
# Measurement aggregation
# ============================================================

def _segments():
    return BarMeasurements(a=3000, b=100, c=75, d=100, e=400, f=400)


def test_standard_aggregation():
    assert aggregate_standard(_segments()) == 4075


def test_u_bar_aggregation_doubles_legs():
    """3000 + 2×100 + 2×75 + 2×100 + 400 + 400."""
    assert aggregate_u_bar(_segments()) == 4350
    assert aggregate(_segments(), u_topology=True) == 4350
    assert aggregate(_segments(), u_topology=False) == 4075


def test_rules_agree_without_legs():
    m = BarMeasurements(a=3000, e=400, f=400, lap=500)
    assert aggregate_standard(m) == aggregate_u_bar(m) == 4300


def test_missing_slots_count_as_zero():
    assert aggregate_standard(BarMeasurements(a=1200)) == 1200
    assert aggregate_standard(BarMeasurements()) == 0


# ============================================================
# Hook, development and lap length
# ============================================================

def test_hook_length(is456, bs8110):
    assert hook_length(10, is456) == 90
    assert hook_length(10, bs8110) == 80
    assert hook_length(10) == 90


def test_development_length_table():
    assert development_length(12) == 699
    assert development_length(16, "M30") == 998


def test_development_length_fallback():
    """Untabulated diameter → 50d. Unknown grade uses the M30 table."""
    assert development_length(18) == 900
    assert development_length(12, "M40") == 699


def test_lap_length_rounds_up():
    assert lap_length(10) == 650          # 1.3 × 500
    assert lap_length(12) == 909          # 1.3 × 699 = 908.7
    assert lap_length(16) == 1298         # 1.3 × 998 = 1297.4
