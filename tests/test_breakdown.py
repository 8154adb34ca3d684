"""
Formula breakdown tests.

Tests:
1-3. Step sequences for stirrup, cranked and straight bars
4.   Final result always matches the calculator
5.   Code references per profile
"""

import pytest

from rebarcalc.calculators.breakdown import code_reference, generate_breakdown
from rebarcalc.calculators.registry import get_shape, list_shapes
from rebarcalc.calculators.shape_calculator import calculate_bar
from rebarcalc.schemas import BarEntry

SAMPLE_DIMENSIONS = {
    "S1": {"A": 3000},
    "S2": {"A": 1000, "B": 200},
    "S3": {"A": 300, "B": 200},
    "S4": {"A": 1000, "B": 300, "C": 400},
    "S5": {"A": 1000, "B": 300},
    "S6": {"A": 1000},
}


def _bar(shape_code, diameter=8, **kwargs):
    return BarEntry(id="bar-1", shape_code=shape_code, diameter=diameter,
                    dimensions=SAMPLE_DIMENSIONS[shape_code], **kwargs)


def test_stirrup_breakdown(is456):
    result = generate_breakdown(_bar("S3"), is456)
    assert result["shape_name"] == "Stirrup"
    assert result["formula"] == "2×(300 + 200) + 2×72 − 4×(90° bend) − 2×(135° bend)"
    assert result["final_result"] == 1032
    assert result["units"] == "mm"

    steps = result["steps"]
    hooks = [s for s in steps if s["is_hook"]]
    deductions = [s for s in steps if s["is_deduction"]]
    assert hooks[0]["formula"] == "9 × 8 = 72"
    assert [s["value"] for s in deductions] == [64, 48]
    assert all(s["operation"] == "subtract" for s in deductions)
    assert steps[-1]["description"] == "Cutting length"


def test_cranked_breakdown_has_sqrt_step(is456):
    result = generate_breakdown(_bar("S4", 12), is456)
    sqrt_steps = [s for s in result["steps"] if s["operation"] == "sqrt"]
    assert sqrt_steps[0]["value"] == pytest.approx(500)
    assert result["final_result"] == pytest.approx(1876)


def test_straight_bar_has_no_deduction_steps(is456):
    steps = generate_breakdown(_bar("S1"), is456)["steps"]
    assert not any(s["is_deduction"] for s in steps)
    assert steps[0] == {
        "description": "Dimension A",
        "formula": "A = 3000",
        "operation": "constant",
        "value": 3000,
        "units": "mm",
        "is_deduction": False,
        "is_hook": False,
    }


@pytest.mark.parametrize("shape_code", list_shapes())
def test_final_result_matches_calculator(shape_code, is456, bs8110):
    for profile in (is456, bs8110, None):
        bar = _bar(shape_code, 10)
        expected = calculate_bar(bar, profile)["calculated"]["cutting_length"]
        assert generate_breakdown(bar, profile)["final_result"] == pytest.approx(expected)


def test_code_reference(is456, bs8110):
    assert code_reference(get_shape("S3"), is456) == "IS 456:2000, Clause 26.2.2.1 (Hook length = 9d)"
    assert code_reference(get_shape("S2"), is456) == "IS 456:2000, Clause 26.2.3 (Bend deductions)"
    assert code_reference(get_shape("S1"), is456) == "IS 456:2000"
    assert code_reference(get_shape("S2"), bs8110) == "BS 8110, Bend deduction provisions"
    assert code_reference(get_shape("S2"), None) == "Custom parameters"
