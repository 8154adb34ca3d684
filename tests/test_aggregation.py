"""
Schedule aggregation tests.

Tests:
1-3. Diameter / shape / member summaries
4-5. Grand totals, rows without results skipped
6.   Order independence
"""

import pytest

from rebarcalc.calculators.aggregation import (
    component_summary,
    grand_totals,
    schedule_summary,
    steel_summary,
    summarize_by_diameter,
    summarize_by_member,
    summarize_by_shape,
)
from rebarcalc.calculators.shape_calculator import calculate_bars
from rebarcalc.schemas import BarEntry


def _rows(profile):
    bars = [
        BarEntry(id="b1", member_type="BEAM", shape_code="S1", diameter=12,
                 dimensions={"A": 3000}, quantity=4),
        BarEntry(id="b2", member_type="BEAM", shape_code="S3", diameter=8,
                 dimensions={"A": 300, "B": 200}, quantity=10),
        BarEntry(id="s1", member_type="SLAB", shape_code="S1", diameter=12,
                 dimensions={"A": 2000}, quantity=5),
        BarEntry(id="c1", member_type="COLUMN", shape_code="S1", diameter=14,
                 dimensions={"A": 1000}, quantity=2),
    ]
    return calculate_bars(bars, profile)


def test_summarize_by_diameter(is456):
    summary = summarize_by_diameter(_rows(is456))
    assert [s["diameter"] for s in summary] == [8, 12, 14]
    twelve = summary[1]
    assert twelve["bar_count"] == 9
    assert twelve["total_length_m"] == pytest.approx(22.0)
    assert twelve["total_weight_kg"] == pytest.approx(22.0 * 0.889)
    assert twelve["is_standard"]
    assert not summary[2]["is_standard"]


def test_summarize_by_shape(is456):
    summary = summarize_by_shape(_rows(is456))
    assert [s["shape_code"] for s in summary] == ["S1", "S3"]
    assert summary[0]["shape_name"] == "Straight"
    assert summary[0]["bar_count"] == 11
    assert summary[1]["total_length_m"] == pytest.approx(10.32)


def test_summarize_by_member(is456):
    summary = summarize_by_member(_rows(is456))
    assert [s["member_type"] for s in summary] == ["BEAM", "COLUMN", "SLAB"]
    assert summary[0]["bar_count"] == 14


def test_grand_totals(is456):
    totals = grand_totals(_rows(is456))
    assert totals["bar_count"] == 21
    assert totals["total_length_m"] == pytest.approx(12.0 + 10.32 + 10.0 + 2.0)
    assert totals["total_weight_mt"] == pytest.approx(totals["total_weight_kg"] / 1000)


def test_rows_without_results_are_skipped(is456):
    rows = _rows(is456) + [
        {"id": "failed", "diameter": 12, "calculated": None, "error": "boom"},
        {"id": "pending", "diameter": 12},
    ]
    assert grand_totals(rows)["bar_count"] == 21
    assert summarize_by_diameter(rows)[1]["bar_count"] == 9
    assert component_summary("X", "X", rows)["total_bars"] == 21


def test_totals_do_not_depend_on_order(is456):
    rows = _rows(is456)
    forward = schedule_summary(rows)
    backward = schedule_summary(list(reversed(rows)))
    assert backward["totals"]["total_weight_kg"] == pytest.approx(forward["totals"]["total_weight_kg"])
    assert [s["diameter"] for s in backward["by_diameter"]] == [s["diameter"] for s in forward["by_diameter"]]
    for a, b in zip(forward["by_diameter"], backward["by_diameter"]):
        assert a["total_weight_kg"] == pytest.approx(b["total_weight_kg"])

    steel = steel_summary(list(reversed(rows)))
    assert list(steel["by_diameter"]) == [8, 12, 14]
    assert steel["total_weight_kg"] == pytest.approx(forward["totals"]["total_weight_kg"])
