"""
Profile switch comparison — what changes if a schedule is recalculated under another profile.

The only place where negative numbers are expected: difference and
percent_change are display deltas (new - current).
"""

from typing import Optional

from ..profiles import CodeProfile
from .aggregation import grand_totals
from .shape_calculator import calculate_bars

CHANGE_TOLERANCE_MM = 0.1


def _percent(difference: float, base: float) -> float:
    return (difference / base) * 100.0 if base > 0 else 0.0


def compare_profiles(bars: list, current: Optional[CodeProfile],
                     new: Optional[CodeProfile]) -> dict:
    """
    Recalculate `bars` under both profiles.

    Returns:
        {
            "current_profile_id", "new_profile_id",
            "bars": [{"id", "shape_code", "current_cut_length", "new_cut_length",
                      "difference", "percent_change"}],
            "summary": {"total_current_length_m", "total_new_length_m", "length_difference_m",
                        "length_percent_change", "total_current_weight_kg", "total_new_weight_kg",
                        "weight_difference_kg", "weight_percent_change",
                        "bars_with_changes", "total_bars"},
        }
    Bars that fail under either profile are left out of the per-bar list.
    """
    current_rows = calculate_bars(bars, current)
    new_rows = calculate_bars(bars, new)

    comparison = []
    for current_row, new_row in zip(current_rows, new_rows):
        if not current_row["calculated"] or not new_row["calculated"]:
            continue
        current_cut = current_row["calculated"]["cutting_length"]
        new_cut = new_row["calculated"]["cutting_length"]
        difference = new_cut - current_cut
        comparison.append({
            "id": current_row["id"],
            "shape_code": current_row.get("shape_code"),
            "current_cut_length": current_cut,
            "new_cut_length": new_cut,
            "difference": difference,
            "percent_change": _percent(difference, current_cut),
        })

    current_totals = grand_totals(current_rows)
    new_totals = grand_totals(new_rows)
    length_difference = new_totals["total_length_m"] - current_totals["total_length_m"]
    weight_difference = new_totals["total_weight_kg"] - current_totals["total_weight_kg"]

    return {
        "current_profile_id": current.id if current is not None else None,
        "new_profile_id": new.id if new is not None else None,
        "bars": comparison,
        "summary": {
            "total_current_length_m": current_totals["total_length_m"],
            "total_new_length_m": new_totals["total_length_m"],
            "length_difference_m": length_difference,
            "length_percent_change": _percent(length_difference, current_totals["total_length_m"]),
            "total_current_weight_kg": current_totals["total_weight_kg"],
            "total_new_weight_kg": new_totals["total_weight_kg"],
            "weight_difference_kg": weight_difference,
            "weight_percent_change": _percent(weight_difference, current_totals["total_weight_kg"]),
            "bars_with_changes": sum(1 for c in comparison if abs(c["difference"]) > CHANGE_TOLERANCE_MM),
            "total_bars": len(comparison),
        },
    }
