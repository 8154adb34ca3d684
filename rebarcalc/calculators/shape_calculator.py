"""
Shape-code bar calculator (S1-S6, dimensions A-D).

Pipeline per bar:
    shape.measure()                    raw length incl. hooks
    - bend_deduction(shape angles)     or manual bend count at the 90° rate
    → cutting length (shape rounding policy)
    × bar count (manual quantity, else spacing over span)
    → total length, weight
"""

from ..profiles import DEFAULT_COVER
from ..schemas import BarEntry
from .bar_count import resolve_bar_count
from .base import BaseBarCalculator
from .cutting_length import resolve_cutting_length
from .deduction import bend_deduction
from .registry import get_shape


class ShapeBarCalculator(BaseBarCalculator):

    def cover_for(self, bar: BarEntry) -> float:
        if bar.cover is not None:
            return bar.cover
        if self.profile is not None:
            return self.profile.default_cover
        return DEFAULT_COVER

    def calculate(self, bar: BarEntry) -> dict:
        shape = get_shape(bar.shape_code)

        measurement = shape.measure(bar.dimensions, bar.diameter, self.profile)
        deduction = bend_deduction(
            bar.diameter,
            angles=shape.BEND_ANGLES,
            manual_count=bar.manual_no_of_deductions,
            profile=self.profile,
        )
        cutting_length = resolve_cutting_length(measurement, deduction["deduction_amount"],
                                                shape.ROUNDING)
        no_of_bars = resolve_bar_count(bar.span, bar.spacing, self.cover_for(bar),
                                       manual_count=bar.quantity)

        return {
            "id": bar.id,
            "member_type": bar.member_type,
            "shape_code": shape.CODE,
            "diameter": bar.diameter,
            "spacing": bar.spacing,
            "remarks": bar.remarks,
            "hook_length": shape.hook(bar.diameter, self.profile),
            "missing_dimensions": shape.missing_dimensions(bar.dimensions),
            "calculated": self.make_bar_result(
                total_measurement=measurement,
                no_of_deductions=deduction["no_of_deductions"],
                deduction_amount=deduction["deduction_amount"],
                cutting_length=cutting_length,
                no_of_bars=no_of_bars,
                diameter=bar.diameter,
            ),
            "error": None,
        }

    def make_error_row(self, entry, message):
        row = super().make_error_row(entry, message)
        row["member_type"] = getattr(entry, "member_type", None)
        row["shape_code"] = getattr(entry, "shape_code", None)
        return row


def calculate_bar(bar: BarEntry, profile=None) -> dict:
    """One bar. Raises UnknownShape for an unregistered shape code."""
    return ShapeBarCalculator(profile).calculate(bar)


def calculate_bars(bars: list, profile=None) -> list:
    """All bars; per-bar failures are recorded on their row."""
    return ShapeBarCalculator(profile).calculate_all(bars)
