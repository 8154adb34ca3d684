"""
Column bar types. span_x / span_y = section sides, depth = column height.
"""

from ..schemas import BarMeasurements
from .bar_types import BarType, CLOSED_LINK_BENDS
from .measurement import lap_length


class ColumnMainBar(BarType):
    LABELS = ("Main Bar",)
    COMPONENT_TYPE = "COLUMN"
    DESCRIPTION = "Vertical bar lapped at top and bottom"
    COMPLEXITY = "simple"
    FORMULA = "a = height + 2 × lap"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        return BarMeasurements(a=self.depth(component) + 2 * lap_length(entry.diameter, concrete_grade))


class ColumnTie(BarType):
    LABELS = ("Tie", "Master Tie", "Ties")
    COMPONENT_TYPE = "COLUMN"
    DESCRIPTION = "Closed lateral tie with two 10d hooks"
    DEFAULT_BENDS = CLOSED_LINK_BENDS
    COMPLEXITY = "complex"
    FORMULA = "a = 2(x - 2c) + 2(y - 2c) + 2 × 10d"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        perimeter = self.closed_link_perimeter(component.span_x, component.span_y, cover, entry.diameter)
        return BarMeasurements(a=perimeter)

    def count_span(self, entry, component):
        # ties are spaced up the height
        return self.depth(component)
