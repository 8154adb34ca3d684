"""
Footing bar types. span_x = length (L), span_y = breadth (B).
"""

from ..schemas import BarMeasurements
from .bar_types import BarType
from .measurement import development_length

DOWEL_FACTOR = 40  # dowel length = 40d


class FootingMainBar(BarType):
    LABELS = ("Bottom Main (L)", "Top Main (L)")
    COMPONENT_TYPE = "FOOTING"
    DESCRIPTION = "Main mesh bar anchored one Ld past each edge"
    COMPLEXITY = "simple"
    FORMULA = "a = span + 2 × Ld"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        span = self.along_span(entry, component)
        return BarMeasurements(a=span + 2 * development_length(entry.diameter, concrete_grade))


class FootingDistributionBar(BarType):
    LABELS = ("Bottom Dist (B)", "Top Dist (B)")
    COMPONENT_TYPE = "FOOTING"
    DESCRIPTION = "Distribution mesh bar with 10d feet"
    FORMULA = "a = span, b = c = 10d"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        foot = 10 * entry.diameter
        return BarMeasurements(a=self.along_span(entry, component), b=foot, c=foot)


class DowelBar(BarType):
    LABELS = ("Dowel Bars", "Dowel Bar")
    COMPONENT_TYPE = "FOOTING"
    DESCRIPTION = "Starter bar connecting footing to column"
    COMPLEXITY = "simple"
    FORMULA = "a = 40d"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        return BarMeasurements(a=DOWEL_FACTOR * entry.diameter)

    def count_span(self, entry, component):
        # dowels are counted per column bar, never by spacing
        return 0.0
