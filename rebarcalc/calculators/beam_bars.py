"""
Beam bar types. span_x = beam span, span_y = beam width, depth = overall depth.

Longitudinal bars are spaced across the width; side face bars up the depth;
stirrups along the span.
"""

from ..schemas import BarMeasurements
from .bar_types import BarType, CLOSED_LINK_BENDS, DEFAULT_BEAM_WIDTH
from .measurement import development_length


class BeamTopBar(BarType):
    LABELS = ("Top Bar",)
    COMPONENT_TYPE = "BEAM"
    DESCRIPTION = "Support top bar, 0.3 × span plus anchorage"
    COMPLEXITY = "simple"
    FORMULA = "a = 0.3 × span + max(12d, Ld)"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        anchorage = max(12 * entry.diameter, development_length(entry.diameter, concrete_grade))
        return BarMeasurements(a=0.3 * component.span_x + anchorage)


class BeamBottomBar(BarType):
    LABELS = ("Bottom Bar",)
    COMPONENT_TYPE = "BEAM"
    DESCRIPTION = "Bottom bar anchored one Ld into each support"
    COMPLEXITY = "simple"
    FORMULA = "a = span + 2 × Ld"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        return BarMeasurements(a=component.span_x + 2 * development_length(entry.diameter, concrete_grade))


class BeamExtraBar(BeamBottomBar):
    LABELS = ("Extra Bar",)
    DESCRIPTION = "Additional longitudinal bar, span plus 2 × Ld"


class BeamSideFaceBar(BarType):
    LABELS = ("Side Face Bar",)
    COMPONENT_TYPE = "BEAM"
    DESCRIPTION = "Side face bar for deep beams, 12d anchorage each end"
    COMPLEXITY = "simple"
    FORMULA = "a = depth + 2 × 12d"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        return BarMeasurements(a=self.depth(component) + 2 * 12 * entry.diameter)

    def count_span(self, entry, component):
        return self.depth(component)


class BeamStirrup(BarType):
    LABELS = ("Stirrups", "Stirrup")
    COMPONENT_TYPE = "BEAM"
    DESCRIPTION = "Closed rectangular stirrup with two 10d hooks"
    DEFAULT_BENDS = CLOSED_LINK_BENDS
    COMPLEXITY = "complex"
    FORMULA = "a = 2(w - 2c) + 2(D - 2c) + 2 × 10d"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        width = component.span_y or DEFAULT_BEAM_WIDTH
        perimeter = self.closed_link_perimeter(width, self.depth(component), cover, entry.diameter)
        return BarMeasurements(a=perimeter)

    def count_span(self, entry, component):
        return component.span_x
