"""
Slab bar types.

Main bars (Bottom Bar, Bottom & Top Bar) are U-bars: they drop through the
supporting beam and return as top extensions at both ends, so they aggregate
with the doubled-leg rule. Top bars carry the same segments but are summed
once. Distribution bars round their cutting length up to the next 5 mm.

Without beam widths (or top extensions for U-bars) only the span is known:
the bar degrades to a = span.
"""

from ..schemas import BarMeasurements
from .bar_types import BarType
from .cutting_length import ROUND_UP_5
from .measurement import clamp, development_length


class SlabUBar(BarType):
    """
    a = span                       b = start beam - cover
    c = depth - 2 × cover          d = end beam - cover
    e = start top extension        f = end top extension
    """

    LABELS = (
        "Bottom Bar (X-X)",
        "Bottom Bar (Y-Y)",
    )
    COMPONENT_TYPE = "SLAB"
    DESCRIPTION = "Bottom main bar cranked through the supports into top extensions"
    U_TOPOLOGY = True
    COMPLEXITY = "complex"
    FORMULA = "a + 2b + 2c + 2d + e + f"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        span = self.along_span(entry, component)
        supports = self.supports(entry, component)
        extensions = self.extensions(entry, component)
        if supports is None or extensions is None:
            return self.span_only(entry, span)

        start, end = supports
        ext_start, ext_end = extensions
        return BarMeasurements(
            a=span,
            b=clamp(start - cover),
            c=clamp(self.depth(component) - 2 * cover),
            d=clamp(end - cover),
            e=ext_start,
            f=ext_end,
            lap=0,
        )


class SlabCombinedBar(SlabUBar):
    LABELS = (
        "Bottom & Top Bar (X-X)",
        "Bottom & Top Bar (Y-Y)",
        "Top & Bottom Bar (X-X)",
        "Top & Bottom Bar (Y-Y)",
    )
    DESCRIPTION = "Continuous bar serving as both bottom and top reinforcement"


class SlabTopBar(SlabUBar):
    """Same segments as the U-bar, each counted once."""

    LABELS = (
        "Top Bar (X-X)",
        "Top Bar (Y-Y)",
        "Top Main Bar (X-X)",
        "Top Main Bar (Y-Y)",
    )
    DESCRIPTION = "Top bar with extensions over the supports"
    U_TOPOLOGY = False
    COMPLEXITY = "medium"
    FORMULA = "a + b + c + d + e + f"


class SlabFullSpanBar(BarType):
    """
    a = span
    b, c = start / end beam - cover
    d, e = depth - 2 × cover
    """

    LABELS = (
        "Bottom Bar (X-X) Full Span",
        "Bottom Bar (Y-Y) Full Span",
        "Top Bar (X-X) Full Span",
        "Top Bar (Y-Y) Full Span",
    )
    COMPONENT_TYPE = "SLAB"
    DESCRIPTION = "Full-span bar anchored into both supports"
    FORMULA = "a + b + c + d + e"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        span = self.along_span(entry, component)
        supports = self.supports(entry, component)
        if supports is None:
            return self.span_only(entry, span)

        start, end = supports
        rise = clamp(self.depth(component) - 2 * cover)
        return BarMeasurements(
            a=span,
            b=clamp(start - cover),
            c=clamp(end - cover),
            d=rise,
            e=rise,
        )


class SlabDistributionBar(BarType):
    """
    a = span
    b, c = start / end beam - cover
    d, e = 10d foot lengths
    """

    LABELS = (
        "Bottom Bar Dist (X-X)",
        "Bottom Bar Dist (Y-Y)",
        "Top Bar Dist (X-X)",
        "Top Bar Dist (Y-Y)",
        "Top Dist Bar (X-X)",
        "Top Dist Bar (Y-Y)",
        "Bottom Bar Dist (X)",
        "Bottom Bar Dist (Y)",
        "Top Bar Dist (X)",
        "Top Bar Dist (Y)",
    )
    COMPONENT_TYPE = "SLAB"
    DESCRIPTION = "Distribution bar with foot lengths, cut to the next 5 mm"
    ROUNDING = ROUND_UP_5
    FORMULA = "ceil((a + b + c + d + e - deduction) / 5) × 5"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        span = self.along_span(entry, component)
        supports = self.supports(entry, component)
        if supports is None:
            return self.span_only(entry, span)

        start, end = supports
        foot = 10 * entry.diameter
        return BarMeasurements(
            a=span,
            b=clamp(start - cover),
            c=clamp(end - cover),
            d=foot,
            e=foot,
        )


class SlabExtraTopBar(BarType):
    LABELS = ("Extra Top",)
    COMPONENT_TYPE = "SLAB"
    DESCRIPTION = "Additional top bar, 12d anchorage each side"
    COMPLEXITY = "simple"
    FORMULA = "a = 2 × 12d"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        return BarMeasurements(a=2 * 12 * entry.diameter)


class SlabExtraBottomBar(BarType):
    LABELS = ("Extra Bottom",)
    COMPONENT_TYPE = "SLAB"
    DESCRIPTION = "Additional bottom bar, one development length each side"
    COMPLEXITY = "simple"
    FORMULA = "a = 2 × Ld"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        return BarMeasurements(a=2 * development_length(entry.diameter, concrete_grade))


class ChairBar(BarType):
    LABELS = ("Chair Bar",)
    COMPONENT_TYPE = "SLAB"
    DESCRIPTION = "Support chair for the top mat"
    FORMULA = "a = depth - 2 × cover, b = c = 5d"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        foot = 5 * entry.diameter
        return BarMeasurements(
            a=clamp(self.depth(component) - 2 * cover),
            b=foot,
            c=foot,
        )
