"""
Base class for component bar types (the a-f + lap spreadsheet methodology).

A bar type is identified by its schedule label ("Bottom Bar (X-X)", "Stirrups", ...)
within a component type. It carries:
    U_TOPOLOGY     aggregate with the doubled-leg U-bar rule
    ROUNDING       cutting-length rounding policy
    DEFAULT_BENDS  bend angles used when the entry gives no manual bend count
    COMPLEXITY     simple / medium / complex, for the confidence scorer
and knows how to derive its own measurements from the component geometry.

Geometry conventions per component type:
    SLAB      span_x, span_y = panel spans; depth = slab thickness (default 125)
    BEAM      span_x = beam span; span_y = beam width (default 300); depth (default 450)
    COLUMN    span_x, span_y = section sides; depth = column height (default 3000)
    FOOTING   span_x = length (L); span_y = breadth (B)
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

from ..profiles import CodeProfile, DEFAULT_COVER
from ..schemas import BarMeasurements, ComponentBarEntry, ConcreteComponent
from .cutting_length import NO_ROUNDING
from .measurement import clamp

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = {
    "SLAB": 125,
    "BEAM": 450,
    "COLUMN": 3000,
    "FOOTING": 500,
}

DEFAULT_BEAM_WIDTH = 300

# Closed links: four corners and two hook turns
CLOSED_LINK_BENDS = (90, 90, 90, 90, 90, 90)


def normalize_bar_type(label: str) -> str:
    """
    Canonical form of a schedule label.
    "(X - X)" → "(X-X)", "Top Bar Main" / "Top MainBar" → "Top Main Bar",
    "DistBar" → "Dist Bar". Suffixes such as "Full Span" are kept: they name a
    different bar type.
    """
    normalized = label.strip()
    normalized = re.sub(r"\(\s*X\s*-\s*X\s*\)", "(X-X)", normalized, flags=re.IGNORECASE)
    normalized = re.sub(r"\(\s*Y\s*-\s*Y\s*\)", "(Y-Y)", normalized, flags=re.IGNORECASE)
    normalized = normalized.replace("Top Bar Main", "Top Main Bar")
    normalized = normalized.replace("Top MainBar", "Top Main Bar")
    normalized = normalized.replace("Bottom MainBar", "Bottom Main Bar")
    normalized = normalized.replace("Top DistBar", "Top Dist Bar")
    normalized = normalized.replace("Bottom DistBar", "Bottom Dist Bar")
    return re.sub(r"\s+", " ", normalized).strip()


class BarType(ABC):
    """All component bar types inherit from this."""

    LABELS: tuple = ()
    COMPONENT_TYPE = "SLAB"
    DESCRIPTION = ""
    U_TOPOLOGY = False
    ROUNDING = NO_ROUNDING
    DEFAULT_BENDS: tuple = ()
    COMPLEXITY = "medium"
    FORMULA = "a"

    @abstractmethod
    def derive_measurements(self, entry: ComponentBarEntry, component: ConcreteComponent,
                            cover: float, concrete_grade: str = "M30") -> BarMeasurements:
        """Segment measurements computed from the component geometry."""
        pass

    def count_span(self, entry: ComponentBarEntry, component: ConcreteComponent) -> float:
        """
        Span the bars are distributed across. Bars running along X are spaced
        along Y and vice versa.
        """
        if entry.direction == "Y":
            return component.span_x
        if entry.direction == "X":
            return component.span_y
        return component.span_x

    # --- Geometry helpers for subclasses ---

    def along_span(self, entry: ComponentBarEntry, component: ConcreteComponent) -> float:
        """Span the bar itself runs along."""
        if entry.direction == "Y":
            return component.span_y
        return component.span_x

    def depth(self, component: ConcreteComponent) -> float:
        return component.depth or DEFAULT_DEPTH.get(component.component_type, 125)

    def supports(self, entry: ComponentBarEntry, component: ConcreteComponent) -> Optional[tuple]:
        """(start, end) support beam widths for the bar's direction, or None."""
        widths = component.beam_widths
        if widths is None:
            return None
        if entry.direction == "Y":
            return widths.top, widths.bottom
        return widths.left, widths.right

    def extensions(self, entry: ComponentBarEntry, component: ConcreteComponent) -> Optional[tuple]:
        """(start, end) top extensions for the bar's direction, or None."""
        ext = component.top_extensions
        if ext is None:
            return None
        if entry.direction == "Y":
            return ext.top, ext.bottom
        return ext.left, ext.right

    def span_only(self, entry: ComponentBarEntry, span: float) -> BarMeasurements:
        """Fallback when the component lacks the support geometry this bar type needs."""
        logger.warning("Bar %s (%s): no beam widths / top extensions, measuring span only",
                       entry.id, entry.bar_type)
        return BarMeasurements(a=span)

    def closed_link_perimeter(self, side_1: float, side_2: float, cover: float,
                              diameter: float) -> float:
        """2(s1 - 2c) + 2(s2 - 2c) + 2 × 10d hook allowance."""
        inner_1 = clamp(side_1 - 2 * cover)
        inner_2 = clamp(side_2 - 2 * cover)
        return 2 * inner_1 + 2 * inner_2 + 2 * (10 * diameter)

    def describe(self) -> dict:
        return {
            "label": self.LABELS[0] if self.LABELS else "",
            "aliases": list(self.LABELS[1:]),
            "component_type": self.COMPONENT_TYPE,
            "description": self.DESCRIPTION,
            "u_topology": self.U_TOPOLOGY,
            "rounding": self.ROUNDING,
            "default_bends": list(self.DEFAULT_BENDS),
            "complexity": self.COMPLEXITY,
            "formula": self.FORMULA,
        }


class GenericBar(BarType):
    """Fallback for labels no bar type claims: a straight bar along its span."""

    LABELS = ("Generic",)
    COMPONENT_TYPE = "ANY"
    DESCRIPTION = "Straight bar along the component span"
    COMPLEXITY = "simple"
    FORMULA = "a = span"

    def derive_measurements(self, entry, component, cover, concrete_grade="M30"):
        return BarMeasurements(a=self.along_span(entry, component))


def effective_cover(component: ConcreteComponent, profile: Optional[CodeProfile] = None) -> float:
    """Component cover, or the profile's default cover when the component gives none."""
    if component.cover:
        return component.cover
    if profile is not None:
        return profile.default_cover
    return DEFAULT_COVER
