"""
Component bar calculator (a-f + lap measurements against component geometry).

Pipeline per bar:
    measurements    as entered, or derived from the geometry when "a" is missing/0
    aggregate       U-bar or standard rule, per bar type
    - deduction     manual bend count, else the bar type's default bends
    → cutting length (bar type rounding policy)
    × bar count     manual, else spacing over the bar type's count span, × member count
"""

import logging

from ..schemas import ComponentBarEntry, ConcreteComponent
from .aggregation import component_summary, project_summary
from .bar_count import resolve_bar_count
from .bar_types import effective_cover
from .base import BaseBarCalculator
from .cutting_length import resolve_cutting_length
from .deduction import bend_deduction
from .measurement import aggregate
from .registry import get_bar_type

logger = logging.getLogger(__name__)


class ComponentBarCalculator(BaseBarCalculator):

    def __init__(self, component: ConcreteComponent, profile=None, concrete_grade: str = "M30"):
        super().__init__(profile, concrete_grade)
        self.component = component
        self.cover = effective_cover(component, profile)

    def calculate(self, entry: ComponentBarEntry) -> dict:
        component = self.component
        bar_type = get_bar_type(component.component_type, entry.bar_type)

        measurements = entry.measurements
        auto_measured = not measurements.a
        if auto_measured:
            measurements = bar_type.derive_measurements(entry, component, self.cover, self.concrete_grade)
            logger.debug("Derived measurements for %s (%s): %s",
                         entry.id, entry.bar_type, measurements.model_dump(exclude_none=True))

        total = aggregate(measurements, bar_type.U_TOPOLOGY)
        deduction = bend_deduction(
            entry.diameter,
            angles=bar_type.DEFAULT_BENDS,
            manual_count=entry.manual_no_of_deductions,
            profile=self.profile,
        )
        cutting_length = resolve_cutting_length(total, deduction["deduction_amount"], bar_type.ROUNDING)
        no_of_bars = resolve_bar_count(
            bar_type.count_span(entry, component),
            entry.spacing,
            self.cover,
            manual_count=entry.manual_no_of_bars,
            multiplier=entry.member_count,
        )

        return {
            "id": entry.id,
            "bar_type": entry.bar_type,
            "resolved_bar_type": bar_type.LABELS[0],
            "direction": entry.direction,
            "diameter": entry.diameter,
            "spacing": entry.spacing,
            "measurements": measurements.model_dump(),
            "auto_measured": auto_measured,
            "u_topology": bar_type.U_TOPOLOGY,
            "calculated": self.make_bar_result(
                total_measurement=total,
                no_of_deductions=deduction["no_of_deductions"],
                deduction_amount=deduction["deduction_amount"],
                cutting_length=cutting_length,
                no_of_bars=no_of_bars,
                diameter=entry.diameter,
            ),
            "error": None,
        }

    def make_error_row(self, entry, message):
        row = super().make_error_row(entry, message)
        row["bar_type"] = getattr(entry, "bar_type", None)
        return row


def calculate_component(component: ConcreteComponent, profile=None,
                        concrete_grade: str = "M30") -> dict:
    """
    Calculate every bar of a component and summarise it.

    Returns:
        {
            "id", "name", "component_type",
            "bars": [bar rows],
            "summary": ComponentSummary dict,
        }
    """
    calculator = ComponentBarCalculator(component, profile, concrete_grade)
    rows = calculator.calculate_all(component.bars)
    return {
        "id": component.id,
        "name": component.name,
        "component_type": component.component_type,
        "bars": rows,
        "summary": component_summary(component.id, component.name, rows),
    }


def calculate_project(components: list, profile=None, concrete_grade: str = "M30") -> dict:
    """
    Calculate every component, then the project steel summary by diameter.

    Returns:
        {"components": [calculate_component() dicts], "summary": ProjectSteelSummary dict}
    """
    results = [calculate_component(c, profile, concrete_grade) for c in components]
    return {
        "components": results,
        "summary": project_summary(results),
    }
