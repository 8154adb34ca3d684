"""
Formula breakdown — the step-by-step derivation of a bar's cutting length.

Produces data only; rendering is the caller's job. Every value comes from the
same functions the calculator uses, so a renderer never has to recompute.

Step dict:
    {"description", "formula", "operation", "value", "units", "is_deduction", "is_hook"}
operation is one of add / subtract / multiply / divide / sqrt / constant / round.
"""

from typing import Optional

from ..profiles import CodeProfile
from ..schemas import BarEntry
from .cutting_length import NO_ROUNDING, apply_rounding
from .deduction import bend_deduction
from .registry import get_shape
from .shapes import ShapeDefinition, format_mm, substitute


def _step(description: str, formula: str, operation: str, value: float, units: str = "mm",
          is_deduction: bool = False, is_hook: bool = False) -> dict:
    return {
        "description": description,
        "formula": formula,
        "operation": operation,
        "value": value,
        "units": units,
        "is_deduction": is_deduction,
        "is_hook": is_hook,
    }


def code_reference(shape: ShapeDefinition, profile: Optional[CodeProfile] = None) -> str:
    """Building-code clause behind the shape's hook or bend rules."""
    standard = (profile.standard if profile is not None else "").upper()
    if standard.startswith("IS"):
        if shape.HAS_HOOK:
            return "IS 456:2000, Clause 26.2.2.1 (Hook length = 9d)"
        if shape.BEND_ANGLES:
            return "IS 456:2000, Clause 26.2.3 (Bend deductions)"
        return "IS 456:2000"
    if standard.startswith("BS"):
        if shape.HAS_HOOK:
            return "BS 8110, Hook length provisions"
        if shape.BEND_ANGLES:
            return "BS 8110, Bend deduction provisions"
        return "BS 8110"
    return "Custom parameters"


def generate_steps(bar: BarEntry, profile: Optional[CodeProfile] = None) -> list:
    """Ordered derivation steps ending in the cutting length."""
    shape = get_shape(bar.shape_code)
    steps = []

    for slot in shape.REQUIRED_DIMENSIONS:
        value = bar.dimensions.value(slot)
        steps.append(_step("Dimension %s" % slot, "%s = %s" % (slot, format_mm(value)), "constant", value))

    if shape.HAS_HOOK:
        hook = shape.hook(bar.diameter, profile)
        mult = hook / bar.diameter
        steps.append(_step("Hook length", "%s × %d = %s" % (format_mm(mult), bar.diameter, format_mm(hook)),
                           "multiply", hook, is_hook=True))

    steps.extend(shape.terms(bar.dimensions, bar.diameter, profile))
    running = shape.measure(bar.dimensions, bar.diameter, profile)

    deduction = bend_deduction(bar.diameter, angles=shape.BEND_ANGLES,
                               manual_count=bar.manual_no_of_deductions, profile=profile)
    for angle, part in deduction["by_angle"].items():
        running -= part["amount"]
        steps.append(_step(
            "%d° bend deduction" % angle,
            "%d × %s × %d = %s" % (part["count"], format_mm(part["multiplier"]), bar.diameter,
                                   format_mm(part["amount"])),
            "subtract", part["amount"], is_deduction=True,
        ))

    cutting = max(0.0, running)
    if shape.ROUNDING != NO_ROUNDING:
        rounded = apply_rounding(cutting, shape.ROUNDING)
        steps.append(_step("Round (%s)" % shape.ROUNDING, "%s → %s" % (format_mm(cutting), format_mm(rounded)),
                           "round", rounded))
        cutting = rounded

    steps.append(_step("Cutting length", "= %s" % format_mm(cutting), "constant", cutting))
    return steps


def generate_breakdown(bar: BarEntry, profile: Optional[CodeProfile] = None) -> dict:
    """
    Complete breakdown for one shape-code bar.

    Returns:
        {
            "shape_code", "shape_name",
            "formula_template": str,
            "formula": str (template with the bar's values),
            "steps": [step dicts],
            "final_result": float (mm),
            "units": "mm",
            "code_reference": str,
        }
    Raises UnknownShape for an unregistered shape code.
    """
    shape = get_shape(bar.shape_code)
    steps = generate_steps(bar, profile)
    values = shape.symbol_values(bar.dimensions, bar.diameter, profile)
    return {
        "shape_code": shape.CODE,
        "shape_name": shape.NAME,
        "formula_template": shape.FORMULA,
        "formula": substitute(shape.FORMULA, values),
        "steps": steps,
        "final_result": steps[-1]["value"],
        "units": "mm",
        "code_reference": code_reference(shape, profile),
    }
