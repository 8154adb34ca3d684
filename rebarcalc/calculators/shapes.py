"""
Shape catalog — the six standard bar shapes of the named-letter (A-D) methodology.

Each shape is a class carrying its own geometry:
    REQUIRED_DIMENSIONS  ordered slots the user must fill
    BEND_ANGLES          one entry per bend, feeds the deduction calculator
    HAS_HOOK             hook length (H = hook multiplier × d) is part of measure()
    COMPLEXITY           simple / medium / complex, used by the confidence scorer
    ROUNDING             cutting-length rounding policy

measure() returns the raw (pre-deduction) length. Downstream code only ever
reads these attributes; adding a shape means adding a class and registering it.
"""

import math
import re
from abc import ABC, abstractmethod
from typing import Optional

from ..profiles import CodeProfile
from ..schemas import BarDimensions
from .cutting_length import NO_ROUNDING
from .measurement import hook_length


FORMULA_SYMBOLS = re.compile(r"(?<![A-Za-z])(A|B|C|D|hook)(?![A-Za-z])")


class UnknownShape(ValueError):
    """Shape code is not registered in the catalog."""


def format_mm(value: float) -> str:
    """3000.0 → "3000", 1231.46 → "1231.46"."""
    value = round(value, 2)
    return ("%d" % value) if float(value).is_integer() else ("%s" % value)


def substitute(formula: str, values: dict) -> str:
    """Replace dimension letters and "hook" in a formula template with their values."""
    return FORMULA_SYMBOLS.sub(lambda m: format_mm(values.get(m.group(1), 0.0)), formula)


def make_term(description: str, formula: str, operation: str, value: float,
              is_hook: bool = False) -> dict:
    return {
        "description": description,
        "formula": formula,
        "operation": operation,
        "value": value,
        "units": "mm",
        "is_deduction": False,
        "is_hook": is_hook,
    }


class ShapeDefinition(ABC):
    """All bar shapes inherit from this."""

    CODE = ""
    NAME = ""
    DESCRIPTION = ""
    REQUIRED_DIMENSIONS: tuple = ("A",)
    BEND_ANGLES: tuple = ()
    HAS_HOOK = False
    COMPLEXITY = "medium"
    ROUNDING = NO_ROUNDING
    FORMULA = ""
    MEASURE_FORMULA = "A"

    @abstractmethod
    def measure(self, dimensions: BarDimensions, diameter: float,
                profile: Optional[CodeProfile] = None) -> float:
        """Raw bar length in mm before bend deductions."""
        pass

    def hook(self, diameter: float, profile: Optional[CodeProfile] = None) -> float:
        """Length of one hook, 0 for shapes without hooks."""
        if not self.HAS_HOOK:
            return 0.0
        return hook_length(diameter, profile)

    def missing_dimensions(self, dimensions: BarDimensions) -> list:
        """Required slots that are absent or not > 0."""
        return [slot for slot in self.REQUIRED_DIMENSIONS if dimensions.value(slot) <= 0]

    def symbol_values(self, dimensions: BarDimensions, diameter: float,
                      profile: Optional[CodeProfile] = None) -> dict:
        values = {slot: dimensions.value(slot) for slot in ("A", "B", "C", "D")}
        values["hook"] = self.hook(diameter, profile)
        return values

    def terms(self, dimensions: BarDimensions, diameter: float,
              profile: Optional[CodeProfile] = None) -> list:
        """Geometry steps that add up to measure(), for the formula breakdown."""
        value = self.measure(dimensions, diameter, profile)
        expression = substitute(self.MEASURE_FORMULA, self.symbol_values(dimensions, diameter, profile))
        return [make_term("Raw length", "%s = %s" % (expression, format_mm(value)), "add", value,
                          is_hook=self.HAS_HOOK)]

    def describe(self) -> dict:
        return {
            "code": self.CODE,
            "name": self.NAME,
            "description": self.DESCRIPTION,
            "required_dimensions": list(self.REQUIRED_DIMENSIONS),
            "bend_angles": list(self.BEND_ANGLES),
            "has_hook": self.HAS_HOOK,
            "complexity": self.COMPLEXITY,
            "rounding": self.ROUNDING,
            "formula": self.FORMULA,
        }


class StraightBar(ShapeDefinition):
    CODE = "S1"
    NAME = "Straight"
    DESCRIPTION = "Straight bar with no bends"
    REQUIRED_DIMENSIONS = ("A",)
    COMPLEXITY = "simple"
    FORMULA = "A"
    MEASURE_FORMULA = "A"

    def measure(self, dimensions, diameter, profile=None):
        return dimensions.value("A")


class UBar(ShapeDefinition):
    CODE = "S2"
    NAME = "U-Bar"
    DESCRIPTION = "U-shaped bar with two 90° bends"
    REQUIRED_DIMENSIONS = ("A", "B")
    BEND_ANGLES = (90, 90)
    FORMULA = "A + 2×B − 2×(90° bend)"
    MEASURE_FORMULA = "A + 2×B"

    def measure(self, dimensions, diameter, profile=None):
        return dimensions.value("A") + 2 * dimensions.value("B")


class Stirrup(ShapeDefinition):
    CODE = "S3"
    NAME = "Stirrup"
    DESCRIPTION = "Rectangular stirrup with hooks"
    REQUIRED_DIMENSIONS = ("A", "B")
    # four corners plus the two 135° hook bends
    BEND_ANGLES = (90, 90, 90, 90, 135, 135)
    HAS_HOOK = True
    COMPLEXITY = "complex"
    FORMULA = "2×(A + B) + 2×hook − 4×(90° bend) − 2×(135° bend)"
    MEASURE_FORMULA = "2×(A + B) + 2×hook"

    def measure(self, dimensions, diameter, profile=None):
        perimeter = 2 * (dimensions.value("A") + dimensions.value("B"))
        return perimeter + 2 * self.hook(diameter, profile)

    def terms(self, dimensions, diameter, profile=None):
        a = dimensions.value("A")
        b = dimensions.value("B")
        perimeter = 2 * (a + b)
        hooks = 2 * self.hook(diameter, profile)
        return [
            make_term("Perimeter", "2×(%s + %s) = %s" % (format_mm(a), format_mm(b), format_mm(perimeter)),
                      "multiply", perimeter),
            make_term("Add two hooks", "%s + 2×%s = %s" % (
                format_mm(perimeter), format_mm(hooks / 2), format_mm(perimeter + hooks)),
                "add", perimeter + hooks, is_hook=True),
        ]


class CrankedBar(ShapeDefinition):
    CODE = "S4"
    NAME = "Cranked"
    DESCRIPTION = "Cranked bar with inclined portion"
    REQUIRED_DIMENSIONS = ("A", "B", "C")
    BEND_ANGLES = (45, 45)
    COMPLEXITY = "complex"
    FORMULA = "A + √(B² + C²) + C − 2×(45° bend)"
    MEASURE_FORMULA = "A + √(B² + C²) + C"

    def measure(self, dimensions, diameter, profile=None):
        b = dimensions.value("B")
        c = dimensions.value("C")
        # B = horizontal offset, C = vertical rise
        return dimensions.value("A") + math.sqrt(b * b + c * c) + c

    def terms(self, dimensions, diameter, profile=None):
        a = dimensions.value("A")
        b = dimensions.value("B")
        c = dimensions.value("C")
        inclined = math.sqrt(b * b + c * c)
        total = a + inclined + c
        return [
            make_term("Inclined length", "√(%s² + %s²) = %s" % (format_mm(b), format_mm(c), format_mm(inclined)),
                      "sqrt", inclined),
            make_term("Raw length", "%s + %s + %s = %s" % (
                format_mm(a), format_mm(inclined), format_mm(c), format_mm(total)), "add", total),
        ]


class LBar(ShapeDefinition):
    CODE = "S5"
    NAME = "L-Bar"
    DESCRIPTION = "L-shaped bar with one 90° bend"
    REQUIRED_DIMENSIONS = ("A", "B")
    BEND_ANGLES = (90,)
    COMPLEXITY = "complex"
    FORMULA = "A + B − 1×(90° bend)"
    MEASURE_FORMULA = "A + B"

    def measure(self, dimensions, diameter, profile=None):
        return dimensions.value("A") + dimensions.value("B")


class HookedBar(ShapeDefinition):
    CODE = "S6"
    NAME = "Hooked"
    DESCRIPTION = "Straight bar with hook at one end"
    REQUIRED_DIMENSIONS = ("A",)
    BEND_ANGLES = (180,)
    HAS_HOOK = True
    FORMULA = "A + hook − 1×(180° bend)"
    MEASURE_FORMULA = "A + hook"

    def measure(self, dimensions, diameter, profile=None):
        return dimensions.value("A") + self.hook(diameter, profile)
