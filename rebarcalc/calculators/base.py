"""
Abstract base class for the two bar calculators (shape codes, component bar types).

Input: one bar entry + the bound CodeProfile
Output: a bar row dict carrying a CalculatedBarResult under "calculated":
    {
        "total_measurement": float (mm, before deductions),
        "no_of_deductions": int,
        "deduction_amount": float (mm),
        "cutting_length": float (mm),
        "no_of_bars": int,
        "total_length": float (m),
        "unit_weight": float (kg/m),
        "total_weight": float (kg),
    }
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..profiles import CodeProfile
from ..weights import total_length_m, unit_weight

logger = logging.getLogger(__name__)


class BaseBarCalculator(ABC):
    """Both bar calculators inherit from this."""

    def __init__(self, profile: Optional[CodeProfile] = None, concrete_grade: str = "M30"):
        # None = default 2D-per-bend policy, 9d hooks, 25 mm cover
        self.profile = profile
        self.concrete_grade = concrete_grade

    @abstractmethod
    def calculate(self, entry) -> dict:
        """
        Takes one bar entry.
        Returns a bar row dict with the CalculatedBarResult under "calculated".
        """
        pass

    def calculate_all(self, entries: list) -> list:
        """
        Calculate every entry. A failure on one bar is logged and recorded
        on that row; the other bars are still calculated.
        """
        rows = []
        for entry in entries:
            try:
                rows.append(self.calculate(entry))
            except Exception as e:
                logger.warning("Bar %s failed: %s", getattr(entry, "id", "?"), e)
                rows.append(self.make_error_row(entry, str(e)))
        return rows

    # --- Helper methods for both calculators ---

    def make_bar_result(self, total_measurement: float, no_of_deductions: int,
                        deduction_amount: float, cutting_length: float,
                        no_of_bars: int, diameter: float) -> dict:
        """Build the CalculatedBarResult dict. Lengths and weights follow from the cut length."""
        total_length = total_length_m(cutting_length, no_of_bars)
        weight_per_m = unit_weight(diameter)
        return {
            "total_measurement": total_measurement,
            "no_of_deductions": no_of_deductions,
            "deduction_amount": deduction_amount,
            "cutting_length": cutting_length,
            "no_of_bars": no_of_bars,
            "total_length": total_length,
            "unit_weight": weight_per_m,
            "total_weight": total_length * weight_per_m,
        }

    def make_error_row(self, entry, message: str) -> dict:
        """Row for a bar that could not be calculated. It has no result, so summaries skip it."""
        return {
            "id": getattr(entry, "id", None),
            "diameter": getattr(entry, "diameter", None),
            "calculated": None,
            "error": message,
        }
