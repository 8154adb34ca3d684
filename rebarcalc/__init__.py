"""RebarCalc — bar bending schedule calculations."""

__version__ = "1.0.0"
