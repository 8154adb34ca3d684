"""
Confidence scorer — how far a bar's numbers can be trusted, 0-100.

Advisory only: reads the bar and the profile, never touches the numbers.

Each factor evaluator is a pure function (bar, shape, profile, now) → factor
dict or None. The score is BASE_SCORE plus the sum of factor weights,
clamped to [0, 100]; evaluation order never changes the result.
    high   ≥ 80
    medium ≥ 60
    low    otherwise
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from ..profiles import CodeProfile
from ..schemas import BarEntry
from ..weights import STANDARD_DIAMETERS
from .deduction import angle_class, multiplier
from .registry import get_shape
from .shapes import ShapeDefinition

BASE_SCORE = 50
HIGH_THRESHOLD = 80
MEDIUM_THRESHOLD = 60
RECENT_DAYS = 30


def _factor(name: str, weight: int, description: str) -> dict:
    if weight > 0:
        impact = "positive"
    elif weight < 0:
        impact = "negative"
    else:
        impact = "neutral"
    return {"factor": name, "impact": impact, "description": description, "weight": weight}


def _profile_source(profile: Optional[CodeProfile]) -> str:
    return profile.source if profile is not None else "manual"


# --- Factor evaluators ---

def profile_source_factor(bar, shape, profile, now):
    source = _profile_source(profile)
    if source == "standard":
        return _factor("Standard Code Profile", 25, "Using %s standard parameters" % profile.standard)
    if source == "custom":
        return _factor("Custom Profile", 0, "Using user-defined parameters")
    return _factor("Manual Configuration", -15, "Parameters not from standard profile")


def shape_complexity_factor(bar, shape, profile, now):
    if shape.COMPLEXITY == "simple":
        return _factor("Simple Shape", 10, "Straightforward calculation with minimal bends")
    if shape.COMPLEXITY == "complex":
        return _factor("Complex Shape", -10, "Multiple bends and deductions increase calculation complexity")
    return None


def dimension_completeness_factor(bar, shape, profile, now):
    missing = shape.missing_dimensions(bar.dimensions)
    if not missing:
        return _factor("Complete Dimensions", 15, "All required dimensions provided")
    # fixed weight however many are missing
    return _factor("Missing Dimensions", -20,
                   "%d dimensions missing or zero (%s)" % (len(missing), ", ".join(missing)))


def diameter_factor(bar, shape, profile, now):
    if bar.diameter in STANDARD_DIAMETERS:
        return _factor("Standard Diameter", 5, "Using standard rebar diameter")
    return _factor("Non-standard Diameter", -10, "Unusual diameter may affect calculation accuracy")


def recency_factor(bar, shape, profile, now):
    if _profile_source(profile) == "manual" or profile.updated_at is None:
        return None
    updated_at = profile.updated_at
    if updated_at.tzinfo is None:
        updated_at = updated_at.replace(tzinfo=timezone.utc)
    if now - updated_at <= timedelta(days=RECENT_DAYS):
        return _factor("Recent Configuration", 5, "Profile updated within last %d days" % RECENT_DAYS)
    return None


FACTOR_EVALUATORS = (
    profile_source_factor,
    shape_complexity_factor,
    dimension_completeness_factor,
    diameter_factor,
    recency_factor,
)


def confidence_level(score: int) -> str:
    if score >= HIGH_THRESHOLD:
        return "high"
    if score >= MEDIUM_THRESHOLD:
        return "medium"
    return "low"


def parameters_used(bar: BarEntry, shape: ShapeDefinition,
                    profile: Optional[CodeProfile] = None) -> list:
    """Human-readable list of the profile parameters this bar's numbers depend on."""
    params = ["Diameter: %dmm" % bar.diameter]
    for cls in sorted({angle_class(angle) for angle in shape.BEND_ANGLES}):
        params.append("%d° deduction: %sd" % (cls, _trim(multiplier(cls, profile))))
    if shape.HAS_HOOK:
        hook = profile.default_hook_multiplier if profile is not None else 9
        params.append("Hook multiplier: %sd" % _trim(hook))
    return params


def score_confidence(bar: BarEntry, profile: Optional[CodeProfile] = None,
                     now: Optional[datetime] = None) -> dict:
    """
    Score one bar.

    Returns:
        {
            "score": int 0-100,
            "level": "high" | "medium" | "low",
            "factors": [{"factor", "impact", "description", "weight"}],
            "data_source": {"profile_id", "profile_name", "profile_source",
                            "parameters_used", "last_modified"},
        }
    Raises UnknownShape for an unregistered shape code.
    """
    now = now or datetime.now(timezone.utc)
    shape = get_shape(bar.shape_code)

    evaluated = (evaluate(bar, shape, profile, now) for evaluate in FACTOR_EVALUATORS)
    factors = [factor for factor in evaluated if factor is not None]
    raw_score = BASE_SCORE + sum(factor["weight"] for factor in factors)
    score = max(0, min(100, raw_score))

    return {
        "score": score,
        "level": confidence_level(score),
        "factors": factors,
        "data_source": {
            "profile_id": profile.id if profile is not None else None,
            "profile_name": profile.name if profile is not None else "Manual Configuration",
            "profile_source": _profile_source(profile),
            "parameters_used": parameters_used(bar, shape, profile),
            "last_modified": profile.updated_at if profile is not None else None,
        },
    }


def _trim(value: float) -> str:
    return ("%d" % value) if float(value).is_integer() else ("%s" % value)
