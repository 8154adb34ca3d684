"""
Calculation endpoints. Stateless: every request carries the bars, the geometry
and (optionally) the profile or project config to calculate with.

Profile precedence per request:
1. "profile"     an explicit profile value
2. "profile_id"  a registered profile (404 if unknown)
3. "config"      the project config's bound profile, else its manual parameters
4. otherwise     settings.DEFAULT_PROFILE_ID
"""

import logging

from fastapi import APIRouter, HTTPException

from ..calculators.aggregation import schedule_summary
from ..calculators.breakdown import generate_breakdown
from ..calculators.comparison import compare_profiles
from ..calculators.component_calculator import calculate_component, calculate_project
from ..calculators.confidence import score_confidence
from ..calculators.shape_calculator import calculate_bars
from ..calculators.shapes import UnknownShape
from ..config import settings
from ..profiles import CodeProfile, get_profile, resolve_profile
from ..schemas import (
    BreakdownRequest,
    CalculationContext,
    CompareRequest,
    ComponentRequest,
    ConfidenceRequest,
    ProjectRequest,
    ShapeBarsRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def profile_for(context: CalculationContext) -> CodeProfile:
    if context.profile is not None:
        return context.profile
    if context.profile_id:
        profile = get_profile(context.profile_id)
        if profile is None:
            raise HTTPException(status_code=404, detail=f"Code profile not found: {context.profile_id}")
        return profile
    if context.config is not None:
        return resolve_profile(context.config)
    return get_profile(settings.DEFAULT_PROFILE_ID)


@router.post("/bars")
def bars(request: ShapeBarsRequest):
    """Shape-code bars: per-bar results plus diameter / shape / member summaries."""
    profile = profile_for(request)
    rows = calculate_bars(request.bars, profile)
    failed = sum(1 for row in rows if row["error"])
    if failed:
        logger.info("%d of %d bars could not be calculated", failed, len(rows))
    return {
        "profile_id": profile.id if profile is not None else None,
        "bars": rows,
        "summary": schedule_summary(rows),
    }


@router.post("/component")
def component(request: ComponentRequest):
    profile = profile_for(request)
    return calculate_component(request.component, profile, settings.DEFAULT_CONCRETE_GRADE)


@router.post("/project")
def project(request: ProjectRequest):
    profile = profile_for(request)
    return calculate_project(request.components, profile, settings.DEFAULT_CONCRETE_GRADE)


@router.post("/confidence")
def confidence(request: ConfidenceRequest):
    try:
        return score_confidence(request.bar, profile_for(request))
    except UnknownShape as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/breakdown")
def breakdown(request: BreakdownRequest):
    try:
        return generate_breakdown(request.bar, profile_for(request))
    except UnknownShape as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/compare")
def compare(request: CompareRequest):
    """Cutting-length changes if the bars were recalculated under new_profile_id."""
    new_profile = get_profile(request.new_profile_id)
    if new_profile is None:
        raise HTTPException(status_code=404, detail=f"Code profile not found: {request.new_profile_id}")
    return compare_profiles(request.bars, profile_for(request), new_profile)
