from fastapi import APIRouter, HTTPException
from typing import List

from ..profiles import (
    CodeProfile,
    ProjectConfig,
    apply_profile,
    create_custom_profile,
    get_profile,
    list_profiles,
    validate_profile,
)
from ..schemas import CustomProfileRequest

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _profile_or_404(profile_id: str) -> CodeProfile:
    profile = get_profile(profile_id)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Code profile not found: {profile_id}")
    return profile


@router.get("", response_model=List[CodeProfile])
def all_profiles():
    return list_profiles()


@router.get("/{profile_id}", response_model=CodeProfile)
def profile_detail(profile_id: str):
    return _profile_or_404(profile_id)


@router.post("/custom", response_model=CodeProfile)
def custom_profile(request: CustomProfileRequest):
    """New editable profile from a base profile plus overrides. Not stored."""
    base = _profile_or_404(request.base_profile_id)
    try:
        return create_custom_profile(base, request.overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/validate")
def validate(profile: CodeProfile):
    return validate_profile(profile)


@router.post("/{profile_id}/apply", response_model=ProjectConfig)
def apply(profile_id: str, config: ProjectConfig):
    """Return the project config bound to a profile, its parameters copied in."""
    return apply_profile(config, _profile_or_404(profile_id))
