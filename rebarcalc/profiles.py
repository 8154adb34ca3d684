"""
Code profiles — named bundles of bending policy (IS 456, BS 8110, custom).

A profile is a plain value: every calculator receives it as an argument.
Nothing in here is mutated after import; "editing" a profile or applying
one to a project always returns a new object.

Lookup order used by resolve_profile():
1. ProjectConfig.code_profile_id found in the profile table → that profile
2. Otherwise → a "manual" profile built from the config's embedded parameters
"""

import logging
import time
from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

MEMBER_TYPES = ("BEAM", "COLUMN", "SLAB")
VALID_DIAMETERS = (6, 8, 10, 12, 16, 20, 25, 32)

ProfileSource = Literal["standard", "custom", "manual"]
CodeStandard = Literal["IS", "BS", "CUSTOM"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BendDeductions(BaseModel):
    """Bend deduction multipliers: deduction = multiplier × diameter."""
    deg45: float = 1.0
    deg90: float = 2.0
    deg135: float = 3.0

    class Config:
        frozen = True


class MemberDefaults(BaseModel):
    default_cover: float
    default_spacing: float
    common_diameters: List[int]

    class Config:
        frozen = True


class DevelopmentLengthFactors(BaseModel):
    straight: float = 1.0
    hooked: float = 0.7
    compression: float = 0.8

    class Config:
        frozen = True


class CodeProfile(BaseModel):
    id: str
    name: str
    description: str = ""
    standard: str = "Custom"
    source: ProfileSource = "standard"
    is_editable: bool = False

    default_cover: float = 25.0
    default_hook_multiplier: float = 9.0
    bend_deductions: BendDeductions = Field(default_factory=BendDeductions)

    member_defaults: Dict[str, MemberDefaults] = Field(default_factory=dict)
    minimum_cover: Dict[str, float] = Field(default_factory=dict)
    maximum_spacing: Dict[str, float] = Field(default_factory=dict)
    development_length_factors: Optional[DevelopmentLengthFactors] = None

    updated_at: Optional[datetime] = None

    class Config:
        frozen = True


class ProjectConfig(BaseModel):
    """Project-level configuration. The engine reads it, never writes it."""
    id: str = "default"
    name: str = "Default Project"
    code_standard: CodeStandard = "IS"
    code_profile_id: Optional[str] = None
    default_cover: float = 25.0
    default_hook_multiplier: float = 9.0
    bend_deductions: BendDeductions = Field(default_factory=BendDeductions)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    class Config:
        frozen = True


# Default bending policy when no profile is bound: 2D per right-angle bend
DEFAULT_BEND_DEDUCTIONS = BendDeductions()
DEFAULT_HOOK_MULTIPLIER = 9.0
DEFAULT_COVER = 25.0


def _member_defaults(beam_spacing, column_cover, column_spacing, slab_spacing):
    return {
        "BEAM": MemberDefaults(default_cover=25, default_spacing=beam_spacing,
                               common_diameters=[8, 10, 12, 16, 20, 25]),
        "COLUMN": MemberDefaults(default_cover=column_cover, default_spacing=column_spacing,
                                 common_diameters=[12, 16, 20, 25, 32]),
        "SLAB": MemberDefaults(default_cover=20, default_spacing=slab_spacing,
                               common_diameters=[8, 10, 12, 16]),
    }


# Standard profiles, values from the code clauses noted inline
CODE_PROFILES: Dict[str, CodeProfile] = {
    "IS456": CodeProfile(
        id="IS456",
        name="IS 456:2000",
        description="Indian Standard Code of Practice for Plain and Reinforced Concrete",
        standard="IS 456:2000",
        source="standard",
        is_editable=False,
        default_cover=25,
        default_hook_multiplier=9,  # IS 456 clause 26.2.2.1
        bend_deductions=BendDeductions(deg45=1, deg90=2, deg135=3),
        member_defaults=_member_defaults(150, 40, 150, 150),
        minimum_cover={"BEAM": 25, "COLUMN": 40, "SLAB": 20},
        maximum_spacing={"BEAM": 300, "COLUMN": 300, "SLAB": 300},
        development_length_factors=DevelopmentLengthFactors(straight=1.0, hooked=0.7, compression=0.8),
    ),
    "BS8110": CodeProfile(
        id="BS8110",
        name="BS 8110",
        description="British Standard Code of Practice for Structural Concrete",
        standard="BS 8110",
        source="standard",
        is_editable=False,
        default_cover=25,
        default_hook_multiplier=8,
        bend_deductions=BendDeductions(deg45=0.5, deg90=1.5, deg135=2.5),
        member_defaults=_member_defaults(200, 35, 200, 200),
        minimum_cover={"BEAM": 25, "COLUMN": 35, "SLAB": 20},
        maximum_spacing={"BEAM": 250, "COLUMN": 250, "SLAB": 250},
        development_length_factors=DevelopmentLengthFactors(straight=1.0, hooked=0.75, compression=0.85),
    ),
    "CUSTOM": CodeProfile(
        id="CUSTOM",
        name="Custom",
        description="User-defined parameters",
        standard="Custom",
        source="custom",
        is_editable=True,
        default_cover=25,
        default_hook_multiplier=9,
        bend_deductions=BendDeductions(deg45=1, deg90=2, deg135=3),
        member_defaults=_member_defaults(150, 40, 150, 150),
        minimum_cover={"BEAM": 20, "COLUMN": 30, "SLAB": 15},
        maximum_spacing={"BEAM": 400, "COLUMN": 400, "SLAB": 400},
        development_length_factors=DevelopmentLengthFactors(straight=1.0, hooked=0.7, compression=0.8),
    ),
}


def list_profiles(profiles: Optional[Dict[str, CodeProfile]] = None) -> List[CodeProfile]:
    """All available profiles, standard ones first."""
    return list((profiles if profiles is not None else CODE_PROFILES).values())


def get_profile(profile_id: str, profiles: Optional[Dict[str, CodeProfile]] = None) -> Optional[CodeProfile]:
    """Profile by id, or None."""
    table = profiles if profiles is not None else CODE_PROFILES
    return table.get(profile_id)


def manual_profile(config: ProjectConfig) -> CodeProfile:
    """
    Wrap a config's embedded (legacy) parameters as a profile value.
    No updated_at: hand-entered parameters never earn the recency bonus.
    """
    return CodeProfile(
        id="manual",
        name="Manual Configuration",
        description="Parameters embedded in the project configuration",
        standard="Manual",
        source="manual",
        is_editable=True,
        default_cover=config.default_cover,
        default_hook_multiplier=config.default_hook_multiplier,
        bend_deductions=config.bend_deductions,
    )


def resolve_profile(config: ProjectConfig,
                    profiles: Optional[Dict[str, CodeProfile]] = None) -> CodeProfile:
    """
    The profile a project calculates with.
    Bound profile if the id resolves, else the config's manual parameters.
    """
    if config.code_profile_id:
        profile = get_profile(config.code_profile_id, profiles)
        if profile is not None:
            # recency is tracked on the project config, not the shared profile table
            return profile.model_copy(update={"updated_at": config.updated_at})
        logger.warning("Code profile %s not found, using manual parameters of project %s",
                       config.code_profile_id, config.id)
    return manual_profile(config)


def validate_profile(profile: CodeProfile) -> dict:
    """
    Check a profile's parameters against sane engineering ranges.

    Returns:
        {"valid": bool, "errors": [str], "warnings": [str]}
    """
    errors = []
    warnings = []

    if profile.default_cover < 10 or profile.default_cover > 100:
        errors.append("Default cover must be between 10mm and 100mm")

    if profile.default_hook_multiplier < 4 or profile.default_hook_multiplier > 15:
        errors.append("Hook multiplier must be between 4 and 15")

    for label, value in (("45°", profile.bend_deductions.deg45),
                         ("90°", profile.bend_deductions.deg90),
                         ("135°", profile.bend_deductions.deg135)):
        if value < 0 or value > 5:
            errors.append("%s bend deduction must be between 0 and 5" % label)

    for member_type in MEMBER_TYPES:
        member_default = profile.member_defaults.get(member_type)
        if member_default is None:
            continue
        min_cover = profile.minimum_cover.get(member_type)
        max_spacing = profile.maximum_spacing.get(member_type)

        if min_cover is not None and member_default.default_cover < min_cover:
            errors.append("%s default cover (%smm) is less than minimum (%smm)" % (
                member_type, _fmt(member_default.default_cover), _fmt(min_cover)))

        if max_spacing is not None and member_default.default_spacing > max_spacing:
            warnings.append("%s default spacing (%smm) exceeds maximum (%smm)" % (
                member_type, _fmt(member_default.default_spacing), _fmt(max_spacing)))

        if not member_default.common_diameters:
            errors.append("%s must have at least one common diameter" % member_type)

        for dia in member_default.common_diameters:
            if dia not in VALID_DIAMETERS:
                errors.append("%s has invalid diameter: %smm" % (member_type, dia))

    cover_ranges = {"BEAM": (15, 75), "COLUMN": (20, 100), "SLAB": (10, 50)}
    for member_type, (low, high) in cover_ranges.items():
        value = profile.minimum_cover.get(member_type)
        if value is not None and (value < low or value > high):
            errors.append("%s minimum cover must be between %dmm and %dmm" % (
                member_type.capitalize(), low, high))

    for member_type in MEMBER_TYPES:
        value = profile.maximum_spacing.get(member_type)
        if value is not None and (value < 100 or value > 500):
            warnings.append("%s maximum spacing should be between 100mm and 500mm" % member_type.capitalize())

    factors = profile.development_length_factors
    if factors is not None:
        if factors.straight < 0.5 or factors.straight > 2.0:
            errors.append("Straight development length factor must be between 0.5 and 2.0")
        if factors.hooked < 0.3 or factors.hooked > 1.5:
            errors.append("Hooked development length factor must be between 0.3 and 1.5")
        if factors.compression < 0.5 or factors.compression > 1.5:
            errors.append("Compression development length factor must be between 0.5 and 1.5")

    return {
        "valid": not errors,
        "errors": errors,
        "warnings": warnings,
    }


def create_custom_profile(base: CodeProfile, overrides: dict,
                          now: Optional[datetime] = None) -> CodeProfile:
    """
    New editable profile = base + overrides.
    Raises ValueError if the result fails validate_profile().
    """
    now = now or _utcnow()
    update = dict(overrides)
    if isinstance(update.get("bend_deductions"), dict):
        merged = base.bend_deductions.model_dump()
        merged.update(update["bend_deductions"])
        update["bend_deductions"] = BendDeductions(**merged)

    data = base.model_dump()
    data.update(update)
    data.update({
        "id": overrides.get("id") or "custom_%d" % int(time.time() * 1000),
        "is_editable": True,
        "standard": "Custom",
        "source": "custom",
        "updated_at": now,
    })
    profile = CodeProfile(**data)

    validation = validate_profile(profile)
    if not validation["valid"]:
        raise ValueError("Invalid custom profile: %s" % ", ".join(validation["errors"]))
    return profile


def code_standard_for(profile_id: str) -> str:
    """Map a profile id to the legacy IS/BS/CUSTOM code standard tag."""
    if profile_id == "IS456":
        return "IS"
    if profile_id == "BS8110":
        return "BS"
    return "CUSTOM"


def apply_profile(config: ProjectConfig, profile: CodeProfile,
                  now: Optional[datetime] = None) -> ProjectConfig:
    """Return a copy of config bound to profile, with its parameters copied in."""
    return config.model_copy(update={
        "code_profile_id": profile.id,
        "default_cover": profile.default_cover,
        "default_hook_multiplier": profile.default_hook_multiplier,
        "bend_deductions": profile.bend_deductions,
        "code_standard": code_standard_for(profile.id),
        "updated_at": now or _utcnow(),
    })


def _fmt(value: float) -> str:
    return ("%d" % value) if float(value).is_integer() else ("%s" % value)
