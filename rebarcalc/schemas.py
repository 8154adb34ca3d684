from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional
from .profiles import CodeProfile, ProjectConfig

MemberType = Literal["BEAM", "COLUMN", "SLAB"]
ComponentType = Literal["BEAM", "COLUMN", "SLAB", "FOOTING"]
BarDirection = Literal["X", "Y", "BOTH", "NONE"]


# --- Shape methodology (S1-S6) ---

class BarDimensions(BaseModel):
    """Named-letter dimensions in mm. Missing slot = 0."""
    A: float = Field(0.0, ge=0)
    B: Optional[float] = Field(None, ge=0)
    C: Optional[float] = Field(None, ge=0)
    D: Optional[float] = Field(None, ge=0)

    def value(self, slot: str) -> float:
        return getattr(self, slot, None) or 0.0


class BarEntry(BaseModel):
    id: str
    member_type: MemberType = "BEAM"
    shape_code: str
    diameter: int = Field(..., gt=0)  # mm
    dimensions: BarDimensions = Field(default_factory=BarDimensions)
    spacing: float = Field(0.0, ge=0)   # 0 = not spacing-governed
    span: float = Field(0.0, ge=0)      # distribution span for spacing-governed counts
    cover: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=0)  # manual bar count, always wins
    manual_no_of_deductions: Optional[int] = Field(None, ge=0)
    remarks: Optional[str] = None


# --- Component methodology (a..f + lap) ---

class BarMeasurements(BaseModel):
    """Segment dimensions in mm, BBS spreadsheet columns a-f plus lap."""
    a: float = Field(0.0, ge=0)
    b: Optional[float] = Field(None, ge=0)
    c: Optional[float] = Field(None, ge=0)
    d: Optional[float] = Field(None, ge=0)
    e: Optional[float] = Field(None, ge=0)
    f: Optional[float] = Field(None, ge=0)
    lap: Optional[float] = Field(None, ge=0)

    def value(self, slot: str) -> float:
        return getattr(self, slot, None) or 0.0


class FourSides(BaseModel):
    left: float = Field(0.0, ge=0)
    right: float = Field(0.0, ge=0)
    top: float = Field(0.0, ge=0)
    bottom: float = Field(0.0, ge=0)


class ComponentBarEntry(BaseModel):
    id: str
    bar_type: str
    direction: BarDirection = "X"
    diameter: int = Field(..., gt=0)  # mm
    spacing: float = Field(0.0, ge=0)
    measurements: BarMeasurements = Field(default_factory=BarMeasurements)
    manual_no_of_deductions: Optional[int] = Field(None, ge=0)
    manual_no_of_bars: Optional[int] = Field(None, ge=0)
    member_count: int = Field(1, ge=1)  # identical members sharing this schedule row


class ConcreteComponent(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    component_type: ComponentType = "SLAB"
    span_x: float = Field(0.0, ge=0)
    span_y: float = Field(0.0, ge=0)
    depth: Optional[float] = Field(None, ge=0)
    cover: float = Field(0.0, ge=0)
    beam_widths: Optional[FourSides] = None
    top_extensions: Optional[FourSides] = None
    bars: List[ComponentBarEntry] = []


# --- API requests ---

class CalculationContext(BaseModel):
    """Either an explicit profile, a project config, or neither (default profile)."""
    profile: Optional[CodeProfile] = None
    profile_id: Optional[str] = None
    config: Optional[ProjectConfig] = None


class ShapeBarsRequest(CalculationContext):
    bars: List[BarEntry]


class ComponentRequest(CalculationContext):
    component: ConcreteComponent


class ProjectRequest(CalculationContext):
    components: List[ConcreteComponent]


class ConfidenceRequest(CalculationContext):
    bar: BarEntry


class BreakdownRequest(CalculationContext):
    bar: BarEntry


class CompareRequest(CalculationContext):
    bars: List[BarEntry]
    new_profile_id: str


class CustomProfileRequest(BaseModel):
    base_profile_id: str = "CUSTOM"
    overrides: Dict = {}
