"""
Registries — map shape codes and bar-type labels to their definition classes.

Shapes: unknown code → UnknownShape (fatal, nothing sensible to compute).
Bar types: unknown label → GenericBar with a warning (the row still gets a span-length bar).
"""

import logging

from .bar_types import BarType, GenericBar, normalize_bar_type
from .beam_bars import BeamBottomBar, BeamExtraBar, BeamSideFaceBar, BeamStirrup, BeamTopBar
from .column_bars import ColumnMainBar, ColumnTie
from .footing_bars import DowelBar, FootingDistributionBar, FootingMainBar
from .shapes import (
    CrankedBar,
    HookedBar,
    LBar,
    ShapeDefinition,
    StraightBar,
    Stirrup,
    UBar,
    UnknownShape,
)
from .slab_bars import (
    ChairBar,
    SlabCombinedBar,
    SlabDistributionBar,
    SlabExtraBottomBar,
    SlabExtraTopBar,
    SlabFullSpanBar,
    SlabTopBar,
    SlabUBar,
)

logger = logging.getLogger(__name__)

SHAPE_REGISTRY: dict[str, type] = {
    "S1": StraightBar,
    "S2": UBar,
    "S3": Stirrup,
    "S4": CrankedBar,
    "S5": LBar,
    "S6": HookedBar,
}

BAR_TYPE_CLASSES: dict[str, list] = {
    "SLAB": [
        SlabUBar,
        SlabCombinedBar,
        SlabTopBar,
        SlabFullSpanBar,
        SlabDistributionBar,
        SlabExtraTopBar,
        SlabExtraBottomBar,
        ChairBar,
    ],
    "BEAM": [
        BeamTopBar,
        BeamBottomBar,
        BeamSideFaceBar,
        BeamStirrup,
        BeamExtraBar,
    ],
    "COLUMN": [
        ColumnMainBar,
        ColumnTie,
    ],
    "FOOTING": [
        FootingMainBar,
        FootingDistributionBar,
        DowelBar,
    ],
}


def _index_labels(classes_by_component: dict) -> dict:
    """{component_type: {lower-cased label: class}} for every label a class claims."""
    index = {}
    for component_type, classes in classes_by_component.items():
        labels = {}
        for cls in classes:
            for label in cls.LABELS:
                labels[label.lower()] = cls
        index[component_type] = labels
    return index


BAR_TYPE_REGISTRY: dict[str, dict[str, type]] = _index_labels(BAR_TYPE_CLASSES)


# --- Shapes ---

def get_shape(shape_code: str) -> ShapeDefinition:
    """Returns an instance of the shape for a code, or raises UnknownShape."""
    code = (shape_code or "").strip().upper()
    if code not in SHAPE_REGISTRY:
        raise UnknownShape(
            f"Unknown shape code: {shape_code}. "
            f"Available: {list(SHAPE_REGISTRY.keys())}"
        )
    return SHAPE_REGISTRY[code]()


lookup = get_shape


def has_shape(shape_code: str) -> bool:
    return (shape_code or "").strip().upper() in SHAPE_REGISTRY


def list_shapes() -> list[str]:
    """List all registered shape codes."""
    return list(SHAPE_REGISTRY.keys())


def required_dimension_count(shape_code: str) -> int:
    return len(get_shape(shape_code).REQUIRED_DIMENSIONS)


def bend_angles(shape_code: str) -> list:
    return list(get_shape(shape_code).BEND_ANGLES)


# --- Bar types ---

def find_bar_type(component_type: str, label: str):
    """Bar-type class for a label within a component type, or None."""
    labels = BAR_TYPE_REGISTRY.get(component_type, {})
    return labels.get(normalize_bar_type(label).lower())


def has_bar_type(component_type: str, label: str) -> bool:
    return find_bar_type(component_type, label) is not None


def get_bar_type(component_type: str, label: str) -> BarType:
    """Returns an instance of the bar type, falling back to GenericBar for unknown labels."""
    cls = find_bar_type(component_type, label)
    if cls is None:
        logger.warning("No bar type %r for %s, using generic straight bar", label, component_type)
        return GenericBar()
    return cls()


def list_bar_types(component_type: str = None) -> dict:
    """{component_type: [every accepted label]}, optionally for one component type."""
    selected = BAR_TYPE_CLASSES
    if component_type is not None:
        selected = {component_type: BAR_TYPE_CLASSES.get(component_type, [])}
    return {
        ctype: [label for cls in classes for label in cls.LABELS]
        for ctype, classes in selected.items()
    }


def describe_bar_types() -> dict:
    """{component_type: [bar type descriptions]} for the catalog endpoint."""
    return {
        ctype: [cls().describe() for cls in classes]
        for ctype, classes in BAR_TYPE_CLASSES.items()
    }
