from fastapi import APIRouter, HTTPException
from typing import Optional

from ..calculators.registry import describe_bar_types, get_shape, list_shapes
from ..calculators.shapes import UnknownShape

router = APIRouter(tags=["catalog"])


@router.get("/shapes")
def shape_catalog():
    """All registered shapes with their geometry metadata."""
    return [get_shape(code).describe() for code in list_shapes()]


@router.get("/shapes/{code}")
def shape_detail(code: str):
    try:
        return get_shape(code).describe()
    except UnknownShape as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/bar-types")
def bar_type_catalog(component_type: Optional[str] = None):
    """Component bar types, grouped by component type."""
    catalog = describe_bar_types()
    if component_type is None:
        return catalog
    key = component_type.upper()
    if key not in catalog:
        raise HTTPException(status_code=404, detail=f"Unknown component type: {component_type}")
    return {key: catalog[key]}
