"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Query

from configurator.config import settings
from configurator.models import BuildingDimensions, RoofGeometry
from configurator.services.layout_service import LayoutService
from configurator.api.schemas import (
    LayoutRequest, LayoutResponse, PlaceFeatureRequest, PlaceFeatureResponse,
    RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = LayoutService(cache_size=settings.layout_cache_size)


@router.post("/layout", response_model=LayoutResponse)
async def generate_layout(request: LayoutRequest) -> LayoutResponse:
    """Lay out every element of a building."""
    layout = _service.generate(request.building, request.params, request.config)

    return LayoutResponse(
        layout=layout,
        rule_count=len(_service.list_rules()),
        element_count=len(layout.elements),
    )


@router.get("/roof", response_model=RoofGeometry)
async def roof_geometry(
    width: float = Query(gt=0),
    roof_pitch: float = Query(ge=0),
    height: float = Query(14.0, gt=0),
) -> RoofGeometry:
    """Roof height, pitch angle, and panel length for a width and pitch."""
    dims = BuildingDimensions(width=width, length=1.0, height=height, roof_pitch=roof_pitch)
    return _service.roof(dims)


@router.post("/features/place", response_model=PlaceFeatureResponse)
async def place_feature(request: PlaceFeatureRequest) -> PlaceFeatureResponse:
    """Resolve a single feature's building-space transform."""
    transform = _service.place_feature(request.dimensions, request.feature, request.params)
    return PlaceFeatureResponse(feature_id=request.feature.id, transform=transform)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available layout rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
