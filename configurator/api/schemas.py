"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from configurator.models import (
    Building, BuildingDimensions, BuildingLayout, GenerationConfig,
    LayoutParams, Transform, WallFeature,
)


class LayoutRequest(BaseModel):
    """Request body for the /layout endpoint."""
    building: Building
    params: LayoutParams = LayoutParams()
    config: GenerationConfig = GenerationConfig()


class LayoutResponse(BaseModel):
    """Response from the /layout endpoint."""
    layout: BuildingLayout
    rule_count: int
    element_count: int


class PlaceFeatureRequest(BaseModel):
    """Request body for the /features/place endpoint."""
    dimensions: BuildingDimensions
    feature: WallFeature
    params: LayoutParams = LayoutParams()


class PlaceFeatureResponse(BaseModel):
    feature_id: str
    transform: Transform


class RuleInfo(BaseModel):
    id: str
    name: str
