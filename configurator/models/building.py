"""Building input models — dimensions, wall features, skylights.

These are the only values the layout engine accepts. Validation happens
here, when a Building is constructed or edited; the layout functions
downstream assume a valid Building and never raise.
"""

from __future__ import annotations
import uuid
from enum import Enum
from pydantic import BaseModel, Field, field_validator

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class FeatureNotFoundError(KeyError):
    """Raised when an edit targets a feature id the building does not have."""


class WallPosition(str, Enum):
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_gable(self) -> bool:
        return self in (WallPosition.FRONT, WallPosition.BACK)


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FeatureType(str, Enum):
    DOOR = "door"
    WINDOW = "window"
    ROLLUP_DOOR = "rollupDoor"
    WALK_DOOR = "walkDoor"


class BuildingDimensions(BaseModel):
    """Overall size of the building. roof_pitch is rise per 12 of run."""
    width: float = Field(40.0, gt=0, allow_inf_nan=False)
    length: float = Field(60.0, gt=0, allow_inf_nan=False)
    height: float = Field(14.0, gt=0, allow_inf_nan=False)
    roof_pitch: float = Field(4.0, ge=0, allow_inf_nan=False)


class FeaturePosition(BaseModel):
    """Where a feature sits on its wall.

    x_offset is measured from the aligned edge (or from the centerline for
    center alignment); y_offset is measured up from the ground.
    """
    wall_position: WallPosition
    x_offset: float = Field(0.0, allow_inf_nan=False)
    y_offset: float = Field(0.0, allow_inf_nan=False)
    alignment: Alignment = Alignment.CENTER


class WallFeature(BaseModel):
    """A door, window, roll-up door or walk door mounted on a wall."""
    id: str
    type: FeatureType
    width: float = Field(gt=0, allow_inf_nan=False)
    height: float = Field(gt=0, allow_inf_nan=False)
    position: FeaturePosition
    color: str | None = Field(None, pattern=HEX_COLOR)


class Skylight(BaseModel):
    """A translucent panel set into one of the roof panels.

    The sign of x_offset selects the panel: negative is the left panel.
    """
    width: float = Field(gt=0, allow_inf_nan=False)
    length: float = Field(gt=0, allow_inf_nan=False)
    x_offset: float = Field(0.0, allow_inf_nan=False)
    y_offset: float = Field(0.0, allow_inf_nan=False)


class Building(BaseModel):
    """Complete configuration of one building."""
    dimensions: BuildingDimensions = Field(default_factory=BuildingDimensions)
    features: list[WallFeature] = []
    skylights: list[Skylight] = []
    color: str = Field("#C0C0C0", pattern=HEX_COLOR)
    roof_color: str = Field("#8B0000", pattern=HEX_COLOR)

    @field_validator("features")
    @classmethod
    def _unique_feature_ids(cls, features: list[WallFeature]) -> list[WallFeature]:
        seen: set[str] = set()
        for f in features:
            if f.id in seen:
                raise ValueError(f"duplicate feature id {f.id!r}")
            seen.add(f.id)
        return features

    def get_feature(self, feature_id: str) -> WallFeature:
        for f in self.features:
            if f.id == feature_id:
                return f
        raise FeatureNotFoundError(feature_id)

    # ── Edits ────────────────────────────────────────────────────
    # Every edit returns a new, revalidated Building.

    def _rebuild(self, **changes: object) -> Building:
        data = self.model_dump()
        data.update(changes)
        return Building.model_validate(data)

    def with_dimensions(self, **updates: float) -> Building:
        dims = self.dimensions.model_dump()
        dims.update(updates)
        return self._rebuild(dimensions=dims)

    def with_colors(self, color: str | None = None, roof_color: str | None = None) -> Building:
        return self._rebuild(
            color=color if color is not None else self.color,
            roof_color=roof_color if roof_color is not None else self.roof_color,
        )

    def add_feature(
        self,
        type: FeatureType,
        width: float,
        height: float,
        position: FeaturePosition,
        color: str | None = None,
    ) -> Building:
        feature = {
            "id": str(uuid.uuid4()),
            "type": type,
            "width": width,
            "height": height,
            "position": position.model_dump(),
            "color": color,
        }
        return self._rebuild(features=[f.model_dump() for f in self.features] + [feature])

    def update_feature(self, feature_id: str, **updates: object) -> Building:
        self.get_feature(feature_id)
        updates.pop("id", None)
        if isinstance(updates.get("position"), FeaturePosition):
            updates["position"] = updates["position"].model_dump()
        features = []
        for f in self.features:
            data = f.model_dump()
            if f.id == feature_id:
                data.update(updates)
            features.append(data)
        return self._rebuild(features=features)

    def remove_feature(self, feature_id: str) -> Building:
        self.get_feature(feature_id)
        return self._rebuild(
            features=[f.model_dump() for f in self.features if f.id != feature_id],
        )

    def add_skylight(self, skylight: Skylight) -> Building:
        return self._rebuild(
            skylights=[s.model_dump() for s in self.skylights] + [skylight.model_dump()],
        )

    def remove_skylight(self, index: int) -> Building:
        if not 0 <= index < len(self.skylights):
            raise IndexError(f"no skylight at index {index}")
        return self._rebuild(
            skylights=[s.model_dump() for i, s in enumerate(self.skylights) if i != index],
        )
