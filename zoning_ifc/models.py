"""
Pydantic models for the application's zoning data
Accepts the camelCase JSON produced by the editor store
"""

from typing import List, Optional, Literal, Union, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from .config import BuildingDefaults
from .encoder.shapes import Point2D, SetbackInsets, LotSpec, BuildingGeometry


class AppModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _or_zero(value: Optional[float]) -> float:
    return float(value) if value is not None else 0.0


# ============================================================
# Lot Geometry
# ============================================================

class Vertex(AppModel):
    x: float
    y: float


class LotGeometry(AppModel):
    mode: Literal["polygon", "rectangle"] = "rectangle"
    vertices: List[Vertex] = Field(default_factory=list)

    def polygon_points(self) -> Optional[List[Point2D]]:
        """Polygon vertices when polygon mode is active with a usable outline"""
        if self.mode != "polygon" or len(self.vertices) < 3:
            return None
        return [Point2D(v.x, v.y) for v in self.vertices]


# ============================================================
# Comparison Module (existing vs proposed)
# ============================================================

class ComparisonModel(AppModel):
    """Flattened single-lot model used by the comparison module"""
    lot_width: float = Field(alias="lotWidth", gt=0)
    lot_depth: float = Field(alias="lotDepth", gt=0)

    setback_front: Optional[float] = Field(None, alias="setbackFront", ge=0)
    setback_rear: Optional[float] = Field(None, alias="setbackRear", ge=0)
    setback_side_left: Optional[float] = Field(None, alias="setbackSideLeft", ge=0)
    setback_side_right: Optional[float] = Field(None, alias="setbackSideRight", ge=0)

    building_width: Optional[float] = Field(None, alias="buildingWidth", ge=0)
    building_depth: Optional[float] = Field(None, alias="buildingDepth", ge=0)
    building_height: Optional[float] = Field(None, alias="buildingHeight")
    building_x: Optional[float] = Field(None, alias="buildingX")
    building_y: Optional[float] = Field(None, alias="buildingY")

    lot_geometry: Optional[LotGeometry] = Field(None, alias="lotGeometry")

    def to_lot_spec(self) -> LotSpec:
        return LotSpec(
            width=self.lot_width,
            depth=self.lot_depth,
            setbacks=SetbackInsets(
                front=_or_zero(self.setback_front),
                rear=_or_zero(self.setback_rear),
                left=_or_zero(self.setback_side_left),
                right=_or_zero(self.setback_side_right),
            ),
            polygon=self.lot_geometry.polygon_points() if self.lot_geometry else None,
        )

    def to_building_geometry(self) -> BuildingGeometry:
        return BuildingGeometry(
            width=_or_zero(self.building_width),
            depth=_or_zero(self.building_depth),
            height=_or_zero(self.building_height),
            x=_or_zero(self.building_x),
            y=_or_zero(self.building_y),
        )


# ============================================================
# District Module (entity lots)
# ============================================================

class SetbackValues(AppModel):
    front: Optional[float] = Field(None, ge=0)
    rear: Optional[float] = Field(None, ge=0)
    side_interior: Optional[float] = Field(None, alias="sideInterior", ge=0)
    side_street: Optional[float] = Field(None, alias="sideStreet", ge=0)

    # Parsed for completeness; max setbacks are not exported
    max_front: Optional[float] = Field(None, alias="maxFront", ge=0)
    max_side_street: Optional[float] = Field(None, alias="maxSideStreet", ge=0)

    def to_insets(self) -> SetbackInsets:
        side_interior = _or_zero(self.side_interior)
        return SetbackInsets(
            front=_or_zero(self.front),
            rear=_or_zero(self.rear),
            left=side_interior,
            right=self.side_street if self.side_street is not None else side_interior,
        )


class LotSetbacks(AppModel):
    principal: SetbackValues = Field(default_factory=SetbackValues)
    accessory: Optional[SetbackValues] = None


class BuildingParams(AppModel):
    """Story-based building parameters of a district lot"""
    width: Optional[float] = Field(None, ge=0)
    depth: Optional[float] = Field(None, ge=0)
    x: Optional[float] = None
    y: Optional[float] = None
    stories: Optional[int] = None
    first_floor_height: Optional[float] = Field(None, alias="firstFloorHeight")
    upper_floor_height: Optional[float] = Field(None, alias="upperFloorHeight")
    height: Optional[float] = None

    @property
    def has_footprint(self) -> bool:
        return _or_zero(self.width) > 0 and _or_zero(self.depth) > 0

    def resolve_height(self, defaults: BuildingDefaults) -> float:
        """
        Total building height

        An explicit height wins. Otherwise the first floor plus every upper
        floor; zero or negative stories give zero height.
        """
        if self.height is not None:
            return float(self.height)
        stories = self.stories if self.stories is not None else defaults.stories
        first = self.first_floor_height if self.first_floor_height is not None else defaults.first_floor_height
        upper = self.upper_floor_height if self.upper_floor_height is not None else defaults.upper_floor_height
        if stories <= 0:
            return 0.0
        if stories == 1:
            return float(first)
        return float(first + (stories - 1) * upper)

    def to_building_geometry(self, defaults: BuildingDefaults) -> BuildingGeometry:
        return BuildingGeometry(
            width=_or_zero(self.width),
            depth=_or_zero(self.depth),
            height=self.resolve_height(defaults),
            x=_or_zero(self.x),
            y=_or_zero(self.y),
        )


class LotBuildings(AppModel):
    principal: Optional[BuildingParams] = None
    accessory: Optional[BuildingParams] = None


class Lot(AppModel):
    """A lot entity of the district module"""
    lot_width: float = Field(alias="lotWidth", gt=0)
    lot_depth: float = Field(alias="lotDepth", gt=0)
    setbacks: LotSetbacks = Field(default_factory=LotSetbacks)
    lot_geometry: Optional[LotGeometry] = Field(None, alias="lotGeometry")
    buildings: LotBuildings = Field(default_factory=LotBuildings)

    def to_lot_spec(self, building_type: str = "principal") -> LotSpec:
        values = getattr(self.setbacks, building_type, None) or self.setbacks.principal
        return LotSpec(
            width=self.lot_width,
            depth=self.lot_depth,
            setbacks=values.to_insets(),
            polygon=self.lot_geometry.polygon_points() if self.lot_geometry else None,
        )


# ============================================================
# Export Options
# ============================================================

class ExportOptions(AppModel):
    filename: Optional[str] = None
    lot_spacing: Optional[float] = Field(None, alias="lotSpacing", ge=0)


ModelInput = Union[ComparisonModel, Dict[str, Any]]
LotInput = Union[Lot, Dict[str, Any]]
OptionsInput = Union[ExportOptions, Dict[str, Any], None]
