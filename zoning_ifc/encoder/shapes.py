"""
Geometry structs consumed by the encoder

Both input shapes (the flattened comparison model and the nested district
lot) are adapted into these before any entity is generated.
"""

from typing import List, NamedTuple, Optional
from dataclasses import dataclass


class Point2D(NamedTuple):
    """Plan coordinate in feet"""
    x: float
    y: float


@dataclass(frozen=True)
class SetbackInsets:
    """Per-side inset distances from the lot rectangle"""
    front: float = 0.0
    rear: float = 0.0
    left: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class LotSpec:
    """
    Lot footprint description

    `polygon` holds vertices relative to the lot center; when it has at least
    three points it replaces the width/depth rectangle for the lot surface.
    """
    width: float
    depth: float
    setbacks: SetbackInsets = SetbackInsets()
    polygon: Optional[List[Point2D]] = None

    @property
    def uses_polygon(self) -> bool:
        return self.polygon is not None and len(self.polygon) >= 3


@dataclass(frozen=True)
class BuildingGeometry:
    """Rectangular building mass centered at (x, y) relative to the lot center"""
    width: float
    depth: float
    height: float
    x: float = 0.0
    y: float = 0.0

    @property
    def has_footprint(self) -> bool:
        return self.width > 0 and self.depth > 0
