"""
Element generators: lot surface, setback lines, building masses

Every generator takes the lot center (offset_x, offset_y) in world
coordinates. Those offsets come from zoning_ifc.layout, the same functions
the viewer layout uses.
"""

from typing import List, NamedTuple, Optional, Sequence

from loguru import logger

from .context import ExportContext
from .entities import (
    IfcLocalPlacement, IfcShapeRepresentation, IfcProductDefinitionShape,
    IfcSlab, IfcBuildingElementProxy,
)
from .geometry_context import GeometricContext
from .profiles import ProfileSolidGenerator
from .shapes import Point2D, LotSpec, BuildingGeometry
from .spatial import SpatialNode
from ..config import GeometryConfig


class ElementResult(NamedTuple):
    element_id: int
    shape_rep_id: Optional[int]


# ============================================================
# Vertex helpers
# ============================================================

def lot_vertices(lot: LotSpec, offset_x: float, offset_y: float) -> List[Point2D]:
    """
    Lot outline in world coordinates

    Polygon mode wins when it has at least three vertices; otherwise the
    width x depth rectangle centered on the offset, wound counter-clockwise
    from the front-left corner.
    """
    if lot.uses_polygon:
        return [Point2D(v.x + offset_x, v.y + offset_y) for v in lot.polygon]

    w2 = lot.width / 2
    d2 = lot.depth / 2
    return [
        Point2D(-w2 + offset_x, -d2 + offset_y),
        Point2D(w2 + offset_x, -d2 + offset_y),
        Point2D(w2 + offset_x, d2 + offset_y),
        Point2D(-w2 + offset_x, d2 + offset_y),
    ]


def setback_vertices(lot: LotSpec, offset_x: float, offset_y: float) -> List[Point2D]:
    """Inset rectangle; insets larger than the lot are not clamped"""
    w2 = lot.width / 2
    d2 = lot.depth / 2
    s = lot.setbacks

    x1 = -w2 + s.left + offset_x
    x2 = w2 - s.right + offset_x
    y1 = -d2 + s.front + offset_y
    y2 = d2 - s.rear + offset_y

    return [
        Point2D(x1, y1),
        Point2D(x2, y1),
        Point2D(x2, y2),
        Point2D(x1, y2),
    ]


def building_footprint(building: BuildingGeometry, offset_x: float, offset_y: float) -> List[Point2D]:
    """Building rectangle centered at its position within the lot"""
    cx = building.x + offset_x
    cy = building.y + offset_y
    w2 = building.width / 2
    d2 = building.depth / 2
    return [
        Point2D(cx - w2, cy - d2),
        Point2D(cx + w2, cy - d2),
        Point2D(cx + w2, cy + d2),
        Point2D(cx - w2, cy + d2),
    ]


# ============================================================
# Generators
# ============================================================

class ElementGenerators:
    """Wraps profile solids into placed, represented products"""

    def __init__(
        self,
        ctx: ExportContext,
        geo: GeometricContext,
        geometry: GeometryConfig,
        owner_history_id: int
    ):
        self.ctx = ctx
        self.geo = geo
        self.geometry = geometry
        self.owner_history_id = owner_history_id
        self.profiles = ProfileSolidGenerator(ctx, geometry)

    def lot_surface(
        self,
        lot: LotSpec,
        storey: SpatialNode,
        name: str,
        offset_x: float,
        offset_y: float
    ) -> ElementResult:
        """Thin slab just below grade covering the lot outline"""
        vertices = lot_vertices(lot, offset_x, offset_y)
        placement = self._placement(storey)
        solid = self.profiles.extruded_solid(
            vertices, self.geometry.slab_thickness, self.geometry.slab_z_offset
        )
        shape_rep, product_shape = self._body((solid,))
        slab_id = self.ctx.add(IfcSlab(
            global_id=self.ctx.new_guid(),
            owner_history_id=self.owner_history_id,
            name=name,
            placement_id=placement,
            representation_id=product_shape,
            predefined_type="BASESLAB",
        ))
        logger.debug(f"Lot surface '{name}' -> #{slab_id} ({len(vertices)} vertices)")
        return ElementResult(slab_id, shape_rep)

    def setback_lines(
        self,
        lot: LotSpec,
        storey: SpatialNode,
        name: str,
        offset_x: float,
        offset_y: float
    ) -> ElementResult:
        """
        Four thin strips tracing the setback rectangle, in one proxy

        Zero-length edges are skipped. When every edge collapses the proxy is
        still emitted, without a representation.
        """
        vertices = setback_vertices(lot, offset_x, offset_y)
        placement = self._placement(storey)

        solids = []
        for i, start in enumerate(vertices):
            end = vertices[(i + 1) % len(vertices)]
            solid = self.profiles.line_strip(
                start, end,
                self.geometry.setback_line_width,
                self.geometry.setback_line_height,
                self.geometry.setback_line_z_offset,
            )
            if solid is None:
                logger.warning(f"{name}: skipped zero-length setback edge at ({start.x:.2f}, {start.y:.2f})")
                continue
            solids.append(solid)

        shape_rep = None
        product_shape = None
        if solids:
            shape_rep, product_shape = self._body(tuple(solids))
        else:
            logger.warning(f"{name}: setback rectangle collapsed to a point, no geometry written")

        element_id = self._proxy(name, placement, product_shape)
        return ElementResult(element_id, shape_rep)

    def building_mass(
        self,
        building: BuildingGeometry,
        storey: SpatialNode,
        name: str,
        offset_x: float,
        offset_y: float,
        allow_empty: bool = False
    ) -> ElementResult:
        """
        Extruded building footprint

        Args:
            allow_empty: Emit a representation-less proxy for a zero-size
                footprint instead of failing (comparison mode)
        """
        placement = self._placement(storey)

        if allow_empty and not building.has_footprint:
            logger.warning(f"{name}: zero-size building footprint, proxy written without geometry")
            return ElementResult(self._proxy(name, placement, None), None)

        vertices = building_footprint(building, offset_x, offset_y)
        solid = self.profiles.extruded_solid(vertices, building.height, 0.0)
        shape_rep, product_shape = self._body((solid,))
        element_id = self._proxy(name, placement, product_shape)
        logger.debug(
            f"Building mass '{name}' -> #{element_id} "
            f"({building.width}x{building.depth}x{building.height} ft)"
        )
        return ElementResult(element_id, shape_rep)

    def _placement(self, storey: SpatialNode) -> int:
        return self.ctx.add(IfcLocalPlacement(self.geo.world_placement, storey.placement_id))

    def _body(self, solid_ids: Sequence[int]):
        shape_rep = self.ctx.add(IfcShapeRepresentation(
            self.geo.context_body, "Body", "SweptSolid", tuple(solid_ids)
        ))
        product_shape = self.ctx.add(IfcProductDefinitionShape((shape_rep,)))
        return shape_rep, product_shape

    def _proxy(self, name: str, placement: int, product_shape: Optional[int]) -> int:
        return self.ctx.add(IfcBuildingElementProxy(
            global_id=self.ctx.new_guid(),
            owner_history_id=self.owner_history_id,
            name=name,
            placement_id=placement,
            representation_id=product_shape,
            predefined_type="NOTDEFINED",
        ))
