"""
Extruded profile solids

The one geometry primitive of the exporter: a closed polygon swept along +Z.
Rectangles (slabs, building masses, setback strips) all go through it.
"""

import math
from typing import List, Optional, Sequence

from loguru import logger
from shapely.geometry import Polygon
from shapely.validation import explain_validity

from .context import ExportContext
from .entities import (
    IfcCartesianPoint, IfcDirection, IfcAxis2Placement3D, IfcPolyline,
    IfcArbitraryClosedProfileDef, IfcExtrudedAreaSolid,
)
from .errors import InvalidGeometryError, InvalidExtrusionError
from .shapes import Point2D
from ..config import GeometryConfig


def open_ring(vertices: Sequence[Point2D]) -> List[Point2D]:
    """Drop an explicit closing vertex if the caller repeated the first point"""
    points = [Point2D(float(v[0]), float(v[1])) for v in vertices]
    if len(points) > 1 and points[0] == points[-1]:
        points = points[:-1]
    return points


class ProfileSolidGenerator:
    """Builds IfcExtrudedAreaSolid records from plan polygons"""

    def __init__(self, ctx: ExportContext, geometry: GeometryConfig):
        self.ctx = ctx
        self.geometry = geometry

    def validate_profile(self, vertices: Sequence[Point2D]) -> List[Point2D]:
        """
        Check that vertices describe a polygon with area

        Raises:
            InvalidGeometryError: non-finite coordinates, fewer than 3 distinct
                vertices, or no enclosed area
        """
        points = open_ring(vertices)
        for p in points:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise InvalidGeometryError(f"Profile vertex has non-finite coordinate: {p}")

        distinct = set(points)
        if len(distinct) < 3:
            raise InvalidGeometryError(
                f"Profile needs at least 3 distinct vertices, got {len(distinct)}"
            )

        polygon = Polygon(points)
        if polygon.area <= self.geometry.area_tolerance:
            raise InvalidGeometryError(
                f"Profile encloses no area ({polygon.area:.3g} sq ft) for vertices {points}"
            )
        if not polygon.is_valid:
            logger.warning(f"Profile outline is not simple: {explain_validity(polygon)}")
        return points

    def extruded_solid(
        self,
        vertices: Sequence[Point2D],
        height: float,
        z_offset: float = 0.0
    ) -> int:
        """
        Sweep a closed polygon upward by `height`, starting at `z_offset`

        Args:
            vertices: Ordered plan vertices (at least 3 distinct)
            height: Extrusion depth, must be positive
            z_offset: Elevation of the profile plane

        Returns:
            ID of the IfcExtrudedAreaSolid
        """
        if not math.isfinite(height) or height <= 0:
            raise InvalidExtrusionError(f"Extrusion height must be positive, got {height}")
        points = self.validate_profile(vertices)

        ctx = self.ctx
        point_ids = [ctx.add(IfcCartesianPoint((p.x, p.y))) for p in points]
        point_ids.append(point_ids[0])
        polyline = ctx.add(IfcPolyline(tuple(point_ids)))
        profile = ctx.add(IfcArbitraryClosedProfileDef(polyline))

        position_point = ctx.add(IfcCartesianPoint((0.0, 0.0, z_offset)))
        position = ctx.add(IfcAxis2Placement3D(position_point))
        direction = ctx.add(IfcDirection((0.0, 0.0, 1.0)))

        return ctx.add(IfcExtrudedAreaSolid(profile, position, direction, height))

    def line_strip(
        self,
        start: Point2D,
        end: Point2D,
        width: float,
        height: float,
        z_offset: float = 0.0
    ) -> Optional[int]:
        """
        Thin rectangular solid standing in for a line from `start` to `end`

        Returns:
            Solid ID, or None when the segment has zero length
        """
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)
        if length <= self.geometry.length_tolerance:
            return None

        # Unit perpendicular scaled to half the strip width
        px = -dy / length * (width / 2)
        py = dx / length * (width / 2)

        corners = [
            Point2D(start.x - px, start.y - py),
            Point2D(end.x - px, end.y - py),
            Point2D(end.x + px, end.y + py),
            Point2D(start.x + px, start.y + py),
        ]
        return self.extruded_solid(corners, height, z_offset)
