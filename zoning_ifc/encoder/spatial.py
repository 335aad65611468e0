"""
Spatial hierarchy: Project -> Site -> Building -> Storey

Placements nest geometrically (each level is placed relative to its
parent's placement); RelAggregates records carry the ownership tree.
"""

from typing import NamedTuple, Sequence

from loguru import logger

from .context import ExportContext
from .entities import (
    IfcCartesianPoint, IfcAxis2Placement3D, IfcLocalPlacement, IfcPolyline,
    IfcShapeRepresentation, IfcProductDefinitionShape, IfcPerson, IfcOrganization,
    IfcPersonAndOrganization, IfcApplication, IfcOwnerHistory, IfcProject, IfcSite,
    IfcBuilding, IfcBuildingStorey, IfcRelAggregates, IfcRelContainedInSpatialStructure,
)
from .errors import EntityGraphError
from .geometry_context import GeometricContext
from .profiles import open_ring
from .shapes import Point2D
from ..config import StepHeaderConfig


class ProjectIds(NamedTuple):
    project_id: int
    owner_history_id: int


class SpatialNode(NamedTuple):
    """A spatial structure element and the placement its children nest under"""
    entity_id: int
    placement_id: int


def closed_polyline(ctx: ExportContext, points: Sequence[Point2D]) -> int:
    """2D polyline through `points`, closed by repeating the first point"""
    point_ids = [ctx.add(IfcCartesianPoint((p.x, p.y))) for p in open_ring(points)]
    point_ids.append(point_ids[0])
    return ctx.add(IfcPolyline(tuple(point_ids)))


class SpatialHierarchyBuilder:
    """Emits spatial structure records and their relationships"""

    def __init__(self, ctx: ExportContext, geo: GeometricContext, header: StepHeaderConfig):
        self.ctx = ctx
        self.geo = geo
        self.header = header
        self.owner_history_id = None

    def project(self) -> ProjectIds:
        """Owner history (with owning user and application) and the project"""
        ctx = self.ctx
        person = ctx.add(IfcPerson())
        organization = ctx.add(IfcOrganization(self.header.application_name))
        user = ctx.add(IfcPersonAndOrganization(person, organization))
        application = ctx.add(IfcApplication(
            developer_id=organization,
            version=self.header.application_version,
            full_name=self.header.application_name,
            identifier=self.header.application_identifier,
        ))
        self.owner_history_id = ctx.add(IfcOwnerHistory(user, application, ctx.creation_epoch))

        project_id = ctx.add(IfcProject(
            global_id=ctx.new_guid(),
            owner_history_id=self.owner_history_id,
            name=self.header.project_name,
            context_ids=(self.geo.context_3d,),
            units_id=self.geo.unit_assignment,
        ))
        return ProjectIds(project_id, self.owner_history_id)

    def site(self, footprint: Sequence[Point2D], name: str) -> SpatialNode:
        """
        Site placed at the world origin with its lot outline as a FootPrint curve

        Args:
            footprint: Lot vertices already shifted into world coordinates
            name: Site name
        """
        ctx = self.ctx
        placement = ctx.add(IfcLocalPlacement(self.geo.world_placement))
        boundary = closed_polyline(ctx, footprint)
        shape_rep = ctx.add(IfcShapeRepresentation(
            self.geo.context_footprint, "FootPrint", "Curve2D", (boundary,)
        ))
        product_shape = ctx.add(IfcProductDefinitionShape((shape_rep,)))
        site_id = ctx.add(IfcSite(
            global_id=ctx.new_guid(),
            owner_history_id=self._owner(),
            name=name,
            placement_id=placement,
            representation_id=product_shape,
        ))
        logger.debug(f"Site '{name}' -> #{site_id}")
        return SpatialNode(site_id, placement)

    def building(self, site: SpatialNode, name: str) -> SpatialNode:
        """Building placed relative to the site, inheriting its position"""
        ctx = self.ctx
        placement = ctx.add(IfcLocalPlacement(self.geo.world_placement, site.placement_id))
        building_id = ctx.add(IfcBuilding(
            global_id=ctx.new_guid(),
            owner_history_id=self._owner(),
            name=name,
            placement_id=placement,
        ))
        return SpatialNode(building_id, placement)

    def storey(self, building: SpatialNode, elevation: float = 0.0, name: str = "Ground Floor") -> SpatialNode:
        """Storey placed at (0, 0, elevation) relative to the building"""
        ctx = self.ctx
        point = ctx.add(IfcCartesianPoint((0.0, 0.0, elevation)))
        axis = ctx.add(IfcAxis2Placement3D(point))
        placement = ctx.add(IfcLocalPlacement(axis, building.placement_id))
        storey_id = ctx.add(IfcBuildingStorey(
            global_id=ctx.new_guid(),
            owner_history_id=self._owner(),
            name=name,
            placement_id=placement,
            elevation=elevation,
        ))
        return SpatialNode(storey_id, placement)

    def aggregate(self, parent_id: int, child_ids: Sequence[int]) -> int:
        """Parent owns children in the decomposition tree"""
        if not child_ids:
            raise EntityGraphError(f"Aggregation of #{parent_id} has no children")
        return self.ctx.add(IfcRelAggregates(
            global_id=self.ctx.new_guid(),
            owner_history_id=self._owner(),
            relating_object_id=parent_id,
            related_object_ids=tuple(child_ids),
        ))

    def contain(self, storey_id: int, element_ids: Sequence[int]) -> int:
        """Elements located in a storey"""
        if not element_ids:
            raise EntityGraphError(f"Containment in #{storey_id} has no elements")
        return self.ctx.add(IfcRelContainedInSpatialStructure(
            global_id=self.ctx.new_guid(),
            owner_history_id=self._owner(),
            related_element_ids=tuple(element_ids),
            relating_structure_id=storey_id,
        ))

    def _owner(self) -> int:
        if self.owner_history_id is None:
            raise EntityGraphError("project() must be emitted before any other spatial record")
        return self.owner_history_id
