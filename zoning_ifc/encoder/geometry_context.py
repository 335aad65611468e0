"""
Shared geometric context

Coordinate system, units and representation contexts emitted once at the
top of every document and referenced by everything after them.
"""

from dataclasses import dataclass, asdict
from typing import Dict

from loguru import logger

from .context import ExportContext
from .entities import (
    IfcCartesianPoint, IfcDirection, IfcAxis2Placement3D, IfcDimensionalExponents,
    IfcSIUnit, IfcMeasureWithUnit, IfcConversionBasedUnit, IfcUnitAssignment,
    IfcGeometricRepresentationContext, IfcGeometricRepresentationSubContext,
)
from ..config import GeometryConfig


@dataclass(frozen=True)
class GeometricContext:
    """IDs of the shared context records"""
    origin_3d: int
    origin_2d: int
    dir_z: int
    dir_x: int
    dir_y: int
    dir_neg_x: int
    dir_2d_x: int
    dir_2d_y: int
    world_placement: int
    dim_exponents: int
    si_length: int
    conversion_factor: int
    foot_unit: int
    si_area: int
    si_angle: int
    unit_assignment: int
    context_3d: int
    context_body: int
    context_footprint: int
    context_annotation: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class GeometricContextBuilder:
    """Emits origin, directions, units and representation contexts"""

    def __init__(self, geometry: GeometryConfig):
        self.geometry = geometry

    def build(self, ctx: ExportContext) -> GeometricContext:
        origin_3d = ctx.add(IfcCartesianPoint((0.0, 0.0, 0.0)))
        origin_2d = ctx.add(IfcCartesianPoint((0.0, 0.0)))

        dir_z = ctx.add(IfcDirection((0.0, 0.0, 1.0)))
        dir_x = ctx.add(IfcDirection((1.0, 0.0, 0.0)))
        dir_y = ctx.add(IfcDirection((0.0, 1.0, 0.0)))
        dir_neg_x = ctx.add(IfcDirection((-1.0, 0.0, 0.0)))
        dir_2d_x = ctx.add(IfcDirection((1.0, 0.0)))
        dir_2d_y = ctx.add(IfcDirection((0.0, 1.0)))

        world_placement = ctx.add(IfcAxis2Placement3D(origin_3d, dir_z, dir_x))

        # Working length unit is the foot, defined against the SI metre
        dim_exponents = ctx.add(IfcDimensionalExponents(length=1))
        si_length = ctx.add(IfcSIUnit("LENGTHUNIT", "METRE"))
        conversion_factor = ctx.add(
            IfcMeasureWithUnit("IFCLENGTHMEASURE", self.geometry.foot_to_metre, si_length)
        )
        foot_unit = ctx.add(
            IfcConversionBasedUnit(dim_exponents, "LENGTHUNIT", "FOOT", conversion_factor)
        )
        si_area = ctx.add(IfcSIUnit("AREAUNIT", "SQUARE_METRE"))
        si_angle = ctx.add(IfcSIUnit("PLANEANGLEUNIT", "RADIAN"))
        unit_assignment = ctx.add(IfcUnitAssignment((foot_unit, si_area, si_angle)))

        context_3d = ctx.add(IfcGeometricRepresentationContext(
            context_type="Model",
            dimension=3,
            precision=self.geometry.precision,
            world_coordinate_system_id=world_placement,
            true_north_id=dir_2d_y,
        ))
        context_body = ctx.add(IfcGeometricRepresentationSubContext("Body", "Model", context_3d))
        context_footprint = ctx.add(IfcGeometricRepresentationSubContext("FootPrint", "Model", context_3d))
        context_annotation = ctx.add(IfcGeometricRepresentationSubContext("Annotation", "Model", context_3d))

        logger.debug(f"Geometric context emitted ({context_annotation - origin_3d + 1} entities)")

        return GeometricContext(
            origin_3d=origin_3d,
            origin_2d=origin_2d,
            dir_z=dir_z,
            dir_x=dir_x,
            dir_y=dir_y,
            dir_neg_x=dir_neg_x,
            dir_2d_x=dir_2d_x,
            dir_2d_y=dir_2d_y,
            world_placement=world_placement,
            dim_exponents=dim_exponents,
            si_length=si_length,
            conversion_factor=conversion_factor,
            foot_unit=foot_unit,
            si_area=si_area,
            si_angle=si_angle,
            unit_assignment=unit_assignment,
            context_3d=context_3d,
            context_body=context_body,
            context_footprint=context_footprint,
            context_annotation=context_annotation,
        )
