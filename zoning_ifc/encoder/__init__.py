"""
IFC4 STEP encoder

Components, leaves first:
- Context: per-export ID allocator, GUID source and record arena
- GeometricContextBuilder: origin, directions, units, representation contexts
- SpatialHierarchyBuilder: Project / Site / Building / Storey and their relations
- ProfileSolidGenerator: extruded polygon solids and line strips
- ElementGenerators: lot surface slab, setback line proxy, building mass proxy
- Layers: storey containment and presentation layer buckets
- DocumentSerializer: HEADER / DATA / footer text
"""

from .errors import IfcExportError, InvalidGeometryError, InvalidExtrusionError, EntityGraphError
from .shapes import Point2D, SetbackInsets, LotSpec, BuildingGeometry
from .context import ExportContext, IdentifierAllocator, GuidSource
from .geometry_context import GeometricContext, GeometricContextBuilder
from .spatial import SpatialHierarchyBuilder, SpatialNode, ProjectIds
from .profiles import ProfileSolidGenerator
from .elements import ElementGenerators, ElementResult, lot_vertices, setback_vertices, building_footprint
from .layers import LayerBuckets, StoreyContents
from .document import DocumentSerializer, IfcDocument
from .step import format_real

__all__ = [
    "IfcExportError",
    "InvalidGeometryError",
    "InvalidExtrusionError",
    "EntityGraphError",
    "Point2D",
    "SetbackInsets",
    "LotSpec",
    "BuildingGeometry",
    "ExportContext",
    "IdentifierAllocator",
    "GuidSource",
    "GeometricContext",
    "GeometricContextBuilder",
    "SpatialHierarchyBuilder",
    "SpatialNode",
    "ProjectIds",
    "ProfileSolidGenerator",
    "ElementGenerators",
    "ElementResult",
    "lot_vertices",
    "setback_vertices",
    "building_footprint",
    "LayerBuckets",
    "StoreyContents",
    "DocumentSerializer",
    "IfcDocument",
    "format_real",
]
