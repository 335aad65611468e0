"""
Zoning IFC exporter

Encodes lots, setbacks and building masses from the zoning editor as IFC4
STEP Physical Files.
"""

from .pipeline import IfcExportPipeline, generate_ifc, generate_district_ifc
from .config import ExportConfig, get_config
from .encoder import IfcExportError, InvalidGeometryError, InvalidExtrusionError

__all__ = [
    "IfcExportPipeline",
    "generate_ifc",
    "generate_district_ifc",
    "ExportConfig",
    "get_config",
    "IfcExportError",
    "InvalidGeometryError",
    "InvalidExtrusionError",
]
