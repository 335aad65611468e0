"""
Encoder exceptions

Any of these aborts the whole document; no partial file is returned.
"""


class IfcExportError(Exception):
    """Base class for IFC export failures"""


class InvalidGeometryError(IfcExportError):
    """Profile has fewer than 3 distinct vertices, non-finite coordinates or no enclosed area"""


class InvalidExtrusionError(IfcExportError):
    """Extrusion depth is zero, negative or non-finite"""


class EntityGraphError(IfcExportError):
    """A record refers to an entity that was not created before it"""
