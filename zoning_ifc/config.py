"""
Configuration settings for the zoning IFC exporter
"""

from dataclasses import dataclass, field


@dataclass
class StepHeaderConfig:
    """HEADER section values and project naming"""
    description: str = "Zoning Comparison Model"
    implementation_level: str = "2;1"
    author: str = "Zoning Comparison App"
    organization: str = ""
    preprocessor: str = "Zoning Comparison App 1.0"
    originating_system: str = ""
    authorization: str = ""
    schema: str = "IFC4"

    # Names written into IfcProject / IfcApplication
    project_name: str = "Zoning Comparison"
    application_name: str = "Zoning Comparison App"
    application_version: str = "1.0"
    application_identifier: str = "ZoningComparison"

    # Default output filenames per export mode
    comparison_filename: str = "zoning-model.ifc"
    district_filename: str = "zoning-district.ifc"


@dataclass
class GeometryConfig:
    """Geometry constants (all lengths in feet)"""
    precision: float = 1e-5

    # Lot surface slab sits just below grade
    slab_thickness: float = 0.1
    slab_z_offset: float = -0.1

    # Setback lines are thin strips (6in wide, 2.4in tall) just above grade
    setback_line_width: float = 0.5
    setback_line_height: float = 0.2
    setback_line_z_offset: float = 0.05

    # Degeneracy thresholds
    area_tolerance: float = 1e-12
    length_tolerance: float = 1e-9

    foot_to_metre: float = 0.3048


@dataclass
class LayoutConfig:
    """Scene layout shared with the 3D viewer"""
    lot_spacing: float = 10.0


@dataclass
class BuildingDefaults:
    """Fallbacks for story-based building height"""
    stories: int = 1
    first_floor_height: float = 12.0
    upper_floor_height: float = 10.0


@dataclass
class ExportConfig:
    """Exporter configuration"""
    header: StepHeaderConfig = field(default_factory=StepHeaderConfig)
    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    buildings: BuildingDefaults = field(default_factory=BuildingDefaults)


# Global config instance
config = ExportConfig()


def get_config() -> ExportConfig:
    """Get global configuration"""
    return config


def validate_config(config: ExportConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []

    if config.header is None:
        errors.append("header configuration is required but not set")
    elif not config.header.schema:
        errors.append("header.schema is required but not set")

    geometry = config.geometry
    if geometry is None:
        errors.append("geometry configuration is required but not set")
    else:
        for name in ("precision", "slab_thickness", "setback_line_width",
                     "setback_line_height", "foot_to_metre"):
            value = getattr(geometry, name)
            if value is None or value <= 0:
                errors.append(f"geometry.{name} must be positive, got {value}")
        for name in ("area_tolerance", "length_tolerance"):
            value = getattr(geometry, name)
            if value is None or value < 0:
                errors.append(f"geometry.{name} must be non-negative, got {value}")

    if config.layout is None:
        errors.append("layout configuration is required but not set")
    elif config.layout.lot_spacing is None or config.layout.lot_spacing < 0:
        errors.append(f"layout.lot_spacing must be non-negative, got {config.layout.lot_spacing}")

    if config.buildings is None:
        errors.append("buildings configuration is required but not set")
    else:
        if config.buildings.first_floor_height <= 0:
            errors.append(
                f"buildings.first_floor_height must be positive, got {config.buildings.first_floor_height}"
            )
        if config.buildings.upper_floor_height < 0:
            errors.append(
                f"buildings.upper_floor_height must be non-negative, got {config.buildings.upper_floor_height}"
            )

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
