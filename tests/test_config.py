"""Tests for configuration validation"""

import pytest

from zoning_ifc import IfcExportPipeline
from zoning_ifc.config import ExportConfig, get_config, validate_config


def test_default_config_is_valid():
    validate_config(ExportConfig())
    validate_config(get_config())


def test_validation_lists_every_problem():
    config = ExportConfig()
    config.geometry.slab_thickness = 0
    config.layout.lot_spacing = -1
    config.buildings.first_floor_height = 0
    with pytest.raises(ValueError) as excinfo:
        validate_config(config)
    message = str(excinfo.value)
    assert "geometry.slab_thickness" in message
    assert "layout.lot_spacing" in message
    assert "buildings.first_floor_height" in message


def test_pipeline_validates_config():
    config = ExportConfig()
    config.header.schema = ""
    with pytest.raises(ValueError):
        IfcExportPipeline(config)
