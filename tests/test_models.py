"""Tests for the editor data models"""

import pytest
from pydantic import ValidationError

from zoning_ifc.config import BuildingDefaults
from zoning_ifc.models import (
    BuildingParams, ComparisonModel, ExportOptions, Lot, LotGeometry, SetbackValues,
)


def test_comparison_model_aliases(existing_model):
    model = ComparisonModel.model_validate(existing_model)
    assert model.lot_width == 50
    assert model.setback_front == 20
    lot = model.to_lot_spec()
    assert (lot.setbacks.front, lot.setbacks.rear, lot.setbacks.left, lot.setbacks.right) == (20, 10, 5, 5)
    building = model.to_building_geometry()
    assert (building.width, building.depth, building.height) == (30, 40, 30)
    assert (building.x, building.y) == (0, 0)


def test_comparison_model_missing_setbacks_default_to_zero():
    lot = ComparisonModel.model_validate({"lotWidth": 50, "lotDepth": 100}).to_lot_spec()
    assert lot.setbacks.front == 0
    assert lot.setbacks.right == 0


def test_comparison_model_ignores_unknown_fields(existing_model):
    model = ComparisonModel.model_validate({**existing_model, "zoneCode": "R-2"})
    assert model.lot_depth == 100


@pytest.mark.parametrize("override", [
    {"lotWidth": 0},
    {"lotDepth": -1},
    {"setbackFront": -5},
    {"buildingWidth": -1},
])
def test_comparison_model_rejects_bad_values(existing_model, override):
    with pytest.raises(ValidationError):
        ComparisonModel.model_validate({**existing_model, **override})


def test_lot_geometry_polygon_points():
    geometry = LotGeometry.model_validate({
        "mode": "polygon",
        "vertices": [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 5, "y": 8}],
    })
    assert geometry.polygon_points() == [(0, 0), (10, 0), (5, 8)]


def test_lot_geometry_rectangle_mode_ignores_vertices():
    geometry = LotGeometry.model_validate({
        "mode": "rectangle",
        "vertices": [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 5, "y": 8}],
    })
    assert geometry.polygon_points() is None


def test_side_street_used_for_right_inset():
    insets = SetbackValues.model_validate({"sideInterior": 5, "sideStreet": 12}).to_insets()
    assert (insets.left, insets.right) == (5, 12)


def test_side_street_falls_back_to_side_interior():
    insets = SetbackValues.model_validate({"sideInterior": 5}).to_insets()
    assert (insets.left, insets.right) == (5, 5)


def test_explicit_zero_side_street_is_kept():
    insets = SetbackValues.model_validate({"sideInterior": 5, "sideStreet": 0}).to_insets()
    assert insets.right == 0


def test_max_setbacks_are_parsed():
    values = SetbackValues.model_validate({"front": 10, "maxFront": 25, "maxSideStreet": 15})
    assert values.max_front == 25
    assert values.to_insets().front == 10


@pytest.mark.parametrize("params, expected", [
    ({"stories": 0}, 0.0),
    ({"stories": -2}, 0.0),
    ({"stories": 1, "firstFloorHeight": 14}, 14.0),
    ({"stories": 3, "firstFloorHeight": 12, "upperFloorHeight": 10}, 32.0),
    ({}, 12.0),
    ({"stories": 2}, 22.0),
    ({"stories": 5, "height": 40}, 40.0),
])
def test_resolve_height(params, expected):
    assert BuildingParams.model_validate(params).resolve_height(BuildingDefaults()) == expected


def test_building_has_footprint():
    assert BuildingParams(width=10, depth=10).has_footprint
    assert not BuildingParams(width=0, depth=10).has_footprint
    assert not BuildingParams().has_footprint


def test_lot_to_lot_spec(district_lots):
    lot = Lot.model_validate(district_lots["lot-a"])
    spec = lot.to_lot_spec()
    assert (spec.width, spec.depth) == (40, 100)
    assert spec.setbacks.right == 10
    assert spec.polygon is None


def test_lot_accessory_setbacks_fall_back_to_principal(district_lots):
    lot = Lot.model_validate(district_lots["lot-a"])
    assert lot.to_lot_spec("accessory").setbacks == lot.to_lot_spec("principal").setbacks


def test_export_options_aliases():
    options = ExportOptions.model_validate({"filename": "out.ifc", "lotSpacing": 0})
    assert options.filename == "out.ifc"
    assert options.lot_spacing == 0
    with pytest.raises(ValidationError):
        ExportOptions.model_validate({"lotSpacing": -1})


def test_null_building_dimensions_have_no_footprint():
    params = BuildingParams.model_validate({"width": None, "depth": 10})
    assert not params.has_footprint
    assert params.to_building_geometry(BuildingDefaults()).width == 0
