import random

import pytest

from zoning_ifc import IfcExportPipeline
from zoning_ifc.config import ExportConfig, GeometryConfig
from zoning_ifc.encoder import ExportContext, ProfileSolidGenerator

from helpers import FIXED_TIME


@pytest.fixture
def existing_model():
    return {
        "lotWidth": 50,
        "lotDepth": 100,
        "setbackFront": 20,
        "setbackRear": 10,
        "setbackSideLeft": 5,
        "setbackSideRight": 5,
        "buildingHeight": 30,
        "buildingWidth": 30,
        "buildingDepth": 40,
    }


@pytest.fixture
def proposed_model():
    return {
        "lotWidth": 72,
        "lotDepth": 100,
        "setbackFront": 15,
        "setbackRear": 10,
        "setbackSideLeft": 5,
        "setbackSideRight": 5,
        "buildingHeight": 45,
        "buildingWidth": 35,
        "buildingDepth": 50,
    }


@pytest.fixture
def district_lots():
    return {
        "lot-a": {
            "lotWidth": 40,
            "lotDepth": 100,
            "setbacks": {"principal": {"front": 20, "rear": 10, "sideInterior": 5, "sideStreet": 10}},
            "buildings": {
                "principal": {
                    "width": 20, "depth": 30, "x": 0, "y": 0,
                    "stories": 2, "firstFloorHeight": 12, "upperFloorHeight": 10,
                },
            },
        },
        "lot-b": {
            "lotWidth": 30,
            "lotDepth": 90,
            "setbacks": {"principal": {"front": 15, "rear": 10, "sideInterior": 3}},
            "buildings": {
                "principal": {"width": 18, "depth": 25, "stories": 1, "firstFloorHeight": 14},
                "accessory": {"width": 10, "depth": 12, "x": 5, "y": 30, "stories": 1, "firstFloorHeight": 10},
            },
        },
        "lot-c": {
            "lotWidth": 50,
            "lotDepth": 120,
            "setbacks": {"principal": {"front": 25, "rear": 20, "sideInterior": 5}},
            "buildings": {},
        },
    }


@pytest.fixture
def pipeline():
    return IfcExportPipeline(rng=random.Random(42), timestamp=FIXED_TIME)


@pytest.fixture
def ctx():
    return ExportContext(rng=random.Random(0), timestamp=FIXED_TIME)


@pytest.fixture
def geometry():
    return GeometryConfig()


@pytest.fixture
def profiles(ctx, geometry):
    return ProfileSolidGenerator(ctx, geometry)


@pytest.fixture
def export_config():
    return ExportConfig()
