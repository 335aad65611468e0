"""Tests for presentation layer buckets"""

import pytest

from zoning_ifc.encoder import ElementResult, EntityGraphError, LayerBuckets
from zoning_ifc.encoder.entities import IfcCartesianPoint
from zoning_ifc.encoder.layers import BUILDINGS, LOT_LINES


def test_unknown_layer_rejected():
    with pytest.raises(EntityGraphError):
        LayerBuckets().add("Roads", ElementResult(10, 9))


def test_representation_on_one_layer_only():
    layers = LayerBuckets()
    layers.add(LOT_LINES, ElementResult(10, 9))
    with pytest.raises(EntityGraphError):
        layers.add(BUILDINGS, ElementResult(11, 9))


def test_missing_representation_ignored():
    layers = LayerBuckets()
    layers.add(BUILDINGS, ElementResult(10, None))
    assert layers.members(BUILDINGS) == []


def test_no_additions_after_emit(ctx):
    shape_rep = ctx.add(IfcCartesianPoint((0.0, 0.0)))
    layers = LayerBuckets()
    layers.add(LOT_LINES, ElementResult(shape_rep, shape_rep))
    assert layers.emit(ctx)[LOT_LINES] == 2
    with pytest.raises(EntityGraphError):
        layers.add(BUILDINGS, ElementResult(5, 4))
