"""Tests for the per-export ID allocator, GUID source and arena"""

import random

import pytest

from zoning_ifc.encoder import ExportContext, EntityGraphError, GuidSource, IdentifierAllocator
from zoning_ifc.encoder.context import GUID_ALPHABET
from zoning_ifc.encoder.entities import IfcCartesianPoint, IfcPolyline


def test_identifier_allocator_is_contiguous():
    ids = IdentifierAllocator()
    assert [ids.next_id() for _ in range(5)] == [1, 2, 3, 4, 5]
    assert ids.last_id == 5


def test_guid_shape():
    source = GuidSource()
    for _ in range(50):
        guid = source.new_guid()
        assert len(guid) == 22
        assert set(guid) <= set(GUID_ALPHABET)


def test_guid_seeded_source_is_deterministic():
    a = GuidSource(random.Random(3))
    b = GuidSource(random.Random(3))
    assert [a.new_guid() for _ in range(4)] == [b.new_guid() for _ in range(4)]


def test_guids_within_a_document_differ():
    source = GuidSource(random.Random(1))
    guids = {source.new_guid() for _ in range(200)}
    assert len(guids) == 200


def test_add_assigns_ids_in_order(ctx):
    first = ctx.add(IfcCartesianPoint((0.0, 0.0)))
    second = ctx.add(IfcCartesianPoint((1.0, 0.0)))
    third = ctx.add(IfcPolyline((first, second)))
    assert (first, second, third) == (1, 2, 3)
    assert len(ctx) == 3
    assert [record.id for record in ctx] == [1, 2, 3]
    assert ctx.type_counts() == {"IFCCARTESIANPOINT": 2, "IFCPOLYLINE": 1}


def test_add_rejects_forward_reference(ctx):
    ctx.add(IfcCartesianPoint((0.0, 0.0)))
    with pytest.raises(EntityGraphError):
        ctx.add(IfcPolyline((1, 5)))


def test_add_rejects_self_reference(ctx):
    with pytest.raises(EntityGraphError):
        ctx.add(IfcPolyline((1,)))


def test_contexts_are_independent():
    a = ExportContext()
    b = ExportContext()
    a.add(IfcCartesianPoint((0.0, 0.0)))
    a.add(IfcCartesianPoint((1.0, 0.0)))
    assert b.add(IfcCartesianPoint((0.0, 0.0))) == 1


def test_creation_epoch_treats_naive_time_as_utc(ctx):
    # 2026-01-01T12:00:00Z
    assert ctx.creation_epoch == 1767268800


def test_record_to_step(ctx):
    ctx.add(IfcCartesianPoint((-55, 0)))
    assert ctx.records[0].to_step() == "#1=IFCCARTESIANPOINT((-55.0,0.0));"
