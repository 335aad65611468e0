"""Tests for the scene layout shared with the viewer"""

import pytest

from zoning_ifc.layout import LotFrame, comparison_layout, district_layout


def test_comparison_layout_centers():
    existing, proposed = comparison_layout(
        LotFrame("existing", 50, 100), LotFrame("proposed", 72, 120), 10
    )
    assert existing.center_x == -30
    assert existing.center_y == 50
    assert existing.right_edge == -5
    assert proposed.center_x == 41
    assert proposed.center_y == 60
    assert proposed.left_edge == 5


def test_comparison_layout_zero_spacing_lots_touch():
    existing, proposed = comparison_layout(LotFrame("e", 40, 80), LotFrame("p", 40, 80), 0)
    assert existing.right_edge == 0
    assert proposed.left_edge == 0


def test_district_layout_packs_toward_negative_x():
    frames = [LotFrame("a", 40, 100), LotFrame("b", 30, 90), LotFrame("c", 50, 120)]
    placements = district_layout(frames, 10)
    assert [p.center_x for p in placements] == [20, -15, -65]
    assert [p.center_y for p in placements] == [50, 45, 60]
    assert [p.label for p in placements] == ["Lot 1", "Lot 2", "Lot 3"]


def test_district_layout_first_lot_starts_at_origin():
    placements = district_layout([LotFrame("a", 40, 100), LotFrame("b", 30, 90)], 10)
    assert placements[0].left_edge == 0
    assert placements[1].right_edge == 0


def test_district_layout_gaps_between_later_lots():
    frames = [LotFrame(k, 20, 50) for k in "abcd"]
    placements = district_layout(frames, 5)
    gaps = [placements[i].left_edge - placements[i + 1].right_edge for i in range(1, 3)]
    assert gaps == [5, 5]


def test_district_layout_skips_missing_lots_but_keeps_index():
    frames = [LotFrame("a", 40, 100), None, LotFrame("c", 30, 90)]
    placements = district_layout(frames, 10)
    assert [p.key for p in placements] == ["a", "c"]
    assert placements[1].index == 2
    assert placements[1].label == "Lot 3"
    assert placements[1].center_x == pytest.approx(-15)


def test_district_layout_empty():
    assert district_layout([], 10) == []
