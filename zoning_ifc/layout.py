"""
Scene layout shared with the 3D viewer

Lot centers computed here are the offsets every element generator applies,
so exported geometry lines up with the on-screen arrangement.

Comparison layout:
  existing lot to the left of the origin, proposed lot to the right,
  separated by `spacing`, both with their front edge on y = 0.

District layout:
  the first lot's front-left corner sits on the origin and it extends
  toward +X; every following lot is packed toward -X, with `spacing`
  between consecutive lots after the first.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple


class LotFrame(NamedTuple):
    key: str
    width: float
    depth: float


class LotPlacement(NamedTuple):
    """Where a lot sits in world coordinates"""
    key: str
    index: int
    center_x: float
    center_y: float
    width: float
    depth: float

    @property
    def left_edge(self) -> float:
        return self.center_x - self.width / 2

    @property
    def right_edge(self) -> float:
        return self.center_x + self.width / 2

    @property
    def label(self) -> str:
        return f"Lot {self.index + 1}"


def comparison_layout(
    existing: LotFrame,
    proposed: LotFrame,
    spacing: float
) -> Tuple[LotPlacement, LotPlacement]:
    """Side-by-side placement of the existing and proposed lots"""
    existing_placement = LotPlacement(
        key=existing.key,
        index=0,
        center_x=-(spacing / 2) - existing.width / 2,
        center_y=existing.depth / 2,
        width=existing.width,
        depth=existing.depth,
    )
    proposed_placement = LotPlacement(
        key=proposed.key,
        index=1,
        center_x=(spacing / 2) + proposed.width / 2,
        center_y=proposed.depth / 2,
        width=proposed.width,
        depth=proposed.depth,
    )
    return existing_placement, proposed_placement


def district_layout(
    frames: Sequence[Optional[LotFrame]],
    spacing: float
) -> List[LotPlacement]:
    """
    Pack district lots along the X axis

    `frames` follows the display order; a None entry (a lot id with no lot
    data) is skipped but still consumes its index.

    Example: widths [40, 30, 50] with spacing 10 give centers 20, -15, -65.
    """
    placements = []
    neg_offset = 0.0

    for index, frame in enumerate(frames):
        if frame is None:
            continue

        if index == 0:
            center_x = frame.width / 2
        else:
            neg_offset -= frame.width
            center_x = neg_offset + frame.width / 2

        placements.append(LotPlacement(
            key=frame.key,
            index=index,
            center_x=center_x,
            center_y=frame.depth / 2,
            width=frame.width,
            depth=frame.depth,
        ))

        if index > 0:
            neg_offset -= spacing

    return placements
