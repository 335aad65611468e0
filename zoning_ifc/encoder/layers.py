"""
Storey containment and presentation layers

Layer names match the viewer's layer toggles. A shape representation lands
in exactly one bucket; empty buckets produce no record.
"""

from typing import Dict, List, Optional

from loguru import logger

from .context import ExportContext
from .elements import ElementResult
from .entities import IfcPresentationLayerAssignment
from .errors import EntityGraphError
from .spatial import SpatialHierarchyBuilder, SpatialNode

LOT_LINES = "Lot Lines"
SETBACK_LINES = "Setback Lines"
BUILDINGS = "Buildings"
ACCESSORY_BUILDINGS = "Accessory Buildings"

LAYER_ORDER = (LOT_LINES, SETBACK_LINES, BUILDINGS, ACCESSORY_BUILDINGS)


class StoreyContents:
    """Elements generated for one storey, in generation order"""

    def __init__(self, storey: SpatialNode):
        self.storey = storey
        self.element_ids: List[int] = []

    def add(self, result: ElementResult) -> ElementResult:
        self.element_ids.append(result.element_id)
        return result

    def emit(self, spatial: SpatialHierarchyBuilder) -> int:
        return spatial.contain(self.storey.entity_id, self.element_ids)


class LayerBuckets:
    """Named sets of shape representation IDs, emitted once at the end"""

    def __init__(self):
        self._buckets: Dict[str, List[int]] = {name: [] for name in LAYER_ORDER}
        self._emitted = False

    def add(self, layer: str, result: ElementResult):
        if self._emitted:
            raise EntityGraphError(f"Layer '{layer}' already written")
        if layer not in self._buckets:
            raise EntityGraphError(f"Unknown layer: {layer}")
        if result.shape_rep_id is None:
            return
        for name, members in self._buckets.items():
            if result.shape_rep_id in members:
                raise EntityGraphError(
                    f"Shape representation #{result.shape_rep_id} already on layer '{name}'"
                )
        self._buckets[layer].append(result.shape_rep_id)

    def members(self, layer: str) -> List[int]:
        return list(self._buckets[layer])

    def emit(self, ctx: ExportContext) -> Dict[str, Optional[int]]:
        """One IfcPresentationLayerAssignment per non-empty bucket"""
        self._emitted = True
        layer_ids: Dict[str, Optional[int]] = {}
        for name in LAYER_ORDER:
            members = self._buckets[name]
            if not members:
                layer_ids[name] = None
                continue
            layer_ids[name] = ctx.add(IfcPresentationLayerAssignment(name, tuple(members)))
            logger.debug(f"Layer '{name}': {len(members)} representations")
        return layer_ids
