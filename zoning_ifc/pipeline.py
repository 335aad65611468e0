"""
Export orchestrators

Two entry points drive the encoder for the editor's two modules:

  generate_ifc(existing, proposed, options)
      Comparison module: one site per scenario, side by side.

  generate_district_ifc(lots_map, entity_order, options)
      District module: one site per lot, packed along X.

Each call builds a fresh ExportContext, runs the pipeline once and returns
the finished STEP text. Any geometry error aborts the whole document.
"""

import random
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence, Type, TypeVar

from loguru import logger
from pydantic import BaseModel

from .config import get_config, validate_config, ExportConfig
from .models import (
    ComparisonModel, Lot, ExportOptions, ModelInput, LotInput, OptionsInput,
)
from .layout import LotFrame, comparison_layout, district_layout
from .encoder import (
    ExportContext, GeometricContextBuilder, SpatialHierarchyBuilder, ElementGenerators,
    LayerBuckets, StoreyContents, DocumentSerializer, IfcDocument, IfcExportError,
    lot_vertices,
)
from .encoder.layers import LOT_LINES, SETBACK_LINES, BUILDINGS, ACCESSORY_BUILDINGS

M = TypeVar("M", bound=BaseModel)


def _coerce(value: Any, model_cls: Type[M]) -> M:
    if isinstance(value, model_cls):
        return value
    return model_cls.model_validate(value)


class IfcExportPipeline:
    """
    Runs the encoder for one document per call

    Usage:
        pipeline = IfcExportPipeline()
        document = pipeline.export_comparison(existing, proposed, {"lotSpacing": 10})
        document.text  # ISO-10303-21 content
    """

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        rng: Optional[random.Random] = None,
        timestamp: Optional[datetime] = None
    ):
        self.config = config or get_config()
        validate_config(self.config)
        self.rng = rng
        self.timestamp = timestamp

    def _new_context(self) -> ExportContext:
        return ExportContext(rng=self.rng, timestamp=self.timestamp)

    def _resolve_options(self, options: OptionsInput, default_filename: str):
        opts = _coerce(options or {}, ExportOptions)
        filename = opts.filename or default_filename
        spacing = opts.lot_spacing if opts.lot_spacing is not None else self.config.layout.lot_spacing
        return filename, spacing

    def export_comparison(
        self,
        existing: ModelInput,
        proposed: ModelInput,
        options: OptionsInput = None
    ) -> IfcDocument:
        """Existing vs proposed scenario, one site each"""
        existing_model = _coerce(existing, ComparisonModel)
        proposed_model = _coerce(proposed, ComparisonModel)
        filename, spacing = self._resolve_options(options, self.config.header.comparison_filename)

        existing_place, proposed_place = comparison_layout(
            LotFrame("existing", existing_model.lot_width, existing_model.lot_depth),
            LotFrame("proposed", proposed_model.lot_width, proposed_model.lot_depth),
            spacing,
        )
        scenarios = [
            ("Existing", existing_model, existing_place),
            ("Proposed", proposed_model, proposed_place),
        ]

        logger.info(f"Generating comparison IFC '{filename}' (lot spacing {spacing} ft)")
        ctx = self._new_context()
        try:
            geo = GeometricContextBuilder(self.config.geometry).build(ctx)
            spatial = SpatialHierarchyBuilder(ctx, geo, self.config.header)
            project = spatial.project()
            elements = ElementGenerators(ctx, geo, self.config.geometry, project.owner_history_id)

            lots = {name: model.to_lot_spec() for name, model, _ in scenarios}

            sites = {
                name: spatial.site(lot_vertices(lots[name], place.center_x, place.center_y), f"{name} Site")
                for name, _, place in scenarios
            }
            spatial.aggregate(project.project_id, [sites[name].entity_id for name, _, _ in scenarios])

            buildings = {name: spatial.building(sites[name], f"{name} Building") for name, _, _ in scenarios}
            for name, _, _ in scenarios:
                spatial.aggregate(sites[name].entity_id, [buildings[name].entity_id])

            storeys = {name: spatial.storey(buildings[name]) for name, _, _ in scenarios}
            for name, _, _ in scenarios:
                spatial.aggregate(buildings[name].entity_id, [storeys[name].entity_id])

            contents = {name: StoreyContents(storeys[name]) for name, _, _ in scenarios}
            layers = LayerBuckets()

            for name, _, place in scenarios:
                surface = contents[name].add(elements.lot_surface(
                    lots[name], storeys[name], f"{name} Lot", place.center_x, place.center_y
                ))
                layers.add(LOT_LINES, surface)

            for name, _, place in scenarios:
                setbacks = contents[name].add(elements.setback_lines(
                    lots[name], storeys[name], f"{name} Setbacks", place.center_x, place.center_y
                ))
                layers.add(SETBACK_LINES, setbacks)

            for name, model, place in scenarios:
                mass = contents[name].add(elements.building_mass(
                    model.to_building_geometry(), storeys[name], f"{name} Mass",
                    place.center_x, place.center_y, allow_empty=True,
                ))
                layers.add(BUILDINGS, mass)

            for name, _, _ in scenarios:
                contents[name].emit(spatial)

            layers.emit(ctx)
        except IfcExportError as e:
            logger.error(f"Comparison IFC export aborted: {e}")
            raise

        return self._finish(ctx, filename)

    def export_district(
        self,
        lots_map: Mapping[str, LotInput],
        entity_order: Sequence[str],
        options: OptionsInput = None
    ) -> IfcDocument:
        """All district lots in display order, one site each"""
        filename, spacing = self._resolve_options(options, self.config.header.district_filename)

        lots: List[Optional[Lot]] = []
        for lot_id in entity_order:
            data = lots_map.get(lot_id)
            if data is None:
                logger.warning(f"Lot '{lot_id}' is in the display order but has no data, skipping")
                lots.append(None)
                continue
            lots.append(_coerce(data, Lot))

        frames = [
            LotFrame(lot_id, lot.lot_width, lot.lot_depth) if lot is not None else None
            for lot_id, lot in zip(entity_order, lots)
        ]
        placements = district_layout(frames, spacing)

        logger.info(f"Generating district IFC '{filename}' for {len(placements)} lots (spacing {spacing} ft)")
        ctx = self._new_context()
        try:
            geo = GeometricContextBuilder(self.config.geometry).build(ctx)
            spatial = SpatialHierarchyBuilder(ctx, geo, self.config.header)
            project = spatial.project()
            elements = ElementGenerators(ctx, geo, self.config.geometry, project.owner_history_id)
            layers = LayerBuckets()
            defaults = self.config.buildings

            site_ids = []
            for place in placements:
                lot = lots[place.index]
                label = place.label
                cx, cy = place.center_x, place.center_y
                lot_spec = lot.to_lot_spec("principal")

                site = spatial.site(lot_vertices(lot_spec, cx, cy), f"{label} Site")
                site_ids.append(site.entity_id)

                building = spatial.building(site, f"{label} Building")
                spatial.aggregate(site.entity_id, [building.entity_id])

                storey = spatial.storey(building)
                spatial.aggregate(building.entity_id, [storey.entity_id])

                contents = StoreyContents(storey)
                layers.add(LOT_LINES, contents.add(
                    elements.lot_surface(lot_spec, storey, f"{label} Surface", cx, cy)
                ))
                layers.add(SETBACK_LINES, contents.add(
                    elements.setback_lines(lot_spec, storey, f"{label} Setbacks", cx, cy)
                ))

                principal = lot.buildings.principal
                if principal is not None and principal.has_footprint:
                    layers.add(BUILDINGS, contents.add(elements.building_mass(
                        principal.to_building_geometry(defaults), storey, f"{label} Principal", cx, cy
                    )))

                accessory = lot.buildings.accessory
                if accessory is not None and accessory.has_footprint:
                    layers.add(ACCESSORY_BUILDINGS, contents.add(elements.building_mass(
                        accessory.to_building_geometry(defaults), storey, f"{label} Accessory", cx, cy
                    )))

                contents.emit(spatial)
                logger.info(f"{label} ({place.key}): center ({cx:.2f}, {cy:.2f}), {len(contents.element_ids)} elements")

            if site_ids:
                spatial.aggregate(project.project_id, site_ids)

            layers.emit(ctx)
        except IfcExportError as e:
            logger.error(f"District IFC export aborted: {e}")
            raise

        return self._finish(ctx, filename)

    def _finish(self, ctx: ExportContext, filename: str) -> IfcDocument:
        ctx.log_summary()
        document = DocumentSerializer(self.config.header).serialize(ctx, filename)
        logger.info(f"IFC document '{filename}' assembled with {document.entity_count} entities")
        return document


def generate_ifc(
    existing_model: ModelInput,
    proposed_model: ModelInput,
    options: OptionsInput = None,
    config: Optional[ExportConfig] = None
) -> str:
    """Comparison-module export; returns the complete IFC file content"""
    return IfcExportPipeline(config).export_comparison(existing_model, proposed_model, options).text


def generate_district_ifc(
    lots_map: Mapping[str, LotInput],
    entity_order: Sequence[str],
    options: OptionsInput = None,
    config: Optional[ExportConfig] = None
) -> str:
    """District-module export; returns the complete IFC file content"""
    return IfcExportPipeline(config).export_district(lots_map, entity_order, options).text
