"""
Typed IFC4 entity records

One frozen dataclass per entity type emitted by the exporter. Fields that
point at other entities are plain integer IDs named `*_id` / `*_ids`; each
record knows how to turn itself into an ordered STEP attribute tuple.
"""

from typing import Any, ClassVar, Iterator, Optional, Sequence, Tuple
from dataclasses import dataclass


# ============================================================
# STEP value wrappers
# ============================================================

@dataclass(frozen=True)
class Ref:
    """Instance reference `#id`"""
    id: int


@dataclass(frozen=True)
class Token:
    """Enumeration value `.NAME.`"""
    name: str


@dataclass(frozen=True)
class TypedMeasure:
    """Select value wrapped in its type, e.g. IFCLENGTHMEASURE(0.3048)"""
    type_name: str
    value: float


class _Marker:
    def __init__(self, text: str):
        self.text = text

    def __repr__(self):
        return self.text


UNSET = _Marker("$")
DERIVED = _Marker("*")


def _ref(entity_id: Optional[int]) -> Any:
    return UNSET if entity_id is None else Ref(entity_id)


def _refs(entity_ids: Sequence[int]) -> Tuple[Ref, ...]:
    return tuple(Ref(i) for i in entity_ids)


def _opt(value: Any) -> Any:
    return UNSET if value is None else value


def _reals(values: Sequence[float]) -> Tuple[float, ...]:
    return tuple(float(v) for v in values)


class IfcEntity:
    """Base for all entity records"""
    step_type: ClassVar[str] = ""

    def attributes(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    def references(self) -> Iterator[int]:
        """All entity IDs this record points at"""
        stack = list(self.attributes())
        while stack:
            value = stack.pop()
            if isinstance(value, Ref):
                yield value.id
            elif isinstance(value, (tuple, list)):
                stack.extend(value)


# ============================================================
# Geometry resources
# ============================================================

@dataclass(frozen=True)
class IfcCartesianPoint(IfcEntity):
    step_type: ClassVar[str] = "IFCCARTESIANPOINT"
    coordinates: Tuple[float, ...]

    def attributes(self):
        return (_reals(self.coordinates),)


@dataclass(frozen=True)
class IfcDirection(IfcEntity):
    step_type: ClassVar[str] = "IFCDIRECTION"
    ratios: Tuple[float, ...]

    def attributes(self):
        return (_reals(self.ratios),)


@dataclass(frozen=True)
class IfcAxis2Placement3D(IfcEntity):
    step_type: ClassVar[str] = "IFCAXIS2PLACEMENT3D"
    location_id: int
    axis_id: Optional[int] = None
    ref_direction_id: Optional[int] = None

    def attributes(self):
        return (Ref(self.location_id), _ref(self.axis_id), _ref(self.ref_direction_id))


@dataclass(frozen=True)
class IfcPolyline(IfcEntity):
    step_type: ClassVar[str] = "IFCPOLYLINE"
    point_ids: Tuple[int, ...]

    def attributes(self):
        return (_refs(self.point_ids),)


@dataclass(frozen=True)
class IfcArbitraryClosedProfileDef(IfcEntity):
    step_type: ClassVar[str] = "IFCARBITRARYCLOSEDPROFILEDEF"
    outer_curve_id: int
    profile_name: Optional[str] = None

    def attributes(self):
        return (Token("AREA"), _opt(self.profile_name), Ref(self.outer_curve_id))


@dataclass(frozen=True)
class IfcExtrudedAreaSolid(IfcEntity):
    step_type: ClassVar[str] = "IFCEXTRUDEDAREASOLID"
    swept_area_id: int
    position_id: int
    direction_id: int
    depth: float

    def attributes(self):
        return (Ref(self.swept_area_id), Ref(self.position_id), Ref(self.direction_id), float(self.depth))


# ============================================================
# Units and representation contexts
# ============================================================

@dataclass(frozen=True)
class IfcDimensionalExponents(IfcEntity):
    step_type: ClassVar[str] = "IFCDIMENSIONALEXPONENTS"
    length: int = 0
    mass: int = 0
    time: int = 0
    electric_current: int = 0
    thermodynamic_temperature: int = 0
    amount_of_substance: int = 0
    luminous_intensity: int = 0

    def attributes(self):
        return (self.length, self.mass, self.time, self.electric_current,
                self.thermodynamic_temperature, self.amount_of_substance,
                self.luminous_intensity)


@dataclass(frozen=True)
class IfcSIUnit(IfcEntity):
    step_type: ClassVar[str] = "IFCSIUNIT"
    unit_type: str
    name: str
    prefix: Optional[str] = None

    def attributes(self):
        prefix = UNSET if self.prefix is None else Token(self.prefix)
        return (DERIVED, Token(self.unit_type), prefix, Token(self.name))


@dataclass(frozen=True)
class IfcMeasureWithUnit(IfcEntity):
    step_type: ClassVar[str] = "IFCMEASUREWITHUNIT"
    measure_type: str
    value: float
    unit_id: int

    def attributes(self):
        return (TypedMeasure(self.measure_type, float(self.value)), Ref(self.unit_id))


@dataclass(frozen=True)
class IfcConversionBasedUnit(IfcEntity):
    step_type: ClassVar[str] = "IFCCONVERSIONBASEDUNIT"
    dimensions_id: int
    unit_type: str
    name: str
    conversion_factor_id: int

    def attributes(self):
        return (Ref(self.dimensions_id), Token(self.unit_type), self.name, Ref(self.conversion_factor_id))


@dataclass(frozen=True)
class IfcUnitAssignment(IfcEntity):
    step_type: ClassVar[str] = "IFCUNITASSIGNMENT"
    unit_ids: Tuple[int, ...]

    def attributes(self):
        return (_refs(self.unit_ids),)


@dataclass(frozen=True)
class IfcGeometricRepresentationContext(IfcEntity):
    step_type: ClassVar[str] = "IFCGEOMETRICREPRESENTATIONCONTEXT"
    context_type: str
    dimension: int
    precision: float
    world_coordinate_system_id: int
    true_north_id: Optional[int] = None
    context_identifier: Optional[str] = None

    def attributes(self):
        return (_opt(self.context_identifier), self.context_type, self.dimension,
                float(self.precision), Ref(self.world_coordinate_system_id),
                _ref(self.true_north_id))


@dataclass(frozen=True)
class IfcGeometricRepresentationSubContext(IfcEntity):
    step_type: ClassVar[str] = "IFCGEOMETRICREPRESENTATIONSUBCONTEXT"
    context_identifier: str
    context_type: str
    parent_context_id: int
    target_view: str = "MODEL_VIEW"

    def attributes(self):
        return (self.context_identifier, self.context_type, DERIVED, DERIVED, DERIVED,
                DERIVED, Ref(self.parent_context_id), UNSET, Token(self.target_view), UNSET)


# ============================================================
# Ownership
# ============================================================

@dataclass(frozen=True)
class IfcPerson(IfcEntity):
    step_type: ClassVar[str] = "IFCPERSON"
    family_name: Optional[str] = None

    def attributes(self):
        return (UNSET, _opt(self.family_name), UNSET, UNSET, UNSET, UNSET, UNSET, UNSET)


@dataclass(frozen=True)
class IfcOrganization(IfcEntity):
    step_type: ClassVar[str] = "IFCORGANIZATION"
    name: str

    def attributes(self):
        return (UNSET, self.name, UNSET, UNSET, UNSET)


@dataclass(frozen=True)
class IfcPersonAndOrganization(IfcEntity):
    step_type: ClassVar[str] = "IFCPERSONANDORGANIZATION"
    person_id: int
    organization_id: int

    def attributes(self):
        return (Ref(self.person_id), Ref(self.organization_id), UNSET)


@dataclass(frozen=True)
class IfcApplication(IfcEntity):
    step_type: ClassVar[str] = "IFCAPPLICATION"
    developer_id: int
    version: str
    full_name: str
    identifier: str

    def attributes(self):
        return (Ref(self.developer_id), self.version, self.full_name, self.identifier)


@dataclass(frozen=True)
class IfcOwnerHistory(IfcEntity):
    step_type: ClassVar[str] = "IFCOWNERHISTORY"
    owning_user_id: int
    owning_application_id: int
    creation_date: int
    change_action: str = "NOCHANGE"

    def attributes(self):
        return (Ref(self.owning_user_id), Ref(self.owning_application_id), UNSET,
                Token(self.change_action), UNSET, UNSET, UNSET, int(self.creation_date))


# ============================================================
# Placement and shape
# ============================================================

@dataclass(frozen=True)
class IfcLocalPlacement(IfcEntity):
    step_type: ClassVar[str] = "IFCLOCALPLACEMENT"
    relative_placement_id: int
    placement_rel_to_id: Optional[int] = None

    def attributes(self):
        return (_ref(self.placement_rel_to_id), Ref(self.relative_placement_id))


@dataclass(frozen=True)
class IfcShapeRepresentation(IfcEntity):
    step_type: ClassVar[str] = "IFCSHAPEREPRESENTATION"
    context_id: int
    identifier: str
    representation_type: str
    item_ids: Tuple[int, ...]

    def attributes(self):
        return (Ref(self.context_id), self.identifier, self.representation_type, _refs(self.item_ids))


@dataclass(frozen=True)
class IfcProductDefinitionShape(IfcEntity):
    step_type: ClassVar[str] = "IFCPRODUCTDEFINITIONSHAPE"
    representation_ids: Tuple[int, ...]

    def attributes(self):
        return (UNSET, UNSET, _refs(self.representation_ids))


@dataclass(frozen=True)
class IfcPresentationLayerAssignment(IfcEntity):
    step_type: ClassVar[str] = "IFCPRESENTATIONLAYERASSIGNMENT"
    name: str
    assigned_item_ids: Tuple[int, ...]

    def attributes(self):
        return (self.name, UNSET, _refs(self.assigned_item_ids), UNSET)


# ============================================================
# Spatial structure and products
# ============================================================

@dataclass(frozen=True)
class IfcProject(IfcEntity):
    step_type: ClassVar[str] = "IFCPROJECT"
    global_id: str
    owner_history_id: int
    name: str
    context_ids: Tuple[int, ...]
    units_id: int

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), self.name, UNSET, UNSET,
                UNSET, UNSET, _refs(self.context_ids), Ref(self.units_id))


@dataclass(frozen=True)
class IfcSite(IfcEntity):
    step_type: ClassVar[str] = "IFCSITE"
    global_id: str
    owner_history_id: int
    name: str
    placement_id: int
    representation_id: Optional[int] = None

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), self.name, UNSET, UNSET,
                Ref(self.placement_id), _ref(self.representation_id), UNSET,
                Token("ELEMENT"), UNSET, UNSET, UNSET, UNSET, UNSET)


@dataclass(frozen=True)
class IfcBuilding(IfcEntity):
    step_type: ClassVar[str] = "IFCBUILDING"
    global_id: str
    owner_history_id: int
    name: str
    placement_id: int

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), self.name, UNSET, UNSET,
                Ref(self.placement_id), UNSET, UNSET, Token("ELEMENT"), UNSET, UNSET, UNSET)


@dataclass(frozen=True)
class IfcBuildingStorey(IfcEntity):
    step_type: ClassVar[str] = "IFCBUILDINGSTOREY"
    global_id: str
    owner_history_id: int
    name: str
    placement_id: int
    elevation: float = 0.0

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), self.name, UNSET, UNSET,
                Ref(self.placement_id), UNSET, UNSET, Token("ELEMENT"), float(self.elevation))


@dataclass(frozen=True)
class IfcSlab(IfcEntity):
    step_type: ClassVar[str] = "IFCSLAB"
    global_id: str
    owner_history_id: int
    name: str
    placement_id: int
    representation_id: Optional[int]
    predefined_type: str = "BASESLAB"

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), self.name, UNSET, UNSET,
                Ref(self.placement_id), _ref(self.representation_id), UNSET,
                Token(self.predefined_type))


@dataclass(frozen=True)
class IfcBuildingElementProxy(IfcEntity):
    step_type: ClassVar[str] = "IFCBUILDINGELEMENTPROXY"
    global_id: str
    owner_history_id: int
    name: str
    placement_id: int
    representation_id: Optional[int]
    predefined_type: str = "NOTDEFINED"

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), self.name, UNSET, UNSET,
                Ref(self.placement_id), _ref(self.representation_id), UNSET,
                Token(self.predefined_type))


@dataclass(frozen=True)
class IfcRelAggregates(IfcEntity):
    step_type: ClassVar[str] = "IFCRELAGGREGATES"
    global_id: str
    owner_history_id: int
    relating_object_id: int
    related_object_ids: Tuple[int, ...]

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), UNSET, UNSET,
                Ref(self.relating_object_id), _refs(self.related_object_ids))


@dataclass(frozen=True)
class IfcRelContainedInSpatialStructure(IfcEntity):
    step_type: ClassVar[str] = "IFCRELCONTAINEDINSPATIALSTRUCTURE"
    global_id: str
    owner_history_id: int
    related_element_ids: Tuple[int, ...]
    relating_structure_id: int

    def attributes(self):
        return (self.global_id, Ref(self.owner_history_id), UNSET, UNSET,
                _refs(self.related_element_ids), Ref(self.relating_structure_id))
