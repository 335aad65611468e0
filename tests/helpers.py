"""
Small STEP reader used by the tests to inspect exporter output
"""

import re
from datetime import datetime
from typing import Dict, List, NamedTuple, Tuple

LINE_RE = re.compile(r"^#(\d+)=([A-Z0-9_]+)\((.*)\);$")
STRING_RE = re.compile(r"'(?:[^']|'')*'")
REF_RE = re.compile(r"#(\d+)")
GUID_RE = re.compile(r"'[0-9A-Za-z_$]{22}'")

FIXED_TIME = datetime(2026, 1, 1, 12, 0, 0)


class Record(NamedTuple):
    id: int
    type: str
    raw: str

    @property
    def refs(self) -> List[int]:
        return [int(r) for r in REF_RE.findall(STRING_RE.sub("''", self.raw))]

    @property
    def fields(self) -> List[str]:
        return split_fields(self.raw)


def split_fields(raw: str) -> List[str]:
    """Split a field list on top-level commas"""
    fields, depth, in_string, current = [], 0, False, []
    i = 0
    while i < len(raw):
        char = raw[i]
        if in_string:
            current.append(char)
            if char == "'":
                if i + 1 < len(raw) and raw[i + 1] == "'":
                    current.append("'")
                    i += 1
                else:
                    in_string = False
        elif char == "'":
            in_string = True
            current.append(char)
        elif char == "(":
            depth += 1
            current.append(char)
        elif char == ")":
            depth -= 1
            current.append(char)
        elif char == "," and depth == 0:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current))
    return fields


def data_lines(text: str) -> List[str]:
    lines = text.splitlines()
    start = lines.index("DATA;") + 1
    end = len(lines) - 1 - lines[::-1].index("ENDSEC;")
    return lines[start:end]


def parse_records(text: str) -> List[Record]:
    records = []
    for line in data_lines(text):
        match = LINE_RE.match(line)
        assert match, f"Malformed record line: {line}"
        records.append(Record(int(match.group(1)), match.group(2), match.group(3)))
    return records


def by_id(records: List[Record]) -> Dict[int, Record]:
    return {r.id: r for r in records}


def of_type(records: List[Record], step_type: str) -> List[Record]:
    return [r for r in records if r.type == step_type]


def named(records: List[Record], step_type: str, name: str) -> Record:
    matches = [r for r in of_type(records, step_type) if r.fields[2] == f"'{name}'"]
    assert len(matches) == 1, f"expected one {step_type} named {name}, got {len(matches)}"
    return matches[0]


def point_coords(record: Record) -> Tuple[float, ...]:
    assert record.type == "IFCCARTESIANPOINT"
    inner = record.raw.strip("()")
    return tuple(float(v) for v in inner.split(","))


def polyline_points(records: List[Record], polyline_id: int) -> List[Tuple[float, ...]]:
    index = by_id(records)
    polyline = index[polyline_id]
    assert polyline.type == "IFCPOLYLINE"
    return [point_coords(index[ref]) for ref in polyline.refs]


def ref_value(field: str) -> int:
    assert field.startswith("#"), field
    return int(field[1:])


def product_items(records: List[Record], product: Record) -> List[int]:
    """Item IDs of the single shape representation behind a product's Representation field"""
    index = by_id(records)
    product_shape = index[ref_value(product.fields[6])]
    (shape_rep_id,) = product_shape.refs
    shape_rep = index[shape_rep_id]
    return shape_rep.refs[1:]


def site_outline(records: List[Record], name: str) -> List[Tuple[float, ...]]:
    site = named(records, "IFCSITE", name)
    (polyline_id,) = product_items(records, site)
    return polyline_points(records, polyline_id)


def layer_members(records: List[Record]) -> Dict[str, List[int]]:
    layers = {}
    for record in of_type(records, "IFCPRESENTATIONLAYERASSIGNMENT"):
        layers[record.fields[0].strip("'")] = record.refs
    return layers
