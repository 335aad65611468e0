"""
ISO-10303-21 text formatting

Every literal that reaches the output passes through `format_value`, so the
number rule below holds for the whole document.
"""

import math
from datetime import datetime
from typing import Any, Sequence

from .entities import IfcEntity, Ref, Token, TypedMeasure, _Marker
from ..config import StepHeaderConfig


def format_real(value: float) -> str:
    """
    Format a REAL literal

    Integral values render as "N.0". Anything else is rounded to 6 decimals
    with trailing zeros stripped; a value that rounds onto an integer keeps
    its ".0" so it still reads as a real.

    >>> format_real(30)
    '30.0'
    >>> format_real(12.3456789)
    '12.345679'
    >>> format_real(12.500000)
    '12.5'
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot write non-finite real: {value}")
    if value.is_integer():
        return f"{value + 0.0:.1f}"  # +0.0 folds -0.0 into 0.0
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", "0"):
        return "0.0"
    if "." not in text:
        text += ".0"
    return text


def encode_string(text: str) -> str:
    """Quote a STRING literal, escaping quotes, backslashes and non-ASCII characters"""
    parts = []
    for char in text:
        if char == "'":
            parts.append("''")
        elif char == "\\":
            parts.append("\\\\")
        elif 32 <= ord(char) < 127:
            parts.append(char)
        elif ord(char) <= 0xFFFF:
            parts.append(f"\\X2\\{ord(char):04X}\\X0\\")
        else:
            parts.append(f"\\X4\\{ord(char):08X}\\X0\\")
    return "'" + "".join(parts) + "'"


def format_value(value: Any) -> str:
    """Render one attribute value"""
    if isinstance(value, _Marker):
        return value.text
    if isinstance(value, Ref):
        return f"#{value.id}"
    if isinstance(value, Token):
        return f".{value.name}."
    if isinstance(value, TypedMeasure):
        return f"{value.type_name}({format_real(value.value)})"
    if isinstance(value, bool):
        return ".T." if value else ".F."
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_real(value)
    if isinstance(value, str):
        return encode_string(value)
    if isinstance(value, (tuple, list)):
        return "(" + ",".join(format_value(v) for v in value) + ")"
    raise TypeError(f"Unsupported STEP value: {value!r}")


def format_record(entity_id: int, entity: IfcEntity) -> str:
    """Render `#<id>=<TYPE>(<fields>);`"""
    fields = ",".join(format_value(v) for v in entity.attributes())
    return f"#{entity_id}={entity.step_type}({fields});"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 timestamp truncated to seconds"""
    return moment.replace(microsecond=0, tzinfo=None).isoformat()


def _string_list(values: Sequence[str]) -> str:
    return "(" + ",".join(encode_string(v) for v in values) + ")"


def render_header(filename: str, moment: datetime, header: StepHeaderConfig) -> str:
    """HEADER section followed by the opening of DATA"""
    lines = [
        "ISO-10303-21;",
        "HEADER;",
        f"FILE_DESCRIPTION({_string_list([header.description])},{encode_string(header.implementation_level)});",
        "FILE_NAME({},{},{},{},{},{},{});".format(
            encode_string(filename),
            encode_string(format_timestamp(moment)),
            _string_list([header.author]),
            _string_list([header.organization]),
            encode_string(header.preprocessor),
            encode_string(header.originating_system),
            encode_string(header.authorization),
        ),
        f"FILE_SCHEMA({_string_list([header.schema])});",
        "ENDSEC;",
        "DATA;",
    ]
    return "\n".join(lines) + "\n"


def render_footer() -> str:
    return "ENDSEC;\nEND-ISO-10303-21;\n"
