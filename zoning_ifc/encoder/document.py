"""
Document assembly: HEADER, DATA records in creation order, footer
"""

from dataclasses import dataclass, field
from typing import Dict

from .context import ExportContext
from .step import render_header, render_footer
from ..config import StepHeaderConfig


@dataclass
class IfcDocument:
    """Finished STEP text plus what went into it"""
    text: str
    filename: str
    entity_count: int
    type_counts: Dict[str, int] = field(default_factory=dict)

    def __str__(self):
        return self.text


class DocumentSerializer:
    """Renders an ExportContext into ISO-10303-21 text"""

    def __init__(self, header: StepHeaderConfig):
        self.header = header

    def serialize(self, ctx: ExportContext, filename: str) -> IfcDocument:
        body = "\n".join(record.to_step() for record in ctx)
        text = render_header(filename, ctx.timestamp, self.header) + body + "\n" + render_footer()
        return IfcDocument(
            text=text,
            filename=filename,
            entity_count=len(ctx),
            type_counts=ctx.type_counts(),
        )
