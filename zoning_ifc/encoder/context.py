"""
Per-invocation export state

An ExportContext owns the ID counter, the GUID source and the ordered list
of emitted records. A fresh context is created for every document, so
concurrent exports never share a counter.
"""

import random
from datetime import datetime, timezone
from typing import Dict, Iterator, List, NamedTuple, Optional

from loguru import logger

from .entities import IfcEntity
from .errors import EntityGraphError
from .step import format_record

# IFC compressed GUID alphabet
GUID_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_$"
GUID_LENGTH = 22


class IdentifierAllocator:
    """Issues entity IDs 1, 2, 3, ... with no reuse"""

    def __init__(self):
        self._last = 0

    def next_id(self) -> int:
        self._last += 1
        return self._last

    @property
    def last_id(self) -> int:
        return self._last


class GuidSource:
    """22-character GUIDs drawn uniformly from the IFC alphabet"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.SystemRandom()

    def new_guid(self) -> str:
        return "".join(self._rng.choice(GUID_ALPHABET) for _ in range(GUID_LENGTH))


class EntityRecord(NamedTuple):
    id: int
    entity: IfcEntity

    def to_step(self) -> str:
        return format_record(self.id, self.entity)


class ExportContext:
    """
    Arena for one export

    `add` assigns the next ID to an entity and rejects any reference that
    does not point at an already emitted record.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        timestamp: Optional[datetime] = None
    ):
        self.ids = IdentifierAllocator()
        self.guids = GuidSource(rng)
        self.timestamp = timestamp or datetime.now(timezone.utc)
        self.records: List[EntityRecord] = []

    def add(self, entity: IfcEntity) -> int:
        entity_id = self.ids.next_id()
        for ref in entity.references():
            if not 1 <= ref < entity_id:
                raise EntityGraphError(
                    f"#{entity_id}={entity.step_type} references #{ref}, "
                    f"which was not emitted before it"
                )
        self.records.append(EntityRecord(entity_id, entity))
        return entity_id

    def new_guid(self) -> str:
        return self.guids.new_guid()

    @property
    def creation_epoch(self) -> int:
        moment = self.timestamp
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return int(moment.timestamp())

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[EntityRecord]:
        return iter(self.records)

    def type_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for record in self.records:
            counts[record.entity.step_type] = counts.get(record.entity.step_type, 0) + 1
        return counts

    def log_summary(self):
        logger.debug(f"Export context holds {len(self.records)} entities: {self.type_counts()}")
