"""
In‑memory record storage.

Each resource collection lives in a ``RecordStore``: an ordered list of
Pydantic record models guarded by its own lock.  The store owns id and
timestamp assignment, so services only ever hand it validated payload
fields.  Nothing is persisted; the lifetime of a store is the lifetime
of the process (or of the test that built it).

To back a collection with a real database later, implement the same
``all``/``find``/``get``/``append``/``replace``/``remove`` methods and
hand the object to ``DataStores`` instead.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Mapping, Optional, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel

from ..schemas.adoption import AdoptionApplication
from ..schemas.breed import Breed
from ..schemas.dog import Dog
from ..schemas.health import HealthRecord
from ..schemas.training import TrainingRecord
from ..utils.datetime_utils import now as utcnow
from .errors import NotFoundError
from .seed import load_seed_data

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Fields owned by the store; patches never overwrite them.
_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class RecordStore(Generic[RecordT]):
    """Ordered, lock‑protected collection of one record type.

    Reads return snapshots and never block writers for longer than a
    list copy.  Writes (``append``, ``replace``, ``remove``) are
    serialised per store.
    """

    def __init__(self, model: Type[RecordT], kind: str, records: Iterable[RecordT] = ()) -> None:
        self.model = model
        self.kind = kind
        self._records: List[RecordT] = list(records)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, UUID) and self.exists(record_id)

    def all(self) -> List[RecordT]:
        """Return a snapshot of every record in insertion order."""
        return list(self._records)

    def find(self, record_id: UUID) -> Optional[RecordT]:
        for record in self._records:
            if record.id == record_id:  # type: ignore[attr-defined]
                return record
        return None

    def get(self, record_id: UUID) -> RecordT:
        record = self.find(record_id)
        if record is None:
            logger.debug("%s %s not found", self.kind, record_id)
            raise NotFoundError(self.kind, record_id)
        return record

    def exists(self, record_id: UUID) -> bool:
        return self.find(record_id) is not None

    def append(self, data: Mapping[str, Any]) -> RecordT:
        """Store a new record built from ``data``.

        A fresh id is assigned and ``created_at``/``updated_at`` are set
        to the same instant.
        """
        now = utcnow()
        fields = {key: value for key, value in data.items() if key not in _MANAGED_FIELDS}
        record = self.model(id=uuid.uuid4(), created_at=now, updated_at=now, **fields)
        with self._lock:
            self._records.append(record)
        logger.info("Created %s %s", self.kind, record.id)  # type: ignore[attr-defined]
        return record

    def replace(self, record_id: UUID, patch: Mapping[str, Any]) -> RecordT:
        """Merge ``patch`` over an existing record and refresh ``updated_at``.

        Only the keys present in ``patch`` change.  Raises
        ``NotFoundError`` when the id is unknown.
        """
        changes = {key: value for key, value in patch.items() if key not in _MANAGED_FIELDS}
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:  # type: ignore[attr-defined]
                    merged = record.model_dump(mode="json")
                    merged.update(changes)
                    merged["updated_at"] = utcnow()
                    updated = self.model.model_validate(merged)
                    self._records[index] = updated
                    break
            else:
                raise NotFoundError(self.kind, record_id)
        logger.info("Updated %s %s (%s)", self.kind, record_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def remove(self, record_id: UUID) -> None:
        """Hard delete a record.  Raises ``NotFoundError`` when absent."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:  # type: ignore[attr-defined]
                    del self._records[index]
                    break
            else:
                raise NotFoundError(self.kind, record_id)
        logger.info("Deleted %s %s", self.kind, record_id)


@dataclass
class DataStores:
    """The five collections served by the API."""

    dogs: RecordStore
    breeds: RecordStore
    adoptions: RecordStore
    health: RecordStore
    training: RecordStore


def build_stores(seed: bool = True) -> DataStores:
    """Create empty stores, optionally loaded with the demo dataset."""
    stores = DataStores(
        dogs=RecordStore(Dog, "Dog"),
        breeds=RecordStore(Breed, "Breed"),
        adoptions=RecordStore(AdoptionApplication, "Adoption application"),
        health=RecordStore(HealthRecord, "Health record"),
        training=RecordStore(TrainingRecord, "Training record"),
    )
    if seed:
        load_seed_data(stores)
    return stores
