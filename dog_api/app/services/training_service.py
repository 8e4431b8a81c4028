"""
Business logic for training records.

The per‑dog progress summary and the trainer directory both average
the ordinal ``progress`` field through ``core.progress``.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import UUID

from ..core.progress import average_progress
from ..core.query import apply_filters, equals, icontains, paginate
from ..core.store import DataStores
from ..schemas.common import Paginated
from ..schemas.training import (
    ProgressLevel,
    Trainer,
    TrainerDirectory,
    TrainingProgress,
    TrainingRecord,
    TrainingRecordCreate,
    TrainingRecordUpdate,
    TrainingStatus,
    TrainingType,
)

logger = logging.getLogger(__name__)


@dataclass
class _TrainerTally:
    facility: Optional[str]
    specialties: List[TrainingType] = field(default_factory=list)
    levels: List[ProgressLevel] = field(default_factory=list)


class TrainingService:
    """Service for training records."""

    def __init__(self, stores: DataStores) -> None:
        self.records = stores.training
        self.dogs = stores.dogs

    def list_records(
        self,
        dog_id: Optional[UUID] = None,
        type: Optional[TrainingType] = None,
        trainer: Optional[str] = None,
        status: Optional[TrainingStatus] = None,
        progress: Optional[ProgressLevel] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Paginated[TrainingRecord]:
        matches = apply_filters(
            self.records.all(),
            equals("dog_id", dog_id),
            equals("type", type),
            icontains("trainer", trainer),
            equals("status", status),
            equals("progress", progress),
        )
        window, pagination = paginate(matches, page, limit)
        return Paginated[TrainingRecord](data=window, pagination=pagination)

    def create_record(self, data: TrainingRecordCreate) -> TrainingRecord:
        """Add a record for an existing dog (``NotFoundError`` otherwise)."""
        self.dogs.get(data.dog_id)
        record = self.records.append(data.model_dump())
        logger.info("Started %s training for dog %s with %s", record.type.value, record.dog_id, record.trainer)
        return record

    def get_record(self, record_id: UUID) -> TrainingRecord:
        return self.records.get(record_id)

    def update_record(self, record_id: UUID, updates: TrainingRecordUpdate) -> TrainingRecord:
        changes = {k: v for k, v in updates.model_dump(exclude_unset=True).items() if v is not None}
        return self.records.replace(record_id, changes)

    def dog_progress(self, dog_id: UUID) -> TrainingProgress:
        """Summarise every training record of one dog.

        Skills are merged across records without duplicates.  The
        records are listed newest start date first.  A dog without
        training has an overall progress of ``fair``.
        """
        self.dogs.get(dog_id)
        records = apply_filters(self.records.all(), equals("dog_id", dog_id))
        skills = list(dict.fromkeys(skill for record in records for skill in record.skills))
        return TrainingProgress(
            dog_id=dog_id,
            total_trainings=len(records),
            completed_trainings=sum(1 for r in records if r.status == TrainingStatus.completed),
            in_progress_trainings=sum(1 for r in records if r.status == TrainingStatus.in_progress),
            overall_progress=average_progress(r.progress for r in records),
            skills=skills,
            training_records=sorted(records, key=lambda r: r.start_date, reverse=True),
        )

    def trainers(self) -> TrainerDirectory:
        """One entry per trainer name, in first‑seen order.

        The facility shown is the one of the trainer's first record.
        """
        tallies: Dict[str, _TrainerTally] = {}
        for record in self.records.all():
            tally = tallies.setdefault(record.trainer, _TrainerTally(facility=record.facility))
            if record.type not in tally.specialties:
                tally.specialties.append(record.type)
            tally.levels.append(record.progress)
        return TrainerDirectory(
            trainers=[
                Trainer(
                    name=name,
                    facility=tally.facility,
                    specialties=tally.specialties,
                    record_count=len(tally.levels),
                    average_progress=average_progress(tally.levels),
                )
                for name, tally in tallies.items()
            ]
        )
