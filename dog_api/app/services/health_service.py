"""
Business logic for health records.

Besides plain record management this service derives two views: the
vaccination history of a single dog and a directory of veterinarians
built from every record on file.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, NamedTuple, Optional
from uuid import UUID

from ..core.query import apply_filters, at_least, at_most, equals, icontains, paginate
from ..core.store import DataStores
from ..schemas.common import Paginated
from ..schemas.health import (
    HealthRecord,
    HealthRecordCreate,
    HealthRecordType,
    HealthRecordUpdate,
    VaccinationHistory,
    Veterinarian,
    VeterinarianDirectory,
)
from ..utils.datetime_utils import now as utcnow
from ..utils.datetime_utils import shift_years, start_of_day

logger = logging.getLogger(__name__)


class VetKey(NamedTuple):
    veterinarian: str
    clinic: str


@dataclass
class _VetTally:
    record_count: int = 0
    specialties: List[HealthRecordType] = field(default_factory=list)


class HealthService:
    """Service for health records."""

    def __init__(self, stores: DataStores) -> None:
        self.records = stores.health
        self.dogs = stores.dogs

    def list_records(
        self,
        dog_id: Optional[UUID] = None,
        type: Optional[HealthRecordType] = None,
        veterinarian: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Paginated[HealthRecord]:
        """Page of health records; ``date_from``/``date_to`` are inclusive."""
        matches = apply_filters(
            self.records.all(),
            equals("dog_id", dog_id),
            equals("type", type),
            icontains("veterinarian", veterinarian),
            at_least("date", date_from),
            at_most("date", date_to),
        )
        window, pagination = paginate(matches, page, limit)
        return Paginated[HealthRecord](data=window, pagination=pagination)

    def create_record(self, data: HealthRecordCreate) -> HealthRecord:
        """Add a record for an existing dog (``NotFoundError`` otherwise)."""
        self.dogs.get(data.dog_id)
        record = self.records.append(data.model_dump())
        logger.info("Recorded %s for dog %s", record.type.value, record.dog_id)
        return record

    def get_record(self, record_id: UUID) -> HealthRecord:
        return self.records.get(record_id)

    def update_record(self, record_id: UUID, updates: HealthRecordUpdate) -> HealthRecord:
        changes = {k: v for k, v in updates.model_dump(exclude_unset=True).items() if v is not None}
        return self.records.replace(record_id, changes)

    def vaccination_history(self, dog_id: UUID, now: Optional[datetime] = None) -> VaccinationHistory:
        """Vaccinations of a dog, newest first, and whether they are current.

        A dog is up to date when its latest vaccination happened after
        the same instant one calendar year before ``now``.  The window
        therefore follows the calendar (366 days across a leap day)
        rather than a fixed day count.
        """
        self.dogs.get(dog_id)
        vaccinations = sorted(
            apply_filters(
                self.records.all(),
                equals("dog_id", dog_id),
                equals("type", HealthRecordType.vaccination),
            ),
            key=lambda record: record.date,
            reverse=True,
        )
        latest = vaccinations[0] if vaccinations else None
        one_year_ago = shift_years(now or utcnow(), -1)
        up_to_date = latest is not None and start_of_day(latest.date) > one_year_ago
        return VaccinationHistory(
            dog_id=dog_id,
            vaccinations=vaccinations,
            up_to_date=up_to_date,
            next_due=latest.follow_up_date if latest else None,
        )

    def veterinarians(self) -> VeterinarianDirectory:
        """One entry per (veterinarian, clinic) pair, in first‑seen order."""
        tallies: Dict[VetKey, _VetTally] = {}
        for record in self.records.all():
            tally = tallies.setdefault(VetKey(record.veterinarian, record.clinic), _VetTally())
            tally.record_count += 1
            if record.type not in tally.specialties:
                tally.specialties.append(record.type)
        return VeterinarianDirectory(
            veterinarians=[
                Veterinarian(
                    name=key.veterinarian,
                    clinic=key.clinic,
                    record_count=tally.record_count,
                    specialties=tally.specialties,
                )
                for key, tally in tallies.items()
            ]
        )
