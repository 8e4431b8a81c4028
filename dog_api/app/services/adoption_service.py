"""
Business logic for adoption applications.

Applications reference a dog by id; the dog must exist when the
application is submitted.  A dog counts as adopted as soon as one of
its applications is approved.
"""

import logging
import math
from typing import List, Optional
from uuid import UUID

from ..core.query import apply_filters, at_most, equals, icontains, paginate
from ..core.store import DataStores
from ..schemas.adoption import (
    AdoptionApplication,
    AdoptionApplicationCreate,
    AdoptionStats,
    ApplicationStatus,
)
from ..schemas.common import Paginated, Size
from ..schemas.dog import Dog

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 2) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class AdoptionService:
    """Service for adoption applications and adoption statistics."""

    def __init__(self, stores: DataStores) -> None:
        self.applications = stores.adoptions
        self.dogs = stores.dogs
        self.breeds = stores.breeds

    def list_applications(
        self,
        status: Optional[ApplicationStatus] = None,
        dog_id: Optional[UUID] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Paginated[AdoptionApplication]:
        matches = apply_filters(
            self.applications.all(),
            equals("status", status),
            equals("dog_id", dog_id),
        )
        window, pagination = paginate(matches, page, limit)
        return Paginated[AdoptionApplication](data=window, pagination=pagination)

    def create_application(self, data: AdoptionApplicationCreate) -> AdoptionApplication:
        """Submit an application.  New applications always start as pending.

        Raises ``NotFoundError`` when the referenced dog does not exist;
        the application store is left untouched in that case.
        """
        self.dogs.get(data.dog_id)
        payload = data.model_dump()
        payload["status"] = ApplicationStatus.pending
        application = self.applications.append(payload)
        logger.info("Application %s submitted for dog %s", application.id, application.dog_id)
        return application

    def get_application(self, application_id: UUID) -> AdoptionApplication:
        return self.applications.get(application_id)

    def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus,
        notes: Optional[str] = None,
    ) -> AdoptionApplication:
        """Move an application to ``status``.

        Existing notes are kept unless a non‑empty ``notes`` is given.
        """
        changes = {"status": status}
        if notes:
            changes["notes"] = notes
        application = self.applications.replace(application_id, changes)
        logger.info("Application %s is now %s", application_id, application.status.value)
        return application

    def _approved_dog_ids(self) -> set:
        return {
            application.dog_id
            for application in self.applications.all()
            if application.status == ApplicationStatus.approved
        }

    def available_dogs(
        self,
        breed: Optional[str] = None,
        size: Optional[Size] = None,
        age_max: Optional[int] = None,
        good_with_kids: Optional[bool] = None,
    ) -> List[Dog]:
        """Dogs without an approved application, narrowed by the filters.

        ``good_with_kids`` is a trait of the breed, so it is resolved by
        looking the dog's breed up in the breed catalogue by name; dogs
        whose breed is not catalogued never match it.
        """
        approved = self._approved_dog_ids()
        candidates = [dog for dog in self.dogs.all() if dog.id not in approved]
        candidates = apply_filters(
            candidates,
            icontains("breed", breed),
            equals("size", size),
            at_most("age", age_max),
        )
        if good_with_kids is not None:
            kid_friendly = {
                b.name.lower(): b.good_with_kids for b in self.breeds.all()
            }
            candidates = [
                dog for dog in candidates
                if kid_friendly.get(dog.breed.lower()) is good_with_kids
            ]
        return candidates

    def statistics(self) -> AdoptionStats:
        """Counts per status and the adoption rate.

        ``adoptionRate`` is approved applications per dog, in percent.
        It is not capped: several approved applications for the same
        dog all count.
        """
        applications = self.applications.all()
        total_dogs = len(self.dogs)

        def count(status: ApplicationStatus) -> int:
            return sum(1 for application in applications if application.status == status)

        approved = count(ApplicationStatus.approved)
        rate = (approved / total_dogs) * 100 if total_dogs > 0 else 0
        return AdoptionStats(
            total_dogs=total_dogs,
            available_for_adoption=total_dogs - approved,
            total_applications=len(applications),
            pending_applications=count(ApplicationStatus.pending),
            approved_applications=approved,
            rejected_applications=count(ApplicationStatus.rejected),
            adoption_rate=round_half_up(rate),
        )
