"""
Business logic for dogs.

Dogs are the only resource that can be deleted.  Deletion is a hard
delete without cascade: adoption applications, health records and
training records that reference the dog stay in their collections.
"""

import logging
from typing import Optional
from uuid import UUID

from ..core.query import apply_filters, at_least, at_most, equals, icontains, paginate
from ..core.store import DataStores
from ..schemas.common import Paginated, Size
from ..schemas.dog import Dog, DogCreate, DogPhotos, DogUpdate, Gender

logger = logging.getLogger(__name__)


class DogService:
    """Service for managing dogs."""

    def __init__(self, stores: DataStores) -> None:
        self.dogs = stores.dogs

    def list_dogs(
        self,
        breed: Optional[str] = None,
        age_min: Optional[int] = None,
        age_max: Optional[int] = None,
        weight_min: Optional[float] = None,
        weight_max: Optional[float] = None,
        gender: Optional[Gender] = None,
        size: Optional[Size] = None,
        is_neutered: Optional[bool] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Paginated[Dog]:
        """Return a page of dogs matching every supplied filter.

        - ``breed`` matches case‑insensitively anywhere in the breed name.
        - ``age_min``/``age_max`` and ``weight_min``/``weight_max`` are
          inclusive bounds.
        - ``gender``, ``size`` and ``is_neutered`` must match exactly.
        """
        matches = apply_filters(
            self.dogs.all(),
            icontains("breed", breed),
            at_least("age", age_min),
            at_most("age", age_max),
            at_least("weight", weight_min),
            at_most("weight", weight_max),
            equals("gender", gender),
            equals("size", size),
            equals("is_neutered", is_neutered),
        )
        window, pagination = paginate(matches, page, limit)
        return Paginated[Dog](data=window, pagination=pagination)

    def get_dog(self, dog_id: UUID) -> Dog:
        return self.dogs.get(dog_id)

    def create_dog(self, data: DogCreate) -> Dog:
        dog = self.dogs.append(data.model_dump())
        logger.info("Registered dog '%s' (%s)", dog.name, dog.id)
        return dog

    def update_dog(self, dog_id: UUID, updates: DogUpdate) -> Dog:
        """Apply a partial update; unspecified fields remain unchanged."""
        changes = {k: v for k, v in updates.model_dump(exclude_unset=True).items() if v is not None}
        return self.dogs.replace(dog_id, changes)

    def delete_dog(self, dog_id: UUID) -> None:
        self.dogs.remove(dog_id)

    def get_photos(self, dog_id: UUID) -> DogPhotos:
        dog = self.dogs.get(dog_id)
        return DogPhotos(dog_id=dog.id, photos=dog.photos)
