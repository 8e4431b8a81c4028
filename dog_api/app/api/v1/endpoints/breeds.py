"""
Breed endpoints for API v1.

Breeds are read‑only.  The static ``/search`` and ``/groups`` routes
are declared before ``/{breed_id}`` so they are not captured by it.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from dog_api.app.api.deps import get_breed_service
from dog_api.app.core.errors import NOT_FOUND_RESPONSE
from dog_api.app.schemas.breed import Breed, BreedGroup, BreedGroups, NeedsLevel
from dog_api.app.schemas.common import Size
from dog_api.app.services import BreedService

router = APIRouter()


@router.get("", response_model=List[Breed], summary="List all dog breeds")
async def list_breeds(
    group: Optional[BreedGroup] = Query(None),
    size: Optional[Size] = Query(None),
    exercise_needs: Optional[NeedsLevel] = Query(None, alias="exerciseNeeds"),
    good_with_kids: Optional[bool] = Query(None, alias="goodWithKids"),
    good_with_pets: Optional[bool] = Query(None, alias="goodWithPets"),
    service: BreedService = Depends(get_breed_service),
) -> List[Breed]:
    """Retrieve every breed matching the supplied characteristics."""
    return service.list_breeds(
        group=group,
        size=size,
        exercise_needs=exercise_needs,
        good_with_kids=good_with_kids,
        good_with_pets=good_with_pets,
    )


@router.get("/search", response_model=List[Breed], summary="Search breeds by name")
async def search_breeds(
    q: str = Query(..., min_length=1, max_length=100),
    limit: int = Query(10, ge=1, le=50),
    service: BreedService = Depends(get_breed_service),
) -> List[Breed]:
    return service.search_breeds(q, limit)


@router.get("/groups", response_model=BreedGroups, summary="Get all breed groups")
async def list_breed_groups(service: BreedService = Depends(get_breed_service)) -> BreedGroups:
    return service.list_groups()


@router.get("/{breed_id}", response_model=Breed, responses=NOT_FOUND_RESPONSE, summary="Get breed by ID")
async def get_breed(breed_id: UUID, service: BreedService = Depends(get_breed_service)) -> Breed:
    return service.get_breed(breed_id)
