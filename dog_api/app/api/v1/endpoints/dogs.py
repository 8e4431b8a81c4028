"""
Dog endpoints for API v1.

CRUD over the dog collection plus a photo listing.  Deleting a dog
does not remove the applications or records that reference it.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from dog_api.app.api.deps import PageParams, get_dog_service
from dog_api.app.core.errors import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from dog_api.app.schemas.common import Paginated, Size
from dog_api.app.schemas.dog import Dog, DogCreate, DogPhotos, DogUpdate, Gender
from dog_api.app.services import DogService

router = APIRouter()


@router.get("", response_model=Paginated[Dog], summary="List all dogs")
async def list_dogs(
    breed: Optional[str] = Query(None, description="Case-insensitive substring of the breed"),
    age_min: Optional[int] = Query(None, ge=0),
    age_max: Optional[int] = Query(None, ge=0),
    weight_min: Optional[float] = Query(None, ge=0),
    weight_max: Optional[float] = Query(None, ge=0),
    gender: Optional[Gender] = Query(None),
    size: Optional[Size] = Query(None),
    is_neutered: Optional[bool] = Query(None, alias="isNeutered"),
    paging: PageParams = Depends(),
    service: DogService = Depends(get_dog_service),
) -> Paginated[Dog]:
    """Retrieve a paginated list of dogs with optional filtering.

    - **breed**: partial, case-insensitive breed match.
    - **age_min**, **age_max**, **weight_min**, **weight_max**: inclusive bounds.
    - **gender**, **size**, **isNeutered**: exact matches.
    - **page**, **limit**: pagination.
    """
    return service.list_dogs(
        breed=breed,
        age_min=age_min,
        age_max=age_max,
        weight_min=weight_min,
        weight_max=weight_max,
        gender=gender,
        size=size,
        is_neutered=is_neutered,
        page=paging.page,
        limit=paging.limit,
    )


@router.get("/{dog_id}", response_model=Dog, responses=NOT_FOUND_RESPONSE, summary="Get dog by ID")
async def get_dog(dog_id: UUID, service: DogService = Depends(get_dog_service)) -> Dog:
    return service.get_dog(dog_id)


@router.post(
    "",
    response_model=Dog,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSE,
    summary="Create a new dog",
)
async def create_dog(dog: DogCreate, service: DogService = Depends(get_dog_service)) -> Dog:
    return service.create_dog(dog)


@router.put(
    "/{dog_id}",
    response_model=Dog,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
    summary="Update dog",
)
async def update_dog(
    dog_id: UUID,
    updates: DogUpdate,
    service: DogService = Depends(get_dog_service),
) -> Dog:
    """Update an existing dog.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    return service.update_dog(dog_id, updates)


@router.delete(
    "/{dog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete dog",
)
async def delete_dog(dog_id: UUID, service: DogService = Depends(get_dog_service)) -> None:
    service.delete_dog(dog_id)
    return None


@router.get("/{dog_id}/photos", response_model=DogPhotos, responses=NOT_FOUND_RESPONSE, summary="Get dog photos")
async def get_dog_photos(dog_id: UUID, service: DogService = Depends(get_dog_service)) -> DogPhotos:
    return service.get_photos(dog_id)
