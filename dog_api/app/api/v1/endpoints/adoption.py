"""
Adoption endpoints for API v1.

Applications are submitted against an existing dog and reviewed by
moving their status.  ``/available`` lists dogs without an approved
application and ``/stats`` reports counts per status.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from dog_api.app.api.deps import PageParams, get_adoption_service
from dog_api.app.core.errors import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from dog_api.app.schemas.adoption import (
    AdoptionApplication,
    AdoptionApplicationCreate,
    AdoptionStats,
    ApplicationStatus,
    ApplicationStatusUpdate,
)
from dog_api.app.schemas.common import Paginated, Size
from dog_api.app.schemas.dog import Dog
from dog_api.app.services import AdoptionService

router = APIRouter()


@router.get(
    "/applications",
    response_model=Paginated[AdoptionApplication],
    summary="List adoption applications",
)
async def list_applications(
    status_filter: Optional[ApplicationStatus] = Query(None, alias="status"),
    dog_id: Optional[UUID] = Query(None, alias="dogId"),
    paging: PageParams = Depends(),
    service: AdoptionService = Depends(get_adoption_service),
) -> Paginated[AdoptionApplication]:
    return service.list_applications(
        status=status_filter,
        dog_id=dog_id,
        page=paging.page,
        limit=paging.limit,
    )


@router.post(
    "/applications",
    response_model=AdoptionApplication,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
    summary="Submit adoption application",
)
async def create_application(
    application: AdoptionApplicationCreate,
    service: AdoptionService = Depends(get_adoption_service),
) -> AdoptionApplication:
    """Submit a new adoption application for a dog.

    Returns 404 when the dog does not exist.  New applications are
    always ``pending``.
    """
    return service.create_application(application)


@router.get(
    "/applications/{application_id}",
    response_model=AdoptionApplication,
    responses=NOT_FOUND_RESPONSE,
    summary="Get adoption application",
)
async def get_application(
    application_id: UUID,
    service: AdoptionService = Depends(get_adoption_service),
) -> AdoptionApplication:
    return service.get_application(application_id)


@router.put(
    "/applications/{application_id}/status",
    response_model=AdoptionApplication,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
    summary="Update application status",
)
async def update_application_status(
    application_id: UUID,
    update: ApplicationStatusUpdate,
    service: AdoptionService = Depends(get_adoption_service),
) -> AdoptionApplication:
    """Approve, reject or withdraw an application.

    ``notes`` replaces the existing notes only when it is non-empty.
    """
    return service.update_status(application_id, update.status, update.notes)


@router.get("/available", response_model=List[Dog], summary="Get available dogs")
async def list_available_dogs(
    breed: Optional[str] = Query(None),
    size: Optional[Size] = Query(None),
    age_max: Optional[int] = Query(None, ge=1),
    good_with_kids: Optional[bool] = Query(None, alias="goodWithKids"),
    service: AdoptionService = Depends(get_adoption_service),
) -> List[Dog]:
    """Dogs that have no approved adoption application."""
    return service.available_dogs(
        breed=breed,
        size=size,
        age_max=age_max,
        good_with_kids=good_with_kids,
    )


@router.get("/stats", response_model=AdoptionStats, summary="Get adoption statistics")
async def get_adoption_stats(service: AdoptionService = Depends(get_adoption_service)) -> AdoptionStats:
    return service.statistics()
