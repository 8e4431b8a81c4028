"""
Health record endpoints for API v1.

Records are created against an existing dog.  Two derived views are
exposed: a dog's vaccination history and the veterinarian directory.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from dog_api.app.api.deps import PageParams, get_health_service
from dog_api.app.core.errors import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from dog_api.app.schemas.common import Paginated
from dog_api.app.schemas.health import (
    HealthRecord,
    HealthRecordCreate,
    HealthRecordType,
    HealthRecordUpdate,
    VaccinationHistory,
    VeterinarianDirectory,
)
from dog_api.app.services import HealthService

router = APIRouter()


@router.get("/records", response_model=Paginated[HealthRecord], summary="List health records")
async def list_health_records(
    dog_id: Optional[UUID] = Query(None, alias="dogId"),
    record_type: Optional[HealthRecordType] = Query(None, alias="type"),
    veterinarian: Optional[str] = Query(None),
    date_from: Optional[date] = Query(None, alias="dateFrom"),
    date_to: Optional[date] = Query(None, alias="dateTo"),
    paging: PageParams = Depends(),
    service: HealthService = Depends(get_health_service),
) -> Paginated[HealthRecord]:
    """Retrieve health records filtered by dog, type, veterinarian or date range."""
    return service.list_records(
        dog_id=dog_id,
        type=record_type,
        veterinarian=veterinarian,
        date_from=date_from,
        date_to=date_to,
        page=paging.page,
        limit=paging.limit,
    )


@router.post(
    "/records",
    response_model=HealthRecord,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
    summary="Create health record",
)
async def create_health_record(
    record: HealthRecordCreate,
    service: HealthService = Depends(get_health_service),
) -> HealthRecord:
    return service.create_record(record)


@router.get(
    "/records/{record_id}",
    response_model=HealthRecord,
    responses=NOT_FOUND_RESPONSE,
    summary="Get health record",
)
async def get_health_record(record_id: UUID, service: HealthService = Depends(get_health_service)) -> HealthRecord:
    return service.get_record(record_id)


@router.put(
    "/records/{record_id}",
    response_model=HealthRecord,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
    summary="Update health record",
)
async def update_health_record(
    record_id: UUID,
    updates: HealthRecordUpdate,
    service: HealthService = Depends(get_health_service),
) -> HealthRecord:
    return service.update_record(record_id, updates)


@router.get(
    "/dogs/{dog_id}/vaccination-history",
    response_model=VaccinationHistory,
    responses=NOT_FOUND_RESPONSE,
    summary="Get dog vaccination history",
)
async def get_vaccination_history(
    dog_id: UUID,
    service: HealthService = Depends(get_health_service),
) -> VaccinationHistory:
    return service.vaccination_history(dog_id)


@router.get("/veterinarians", response_model=VeterinarianDirectory, summary="Get veterinarians")
async def list_veterinarians(service: HealthService = Depends(get_health_service)) -> VeterinarianDirectory:
    return service.veterinarians()
