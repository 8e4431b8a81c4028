"""
Training record endpoints for API v1.

Besides record management this router exposes the per‑dog progress
summary and the trainer directory.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from dog_api.app.api.deps import PageParams, get_training_service
from dog_api.app.core.errors import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from dog_api.app.schemas.common import Paginated
from dog_api.app.schemas.training import (
    ProgressLevel,
    TrainerDirectory,
    TrainingProgress,
    TrainingRecord,
    TrainingRecordCreate,
    TrainingRecordUpdate,
    TrainingStatus,
    TrainingType,
)
from dog_api.app.services import TrainingService

router = APIRouter()


@router.get("/records", response_model=Paginated[TrainingRecord], summary="List training records")
async def list_training_records(
    dog_id: Optional[UUID] = Query(None, alias="dogId"),
    training_type: Optional[TrainingType] = Query(None, alias="type"),
    trainer: Optional[str] = Query(None),
    status_filter: Optional[TrainingStatus] = Query(None, alias="status"),
    progress: Optional[ProgressLevel] = Query(None),
    paging: PageParams = Depends(),
    service: TrainingService = Depends(get_training_service),
) -> Paginated[TrainingRecord]:
    return service.list_records(
        dog_id=dog_id,
        type=training_type,
        trainer=trainer,
        status=status_filter,
        progress=progress,
        page=paging.page,
        limit=paging.limit,
    )


@router.post(
    "/records",
    response_model=TrainingRecord,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
    summary="Create training record",
)
async def create_training_record(
    record: TrainingRecordCreate,
    service: TrainingService = Depends(get_training_service),
) -> TrainingRecord:
    return service.create_record(record)


@router.get(
    "/records/{record_id}",
    response_model=TrainingRecord,
    responses=NOT_FOUND_RESPONSE,
    summary="Get training record",
)
async def get_training_record(
    record_id: UUID,
    service: TrainingService = Depends(get_training_service),
) -> TrainingRecord:
    return service.get_record(record_id)


@router.put(
    "/records/{record_id}",
    response_model=TrainingRecord,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
    summary="Update training record",
)
async def update_training_record(
    record_id: UUID,
    updates: TrainingRecordUpdate,
    service: TrainingService = Depends(get_training_service),
) -> TrainingRecord:
    """Update status, progress, end date, skills, notes or certificates."""
    return service.update_record(record_id, updates)


@router.get(
    "/dogs/{dog_id}/progress",
    response_model=TrainingProgress,
    responses=NOT_FOUND_RESPONSE,
    summary="Get dog training progress",
)
async def get_dog_training_progress(
    dog_id: UUID,
    service: TrainingService = Depends(get_training_service),
) -> TrainingProgress:
    return service.dog_progress(dog_id)


@router.get("/trainers", response_model=TrainerDirectory, summary="Get trainers")
async def list_trainers(service: TrainingService = Depends(get_training_service)) -> TrainerDirectory:
    return service.trainers()
