"""
FastAPI dependencies resolving the stores and services for a request.

The stores are created once per application by ``create_app`` and kept
on ``app.state``; every request builds lightweight service objects on
top of them.
"""

from fastapi import Depends, Query, Request

from ..core.config import settings
from ..core.store import DataStores
from ..services import AdoptionService, BreedService, DogService, HealthService, TrainingService


def get_stores(request: Request) -> DataStores:
    return request.app.state.stores


def get_dog_service(stores: DataStores = Depends(get_stores)) -> DogService:
    return DogService(stores)


def get_breed_service(stores: DataStores = Depends(get_stores)) -> BreedService:
    return BreedService(stores)


def get_adoption_service(stores: DataStores = Depends(get_stores)) -> AdoptionService:
    return AdoptionService(stores)


def get_health_service(stores: DataStores = Depends(get_stores)) -> HealthService:
    return HealthService(stores)


def get_training_service(stores: DataStores = Depends(get_stores)) -> TrainingService:
    return TrainingService(stores)


class PageParams:
    """``page``/``limit`` query parameters shared by list endpoints."""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="1-based page number"),
        limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Page size"),
    ) -> None:
        self.page = page
        self.limit = limit
