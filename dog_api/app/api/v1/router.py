"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under their path prefixes.
When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import adoption, breeds, dogs, health, training

router = APIRouter()

router.include_router(dogs.router, prefix="/dogs", tags=["Dogs"])
router.include_router(breeds.router, prefix="/breeds", tags=["Breeds"])
router.include_router(adoption.router, prefix="/adoption", tags=["Adoption"])
router.include_router(health.router, prefix="/health", tags=["Health"])
router.include_router(training.router, prefix="/training", tags=["Training"])
