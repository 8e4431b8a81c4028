"""
Service layer abstraction.

Each service encapsulates business logic for a resource and receives
the ``DataStores`` it works on, so the in‑memory stores used here can
be swapped for persistent ones without changing API handlers.
"""

from .adoption_service import AdoptionService
from .breed_service import BreedService
from .dog_service import DogService
from .health_service import HealthService
from .training_service import TrainingService

__all__ = ["AdoptionService", "BreedService", "DogService", "HealthService", "TrainingService"]
