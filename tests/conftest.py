"""Shared fixtures: fresh seeded stores and an API client per test."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from dog_api.app.core.store import DataStores, build_stores
from dog_api.app.main import create_app


@pytest.fixture
def stores() -> DataStores:
    return build_stores(seed=True)


@pytest.fixture
def empty_stores() -> DataStores:
    return build_stores(seed=False)


@pytest.fixture
def client(stores: DataStores) -> TestClient:
    return TestClient(create_app(stores))


@pytest.fixture
def dog_ids(stores: DataStores) -> dict:
    """Seeded dog ids keyed by dog name."""
    return {dog.name: str(dog.id) for dog in stores.dogs.all()}


def dog_payload(**overrides) -> dict:
    payload = {
        "name": "Daisy",
        "breed": "Beagle",
        "age": 4,
        "weight": 24.5,
        "gender": "female",
        "color": "Tricolor",
        "size": "medium",
        "temperament": ["curious", "merry"],
        "isNeutered": True,
        "photos": ["https://example.com/photos/daisy1.jpg"],
        "description": "Daisy follows her nose everywhere.",
    }
    payload.update(overrides)
    return payload
