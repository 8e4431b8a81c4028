"""Tests for the in-memory record store."""

from __future__ import annotations

import threading
import uuid

import pytest

from dog_api.app.core.errors import NotFoundError
from dog_api.app.core.store import RecordStore
from dog_api.app.schemas.dog import Dog, DogCreate

from .conftest import dog_payload


@pytest.fixture
def dog_store() -> RecordStore:
    return RecordStore(Dog, "Dog")


class TestRecordStore:
    def test_append_assigns_id_and_timestamps(self, dog_store: RecordStore) -> None:
        dog = dog_store.append(DogCreate(**dog_payload()).model_dump())

        assert isinstance(dog.id, uuid.UUID)
        assert dog.created_at == dog.updated_at
        assert dog.created_at.tzinfo is not None
        assert dog_store.get(dog.id) == dog
        assert dog.id in dog_store
        assert len(dog_store) == 1

    def test_fetched_record_equals_input_plus_managed_fields(self, dog_store: RecordStore) -> None:
        data = DogCreate(**dog_payload()).model_dump()
        dog = dog_store.append(data)

        fetched = dog_store.get(dog.id).model_dump()
        managed = {"id", "created_at", "updated_at"}
        assert {key: value for key, value in fetched.items() if key not in managed} == data
        assert set(fetched) - set(data) == managed

    def test_append_ignores_client_supplied_managed_fields(self, dog_store: RecordStore) -> None:
        forged = uuid.uuid4()
        data = DogCreate(**dog_payload()).model_dump()
        data["id"] = forged
        dog = dog_store.append(data)
        assert dog.id != forged

    def test_ids_are_unique(self, dog_store: RecordStore) -> None:
        ids = {dog_store.append(DogCreate(**dog_payload()).model_dump()).id for _ in range(20)}
        assert len(ids) == 20

    def test_replace_merges_and_refreshes_updated_at(self, dog_store: RecordStore) -> None:
        dog = dog_store.append(DogCreate(**dog_payload()).model_dump())

        updated = dog_store.replace(dog.id, {"name": "Rex", "age": 6})

        assert updated.id == dog.id
        assert updated.name == "Rex"
        assert updated.age == 6
        assert updated.breed == dog.breed
        assert updated.photos == dog.photos
        assert updated.created_at == dog.created_at
        assert updated.updated_at >= dog.updated_at
        assert dog_store.get(dog.id).name == "Rex"

    def test_replace_cannot_touch_managed_fields(self, dog_store: RecordStore) -> None:
        dog = dog_store.append(DogCreate(**dog_payload()).model_dump())
        updated = dog_store.replace(dog.id, {"id": uuid.uuid4(), "created_at": None})
        assert updated.id == dog.id
        assert updated.created_at == dog.created_at

    def test_replace_unknown_id(self, dog_store: RecordStore) -> None:
        missing = uuid.uuid4()
        with pytest.raises(NotFoundError) as excinfo:
            dog_store.replace(missing, {"name": "Rex"})
        assert excinfo.value.message == f"Dog with ID {missing} not found"

    def test_remove(self, dog_store: RecordStore) -> None:
        keep = dog_store.append(DogCreate(**dog_payload(name="Keep")).model_dump())
        drop = dog_store.append(DogCreate(**dog_payload(name="Drop")).model_dump())

        dog_store.remove(drop.id)

        assert [dog.name for dog in dog_store.all()] == ["Keep"]
        assert dog_store.find(drop.id) is None
        assert keep.id in dog_store
        with pytest.raises(NotFoundError):
            dog_store.remove(drop.id)

    def test_all_is_a_snapshot(self, dog_store: RecordStore) -> None:
        dog_store.append(DogCreate(**dog_payload()).model_dump())
        snapshot = dog_store.all()
        dog_store.append(DogCreate(**dog_payload()).model_dump())
        assert len(snapshot) == 1
        assert len(dog_store) == 2

    def test_concurrent_writes_are_serialised(self, dog_store: RecordStore) -> None:
        workers, iterations = 8, 200
        first = dog_store.append(DogCreate(**dog_payload()).model_dump())
        data = DogCreate(**dog_payload()).model_dump()
        errors = []

        def write(worker: int) -> None:
            try:
                for step in range(iterations):
                    dog_store.append(data)
                    dog_store.replace(first.id, {"age": (worker + step) % 30})
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=write, args=(worker,)) for worker in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(dog_store) == 1 + workers * iterations
        ids = [dog.id for dog in dog_store.all()]
        assert len(set(ids)) == len(ids)
        assert ids[0] == first.id
        assert dog_store.get(first.id).created_at == first.created_at

    def test_contains_rejects_non_uuid(self, dog_store: RecordStore) -> None:
        dog = dog_store.append(DogCreate(**dog_payload()).model_dump())
        assert str(dog.id) not in dog_store


class TestSeedData:
    def test_seed_counts(self, stores) -> None:
        assert len(stores.dogs) == 5
        assert len(stores.breeds) == 4
        assert len(stores.adoptions) == 2
        assert len(stores.health) == 3
        assert len(stores.training) == 3

    def test_seed_references_resolve(self, stores) -> None:
        for collection in (stores.adoptions, stores.health, stores.training):
            for record in collection.all():
                assert record.dog_id in stores.dogs

    def test_empty_stores(self, empty_stores) -> None:
        assert len(empty_stores.dogs) == 0
        assert empty_stores.breeds.all() == []
