"""HTTP-level tests driving the application through ``TestClient``."""

from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from .conftest import dog_payload


class TestInfo:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["message"].startswith("Welcome to the Dog API")
        assert body["version"] == "1.0.0"
        assert body["docs"] == "/swagger"

    def test_openapi_document(self, client: TestClient) -> None:
        response = client.get("/openapi")
        assert response.status_code == 200
        schema = response.json()
        assert schema["info"]["title"] == "Dog API"
        assert "/dogs" in schema["paths"]
        assert "/health/dogs/{dog_id}/vaccination-history" in schema["paths"]

    def test_swagger_ui(self, client: TestClient) -> None:
        response = client.get("/swagger")
        assert response.status_code == 200
        assert "swagger-ui" in response.text


class TestDogsApi:
    def test_list_uses_camel_case_and_default_page(self, client: TestClient) -> None:
        body = client.get("/dogs").json()
        assert len(body["data"]) == 5
        assert body["pagination"] == {"page": 1, "limit": 10, "total": 5, "totalPages": 1}
        first = body["data"][0]
        assert first["name"] == "Buddy"
        assert first["isNeutered"] is True
        assert "createdAt" in first and "updatedAt" in first

    def test_list_filters(self, client: TestClient) -> None:
        body = client.get("/dogs", params={"size": "large", "gender": "male"}).json()
        assert [dog["name"] for dog in body["data"]] == ["Buddy", "Max"]

        body = client.get("/dogs", params={"isNeutered": "false"}).json()
        assert [dog["name"] for dog in body["data"]] == ["Bella"]

        body = client.get("/dogs", params={"weight_min": 50, "weight_max": 70}).json()
        assert [dog["name"] for dog in body["data"]] == ["Buddy", "Rocky"]

    def test_page_past_the_end(self, client: TestClient) -> None:
        body = client.get("/dogs", params={"page": 4, "limit": 2}).json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 5
        assert body["pagination"]["totalPages"] == 3

    def test_invalid_paging_is_rejected(self, client: TestClient) -> None:
        for params in ({"page": 0}, {"limit": 0}, {"limit": 101}, {"size": "huge"}):
            response = client.get("/dogs", params=params)
            assert response.status_code == 400
            assert response.json()["error"] == "VALIDATION_ERROR"

    def test_crud_cycle(self, client: TestClient) -> None:
        payload = dog_payload()
        created = client.post("/dogs", json=payload)
        assert created.status_code == 201
        dog = created.json()
        assert dog["createdAt"] == dog["updatedAt"]

        fetched = client.get(f"/dogs/{dog['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == dog
        for key, value in payload.items():
            assert fetched.json()[key] == value, key
        assert set(fetched.json()) >= {"id", "createdAt", "updatedAt"}

        updated = client.put(f"/dogs/{dog['id']}", json={"age": 5, "color": "Brown"})
        assert updated.status_code == 200
        assert updated.json()["age"] == 5
        assert updated.json()["color"] == "Brown"
        assert updated.json()["breed"] == "Beagle"
        assert updated.json()["createdAt"] == dog["createdAt"]

        photos = client.get(f"/dogs/{dog['id']}/photos")
        assert photos.json() == {"dogId": dog["id"], "photos": ["https://example.com/photos/daisy1.jpg"]}

        deleted = client.delete(f"/dogs/{dog['id']}")
        assert deleted.status_code == 204
        assert deleted.content == b""

        missing = client.get(f"/dogs/{dog['id']}")
        assert missing.status_code == 404
        assert missing.json() == {"error": "NOT_FOUND", "message": f"Dog with ID {dog['id']} not found"}

    def test_unknown_dog_operations(self, client: TestClient) -> None:
        missing = str(uuid.uuid4())
        assert client.put(f"/dogs/{missing}", json={"age": 2}).status_code == 404
        assert client.delete(f"/dogs/{missing}").status_code == 404
        assert client.get(f"/dogs/{missing}/photos").status_code == 404

    def test_malformed_id(self, client: TestClient) -> None:
        response = client.get("/dogs/not-a-uuid")
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["details"]

    def test_create_rejects_invalid_payload(self, client: TestClient) -> None:
        before = client.get("/dogs").json()["pagination"]["total"]
        for payload in (dog_payload(age=31), dog_payload(name=""), dog_payload(weight=0), dog_payload(size="tiny")):
            response = client.post("/dogs", json=payload)
            assert response.status_code == 400
            assert response.json()["error"] == "VALIDATION_ERROR"
        assert client.get("/dogs").json()["pagination"]["total"] == before

    def test_create_requires_every_descriptive_field(self, client: TestClient) -> None:
        for field in ("temperament", "photos", "description"):
            payload = dog_payload()
            del payload[field]
            response = client.post("/dogs", json=payload)
            assert response.status_code == 400, field
            assert field in response.json()["message"]

    def test_update_does_not_require_descriptive_fields(self, client: TestClient, dog_ids: dict) -> None:
        response = client.put(f"/dogs/{dog_ids['Luna']}", json={"age": 3})
        assert response.status_code == 200
        assert response.json()["description"].startswith("Luna is a brilliant Border Collie")


class TestBreedsApi:
    def test_list_and_filters(self, client: TestClient) -> None:
        assert len(client.get("/breeds").json()) == 4
        body = client.get("/breeds", params={"group": "herding", "goodWithPets": "false"}).json()
        assert [breed["name"] for breed in body] == ["German Shepherd"]
        body = client.get("/breeds", params={"exerciseNeeds": "low"}).json()
        assert [breed["name"] for breed in body] == ["French Bulldog"]

    def test_get_breed(self, client: TestClient) -> None:
        breed = client.get("/breeds").json()[0]
        body = client.get(f"/breeds/{breed['id']}").json()
        assert body["name"] == "Golden Retriever"
        assert body["lifeSpan"] == {"min": 10, "max": 12}
        assert client.get(f"/breeds/{uuid.uuid4()}").status_code == 404

    def test_search(self, client: TestClient) -> None:
        body = client.get("/breeds/search", params={"q": "COLLIE"}).json()
        assert [breed["name"] for breed in body] == ["Border Collie"]
        body = client.get("/breeds/search", params={"q": "e", "limit": 2}).json()
        assert len(body) == 2
        assert client.get("/breeds/search").status_code == 400

    def test_groups(self, client: TestClient) -> None:
        groups = client.get("/breeds/groups").json()["groups"]
        assert [(group["name"], group["count"]) for group in groups] == [
            ("sporting", 1),
            ("herding", 2),
            ("non-sporting", 1),
        ]
        assert groups[1]["description"] == "Dogs bred to control the movement of livestock"


class TestAdoptionApi:
    def _application(self, dog_id: str) -> dict:
        return {
            "dogId": dog_id,
            "applicantName": "Maria Garcia",
            "applicantEmail": "maria.garcia@mail.com",
            "applicantPhone": "+1-555-0777",
            "address": {"street": "9 Pine Rd", "city": "Austin", "state": "TX", "zipCode": "73301"},
            "housingType": "house",
            "hasYard": True,
            "hasOtherPets": False,
            "experience": "none",
            "workSchedule": "Part time",
            "reason": "Our family is ready for a first dog.",
        }

    def test_submit_and_review(self, client: TestClient, dog_ids: dict) -> None:
        created = client.post("/adoption/applications", json=self._application(dog_ids["Bella"]))
        assert created.status_code == 201
        application = created.json()
        assert application["status"] == "pending"

        listed = client.get("/adoption/applications", params={"dogId": dog_ids["Bella"]}).json()
        assert [item["id"] for item in listed["data"]] == [application["id"]]

        reviewed = client.put(
            f"/adoption/applications/{application['id']}/status",
            json={"status": "approved", "notes": "Lovely family"},
        )
        assert reviewed.status_code == 200
        assert reviewed.json()["status"] == "approved"
        assert reviewed.json()["notes"] == "Lovely family"

        available = [dog["name"] for dog in client.get("/adoption/available").json()]
        assert "Bella" not in available

    def test_submit_for_unknown_dog(self, client: TestClient) -> None:
        missing = str(uuid.uuid4())
        response = client.post("/adoption/applications", json=self._application(missing))
        assert response.status_code == 404
        assert response.json()["message"] == f"Dog with ID {missing} not found"
        assert client.get("/adoption/applications").json()["pagination"]["total"] == 2

    def test_submit_rejects_bad_email(self, client: TestClient, dog_ids: dict) -> None:
        payload = self._application(dog_ids["Max"])
        payload["applicantEmail"] = "not-an-email"
        assert client.post("/adoption/applications", json=payload).status_code == 400

    def test_status_filter(self, client: TestClient) -> None:
        body = client.get("/adoption/applications", params={"status": "approved"}).json()
        assert [item["applicantName"] for item in body["data"]] == ["Sarah Johnson"]

    def test_unknown_application(self, client: TestClient) -> None:
        missing = str(uuid.uuid4())
        assert client.get(f"/adoption/applications/{missing}").status_code == 404
        response = client.put(f"/adoption/applications/{missing}/status", json={"status": "rejected"})
        assert response.status_code == 404

    def test_available_good_with_kids(self, client: TestClient) -> None:
        body = client.get("/adoption/available", params={"goodWithKids": "true", "size": "large"}).json()
        assert [dog["name"] for dog in body] == ["Buddy", "Max"]

    def test_stats(self, client: TestClient) -> None:
        assert client.get("/adoption/stats").json() == {
            "totalDogs": 5,
            "availableForAdoption": 4,
            "totalApplications": 2,
            "pendingApplications": 1,
            "approvedApplications": 1,
            "rejectedApplications": 0,
            "adoptionRate": 20.0,
        }


class TestHealthApi:
    def test_list_by_dog_and_dates(self, client: TestClient, dog_ids: dict) -> None:
        body = client.get("/health/records", params={"dogId": dog_ids["Buddy"]}).json()
        assert body["pagination"]["total"] == 2

        records = client.get("/health/records").json()["data"]
        checkup = next(record for record in records if record["type"] == "checkup")
        body = client.get(
            "/health/records",
            params={"dateFrom": checkup["date"], "dateTo": checkup["date"]},
        ).json()
        assert [record["id"] for record in body["data"]] == [checkup["id"]]

    def test_create_get_update(self, client: TestClient, dog_ids: dict) -> None:
        payload = {
            "dogId": dog_ids["Rocky"],
            "type": "surgery",
            "date": "2025-04-02",
            "veterinarian": "Dr. Paul Kim",
            "clinic": "Riverside Animal Clinic",
            "description": "Removal of a benign skin growth",
            "medications": [{"name": "Carprofen", "dosage": "75mg", "frequency": "Once daily"}],
            "cost": 420,
        }
        created = client.post("/health/records", json=payload)
        assert created.status_code == 201
        record = created.json()
        assert record["medications"][0]["name"] == "Carprofen"

        assert client.get(f"/health/records/{record['id']}").json()["clinic"] == "Riverside Animal Clinic"

        updated = client.put(f"/health/records/{record['id']}", json={"notes": "Stitches out in 10 days"})
        assert updated.status_code == 200
        assert updated.json()["notes"] == "Stitches out in 10 days"
        assert updated.json()["type"] == "surgery"

    def test_create_for_unknown_dog(self, client: TestClient) -> None:
        payload = {
            "dogId": str(uuid.uuid4()),
            "type": "checkup",
            "date": "2025-04-02",
            "veterinarian": "Dr. Paul Kim",
            "clinic": "Riverside Animal Clinic",
            "description": "Checkup",
        }
        assert client.post("/health/records", json=payload).status_code == 404

    def test_vaccination_history(self, client: TestClient, dog_ids: dict) -> None:
        body = client.get(f"/health/dogs/{dog_ids['Buddy']}/vaccination-history").json()
        assert body["dogId"] == dog_ids["Buddy"]
        assert body["upToDate"] is True
        assert len(body["vaccinations"]) == 1
        assert body["nextDue"] == body["vaccinations"][0]["followUpDate"]

        body = client.get(f"/health/dogs/{dog_ids['Bella']}/vaccination-history").json()
        assert body["vaccinations"] == []
        assert body["upToDate"] is False

        assert client.get(f"/health/dogs/{uuid.uuid4()}/vaccination-history").status_code == 404

    def test_veterinarians(self, client: TestClient) -> None:
        vets = client.get("/health/veterinarians").json()["veterinarians"]
        assert [vet["name"] for vet in vets] == ["Dr. Emily Chen", "Dr. Michael Rodriguez", "Dr. Lisa Park"]
        assert vets[0]["recordCount"] == 1


class TestTrainingApi:
    def test_list_filters(self, client: TestClient) -> None:
        body = client.get("/training/records", params={"status": "completed"}).json()
        assert body["pagination"]["total"] == 2
        body = client.get("/training/records", params={"type": "agility"}).json()
        assert [record["trainer"] for record in body["data"]] == ["Sarah Johnson"]

    def test_create_and_progress(self, client: TestClient, dog_ids: dict) -> None:
        payload = {
            "dogId": dog_ids["Rocky"],
            "type": "behavioral",
            "trainer": "Nina Patel",
            "startDate": "2025-02-01",
            "status": "in-progress",
            "skills": ["loose leash", "calm greeting"],
            "progress": "fair",
        }
        created = client.post("/training/records", json=payload)
        assert created.status_code == 201

        progress = client.get(f"/training/dogs/{dog_ids['Rocky']}/progress").json()
        assert progress["totalTrainings"] == 1
        assert progress["inProgressTrainings"] == 1
        assert progress["overallProgress"] == "fair"
        assert progress["skills"] == ["loose leash", "calm greeting"]

        updated = client.put(
            f"/training/records/{created.json()['id']}",
            json={"status": "completed", "progress": "good", "endDate": "2025-04-01"},
        )
        assert updated.json()["status"] == "completed"
        assert client.get(f"/training/dogs/{dog_ids['Rocky']}/progress").json()["overallProgress"] == "good"

    def test_progress_for_untrained_dog(self, client: TestClient, dog_ids: dict) -> None:
        body = client.get(f"/training/dogs/{dog_ids['Bella']}/progress").json()
        assert body["totalTrainings"] == 0
        assert body["overallProgress"] == "fair"
        assert body["skills"] == []

    def test_trainers(self, client: TestClient) -> None:
        trainers = client.get("/training/trainers").json()["trainers"]
        assert [trainer["name"] for trainer in trainers] == ["Mark Thompson", "Sarah Johnson", "Robert Miller"]
        assert all(trainer["averageProgress"] == "excellent" for trainer in trainers)

    def test_unknown_record(self, client: TestClient) -> None:
        assert client.get(f"/training/records/{uuid.uuid4()}").status_code == 404
