import pytest
from httpx import AsyncClient

from healthcare_api.infrastructure.store import DataStore


@pytest.mark.patients
@pytest.mark.integration
class TestPatientManagement:
    """Test patient CRUD endpoints."""

    async def test_list_patients_returns_seed_data(self, client: AsyncClient) -> None:
        response = await client.get("/patients")

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert len(data) == 15
        assert [p["id"] for p in data] == list(range(1, 16))
        assert data[0] == {
            "id": 1,
            "name": "John Doe",
            "age": 30,
            "gender": "male",
            "medicalHistory": "None",
            "contactInfo": "john.doe@email.com"
        }

    async def test_get_patient_success(self, client: AsyncClient) -> None:
        response = await client.get("/patients/3")

        assert response.status_code == 200
        assert response.json()["name"] == "Michael Johnson"

    async def test_get_patient_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/patients/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Patient not found"}

    async def test_get_patient_non_integer_id(self, client: AsyncClient) -> None:
        response = await client.get("/patients/abc")

        assert response.status_code == 404
        assert response.json() == {"error": "Patient not found"}

    async def test_patch_patient_non_integer_id(self, client: AsyncClient) -> None:
        response = await client.patch("/patients/1.5", json={"age": 40})

        assert response.status_code == 404
        assert response.json() == {"error": "Patient not found"}

    async def test_create_patient_success(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        """Created record equals the payload plus the assigned id."""
        response = await client.post("/patients", json=sample_patient_data)

        assert response.status_code == 201
        created = response.json()
        assert created == {"id": 16, **sample_patient_data}

        get_response = await client.get(f"/patients/{created['id']}")
        assert get_response.status_code == 200
        assert get_response.json() == created

    async def test_create_patient_negative_age(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        sample_patient_data["age"] = -1

        response = await client.post("/patients", json=sample_patient_data)

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 1
        assert errors[0]["path"] == "age"
        assert errors[0]["value"] == -1
        assert errors[0]["location"] == "body"

        listing = await client.get("/patients")
        assert len(listing.json()) == 15

    async def test_create_patient_boolean_age(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        sample_patient_data["age"] = True

        response = await client.post("/patients", json=sample_patient_data)

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == "age"
        assert len((await client.get("/patients")).json()) == 15

    async def test_create_patient_numeric_string_age(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        sample_patient_data["age"] = "30"

        response = await client.post("/patients", json=sample_patient_data)

        assert response.status_code == 201
        assert response.json()["age"] == 30

    async def test_create_patient_missing_fields(self, client: AsyncClient) -> None:
        response = await client.post("/patients", json={"name": "Only Name"})

        assert response.status_code == 400
        paths = {error["path"] for error in response.json()["errors"]}
        assert paths == {"age", "gender", "medicalHistory", "contactInfo"}

    async def test_create_patient_empty_string(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        sample_patient_data["name"] = ""

        response = await client.post("/patients", json=sample_patient_data)

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == "name"

    async def test_create_patient_ignores_unknown_fields(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        response = await client.post("/patients", json={**sample_patient_data, "bloodType": "O+"})

        assert response.status_code == 201
        assert "bloodType" not in response.json()

    async def test_create_patient_reuses_highest_deleted_id(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        await client.delete("/patients/15")

        response = await client.post("/patients", json=sample_patient_data)

        assert response.json()["id"] == 15

    async def test_replace_patient_success(
        self,
        client: AsyncClient,
        sample_patient_data: dict
    ) -> None:
        response = await client.put("/patients/2", json=sample_patient_data)

        assert response.status_code == 200
        assert response.json() == {"id": 2, **sample_patient_data}
        assert (await client.get("/patients/2")).json()["name"] == sample_patient_data["name"]

    async def test_replace_patient_requires_full_payload(self, client: AsyncClient) -> None:
        response = await client.put("/patients/2", json={"name": "Partial"})

        assert response.status_code == 400
        assert (await client.get("/patients/2")).json()["name"] == "Jane Smith"

    async def test_replace_patient_not_found_before_validation(self, client: AsyncClient) -> None:
        response = await client.put("/patients/999", json={"age": -3})

        assert response.status_code == 404
        assert response.json() == {"error": "Patient not found"}

    async def test_patch_patient_merges_fields(self, client: AsyncClient) -> None:
        response = await client.patch("/patients/4", json={"contactInfo": "emily.d@newmail.com"})

        assert response.status_code == 200
        assert response.json() == {
            "id": 4,
            "name": "Emily Davis",
            "age": 32,
            "gender": "female",
            "medicalHistory": "Allergies (peanuts)",
            "contactInfo": "emily.d@newmail.com"
        }

    async def test_patch_patient_validates_provided_fields(self, client: AsyncClient) -> None:
        response = await client.patch("/patients/4", json={"age": -10})

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == "age"
        assert (await client.get("/patients/4")).json()["age"] == 32

    async def test_patch_patient_rejects_boolean_age(self, client: AsyncClient) -> None:
        response = await client.patch("/patients/1", json={"age": False})

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == "age"
        assert (await client.get("/patients/1")).json()["age"] == 30

    async def test_patch_patient_rejects_null(self, client: AsyncClient) -> None:
        response = await client.patch("/patients/4", json={"name": None})

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == "name"

    async def test_patch_patient_not_found(self, client: AsyncClient) -> None:
        response = await client.patch("/patients/999", json={"age": 40})

        assert response.status_code == 404

    async def test_delete_patient_success(self, client: AsyncClient) -> None:
        response = await client.delete("/patients/5")

        assert response.status_code == 200
        assert response.json()["name"] == "Robert Brown"

        get_response = await client.get("/patients/5")
        assert get_response.status_code == 404

    async def test_delete_patient_not_found_keeps_collection(
        self,
        client: AsyncClient,
        reset_store: DataStore
    ) -> None:
        response = await client.delete("/patients/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Patient not found"}
        assert reset_store.patients.count() == 15

    async def test_delete_patient_does_not_cascade(
        self,
        client: AsyncClient,
        reset_store: DataStore
    ) -> None:
        await client.delete("/patients/1")

        remaining = [a for a in reset_store.appointments.get_all() if a.patient_id == 1]
        assert len(remaining) == 2
