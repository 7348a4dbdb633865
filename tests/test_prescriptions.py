import pytest
from httpx import AsyncClient


@pytest.mark.prescriptions
@pytest.mark.integration
class TestPrescriptionManagement:
    """Test prescription CRUD endpoints."""

    async def test_list_prescriptions(self, client: AsyncClient) -> None:
        response = await client.get("/prescriptions")

        assert response.status_code == 200
        assert len(response.json()) == 20

    async def test_create_and_get_prescription(
        self,
        client: AsyncClient,
        sample_prescription_data: dict
    ) -> None:
        response = await client.post("/prescriptions", json=sample_prescription_data)

        assert response.status_code == 201
        created = response.json()
        assert created == {"id": 21, **sample_prescription_data}
        assert (await client.get("/prescriptions/21")).json() == created

    async def test_create_prescription_missing_medication(
        self,
        client: AsyncClient,
        sample_prescription_data: dict
    ) -> None:
        del sample_prescription_data["medication"]

        response = await client.post("/prescriptions", json=sample_prescription_data)

        assert response.status_code == 400
        error = response.json()["errors"][0]
        assert error["path"] == "medication"
        assert "value" not in error

    async def test_patch_prescription_dosage(self, client: AsyncClient) -> None:
        response = await client.patch("/prescriptions/3", json={"dosage": "1000mg"})

        assert response.status_code == 200
        data = response.json()
        assert data["dosage"] == "1000mg"
        assert data["medication"] == "Metformin"

    async def test_replace_missing_prescription(
        self,
        client: AsyncClient,
        sample_prescription_data: dict
    ) -> None:
        response = await client.put("/prescriptions/99", json=sample_prescription_data)

        assert response.status_code == 404
        assert response.json() == {"error": "Prescription not found"}

    async def test_delete_prescription(self, client: AsyncClient) -> None:
        response = await client.delete("/prescriptions/1")

        assert response.status_code == 200
        assert response.json()["medication"] == "Aspirin"
        assert len((await client.get("/prescriptions")).json()) == 19

    async def test_delete_missing_prescription_keeps_collection(self, client: AsyncClient) -> None:
        response = await client.delete("/prescriptions/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Prescription not found"}
        assert len((await client.get("/prescriptions")).json()) == 20

    async def test_unknown_doctor_rejected_when_enforced(
        self,
        client: AsyncClient,
        enforce_references: None,
        sample_prescription_data: dict
    ) -> None:
        sample_prescription_data["doctorId"] = 99

        response = await client.post("/prescriptions", json=sample_prescription_data)

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Doctor 99 does not exist"
