import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from healthcare_api.main import app
from healthcare_api.core.config import settings
from healthcare_api.core.security import create_access_token
from healthcare_api.infrastructure.store import DataStore, store


@pytest.fixture(autouse=True)
def reset_store() -> DataStore:
    """Reseed the shared store before each test."""
    store.reset(seed=True)
    yield store
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def empty_store(reset_store: DataStore) -> DataStore:
    """A store with every collection emptied."""
    reset_store.clear()
    return reset_store


@pytest.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(scope="function")
async def lenient_client() -> AsyncGenerator[AsyncClient, None]:
    """Test client that turns unhandled app errors into 500 responses."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(scope="function")
def auth_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Turn on bearer-token authentication for the duration of a test."""
    monkeypatch.setattr(settings, "USE_AUTH", True)


@pytest.fixture(scope="function")
def enforce_references(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "ENFORCE_REFERENCES", True)


@pytest.fixture(scope="function")
def test_token() -> str:
    """Create a test JWT token for authentication."""
    return create_access_token("dr.wilson", {"name": "Dr. Sarah Wilson", "role": "Doctor"})


@pytest.fixture(scope="function")
async def authenticated_client(
    client: AsyncClient,
    test_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create an authenticated test client."""
    client.headers.update({"Authorization": f"Bearer {test_token}"})
    yield client


@pytest.fixture(scope="function")
def sample_patient_data() -> dict:
    """Sample patient data for testing."""
    return {
        "name": "Olivia Harris",
        "age": 47,
        "gender": "female",
        "medicalHistory": "Type 1 diabetes",
        "contactInfo": "olivia.harris@email.com"
    }


@pytest.fixture(scope="function")
def sample_doctor_data() -> dict:
    """Sample doctor data for testing."""
    return {
        "name": "Dr. Nina Patel",
        "specialty": "Oncology",
        "contactInfo": "nina.patel@hospital.com"
    }


@pytest.fixture(scope="function")
def sample_appointment_data() -> dict:
    """Sample appointment data for testing."""
    return {
        "patientId": 2,
        "doctorId": 5,
        "date": "2025-10-12",
        "time": "09:30",
        "reason": "Vaccination",
        "status": "scheduled"
    }


@pytest.fixture(scope="function")
def sample_prescription_data() -> dict:
    """Sample prescription data for testing."""
    return {
        "patientId": 4,
        "doctorId": 8,
        "medication": "Cetirizine",
        "dosage": "10mg",
        "instructions": "Once daily at night",
        "dateIssued": "2025-10-01"
    }


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    for marker, description in [
        ("unit", "mark test as a unit test"),
        ("integration", "mark test as an integration test"),
        ("auth", "mark test as authentication related"),
        ("patients", "mark test as patient resource related"),
        ("doctors", "mark test as doctor resource related"),
        ("appointments", "mark test as appointment resource related"),
        ("prescriptions", "mark test as prescription resource related"),
        ("summary", "mark test as summary statistics related"),
        ("store", "mark test as in-memory store related"),
    ]:
        config.addinivalue_line("markers", f"{marker}: {description}")
