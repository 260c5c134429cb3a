import os
import tempfile

import pytest

# Point the app at a throwaway SQLite file before anything imports config.
DB_DIR = tempfile.mkdtemp(prefix="clinic-tests-")
DB_PATH = os.path.join(DB_DIR, "test.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["SEED_SAMPLE_DATA"] = "false"

from fastapi.testclient import TestClient  # noqa: E402

from main import app  # noqa: E402


@pytest.fixture
def client():
    # Fresh database per test; the lifespan recreates the tables.
    if os.path.exists(DB_PATH):
        os.remove(DB_PATH)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def patient(client):
    response = client.post("/patients/", json={
        "name": "Asha Verma",
        "phone": "9876543210",
        "gender": "female",
        "date_of_birth": "1990-04-12",
        "city": "Pune",
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def doctor(client):
    response = client.post("/doctors/", json={
        "name": "Dr. Sarah Johnson",
        "email": "sarah.johnson@clinic.com",
        "phone": "+1-555-0101",
        "specialization": "Cardiology",
        "department": "Internal Medicine",
        "experience": 8,
    })
    assert response.status_code == 201
    return response.json()
