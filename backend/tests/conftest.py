"""
Shared fixtures: each test gets a fresh app on its own SQLite file database.
Run with: pytest -v
"""

import pytest
from fastapi.testclient import TestClient

from vitals_api.config import Settings, get_settings
from vitals_api.main import create_app

TEST_PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        jwt_secret="test-secret",
        jwt_expires_in="1h",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "nurse", "email": "nurse@example.com", "password": TEST_PASSWORD},
    )
    assert response.status_code == 201
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_patient(client, auth_headers):
    """Create a patient through the API and return the response body."""
    def _make(**overrides):
        body = {
            "name": "A",
            "age": 30,
            "systolicbloodPressure": 120,
            "diastolicbloodPressure": 80,
            "pulseRate": 70,
            "temperature": 98.6,
        }
        body.update(overrides)
        response = client.post("/api/patients", json=body, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
