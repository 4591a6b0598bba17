def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "API is running"


def test_health(client):
    assert client.get("/api/health").json()["status"] == "healthy"


def test_responses_are_not_cacheable(client):
    assert "no-store" in client.get("/api/health").headers["Cache-Control"]


def test_openapi_document(client):
    response = client.get("/api-docs/openapi.json")
    assert response.status_code == 200
    doc = response.json()

    assert doc["info"]["title"] == "Patient Vitals API"
    assert doc["components"]["securitySchemes"]["bearerAuth"]["scheme"] == "bearer"
    paths = doc["paths"]
    for path in (
        "/api/auth/register",
        "/api/auth/login",
        "/api/patients",
        "/api/patients/highBP",
        "/api/patients/lowBP",
        "/api/patients/hasFever",
        "/api/patients/{id}",
    ):
        assert path in paths
    assert set(paths["/api/patients/{id}"]) == {"get", "put", "delete"}
    assert "bearerAuth" in str(paths["/api/patients"]["get"]["security"])


def test_swagger_ui_served(client):
    response = client.get("/api-docs")
    assert response.status_code == 200
    assert "swagger" in response.text.lower()
