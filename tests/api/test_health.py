import pytest
from fastapi.testclient import TestClient

from bible_portal.api.deps import get_settings_dependency
from bible_portal.configs import Settings
from bible_portal.configs.ai_gateway import AIGatewaySettings
from bible_portal.main import create_app


def _settings(api_key):
    return Settings(ai_gateway=AIGatewaySettings(api_key=api_key))


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_should_echo_correlation_id(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_health_check_gateway_configured(app, client):
    app.dependency_overrides[get_settings_dependency] = lambda: _settings("key")
    response = client.get("/api/v1/health/gateway")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "message": "AI gateway model google/gemini-2.5-flash",
    }


def test_health_check_gateway_missing_key(app, client):
    app.dependency_overrides[get_settings_dependency] = lambda: _settings(None)
    response = client.get("/api/v1/health/gateway")
    assert response.json()["status"] == "degraded"
