"""Tests for the health endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Liveness does not touch the storage backend."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "productos"}


def test_readiness_with_reachable_storage(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["storage"]["status"] == "healthy"


def test_readiness_with_unreachable_storage(client: TestClient, db_service):
    with patch.object(db_service, "health_check", return_value=False):
        response = client.get("/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["checks"]["storage"]["status"] == "unhealthy"


def test_readiness_when_check_raises(client: TestClient, db_service):
    with patch.object(db_service, "health_check", side_effect=RuntimeError("boom")):
        response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["checks"]["storage"]["error"] == "boom"
