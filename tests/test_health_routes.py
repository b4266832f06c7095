"""
Tests for the ping and health endpoints.
"""

from fastapi.testclient import TestClient

from internal.api.app import create_app


def test_ping_returns_pong(client):
    response = client.get("/ping")

    assert response.status_code == 200
    assert response.text == "pong"


def test_health_reports_connected_store(client, settings):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "store": "connected",
    }


def test_health_reports_unreachable_store(settings, failing_store):
    with TestClient(create_app(settings=settings, store=failing_store)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["store"] == "disconnected"


def test_app_builds_in_memory_store_when_configured(settings):
    with TestClient(create_app(settings=settings)) as client:
        assert client.get("/ping").text == "pong"
        assert client.post("/task", json={"name": "A"}).status_code == 201
        assert len(client.get("/task").json()["tasks"]) == 1
