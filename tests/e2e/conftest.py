"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app

ADMIN_PASSWORD = "e2e-password"


@pytest.fixture
def content_root(tmp_path, monkeypatch):
    """Scratch content directory and test credentials for the app."""
    monkeypatch.setenv("CONTENT__ROOT", str(tmp_path))
    monkeypatch.setenv("AUTH__ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setenv("AUTH__JWT_SECRET", "e2e-secret")
    monkeypatch.setenv("SITE__URL", "https://blog.example.com")
    return tmp_path


@pytest.fixture
def client(content_root):
    """Test client for a fresh app; startup creates the content directories."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client) -> dict[str, str]:
    """Authorization header carrying a freshly issued admin token."""
    response = client.post("/auth", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
