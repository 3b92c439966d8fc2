"""Pytest configuration and fixtures."""

import os

# Configuration is read at import time, so this has to run before the app is imported.
os.environ["DB_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_ON_STARTUP"] = "0"
os.environ["REGISTRATION_ENABLED"] = "1"
os.environ["ANTHROPIC_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from main import app


def register_and_login(client: TestClient, email: str, name: str = "Tester") -> dict:
    """Register a user and return bearer headers for it."""
    password = "geheim-wachtwoord"
    r = client.post("/register", json={"name": name, "email": email, "password": password})
    assert r.status_code == 201, r.text
    r = client.post("/login/access-token", data={"username": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def create_project(client: TestClient, headers: dict, **fields) -> dict:
    payload = {"name": "Project", "status": "concept", "priority": "normaal"}
    payload.update(fields)
    r = client.post("/projects", json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["project"]


@pytest.fixture
def client():
    """App client backed by a fresh in-memory database."""
    app.state.chat_backend = None
    with TestClient(app) as c:
        yield c
    app.state.chat_backend = None


@pytest.fixture
def auth_headers(client):
    return register_and_login(client, "eigenaar@example.com", name="Eigenaar")


@pytest.fixture
def other_headers(client):
    return register_and_login(client, "ander@example.com", name="Ander")
