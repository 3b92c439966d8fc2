"""Tests for registration, login and the current-user endpoint."""

from conftest import register_and_login


def test_welcome(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["can_register"] is True


def test_register_login_and_me(client):
    headers = register_and_login(client, "Jan@Example.com", name="Jan")
    r = client.get("/users/me", headers=headers)
    assert r.status_code == 200
    assert r.json()["email"] == "jan@example.com"
    assert r.json()["name"] == "Jan"


def test_duplicate_email_is_rejected(client):
    register_and_login(client, "dubbel@example.com")
    r = client.post("/register", json={"name": "X", "email": "dubbel@example.com", "password": "nog-een-wachtwoord"})
    assert r.status_code == 400


def test_short_password_is_rejected(client):
    r = client.post("/register", json={"name": "X", "email": "kort@example.com", "password": "kort"})
    assert r.status_code == 422


def test_wrong_password(client):
    register_and_login(client, "fout@example.com")
    r = client.post("/login/access-token", data={"username": "fout@example.com", "password": "verkeerd"})
    assert r.status_code == 401


def test_refresh_token(client):
    register_and_login(client, "ververs@example.com")
    r = client.post("/login/access-token", data={"username": "ververs@example.com", "password": "geheim-wachtwoord"})
    tokens = r.json()

    r = client.post("/login/refresh-token", json=tokens)
    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"

    r = client.post("/login/refresh-token", json={**tokens, "refresh_token": tokens["access_token"]})
    assert r.status_code == 401


def test_garbage_token(client):
    r = client.get("/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
