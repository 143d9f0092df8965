"""
Tests for registration, login and the profile endpoints.
These go through the real bearer token check, no dependency override.
"""

from app.utils.auth_helper import create_access_token


def _register(client, email="asha@example.com", password="secret123", name="Asha"):
    return client.post("/auth/register", json={"name": name, "email": email, "password": password})


def test_register_returns_token(client):
    response = _register(client)

    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "asha@example.com"
    assert data["token"]
    assert "passwordHash" not in data


def test_register_duplicate_email(client):
    _register(client)
    response = _register(client, email="ASHA@example.com")

    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


def test_login(client):
    _register(client)

    response = client.post("/auth/login", json={"email": "asha@example.com", "password": "secret123"})
    assert response.status_code == 200
    assert response.json()["name"] == "Asha"

    response = client.post("/auth/login", json={"email": "asha@example.com", "password": "wrong-pass"})
    assert response.status_code == 401


def test_profile_with_token(client):
    token = _register(client).json()["token"]

    response = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Asha"
    assert "passwordHash" not in data
    assert "password_hash" not in data


def test_profile_rejects_bad_token(client):
    response = client.get("/auth/profile", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_token_for_deleted_user(client):
    token = create_access_token(999)
    response = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404


def test_update_profile(client):
    _register(client, email="taken@example.com", name="Other")
    token = _register(client).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    response = client.put("/auth/profile", json={"email": "taken@example.com"}, headers=headers)
    assert response.status_code == 400

    response = client.put("/auth/profile", json={"name": "Asha M."}, headers=headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Asha M."
