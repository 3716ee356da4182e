from datetime import timedelta

from app.core.security import create_access_token


def test_register_and_login(client):
    res = client.post(
        "/auth/register",
        json={"email": "carol@happythoughts.dev", "username": "carol", "password": "Sunshine123"},
    )
    assert res.status_code == 201
    user = res.json()["response"]
    assert user["email"] == "carol@happythoughts.dev"
    assert user["username"] == "carol"
    assert "passwordHash" not in user
    assert "password_hash" not in user

    res = client.post(
        "/auth/login", json={"email": "carol@happythoughts.dev", "password": "Sunshine123"}
    )
    assert res.status_code == 200
    token = res.json()["response"]
    assert token["tokenType"] == "bearer"
    assert token["accessToken"]


def test_register_duplicate_email(client, user):
    res = client.post(
        "/auth/register",
        json={"email": "alice@happythoughts.dev", "username": "alice2", "password": "Sunshine123"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Email already registered"


def test_register_weak_password(client):
    res = client.post(
        "/auth/register",
        json={"email": "dave@happythoughts.dev", "username": "dave", "password": "password"},
    )
    assert res.status_code == 400


def test_login_wrong_password(client, user):
    res = client.post(
        "/auth/login", json={"email": "alice@happythoughts.dev", "password": "Wrong1234"}
    )
    assert res.status_code == 401
    assert res.json()["success"] is False


def test_me(client, user):
    user_id, headers = user
    res = client.get("/auth/me", headers=headers)
    assert res.status_code == 200
    assert res.json()["response"]["uuid"] == user_id


def test_expired_token_is_rejected(client, user):
    user_id, _ = user
    token = create_access_token({"sub": user_id}, expires_delta=timedelta(minutes=-1))
    res = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token({"sub": "7c9e6679-7425-40de-944b-e07fc1f90ae7"})
    res = client.post(
        "/thoughts", json={"message": "Ghost post"}, headers={"Authorization": f"Bearer {token}"}
    )
    assert res.status_code == 401


def test_auth_router_uses_shared_envelope(client, user):
    from app.api.http import auth, thoughts
    from app.core.schemas import ApiResponse

    assert auth.ApiResponse is ApiResponse
    assert thoughts.ApiResponse is ApiResponse

    _, headers = user
    body = client.get("/auth/me", headers=headers).json()
    assert set(body) == {"success", "message", "response"}
