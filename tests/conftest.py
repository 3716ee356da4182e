import os

import pytest

# Настройки должны быть заданы до импорта приложения
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test-happy-thoughts.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ.pop("SEED_DATA_PATH", None)

from fastapi.testclient import TestClient

from app.core.db import Database
from app.main import create_app

PASSWORD = "Sunshine123"


@pytest.fixture()
def database(tmp_path):
    """Отдельный файл SQLite на каждый тест"""
    return Database(f"sqlite+aiosqlite:///{tmp_path / 'thoughts.db'}", echo=False)


@pytest.fixture()
def app(database):
    return create_app(database)


@pytest.fixture()
def client(app):
    # Контекстный менеджер запускает lifespan (подключение и создание таблиц)
    with TestClient(app) as test_client:
        yield test_client


def register_and_login(client, username):
    email = f"{username}@happythoughts.dev"
    res = client.post(
        "/auth/register",
        json={"email": email, "username": username, "password": PASSWORD},
    )
    assert res.status_code == 201, res.text
    user_id = res.json()["response"]["uuid"]

    res = client.post("/auth/login", json={"email": email, "password": PASSWORD})
    assert res.status_code == 200, res.text
    token = res.json()["response"]["accessToken"]
    return user_id, {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def user(client):
    """Зарегистрированный пользователь: (id, заголовки авторизации)"""
    return register_and_login(client, "alice")


@pytest.fixture()
def auth_headers(user):
    return user[1]


@pytest.fixture()
def other_user(client):
    return register_and_login(client, "bob")


@pytest.fixture()
def create_thought(client, auth_headers):
    def _create(message="Hi there", category=None):
        payload = {"message": message}
        if category is not None:
            payload["category"] = category
        res = client.post("/thoughts", json=payload, headers=auth_headers)
        assert res.status_code == 200, res.text
        return res.json()["response"]

    return _create
