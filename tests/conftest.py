# File: tests/conftest.py

import os

# Settings are read at import time, so configure the environment first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_MIGRATE"] = "false"
os.environ["CIPHER_KEY"] = "MDEyMzQ1Njc4OWFiY2RlZjAxMjM0NTY3ODlhYmNkZWY="
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["AUTH_LOGIN"] = "manager"
os.environ["AUTH_PASSWORD"] = "manager-pass"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from user_manager.api.deps import get_db
from user_manager.core.crypto import PasswordCipher, get_cipher
from user_manager.db.migrations import run_migrations
from user_manager.db.session import build_engine
from user_manager.main import app

TEST_CIPHER_KEY = os.environ["CIPHER_KEY"]


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    run_migrations(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def cipher() -> PasswordCipher:
    return PasswordCipher.from_b64(TEST_CIPHER_KEY)


@pytest.fixture()
def client(session_factory, cipher):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cipher] = lambda: cipher
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers(client):
    resp = client.post("/api/v1/auth/login", json={"login": "manager", "password": "manager-pass"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['data']['token']}"}
