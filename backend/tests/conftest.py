# File: tests/conftest.py

import os
import tempfile

import pytest

# Point the app at a throwaway SQLite file before anything imports config
_tmpdir = tempfile.mkdtemp(prefix="marketplace-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret")


@pytest.fixture(autouse=True)
def clean_db():
    from database import Base, engine, init_db

    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    def _register(name="Alice", email="alice@acme.io", password="pw1", role="employer"):
        return client.post("/api/users/register", json={
            "name": name, "email": email, "password": password, "role": role,
        })
    return _register


class BrokenSession:
    """Session whose every database call fails, as with a lost connection."""

    def query(self, *entities):
        raise RuntimeError("database is down")

    def add(self, obj):
        raise RuntimeError("database is down")

    def rollback(self):
        pass


@pytest.fixture
def broken_db():
    from database import get_db
    from main import app

    def _broken():
        yield BrokenSession()

    app.dependency_overrides[get_db] = _broken
    yield
    app.dependency_overrides.pop(get_db, None)
