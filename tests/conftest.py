import os
import sys
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

# Ensure the repository root is on sys.path so that top-level imports like
# `from api...` resolve when running tests from anywhere.
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from api.dependencies import get_now, get_user_repository  # noqa: E402
from api.main import app  # noqa: E402
from models.repository import InMemoryUserRepository  # noqa: E402

FIXED_NOW = datetime(2024, 3, 15, 12, 30, 0)


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_user_repository] = lambda: repository
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    def _make(username="fcc_test"):
        r = client.post("/api/users", data={"username": username})
        assert r.status_code == 200
        return r.json()

    return _make
