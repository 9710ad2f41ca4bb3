import pytest
from fastapi.testclient import TestClient

from quickwash_api.app.core.config import settings
from quickwash_api.app.core.db import init_db
from quickwash_api.app.main import app
from quickwash_api.app.services.catalog_service import CatalogService


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file with the default catalogue."""
    path = tmp_path / "quickwash-test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    CatalogService.seed_default_services()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service_ids(client):
    return {s["name"]: s["id"] for s in client.get("/api/services").json()}
