"""Shared test fixtures: a throwaway data directory, store and HTTP client."""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from schemas.items import ItemKind, SyncItem
from store import SyncStore


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    return SyncStore.open(data_dir)


@pytest.fixture
def settings(data_dir):
    s = Settings()
    s.DATA_DIR = data_dir
    s.ALLOWED_ORIGINS = ["*"]
    return s


@pytest.fixture
def client(settings, store):
    with TestClient(create_app(settings, store)) as c:
        yield c


@pytest.fixture
def text_item():
    return SyncItem(kind=ItemKind.TEXT, content="hello", timestamp="2026-01-01T00:00:00+00:00")
