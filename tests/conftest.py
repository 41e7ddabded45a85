import json
import os

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from main import app


@pytest.fixture
def settings(tmp_path):
    return Settings(DATA_DIR=str(tmp_path / "data"))


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def read_json():
    def _read(path):
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    return _read


@pytest.fixture
def write_json():
    def _write(path, data):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    return _write
