from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fundraiser_api.app.core.config import Settings
from fundraiser_api.app.core.storage import DataStore
from fundraiser_api.app.main import create_app

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "data.json"


@pytest.fixture
def settings(data_file: Path) -> Settings:
    return Settings(data_file=str(data_file), admin_token=ADMIN_TOKEN, log_level="WARNING")


@pytest.fixture
def store(data_file: Path) -> DataStore:
    data_file.parent.mkdir(parents=True, exist_ok=True)
    return DataStore(data_file)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Entering the context runs the startup hook, which creates the data file.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
