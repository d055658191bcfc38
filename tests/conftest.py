from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from csv_explorer.data.store import TableStore
from csv_explorer.main import create_app

SAMPLE_CSV = (
    "name,category,amount,score\n"
    "Alpha,A,12,88\n"
    "Beta,B,,72\n"
    "Gamma,A,7.5,abc\n"
    "Delta,,30,91\n"
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def store(data_file) -> TableStore:
    return TableStore(data_file=data_file, data_url=None)


@pytest.fixture
def loaded_store(store) -> TableStore:
    store.load_text(SAMPLE_CSV)
    return store


@pytest.fixture
def client(loaded_store) -> TestClient:
    return TestClient(create_app(loaded_store, load_on_startup=False))


@pytest.fixture
def empty_client(store) -> TestClient:
    return TestClient(create_app(store, load_on_startup=False))
