"""
Shared test fixtures.

Every test gets its own store file under pytest's tmp_path,
so tests never touch a real store and never see each other's
data.
"""

import pytest
from fastapi.testclient import TestClient

from bank_ledger.dependencies import get_account_service
from bank_ledger.main import app
from bank_ledger.services.account_repository import AccountRepository
from bank_ledger.services.account_service import AccountService


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "store.json"


@pytest.fixture
def repository(store_path):
    return AccountRepository(store_path)


@pytest.fixture
def service(repository):
    return AccountService(repository)


@pytest.fixture
def client(service):
    """
    Provide a test client backed by the per-test store.

    We override the service dependency so the FastAPI app uses
    our temporary repository instead of the configured one.
    """
    app.dependency_overrides[get_account_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
