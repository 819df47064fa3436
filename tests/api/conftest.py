import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.presentation.dependencies import get_access_code_store, get_uow
from tests.fakes import FakeAccessCodeStore, FakeUoW


@pytest.fixture()
def app_and_deps():
    app = create_app()
    uow = FakeUoW()
    uow.db_users.add("alice", "pw1", "dev1")
    store = FakeAccessCodeStore()

    app.dependency_overrides[get_uow] = lambda: uow
    app.dependency_overrides[get_access_code_store] = lambda: store

    try:
        yield app, uow, store
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)
