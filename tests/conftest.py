import pytest

from tests.fakes import FakeAccessCodeStore, FakeClock, FakeErroredAccessCodeStore, FakeUoW


@pytest.fixture()
def uow():
    return FakeUoW()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def code_store(clock):
    return FakeAccessCodeStore(clock)


@pytest.fixture()
def errored_code_store():
    return FakeErroredAccessCodeStore()


@pytest.fixture()
def seeded_uow(uow):
    """A user 'alice' with password 'pw1' bound to device 'dev1'."""
    uow.db_users.add("alice", "pw1", "dev1")
    return uow
