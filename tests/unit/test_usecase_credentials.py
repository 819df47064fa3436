import pytest

from app.application.credentials import check_username, verify_credentials
from app.domain.errors import (
    InvalidCredentials,
    StoreUnavailable,
    UserNotFound,
    ValidationError,
)
from tests.fakes import FakeUnavailableUoW


@pytest.mark.asyncio
async def test_matching_password_and_device(seeded_uow):
    await verify_credentials(
        uow=seeded_uow, username="alice", password="pw1", device_id="dev1"
    )

    assert seeded_uow.db_users.lookups == ["alice"]
    assert seeded_uow.committed is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "password, device_id",
    [("pw1", "dev2"), ("wrong", "dev1"), ("wrong", "dev2"), ("PW1", "dev1")],
)
async def test_any_mismatch_is_the_same_error(seeded_uow, password, device_id):
    with pytest.raises(InvalidCredentials) as exc_info:
        await verify_credentials(
            uow=seeded_uow, username="alice", password=password, device_id=device_id
        )

    assert str(exc_info.value) == ""


@pytest.mark.asyncio
async def test_unknown_user(seeded_uow):
    with pytest.raises(UserNotFound):
        await verify_credentials(
            uow=seeded_uow, username="mallory", password="pw1", device_id="dev1"
        )


@pytest.mark.asyncio
async def test_missing_username_does_not_query(uow):
    with pytest.raises(ValidationError):
        await verify_credentials(
            uow=uow, username=None, password="pw1", device_id="dev1"
        )

    assert uow.db_users.lookups == []


@pytest.mark.asyncio
async def test_missing_device_id_is_rejected(seeded_uow):
    with pytest.raises(ValidationError):
        await verify_credentials(
            uow=seeded_uow, username="alice", password="pw1", device_id=None
        )


@pytest.mark.asyncio
async def test_store_down_propagates():
    with pytest.raises(StoreUnavailable):
        await verify_credentials(
            uow=FakeUnavailableUoW(), username="alice", password="pw1", device_id="dev1"
        )


@pytest.mark.asyncio
async def test_check_username(seeded_uow):
    assert await check_username(seeded_uow, "alice") is True
    assert await check_username(seeded_uow, "bob") is False


@pytest.mark.asyncio
async def test_check_username_requires_a_value(uow):
    with pytest.raises(ValidationError):
        await check_username(uow, "")
