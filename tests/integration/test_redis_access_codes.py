import asyncio

import pytest

from app.application.access_codes import issue_access_code, verify_access_code
from app.domain.errors import InvalidAccessCode
from app.infrastructure.redis_cache.access_codes import RedisAccessCodeStore

pytestmark = pytest.mark.integration


@pytest.fixture()
def store(redis_client, key_prefix):
    return RedisAccessCodeStore(redis_client, key_prefix=key_prefix)


@pytest.mark.asyncio
async def test_issue_consume_then_missing(store, redis_client, key_prefix):
    await store.issue("alice", "123456", 300)

    assert await redis_client.get(f"{key_prefix}alice:123456") == "valid"
    ttl = await redis_client.ttl(f"{key_prefix}alice:123456")
    assert 0 < ttl <= 300

    assert await store.consume("alice", "123456") is True
    assert await store.consume("alice", "123456") is False
    assert await redis_client.exists(f"{key_prefix}alice:123456") == 0


@pytest.mark.asyncio
async def test_never_issued_is_false(store):
    assert await store.consume("alice", "000000") is False


@pytest.mark.asyncio
async def test_reissue_resets_ttl(store, redis_client, key_prefix):
    key = f"{key_prefix}alice:123456"
    await store.issue("alice", "123456", 300)
    await redis_client.expire(key, 5)

    await store.issue("alice", "123456", 300)

    assert await redis_client.ttl(key) > 5
    assert len(await redis_client.keys(f"{key_prefix}*")) == 1


@pytest.mark.asyncio
async def test_ttl_expiry_causes_failure(store):
    await store.issue("alice", "0001", 1)
    await asyncio.sleep(1.2)

    with pytest.raises(InvalidAccessCode):
        await verify_access_code(store, "alice", "0001")


@pytest.mark.asyncio
async def test_atomic_single_use_under_race(store, redis_client, key_prefix):
    await issue_access_code(store, "alice", "4242", ttl_seconds=60)

    results = await asyncio.gather(
        *(store.consume("alice", "4242") for _ in range(10))
    )

    assert results.count(True) == 1
    assert await redis_client.exists(f"{key_prefix}alice:4242") == 0
