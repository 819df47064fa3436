from fastapi import Request
from psycopg_pool import AsyncConnectionPool
from redis.asyncio import Redis

from app.domain.ports.access_code_store import AccessCodeStorePort
from app.domain.ports.unit_of_work import UnitOfWorkPort
from app.infrastructure.db.uow import PgUnitOfWork
from app.infrastructure.redis_cache.access_codes import RedisAccessCodeStore
from app.settings import get_settings

# Store clients are opened in app.main lifespan() and parked on app.state;
# nothing below reaches for a module-level global.


def get_db_pool(request: Request) -> AsyncConnectionPool:
    return request.app.state.db_pool


def get_redis_client(request: Request) -> Redis:
    return request.app.state.redis


def get_uow(request: Request) -> UnitOfWorkPort:
    return PgUnitOfWork(get_db_pool(request))


def get_access_code_store(request: Request) -> AccessCodeStorePort:
    return RedisAccessCodeStore(
        get_redis_client(request),
        key_prefix=get_settings().access_code_key_prefix,
    )


def get_access_code_ttl_seconds() -> int:
    return get_settings().access_code_ttl_seconds
