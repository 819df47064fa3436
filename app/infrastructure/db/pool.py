from __future__ import annotations

import logging
from typing import Optional

from psycopg_pool import AsyncConnectionPool

from app.settings import get_settings

logger = logging.getLogger(__name__)

_pool: Optional[AsyncConnectionPool] = None


def _add_connect_timeout(dsn: str, seconds: int = 3) -> str:
    if "connect_timeout=" in dsn:
        return dsn
    sep = "&" if "?" in dsn else "?"
    return f"{dsn}{sep}connect_timeout={seconds}"


def get_pool() -> AsyncConnectionPool:
    """
    Create (if needed) and return the global pool WITHOUT opening it.
    No deprecation warning because we pass open=False.
    """
    global _pool
    if _pool is None:
        settings = get_settings()
        _pool = AsyncConnectionPool(
            _add_connect_timeout(settings.database_url, settings.db_timeout_seconds),
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            timeout=settings.db_timeout_seconds,
            kwargs={"options": f"-c statement_timeout={settings.db_statement_timeout_ms}"},
            open=False,  # created closed; caller decides when to open
        )
    return _pool


async def open_pool() -> AsyncConnectionPool:
    """Open the pool and check the database answers before serving."""
    pool = get_pool()
    await pool.open(wait=True)
    async with pool.connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute("SELECT now()")
            (now,) = await cur.fetchone()
    logger.info("database connected", extra={"server_time": now.isoformat()})
    return pool


async def close_pool() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
        logger.info("database pool closed")
