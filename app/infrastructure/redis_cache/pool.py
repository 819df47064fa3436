from __future__ import annotations

import logging
from typing import Optional

from redis.asyncio import Redis

from app.settings import get_settings

logger = logging.getLogger(__name__)

_client: Optional[Redis] = None


def get_redis() -> Redis:
    """
    Lazy singleton Redis client using REDIS_URL from settings.
    decode_responses=True -> we get/put str, not bytes.
    Socket timeouts bound every command; a timeout surfaces as
    redis.exceptions.TimeoutError.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_timeout=settings.redis_timeout_seconds,
            socket_connect_timeout=settings.redis_timeout_seconds,
        )
    return _client


async def open_redis() -> Redis:
    """Create the client and round-trip a PING so startup fails fast."""
    client = get_redis()
    await client.ping()
    logger.info("redis connected")
    return client


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("redis closed")
