from __future__ import annotations

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.domain.errors import StoreUnavailable
from app.domain.ports.access_code_store import AccessCodeStorePort

logger = logging.getLogger(__name__)

VALID_SENTINEL = "valid"

_LUA_CONSUME = """
-- KEYS[1]: access code key
-- ARGV[1]: sentinel marking a live code
if redis.call('GET', KEYS[1]) ~= ARGV[1] then
  return 0
end
redis.call('DEL', KEYS[1])
return 1
"""


def _escape(part: str) -> str:
    # keeps "<username>:<code>" unambiguous when a username contains ':'
    return part.replace("%", "%25").replace(":", "%3A")


class RedisAccessCodeStore(AccessCodeStorePort):
    def __init__(self, redis: Redis, *, key_prefix: str = "accessCode:") -> None:
        self._redis = redis
        self._prefix = key_prefix

    def key(self, username: str, access_code: str) -> str:
        return f"{self._prefix}{_escape(username)}:{access_code}"

    async def issue(self, username: str, access_code: str, ttl_seconds: int) -> None:
        try:
            await self._redis.set(
                self.key(username, access_code), VALID_SENTINEL, ex=ttl_seconds
            )
        except RedisError as e:
            logger.error("storing access code failed", exc_info=e)
            raise StoreUnavailable() from e

    async def consume(self, username: str, access_code: str) -> bool:
        # atomic compare-and-delete
        try:
            res = await self._redis.eval(
                _LUA_CONSUME, 1, self.key(username, access_code), VALID_SENTINEL
            )
        except RedisError as e:
            logger.error("verifying access code failed", exc_info=e)
            raise StoreUnavailable() from e
        return int(res) == 1
