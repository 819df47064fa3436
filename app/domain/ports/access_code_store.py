from typing import Protocol


class AccessCodeStorePort(Protocol):
    async def issue(self, username: str, access_code: str, ttl_seconds: int) -> None:
        """Store/replace the (username, access_code) record with TTL=ttl_seconds."""

    async def consume(self, username: str, access_code: str) -> bool:
        """
        True if the record existed and was deleted by this call, else False.
        Check and delete happen as one atomic step, so concurrent callers
        for the same pair see True at most once.
        """
