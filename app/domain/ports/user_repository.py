from __future__ import annotations

from typing import Optional, Protocol

from app.domain.entities import User


class UserRepositoryPort(Protocol):
    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Fetch the user with its stored password and device id.
        Return None if not found.
        """

    async def exists(self, username: str) -> bool:
        """True if a user row with this username exists."""
