from __future__ import annotations

from typing import Optional

import psycopg

from app.domain.entities import User
from app.domain.ports.user_repository import UserRepositoryPort
from app.infrastructure.db.errors import store_errors


class PgUserRepository(UserRepositoryPort):
    """
    Postgres implementation of UserRepositoryPort.

    NOTE:
    - This repo is constructed with an *active async connection* supplied by the UoW.
    - It only reads; users are provisioned outside this service.
    """

    def __init__(self, conn: psycopg.AsyncConnection) -> None:
        self._conn = conn

    async def get_by_username(self, username: str) -> Optional[User]:
        sql = """
        SELECT username, password, device_id
        FROM users
        WHERE username = %s
        """
        with store_errors("get user by username"):
            async with self._conn.cursor() as cur:
                await cur.execute(sql, (username,))
                row = await cur.fetchone()

        if not row:
            return None
        db_username, db_password, db_device_id = row
        return User(
            username=str(db_username),
            password=db_password,
            device_id=db_device_id,
        )

    async def exists(self, username: str) -> bool:
        sql = "SELECT EXISTS (SELECT 1 FROM users WHERE username = %s)"
        with store_errors("check username"):
            async with self._conn.cursor() as cur:
                await cur.execute(sql, (username,))
                (found,) = await cur.fetchone()
        return bool(found)
