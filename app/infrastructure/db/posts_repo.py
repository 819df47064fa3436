from __future__ import annotations

from typing import Optional, Sequence

import psycopg
from psycopg import errors as pg_errors

from app.domain.entities import Post
from app.domain.errors import SlugAlreadyExists
from app.domain.ports.post_repository import PostRepositoryPort
from app.infrastructure.db.errors import store_errors

_COLUMNS = "id, title, content, status, slug, created_at"


def _to_post(row: Sequence) -> Post:
    id_, title, content, status, slug, created_at = row
    return Post(
        id=int(id_),
        title=str(title),
        content=str(content),
        status=str(status),
        slug=str(slug),
        created_at=created_at,
    )


class PgPostRepository(PostRepositoryPort):
    """
    Postgres implementation of PostRepositoryPort, bound to an *active async connection*.
    This class DOES NOT COMMIT; the UoW controls the transaction.
    """

    def __init__(self, conn: psycopg.AsyncConnection) -> None:
        self._conn = conn

    async def list_newest_first(self) -> list[Post]:
        sql = f"SELECT {_COLUMNS} FROM posts ORDER BY created_at DESC"
        with store_errors("list posts"):
            async with self._conn.cursor() as cur:
                await cur.execute(sql)
                rows = await cur.fetchall()
        return [_to_post(r) for r in rows]

    async def create(self, title: str, content: str, status: str, slug: str) -> Post:
        sql = f"""
        INSERT INTO posts (title, content, status, slug)
        VALUES (%s, %s, %s, %s)
        RETURNING {_COLUMNS}
        """
        with store_errors("create post"):
            async with self._conn.cursor() as cur:
                try:
                    await cur.execute(sql, (title, content, status, slug))
                except pg_errors.UniqueViolation as e:
                    raise SlugAlreadyExists(slug) from e
                row = await cur.fetchone()
        return _to_post(row)

    async def update(
        self, post_id: int, title: str, content: str, status: str, slug: str
    ) -> Optional[Post]:
        sql = f"""
        UPDATE posts
        SET title = %s, content = %s, status = %s, slug = %s
        WHERE id = %s
        RETURNING {_COLUMNS}
        """
        with store_errors("update post"):
            async with self._conn.cursor() as cur:
                try:
                    await cur.execute(sql, (title, content, status, slug, post_id))
                except pg_errors.UniqueViolation as e:
                    raise SlugAlreadyExists(slug) from e
                row = await cur.fetchone()
        return _to_post(row) if row else None

    async def delete(self, post_id: int) -> bool:
        sql = "DELETE FROM posts WHERE id = %s"
        with store_errors("delete post"):
            async with self._conn.cursor() as cur:
                await cur.execute(sql, (post_id,))
                deleted = cur.rowcount
        return deleted > 0
