from __future__ import annotations

from typing import Optional, Protocol

from app.domain.entities import Post


class PostRepositoryPort(Protocol):
    async def list_newest_first(self) -> list[Post]:
        """All posts ordered by created_at, newest first."""

    async def create(self, title: str, content: str, status: str, slug: str) -> Post:
        """
        Insert a post and return the stored row.
        Raise SlugAlreadyExists if the slug is taken.
        """

    async def update(
        self, post_id: int, title: str, content: str, status: str, slug: str
    ) -> Optional[Post]:
        """
        Replace title/content/status/slug. Return None if no post has post_id.
        Raise SlugAlreadyExists if the slug is taken by another post.
        """

    async def delete(self, post_id: int) -> bool:
        """Delete the post; False if no post has post_id."""
