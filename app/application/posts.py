from app.domain.entities import Post
from app.domain.errors import PostNotFound
from app.domain.ports.unit_of_work import UnitOfWorkPort
from app.domain.services import DEFAULT_POST_STATUS, require, slugify


async def list_posts(uow: UnitOfWorkPort) -> list[Post]:
    async with uow as transaction:
        return await transaction.db_posts.list_newest_first()


async def create_post(
    uow: UnitOfWorkPort,
    title: str | None,
    content: str | None,
    status: str | None = None,
) -> Post:
    require(title=title, content=content)
    slug = slugify(title)

    async with uow as transaction:
        post = await transaction.db_posts.create(
            title, content, status or DEFAULT_POST_STATUS, slug
        )
        await transaction.commit()
    return post


async def update_post(
    uow: UnitOfWorkPort,
    post_id: int,
    title: str | None,
    content: str | None,
    status: str | None = None,
) -> Post:
    require(title=title, content=content)
    slug = slugify(title)

    async with uow as transaction:
        post = await transaction.db_posts.update(
            post_id, title, content, status or DEFAULT_POST_STATUS, slug
        )
        if post is None:
            raise PostNotFound()
        await transaction.commit()
    return post


async def delete_post(uow: UnitOfWorkPort, post_id: int) -> None:
    async with uow as transaction:
        if not await transaction.db_posts.delete(post_id):
            raise PostNotFound()
        await transaction.commit()
