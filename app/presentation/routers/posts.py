from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.application import posts as post_usecases
from app.domain.errors import PostNotFound, SlugAlreadyExists, ValidationError
from app.domain.ports.unit_of_work import UnitOfWorkPort
from app.presentation.dependencies import get_uow
from app.schemas.requests import PostIn
from app.schemas.responses import MessageOut, PostOut

router = APIRouter(prefix="/posts", tags=["Posts"])

TITLE_AND_CONTENT_REQUIRED = "Title and content are required"
SLUG_TAKEN = "Slug already exists, choose another title"
POST_NOT_FOUND = "Post not found"


@router.get("", response_model=list[PostOut])
async def get_posts(uow: Annotated[UnitOfWorkPort, Depends(get_uow)]):
    posts = await post_usecases.list_posts(uow)
    return [PostOut.model_validate(p) for p in posts]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PostOut)
async def post_create_post(
    body: PostIn,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
):
    try:
        post = await post_usecases.create_post(
            uow, title=body.title, content=body.content, status=body.status
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=TITLE_AND_CONTENT_REQUIRED,
        )
    except SlugAlreadyExists:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SLUG_TAKEN)
    return PostOut.model_validate(post)


@router.put("/{post_id}", response_model=PostOut)
async def put_update_post(
    post_id: int,
    body: PostIn,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
):
    try:
        post = await post_usecases.update_post(
            uow,
            post_id=post_id,
            title=body.title,
            content=body.content,
            status=body.status,
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=TITLE_AND_CONTENT_REQUIRED,
        )
    except SlugAlreadyExists:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SLUG_TAKEN)
    except PostNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return PostOut.model_validate(post)


@router.delete("/{post_id}", response_model=MessageOut)
async def delete_post(
    post_id: int,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
):
    try:
        await post_usecases.delete_post(uow, post_id=post_id)
    except PostNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return MessageOut(message="Post deleted")
