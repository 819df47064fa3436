from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.application.credentials import check_username, verify_credentials
from app.domain.errors import InvalidCredentials, UserNotFound, ValidationError
from app.domain.ports.unit_of_work import UnitOfWorkPort
from app.presentation.dependencies import get_uow
from app.schemas.requests import CheckUsernameIn, VerifyPasswordIn
from app.schemas.responses import ExistsOut, PasswordVerifiedOut

router = APIRouter(tags=["Users"])


@router.post("/verify-password", response_model=PasswordVerifiedOut)
async def post_verify_password(
    body: VerifyPasswordIn,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
):
    try:
        await verify_credentials(
            uow=uow,
            username=body.username,
            password=body.password,
            device_id=body.device_id,
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username, password and device ID are required",
        )
    except UserNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except InvalidCredentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password or device ID",
        )
    return PasswordVerifiedOut()


@router.post(
    "/check-username",
    response_model=ExistsOut,
    responses={404: {"model": ExistsOut}},
)
async def post_check_username(
    body: CheckUsernameIn,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
):
    try:
        exists = await check_username(uow=uow, username=body.username)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Username is required"
        )
    if not exists:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"exists": False}
        )
    return ExistsOut(exists=True)
