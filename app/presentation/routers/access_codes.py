from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.access_codes import issue_access_code, verify_access_code
from app.domain.errors import InvalidAccessCode, ValidationError
from app.domain.ports.access_code_store import AccessCodeStorePort
from app.presentation.dependencies import (
    get_access_code_store,
    get_access_code_ttl_seconds,
)
from app.schemas.requests import AccessCodeIn
from app.schemas.responses import SuccessOut

router = APIRouter(tags=["Access codes"])

MISSING_FIELDS = "Access code and username are required"


@router.post("/store-access-code", response_model=SuccessOut)
async def post_store_access_code(
    body: AccessCodeIn,
    store: Annotated[AccessCodeStorePort, Depends(get_access_code_store)],
    ttl_seconds: Annotated[int, Depends(get_access_code_ttl_seconds)],
):
    try:
        await issue_access_code(
            access_code_store=store,
            username=body.username,
            access_code=body.access_code,
            ttl_seconds=ttl_seconds,
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS
        )
    return SuccessOut()


@router.post("/verify-access-code", response_model=SuccessOut)
async def post_verify_access_code(
    body: AccessCodeIn,
    store: Annotated[AccessCodeStorePort, Depends(get_access_code_store)],
):
    try:
        await verify_access_code(
            access_code_store=store,
            username=body.username,
            access_code=body.access_code,
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS
        )
    except InvalidAccessCode:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access code",
        )
    return SuccessOut()
