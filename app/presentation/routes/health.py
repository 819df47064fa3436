import logging
from typing import Annotated

import psycopg
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from psycopg_pool import AsyncConnectionPool

from app.presentation.dependencies import get_db_pool

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@router.get("/api/test")
async def database_test(pool: Annotated[AsyncConnectionPool, Depends(get_db_pool)]):
    """Round-trip to Postgres and report its clock."""
    try:
        async with pool.connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SELECT now()")
                (now,) = await cur.fetchone()
    except psycopg.Error:
        logger.exception("database test failed")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Database connection failed"},
        )
    return {"success": True, "time": now.isoformat()}
