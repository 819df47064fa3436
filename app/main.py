from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.infrastructure.db.pool import close_pool, open_pool
from app.infrastructure.redis_cache.pool import close_redis, open_redis
from app.logging import setup_logging
from app.presentation.api import api
from app.presentation.errors import register_exception_handlers
from app.settings import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup: both stores must answer before we accept traffic
    app.state.db_pool = await open_pool()
    try:
        app.state.redis = await open_redis()
    except Exception:
        await close_pool()
        raise

    try:
        yield
    finally:
        # shutdown
        await close_redis()
        await close_pool()


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title="Publishing API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api)
    return app


app = create_app()
