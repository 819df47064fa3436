from fastapi import APIRouter

from app.presentation.routers.access_codes import router as access_codes_router
from app.presentation.routers.posts import router as posts_router
from app.presentation.routers.users import router as users_router
from app.presentation.routes.health import router as health_router

api = APIRouter()

# Access code routes are served at the root; everything else under /api
api.include_router(access_codes_router)
api.include_router(health_router)

routers = (posts_router, users_router)
for router in routers:
    api.include_router(router, prefix="/api")
