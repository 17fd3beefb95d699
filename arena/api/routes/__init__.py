"""Versioned API route modules."""

from fastapi import APIRouter

from arena.api.routes.config import router as config_router
from arena.api.routes.geometry import router as geometry_router
from arena.api.routes.match import router as match_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(match_router, tags=["Match"])
api_router.include_router(geometry_router, tags=["Geometry"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
