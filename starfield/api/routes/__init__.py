"""Versioned API route modules."""

from fastapi import APIRouter

from starfield.api.routes.catalog import router as catalog_router
from starfield.api.routes.stations import router as stations_router
from starfield.api.routes.world import router as world_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(world_router, tags=["World"])
api_router.include_router(stations_router, tags=["Stations"])
api_router.include_router(catalog_router, tags=["Catalog"])

__all__ = ["api_router"]
