"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from starfield.api.dependencies import set_galaxy_service
from starfield.api.galaxy_service import GalaxyService
from starfield.api.routes import api_router
from starfield.config import StarfieldConfig
from starfield.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: StarfieldConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = StarfieldConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_galaxy_service(GalaxyService(_config))
        logger.info("API server started with world seed %d.", _config.world_seed)
        yield
        set_galaxy_service(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Starfield",
        description=(
            "Deterministic procedural starfield and station markets.\n\n"
            "## API Groups\n\n"
            "- **World**: Background objects around a camera rectangle\n"
            "- **Stations**: Station lookup and baseline market tables\n"
            "- **Catalog**: Commodity definitions and world configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "World", "description": "Stars, stations and asteroids visible from a camera rectangle, with rotation angles for the current time."},
            {"name": "Stations", "description": "Station records by id and their deterministic commodity baselines per visit."},
            {"name": "Catalog", "description": "Static commodity definitions and the generator configuration."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
