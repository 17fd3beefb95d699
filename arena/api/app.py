"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from arena.api.dependencies import set_match_manager
from arena.api.match_manager import MatchManager
from arena.api.routes import api_router
from arena.config import ArenaConfig
from arena.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: ArenaConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = ArenaConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_match_manager(MatchManager(_config))
        logger.info("API server started.")
        yield
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Arena Control Bot",
        description=(
            "Decision core of a turn-based arena-control bot.\n\n"
            "## API Groups\n\n"
            "- **Match** — Start a match, push turns, read the classified state\n"
            "- **Geometry** — Line/circle and circle/circle intersections\n"
            "- **Config** — Read-only ruleset constants\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Match", "description": "Turn ingestion and the resulting threat classification and hero commands."},
            {"name": "Geometry", "description": "Closed-form intersection kernel, exposed for inspection."},
            {"name": "Config", "description": "Ruleset constants: map size, base radius, spell cost and ranges."},
        ],
    )

    app.include_router(api_router)

    return app
