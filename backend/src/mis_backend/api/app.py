"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mis_backend.api.errors import register_error_handlers
from mis_backend.api.routers import ROUTERS
from mis_backend.database import dispose_databases
from mis_backend.observability import setup_logging
from mis_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(config.log_level, config.log_format)
        logger.info("MIS API starting in %s mode", config.environment)
        try:
            yield
        finally:
            dispose_databases()
            logger.info("MIS API stopped")

    app = FastAPI(title="MIS API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)
    return app
