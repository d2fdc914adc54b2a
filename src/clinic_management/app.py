"""FastAPI application factory for clinic-management."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.exception_handlers import register_exception_handlers
from .config.settings import AppSettings, get_settings
from .database.connection import DatabaseManager
from .features.students.routers import router as students_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create the FastAPI application.
    
    Args:
        settings: Application settings; defaults to the cached environment settings
        
    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = DatabaseManager.from_settings(settings)
        await database.create_pool()
        app.state.database = database
        logger.info(f"{settings.app_name} {settings.app_version} started ({settings.environment})")
        try:
            yield
        finally:
            await database.close_pool()
            logger.info(f"{settings.app_name} stopped")
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    
    cors_origins = settings.get_cors_origins()
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    
    register_exception_handlers(app, is_production=settings.is_production)
    app.include_router(students_router, prefix=settings.api_prefix)
    
    @app.get("/health", tags=["Health"])
    async def health(request: Request) -> JSONResponse:
        """Report service and database health."""
        database = getattr(request.app.state, "database", None)
        healthy = database is not None and await database.health_check()
        return JSONResponse(
            status_code=200 if healthy else 503,
            content={
                "status": "healthy" if healthy else "unhealthy",
                "version": settings.app_version,
            },
        )
    
    return app
