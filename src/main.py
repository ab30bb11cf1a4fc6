"""
Product Catalog - Main Application
==================================

Layered CRUD API for a product catalog.

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Entities
- Infrastructure: Database
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from sqlalchemy.engine import make_url

# Configuration
from src.config import Settings, get_settings

# Infrastructure
from src.infrastructure.database import init_database, close_database, create_tables

# Module Routers
from src.catalog.interfaces import catalog_router

# Logging and middleware
from src.shared.infrastructure.logging import setup_logging, get_logger
from src.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    global_exception_handler
)

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Interactive API docs are only published in development.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        """
        Application lifespan manager.

        STARTUP:
        1. Setup structured logging
        2. Initialize database (fails without a connection string)
        3. Create database tables

        SHUTDOWN:
        1. Close database connections
        """
        # === STARTUP ===
        setup_logging(level=settings.log_level, environment=settings.environment)
        logger.info("Starting Product Catalog", extra={
            "version": settings.app_version,
            "environment": settings.environment
        })

        init_database(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
        logger.info("Database initialized", extra={
            "backend": make_url(settings.database_url).get_backend_name()
        })

        if settings.create_tables_on_startup:
            logger.info("Creating database tables")
            await create_tables()

        logger.info("Product Catalog started successfully")

        yield  # Application runs here

        # === SHUTDOWN ===
        logger.info("Shutting down Product Catalog")
        await close_database()
        logger.info("Product Catalog shutdown complete")

    docs_enabled = settings.is_development
    app = FastAPI(
        title="Product Catalog API",
        description="Add and list products.",
        version=settings.app_version,
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        lifespan=lifespan
    )
    app.state.settings = settings

    # === Middleware (last added runs first) ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)
    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_exception_handler(Exception, global_exception_handler)

    # === Include Module Routers ===
    app.include_router(catalog_router)

    # === Health Check Endpoint ===

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Liveness probe for load balancers and orchestrators."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment
        }

    @app.get("/", tags=["Root"])
    async def root(request: Request):
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "docs": request.app.docs_url,
            "health": "/health",
            "endpoints": [
                "POST /products/addproduct - Add a product",
                "GET /products/getproducts - List products"
            ]
        }

    return app


app = create_app()


# === Development Entry Point ===

if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.is_development,
        log_level=_settings.log_level.lower()
    )
