"""
Newsdesk - FastAPI Main Application Entry Point
"""
from typing import Optional

from fastapi import FastAPI
from contextlib import asynccontextmanager
import structlog

from newsdesk.config import Settings, get_settings
from newsdesk.core.logging import configure_logging
from newsdesk.api.middleware import register_middleware
from newsdesk.api.routes import api_router
from newsdesk.db.database import build_engine, build_session_factory, init_db, close_db
from newsdesk.db.store import NewsStore, SqlNewsStore

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting Newsdesk application", version=settings.app_version)

    engine = None
    if app.state.store is None:
        engine = build_engine(settings)
        await init_db(engine)
        app.state.store = SqlNewsStore(
            build_session_factory(engine),
            timeout_seconds=settings.store_timeout_seconds,
        )
        logger.info("Database initialized")

    yield

    logger.info("Shutting down Newsdesk application")
    if engine is not None:
        await close_db(engine)
        app.state.store = None
        logger.info("Database connections closed")


def create_app(settings: Optional[Settings] = None, store: Optional[NewsStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    When ``store`` is given it is used as is and no database is opened.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="News record service with partial updates and listing",
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    register_middleware(app)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.app_version,
        }

    app.include_router(api_router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "newsdesk.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
