"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, bible_portal.api, bible_portal.observability, bible_portal.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bible_portal import __version__
from bible_portal.api.deps import get_service_cache
from bible_portal.api.routers import bible_chat_router, health_router, strongs_router
from bible_portal.configs import get_settings
from bible_portal.observability.logger import configure_logging
from bible_portal.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and closes shared clients on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={
            "environment": settings.environment,
            "gateway_configured": settings.ai_gateway.is_configured,
        },
    )

    yield

    await get_service_cache().aclose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Bible Portal API",
        description="Bible study chat relay and Strong's lexicon services",
        version=__version__,
        lifespan=lifespan,
    )

    # Added first = last to execute
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(bible_chat_router, prefix="/api/v1")
    app.include_router(strongs_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bible_portal.main:app",
        host="localhost",
        port=8000,
        reload=get_settings().debug,
    )
