"""
FastAPI application entry point for the Promptkit API.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from promptkit.api.errors import setup_error_handlers
from promptkit.api.schemas import HealthResponse
from promptkit.api.v1 import v1_router
from promptkit.infra.config.logging_config import get_logger, setup_logging
from promptkit.infra.config.settings import get_settings
from promptkit.infra.middleware.request_context import RequestContextMiddleware

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    yield

    logger.info("app.shutdown", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Heuristic prompt optimization, atomization and preamble generation",
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request context + logging middleware
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    app.include_router(v1_router, prefix="/api")

    @app.get("/", response_model=HealthResponse)
    async def root():
        return HealthResponse(
            status="healthy",
            service=settings.app_name,
            version=settings.version,
            message=f"{settings.app_name} is running",
        )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(
            status="healthy", service=settings.app_name, version=settings.version
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "promptkit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
