from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings
from .infrastructure.logging import configure_logging
from .presentation.api import health, sample
from .presentation.api.dependencies import get_settings
from .presentation.errors import register_exception_handlers
from .presentation.middleware import CorrelationIdMiddleware

configure_logging(settings.service_name)

logger = structlog.get_logger()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the API application."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(
            "API server running",
            service=app_settings.service_name,
            port=app_settings.port,
            environment=app_settings.environment,
            version=app_settings.version,
        )

        yield

        logger.info("Application shutdown complete")

    app = FastAPI(
        title="Yeojeong API",
        description="Sample API with health, hello and echo endpoints",
        version="0.1.0",
        lifespan=lifespan,
    )

    # First added = last executed. CORS is outermost and also wraps the
    # 500 responses built by the correlation middleware.
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(sample.router)

    app.dependency_overrides[get_settings] = lambda: app_settings

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(
        "yeojeong_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
