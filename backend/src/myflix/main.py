"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from myflix.application.errors import UpstreamUnavailableError
from myflix.config import get_settings
from myflix.infrastructure.auth.password import CorruptPasswordHashError
from myflix.infrastructure.database.connection import dispose_engine, get_engine
from myflix.interfaces.api.v1.router import v1_router
from myflix.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: settings (and the signing key) are loaded once here
    settings = get_settings()
    get_engine()  # Initialize connection pool
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    # Shutdown: clean up
    await dispose_engine()


async def _upstream_unavailable(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


async def _corrupt_hash(request: Request, exc: CorruptPasswordHashError) -> JSONResponse:
    logger.error("Corrupt password hash encountered on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="myFlix movie catalog API",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(UpstreamUnavailableError, _upstream_unavailable)
    app.add_exception_handler(CorruptPasswordHashError, _corrupt_hash)

    app.include_router(v1_router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to myFlix!"}

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": settings.app_version}

    return app


app = create_app()
