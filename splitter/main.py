"""FastAPI app entry: config, logging, health, and centralized error handling."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from splitter.config.chunking.static import get_active_profile_name, load_chunking_profiles
from splitter.config.logging import configure_logging, get_logger
from splitter.config.settings import get_settings
from splitter.controllers.routes.chunk import router as chunk_router
from splitter.errors import InvalidChunkConfigError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging and profile validation. A broken static.json fails startup."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    profiles = load_chunking_profiles()
    logger.info(
        "Chunking profiles loaded",
        extra={"profiles": sorted(profiles), "active": get_active_profile_name()},
    )
    yield
    logger.info("Shutdown complete")


app = FastAPI(
    title="Text Splitter Service",
    description="Cut documents into bounded, overlapping chunks for retrieval",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(InvalidChunkConfigError)
async def invalid_config_handler(_request: Request, exc: InvalidChunkConfigError):
    logger.info("Invalid chunk configuration", extra={"error": str(exc)})
    return JSONResponse(content={"detail": "invalid chunk configuration"}, status_code=422)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: never leak stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
