"""FastAPI app entry: config, logging, health, and definition rendering."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from indexdef.config.definitions.static import load_definition_profiles
from indexdef.config.logging import configure_logging, get_logger
from indexdef.config.settings import get_settings
from indexdef.controllers.routes.definitions import router as definitions_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and profile validation."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    # Fail startup on a broken static.json rather than on the first request
    profiles = load_definition_profiles()
    logger.info("Definition profiles loaded", extra={"profile_count": len(profiles)})
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Index Definition Builder",
    description="Render Lucene index definitions from declarative profiles",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(definitions_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: never leak stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
