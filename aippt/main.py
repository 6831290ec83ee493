"""
AIPPT - Main Application Entry Point

Backend for AI-assisted presentation generation: outlines, slide data and
themed PPTX export.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from aippt import __version__
from aippt.api.routes import aippt
from aippt.core import AIPPTError, Settings, get_settings, setup_logging
from aippt.core.errors import bounded_details
from aippt.services import AIPPTService

logger = logging.getLogger(__name__)

ENDPOINTS = [
    "POST /tools/aippt_outline - generate a presentation outline",
    "POST /tools/aippt - generate slide data",
    "POST /tools/aippt_with_action - generate and export a PPTX deck",
    "POST /tools/ai_writing - AI writing assistance",
    "GET /health - health check",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"🚀 Starting {settings.app_name}...")
    logger.info(f"📁 Export directory: \033[93m{settings.export_dir}\033[0m")
    logger.info(f"🤖 Models: \033[96m{', '.join(settings.model_names)}\033[0m")

    yield

    # Shutdown
    logger.info(f"👋 Shutting down {settings.app_name}...")


def register_error_handlers(app: FastAPI) -> None:
    """Render every error as JSON with a stable category."""

    @app.exception_handler(AIPPTError)
    async def aippt_error_handler(request: Request, exc: AIPPTError):
        logger.error(f"{request.url.path} failed: {exc}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"{request.url.path} rejected: invalid request body")
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid request body",
                "category": "invalid_request",
                "details": bounded_details(exc.errors()),
                "status": 422,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={"error": "Endpoint not found", "category": "not_found"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "category": "http_error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Server error on {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "category": "internal_error",
                "details": str(exc) if app.state.settings.debug else None,
            },
        )


def create_app(settings: Optional[Settings] = None, service: Optional[AIPPTService] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    settings.ensure_directories()

    app = FastAPI(
        title=settings.app_name,
        description="AI presentation backend with themed PPTX export",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.aippt_service = service or AIPPTService(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(app)

    # Include API routers
    app.include_router(aippt.router, tags=["aippt"])

    # Serve exported decks
    app.mount(
        settings.exports_url_prefix,
        StaticFiles(directory=settings.export_dir),
        name="exports",
    )

    @app.get("/")
    async def index():
        """Describe the service and its endpoints."""
        return {
            "message": f"{settings.app_name} Backend Service",
            "version": __version__,
            "endpoints": ENDPOINTS,
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "models": settings.model_names,
        }

    return app


if __name__ == "__main__":
    import uvicorn

    setup_logging()
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
    )
