"""FastAPI application entry point for the EduAdvisor API."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.clients.gemini_client import get_gemini_client
from app.config import get_settings, setup_logging
from app.routers.advisor_router import CONFIG_ERROR_MESSAGES, router as advisor_router

# Initialise logging early
setup_logging()
logger = logging.getLogger(__name__)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as ``{"error": <message>}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors, unless the API key is missing."""
    config_message = CONFIG_ERROR_MESSAGES.get(request.url.path)
    if config_message is not None:
        provider = request.app.dependency_overrides.get(get_gemini_client, get_gemini_client)
        if not provider().is_configured:
            logger.error("GEMINI_API_KEY is not set — rejecting request to %s.", request.url.path)
            return JSONResponse(status_code=500, content={"error": config_message})

    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    application = FastAPI(
        title="EduAdvisor API",
        description=(
            "Career and hobby recommendations plus a chat counselor, "
            "backed by the Gemini generative language API."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS: allow all origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, _http_error_handler)
    application.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Include routers
    application.include_router(advisor_router)

    # Static front-end; mounted last so /api routes take precedence
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        application.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("Static directory %s not found — serving API only.", static_dir)

    @application.on_event("startup")
    async def _startup() -> None:
        logger.info(
            "EduAdvisor starting — GEMINI_API_KEY %s, model=%s",
            "found" if settings.gemini_api_key else "NOT found",
            settings.gemini_model,
        )

    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
    )
