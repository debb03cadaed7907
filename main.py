from __future__ import annotations

"""PopKing AI Backend - Main Application Entry Point
FastAPI application factory exposing the Gemini-backed generators.
Entry Points:
    - /health - Health check endpoint
    - /chat/* - Persona/mode chat, study material, image records and history
    - /image/generate - Imagen prompt-to-PNG
    - /tts/generate - Gemini speech rendered as WAV
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.exceptions import ConfigurationError
from core.logging import setup_logging
from core.observability import register_http_request_logging
from core.pydantic_schemas import error as api_error
from core.utils.env import is_production
from features.chat import router as chat_router
from features.image import router as image_router
from features.tts import router as tts_router

APP_VERSION = "1.0.0"

setup_logging()

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    app = FastAPI(
        title="PopKing AI Backend",
        description="Chat, study material, image and speech generation on Gemini",
        version=APP_VERSION,
    )

    if is_production():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        # Any localhost port in dev (React/Vite/etc.)
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"^http://(localhost|127\.0\.0\.1)(:\d+)?$",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        """Return a structured API envelope for configuration errors."""

        payload = api_error(
            code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=str(exc),
            data={"key": exc.key} if getattr(exc, "key", None) else None,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=payload.model_dump(mode="json"),
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": APP_VERSION}

    register_http_request_logging(app)

    app.include_router(chat_router)
    app.include_router(image_router)
    app.include_router(tts_router)

    logger.info("Application created with chat, image and TTS routers")
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
