"""Application factory for the speechify service."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from .config import get_settings
from .routers.events import router as events_router
from .routers.segments import router as segments_router
from .services.gcs import StorageGateway, create_storage_client
from .services.speechify_service import SpeechifyService
from .services.synthesis import SpeechSynthesizer, create_synthesis_client

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging based on LOG_LEVEL environment variable."""
    # Load .env file first to ensure LOG_FILE is available
    load_dotenv()

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers: list[logging.Handler] = []

    log_file = os.getenv("LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Always add console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    logging.getLogger("speechify").setLevel(log_level)
    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel(log_level)
    logging.getLogger("uvicorn.error").setLevel(log_level)

    # Quiet down noisy Google client libraries unless debugging
    if log_level > logging.DEBUG:
        logging.getLogger("google").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def _build_speechify_service() -> SpeechifyService:
    settings = get_settings()
    storage = StorageGateway(create_storage_client(settings))
    synthesizer = SpeechSynthesizer(
        create_synthesis_client(),
        input_type=settings.synthesis_input_type,
    )
    return SpeechifyService.from_settings(settings, storage, synthesizer)


def create_app(*, speechify_service: SpeechifyService | None = None) -> FastAPI:
    # Configure logging first thing
    _configure_logging()

    # Resolve settings eagerly so malformed limits fail at startup
    settings = get_settings()
    logger.info(
        "Segmenting at %d characters, searching for breaks after %d",
        settings.character_limit,
        settings.find_break_after,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.speechify_service is None:
            app.state.speechify_service = _build_speechify_service()
        yield

    app = FastAPI(title="Speechify", lifespan=lifespan)
    app.state.speechify_service = speechify_service

    app.include_router(events_router)
    app.include_router(segments_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


__all__ = ["create_app"]
