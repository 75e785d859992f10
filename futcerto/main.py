"""Entry point for the FutCerto FastAPI application.

Run with ``uvicorn futcerto.main:create_app --factory``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from futcerto.api.v1 import router as v1_router
from futcerto.core.config import Settings, get_settings
from futcerto.core.database import Base, build_engine, build_session_factory
from futcerto.core.error_handlers import register_exception_handlers
from futcerto.core.events import EventBus

# Importing the models registers their tables on Base.metadata.
import futcerto.models  # noqa: F401

API_PREFIX = "/api/futcerto/v1"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = (settings or get_settings()).validate()
    configure_logging(settings.LOG_LEVEL)

    engine = build_engine(settings.DATABASE_URL)
    # Ensure tables exist when the application starts (for development purposes).
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.events = EventBus()

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=API_PREFIX)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app
