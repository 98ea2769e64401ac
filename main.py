from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.application.use_cases.notifications import (
    NotificationContentRenderer,
    process_next,
)
from app.application.use_cases.users import replace_directory
from app.config import Settings, get_settings
from app.infrastructure.database import SessionLocal, engine, initialize_database
from app.infrastructure.dispatch import DispatchQueue, DispatchWorker
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def _seed_directory() -> None:
    session = SessionLocal()
    try:
        replace_directory(session)
    finally:
        session.close()


def build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Prepare storage and the dispatcher on startup, stop them on shutdown."""

        initialize_database()
        if settings.seed_directory_on_startup:
            _seed_directory()

        queue = DispatchQueue(max_size=settings.dispatch_queue_max_size)
        renderer = NotificationContentRenderer.from_settings(settings)
        worker = DispatchWorker(
            partial(process_next, SessionLocal, queue, renderer),
            interval=settings.dispatch_interval_seconds,
            tick_timeout=settings.dispatch_tick_timeout_seconds,
        )
        app.state.dispatch_queue = queue
        app.state.dispatch_worker = worker
        if settings.dispatcher_enabled:
            worker.start()
        try:
            yield
        finally:
            await worker.stop()
            dropped = queue.clear()
            if dropped:
                logger.warning("%d queued events dropped on shutdown", dropped)
            engine.dispose()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    app = FastAPI(title="Notification service", lifespan=build_lifespan(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_routes(app)
    return app


app = create_app()
