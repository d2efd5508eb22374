"""Favorites API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FavoritesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - STORAGE_BACKEND selects the SQL database or the in-memory store once, at startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import favorites.infrastructure.database as db_module
from favorites.api.error_handlers import register_error_handlers
from favorites.api.routes import assets, health, user_favorites, users
from favorites.config import get_settings
from favorites.infrastructure.memory_store import init_memory_store
from favorites.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.storage_backend == "memory":
        init_memory_store()
    else:
        db_module.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info(f"Favorites API started (storage={settings.storage_backend})")
    yield
    if db_module.db_manager:
        await db_module.db_manager.dispose()
    logger.info("Favorites API shutting down")


app = FastAPI(
    title="Favorites API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(assets.router)
app.include_router(user_favorites.router)

register_error_handlers(app)
