"""ZeTodo API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ZeTodoError -> structured JSON responses
    - The store is migrated and opened on startup; a migration failure aborts startup
    - The store handle is closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event
    - CORS origins from settings: the desktop webview and the dev server
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zetodo.api.error_handlers import register_error_handlers
from zetodo.api.routes import board, health, projects
from zetodo.config import get_settings
from zetodo.core.errors import MigrationError
import zetodo.infrastructure.database as db_module
from zetodo.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.database_path != ":memory:":
        Path(settings.database_path).parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Database path: {settings.database_path}")
    try:
        db_module.init_db(settings.database_url, echo=settings.database_echo)
    except MigrationError as e:
        logger.critical(
            f"Failed to initialize database: {e}",
            extra={"error_code": e.code},
        )
        raise
    logger.info(f"{settings.app_name} API started")
    yield
    if db_module.db_manager is not None:
        db_module.db_manager.close()
        db_module.db_manager = None
    logger.info(f"{settings.app_name} API shutting down")


settings = get_settings()
app = FastAPI(
    title=f"{settings.app_name} API",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(board.router)

register_error_handlers(app)
