"""FastAPI application factory for MigraTrack.

Creates and configures the FastAPI app with CORS, session middleware,
the error envelope and all route modules registered.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .core import register_error_handlers
from ..core.storage import FileStore
from ..setting import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    db_manager,
    settings: Optional[Settings] = None,
    file_store: Optional[FileStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_manager: DatabaseManager instance
        settings: Settings (defaults to the environment)
        file_store: FileStore for uploads (defaults to one rooted at settings.upload_root)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    if file_store is None:
        file_store = FileStore(settings.upload_root, max_bytes=settings.max_upload_mb * 1024 * 1024)

    app = FastAPI(
        title="MigraTrack API",
        description="Tracker for client data-migration projects",
        version="0.1.0",
    )

    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)

    # CORS for the browser front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Store shared dependencies on app state
    app.state.db_manager = db_manager
    app.state.settings = settings
    app.state.file_store = file_store

    # Register routers
    from .routes.projects import router as projects_router
    from .routes.transfer_checks import router as transfer_router
    from .routes.verification import router as verification_router
    from .routes.customization import router as customization_router
    from .routes.issues import router as issues_router
    from .routes.field_master import router as field_master_router
    from .routes.module_data import router as module_data_router
    from .routes.reference import (
        module_groups_router,
        module_master_router,
        quick_works_router,
        web_tables_router,
    )
    from .routes.manual_configurations import router as manual_configurations_router
    from .routes.registry import database_detail_router, server_data_router
    from .routes.emails import router as emails_router
    from .routes.excel_data import router as excel_data_router

    app.include_router(projects_router, prefix="/api")
    app.include_router(transfer_router, prefix="/api")
    app.include_router(verification_router, prefix="/api")
    app.include_router(customization_router, prefix="/api")
    app.include_router(issues_router, prefix="/api")
    app.include_router(field_master_router, prefix="/api")
    app.include_router(module_data_router, prefix="/api")
    app.include_router(module_master_router, prefix="/api")
    app.include_router(web_tables_router, prefix="/api")
    app.include_router(module_groups_router, prefix="/api")
    app.include_router(quick_works_router, prefix="/api")
    app.include_router(manual_configurations_router, prefix="/api")
    app.include_router(server_data_router, prefix="/api")
    app.include_router(database_detail_router, prefix="/api")
    app.include_router(emails_router, prefix="/api")
    app.include_router(excel_data_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        database = "ok" if db_manager.ping() else "unavailable"
        return {"status": "ok", "service": "migratrack", "database": database}

    logger.info("FastAPI app created with all routes registered")
    return app


def create_app_from_env() -> FastAPI:
    """App factory for ``uvicorn --factory``; used when the server reloads."""
    from ..core.db import DatabaseManager

    settings = get_settings()
    return create_app(db_manager=DatabaseManager(settings.database_url), settings=settings)
