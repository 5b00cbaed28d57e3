import argparse
import logging
import sys
from pathlib import Path

from .core.db.db import DatabaseManager, wait_for_db
from .setting import get_settings


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.ERROR)
    logging.getLogger("sqlalchemy.engine.Engine").setLevel(logging.ERROR)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.orm").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("psycopg2").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    prefix = "sqlite:///"
    if database_url.startswith(prefix) and ":memory:" not in database_url:
        Path(database_url[len(prefix):]).parent.mkdir(parents=True, exist_ok=True)


def main():
    """Main entry point for MigraTrack."""
    settings = get_settings()

    # Parse arguments
    parser = argparse.ArgumentParser(description="MigraTrack - Data Migration Project Tracker")
    parser.add_argument(
        "--port",
        type=int,
        default=9005,
        help="Port for the API server"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level.upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run in debug mode (auto-reload)"
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create missing tables before serving (use Alembic for upgrades)"
    )
    args = parser.parse_args()

    # Setup logging
    setup_logging(args.log_level)
    logger.info("Starting MigraTrack")

    # Ensure directories exist
    Path(settings.upload_root).mkdir(parents=True, exist_ok=True)
    _ensure_sqlite_dir(settings.database_url)

    db_manager = DatabaseManager(settings.database_url)
    if not wait_for_db(db_manager):
        logger.error("Database is not reachable, exiting")
        sys.exit(1)

    if args.init_db:
        db_manager.init_db()

    # Launch with uvicorn
    import uvicorn

    logger.info(f"Starting FastAPI server on http://0.0.0.0:{args.port}")
    print(f"\n  MigraTrack is running at: http://localhost:{args.port}")
    print(f"  API docs at: http://localhost:{args.port}/docs\n")

    if args.debug:
        # Reload needs an import string; each reload builds its own app
        db_manager.dispose()
        uvicorn.run(
            "migratrack.api.app:create_app_from_env",
            factory=True,
            host="0.0.0.0",
            port=args.port,
            log_level=args.log_level.lower(),
            reload=True,
        )
        return

    from .api.app import create_app
    app = create_app(db_manager=db_manager, settings=settings)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
