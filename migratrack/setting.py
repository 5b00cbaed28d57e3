"""Runtime settings for MigraTrack.

Values come from environment variables, with a ``.env`` file in the
working directory filling in any that are unset. ``get_settings()``
caches one instance per process. Tests build ``Settings(...)`` directly.
"""

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field


DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"
DEFAULT_ENV_FILE = ".env"


class Settings(BaseModel):
    """Application settings."""

    database_url: str = Field("sqlite:///data/migratrack.db", description="SQLAlchemy database URL")
    upload_root: str = Field("uploads", description="Root directory for stored files")
    cors_origins: List[str] = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.split(","))
    secret_key: str = Field("migratrack-dev-secret-change-me", description="Session middleware secret")
    transfer_group_id: int = Field(1, description="FieldMaster group that seeds transfer checklists")
    max_upload_mb: int = Field(25, ge=1)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("MIGRATRACK_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///data/migratrack.db"),
            upload_root=os.getenv("MIGRATRACK_UPLOAD_ROOT", "uploads"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            secret_key=os.getenv("MIGRATRACK_SECRET_KEY", "migratrack-dev-secret-change-me"),
            transfer_group_id=int(os.getenv("MIGRATRACK_TRANSFER_GROUP_ID", "1")),
            max_upload_mb=int(os.getenv("MIGRATRACK_MAX_UPLOAD_MB", "25")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Variables already set in the environment win over the file
    load_dotenv(os.getenv("MIGRATRACK_ENV_FILE", DEFAULT_ENV_FILE))
    return Settings.from_env()
