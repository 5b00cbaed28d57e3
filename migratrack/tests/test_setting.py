"""Tests for runtime settings.

Tests cover:
- Environment variable parsing
- .env file loading and precedence
"""

import os
from unittest.mock import patch

import pytest

from migratrack.setting import Settings, get_settings

ENV_KEYS = (
    "DATABASE_URL",
    "LOG_LEVEL",
    "MIGRATRACK_CORS_ORIGINS",
    "MIGRATRACK_ENV_FILE",
    "MIGRATRACK_TRANSFER_GROUP_ID",
)


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Run with the settings variables unset and the cache empty."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    with patch.dict(os.environ):
        for key in ENV_KEYS:
            os.environ.pop(key, None)
        yield tmp_path
    get_settings.cache_clear()


class TestFromEnv:

    def test_defaults(self, clean_env):
        settings = Settings.from_env()

        assert settings.database_url == "sqlite:///data/migratrack.db"
        assert settings.transfer_group_id == 1
        assert settings.log_level == "INFO"

    def test_reads_variables(self, clean_env):
        os.environ["MIGRATRACK_CORS_ORIGINS"] = "http://a.test, ,http://b.test"
        os.environ["MIGRATRACK_TRANSFER_GROUP_ID"] = "7"

        settings = Settings.from_env()

        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.transfer_group_id == 7


class TestDotenv:

    def test_values_come_from_env_file(self, clean_env):
        (clean_env / ".env").write_text(
            "DATABASE_URL=postgresql://tracker@db/migratrack\n"
            "MIGRATRACK_TRANSFER_GROUP_ID=4\n"
            "LOG_LEVEL=DEBUG\n"
        )

        settings = get_settings()

        assert settings.database_url == "postgresql://tracker@db/migratrack"
        assert settings.transfer_group_id == 4
        assert settings.log_level == "DEBUG"

    def test_environment_wins_over_env_file(self, clean_env):
        (clean_env / ".env").write_text("DATABASE_URL=sqlite:///from-file.db\n")
        os.environ["DATABASE_URL"] = "sqlite:///from-env.db"

        assert get_settings().database_url == "sqlite:///from-env.db"

    def test_custom_env_file(self, clean_env):
        (clean_env / "staging.env").write_text("MIGRATRACK_TRANSFER_GROUP_ID=9\n")
        os.environ["MIGRATRACK_ENV_FILE"] = str(clean_env / "staging.env")

        assert get_settings().transfer_group_id == 9
