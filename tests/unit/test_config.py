"""Tests for service configuration, environment settings and logging setup."""

import pytest

from neo_assets.config.logging_config import LOG_FORMATS, LoggingSettings, build_logging_config
from neo_assets.config.service import AdminDeletePolicy, AssetServiceConfig
from neo_assets.config.settings import AssetSettings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "PREVIEW_MAX_WIDTH", "GENERATE_PREVIEW", "ADMIN_DELETE_POLICY", "DATABASE_URL",
        "S3_BUCKET", "LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "ENABLE_SQL_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestAssetServiceConfig:
    """Test orchestration configuration."""

    def test_defaults(self):
        config = AssetServiceConfig()
        assert config.preview_max_width == 512
        assert config.generate_preview is True
        assert config.admin_delete_policy == AdminDeletePolicy.OWNER

    def test_policy_coerced_from_string(self):
        assert AssetServiceConfig(admin_delete_policy="any").admin_delete_policy is AdminDeletePolicy.ANY

    @pytest.mark.parametrize("width", [0, -1])
    def test_rejects_non_positive_width(self, width):
        with pytest.raises(ValueError):
            AssetServiceConfig(preview_max_width=width)


class TestAssetSettings:
    """Test environment-driven settings."""

    def test_defaults(self, clean_env):
        settings = AssetSettings(_env_file=None)

        assert settings.preview_max_width == 512
        assert settings.assets_schema == "public"
        assert settings.assets_table == "assets"
        assert settings.s3_region == "us-east-1"
        assert not settings.storage_enabled

    def test_reads_environment(self, clean_env):
        clean_env.setenv("PREVIEW_MAX_WIDTH", "256")
        clean_env.setenv("GENERATE_PREVIEW", "false")
        clean_env.setenv("ADMIN_DELETE_POLICY", "any")
        clean_env.setenv("S3_BUCKET", "assets-public")

        settings = AssetSettings(_env_file=None)

        assert settings.preview_max_width == 256
        assert settings.generate_preview is False
        assert settings.admin_delete_policy == AdminDeletePolicy.ANY
        assert settings.storage_enabled

    def test_to_service_config(self, clean_env):
        settings = AssetSettings(_env_file=None, preview_max_width=128, admin_delete_policy="any")

        config = settings.to_service_config()

        assert config == AssetServiceConfig(
            preview_max_width=128,
            generate_preview=True,
            admin_delete_policy=AdminDeletePolicy.ANY
        )


class TestLoggingSettings:
    """Test logging dictConfig construction."""

    @pytest.mark.parametrize("verbosity,level", [
        ("QUIET", "ERROR"),
        ("normal", "WARNING"),
        ("VERBOSE", "INFO"),
        ("DEBUG", "DEBUG"),
        ("bogus", "WARNING"),
    ])
    def test_verbosity_mapping(self, clean_env, verbosity, level):
        settings = LoggingSettings(_env_file=None, log_verbosity=verbosity)

        assert settings.effective_level == level

    def test_explicit_level_wins(self, clean_env):
        clean_env.setenv("LOG_VERBOSITY", "QUIET")
        clean_env.setenv("LOG_LEVEL", "debug")

        config = build_logging_config(LoggingSettings(_env_file=None))

        assert config["root"]["level"] == "DEBUG"

    def test_invalid_level_falls_back_to_verbosity(self, clean_env):
        settings = LoggingSettings(_env_file=None, log_level="loud", log_verbosity="VERBOSE")

        assert settings.effective_level == "INFO"

    def test_format_selection(self, clean_env):
        clean_env.setenv("LOG_FORMAT", "JSON")

        config = build_logging_config(LoggingSettings(_env_file=None))

        assert config["formatters"]["assets"]["format"] == LOG_FORMATS["json"]

    def test_unknown_format_is_simple(self, clean_env):
        settings = LoggingSettings(_env_file=None, log_format="xml")

        assert settings.format_string == LOG_FORMATS["simple"]

    def test_noisy_libraries_clamped(self, clean_env):
        loggers = build_logging_config(LoggingSettings(_env_file=None))["loggers"]

        assert loggers["botocore"]["level"] == "ERROR"
        assert loggers["PIL"]["level"] == "ERROR"
        assert loggers["asyncpg"]["level"] == "WARNING"

    def test_sql_logging_enabled(self, clean_env):
        clean_env.setenv("ENABLE_SQL_LOGGING", "true")

        loggers = build_logging_config(LoggingSettings(_env_file=None))["loggers"]

        assert "asyncpg" not in loggers
