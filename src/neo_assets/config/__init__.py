"""Configuration for neo-assets."""

from .service import AdminDeletePolicy, AssetServiceConfig
from .settings import AssetSettings, get_settings
from .logging_config import LoggingSettings, build_logging_config, setup_logging

__all__ = [
    "AdminDeletePolicy",
    "AssetServiceConfig",
    "AssetSettings",
    "get_settings",
    "LoggingSettings",
    "build_logging_config",
    "setup_logging",
]
