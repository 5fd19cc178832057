"""Asset management core exceptions."""

from .base import NeoAssetsError, ConfigurationError, create_error_response
from .asset_errors import (
    CapabilityMissing,
    CapabilityFailed,
    UploadFailed,
    AssetNotFound,
    PermissionDenied,
    PersistenceError,
)

__all__ = [
    "NeoAssetsError",
    "ConfigurationError",
    "create_error_response",
    "CapabilityMissing",
    "CapabilityFailed",
    "UploadFailed",
    "AssetNotFound",
    "PermissionDenied",
    "PersistenceError",
]
