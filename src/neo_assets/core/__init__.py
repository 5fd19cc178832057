"""Asset management core: entities, value objects, events, protocols, exceptions."""

from .entities import Asset, AssetType, AssetScope, UploadedFile
from .value_objects import AssetId, StorageResult, ImageMetadata
from .events import AssetUploaded, AssetDeleting
from .protocols import (
    AssetCapabilities,
    UploadBinary,
    DeleteBinary,
    ImageProcessor,
    AssetRepository,
)
from .exceptions import (
    NeoAssetsError,
    ConfigurationError,
    CapabilityMissing,
    CapabilityFailed,
    UploadFailed,
    AssetNotFound,
    PermissionDenied,
    PersistenceError,
    create_error_response,
)

__all__ = [
    # Entities
    "Asset",
    "AssetType",
    "AssetScope",
    "UploadedFile",

    # Value Objects
    "AssetId",
    "StorageResult",
    "ImageMetadata",

    # Events
    "AssetUploaded",
    "AssetDeleting",

    # Protocols
    "AssetCapabilities",
    "UploadBinary",
    "DeleteBinary",
    "ImageProcessor",
    "AssetRepository",

    # Exceptions
    "NeoAssetsError",
    "ConfigurationError",
    "CapabilityMissing",
    "CapabilityFailed",
    "UploadFailed",
    "AssetNotFound",
    "PermissionDenied",
    "PersistenceError",
    "create_error_response",
]
