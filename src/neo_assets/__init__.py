"""Neo-Assets - asset upload and deletion orchestration.

Classifies uploaded files, stores binaries through injected capabilities,
derives image metadata and thumbnails, persists ownership-scoped asset
records and announces uploads and deletions to observers.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    AdminDeletePolicy,
    AssetServiceConfig,
    AssetSettings,
    get_settings,
)

from .core.exceptions import (
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

from .core.entities import (
    Asset,
    AssetType,
    AssetScope,
    UploadedFile,
)

from .core.value_objects import (
    AssetId,
    StorageResult,
    ImageMetadata,
)

from .core.events import AssetUploaded, AssetDeleting

from .core.protocols import (
    AssetCapabilities,
    AssetRepository,
    UploadBinary,
    DeleteBinary,
    ImageProcessor,
)

from .application import (
    classify,
    AssetEventNotifier,
    AssetService,
    create_asset_service,
)

__all__ = [
    "__version__",

    # Configuration
    "AdminDeletePolicy",
    "AssetServiceConfig",
    "AssetSettings",
    "get_settings",

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

    # Entities and value objects
    "Asset",
    "AssetType",
    "AssetScope",
    "UploadedFile",
    "AssetId",
    "StorageResult",
    "ImageMetadata",

    # Events
    "AssetUploaded",
    "AssetDeleting",

    # Protocols
    "AssetCapabilities",
    "AssetRepository",
    "UploadBinary",
    "DeleteBinary",
    "ImageProcessor",

    # Application
    "classify",
    "AssetEventNotifier",
    "AssetService",
    "create_asset_service",
]
